from fastapi import APIRouter, Depends
from typing import List
from app.db.session import get_query_service
from app.schemas.results import QualifyingEntry
from app.services.queries import QueryService

router = APIRouter()


@router.get("/{race_id}", response_model=List[QualifyingEntry])
def race_qualifying(race_id: str, service: QueryService = Depends(get_query_service)):
    return service.run("race_qualifying", race_id=race_id)
