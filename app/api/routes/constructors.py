from fastapi import APIRouter, Depends
from typing import List
from app.db.session import get_query_service
from app.schemas.reference import Constructor
from app.services.queries import QueryService

router = APIRouter()


@router.get("", response_model=List[Constructor])
def list_constructors(service: QueryService = Depends(get_query_service)):
    return service.run("list_constructors")


@router.get("/{ref}", response_model=Constructor)
def get_constructor(ref: str, service: QueryService = Depends(get_query_service)):
    return service.run("get_constructor", ref=ref)
