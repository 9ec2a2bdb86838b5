from fastapi import APIRouter, Depends
from app.db.session import get_query_service
from app.schemas.common import HealthResponse
from app.services.queries import QueryService

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health(service: QueryService = Depends(get_query_service)):
    return {"status": "ok"}
