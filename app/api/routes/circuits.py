from fastapi import APIRouter, Depends
from typing import List
from app.db.session import get_query_service
from app.schemas.reference import Circuit
from app.services.queries import QueryService

router = APIRouter()


@router.get("", response_model=List[Circuit])
def list_circuits(service: QueryService = Depends(get_query_service)):
    return service.run("list_circuits")


@router.get("/season/{year}", response_model=List[Circuit])
def circuits_for_season(year: str, service: QueryService = Depends(get_query_service)):
    """Circuits raced in a season, one row per round."""
    return service.run("circuits_for_season", year=year)


@router.get("/{ref}", response_model=Circuit)
def get_circuit(ref: str, service: QueryService = Depends(get_query_service)):
    return service.run("get_circuit", ref=ref)
