from fastapi import APIRouter, Depends
from typing import List
from app.db.session import get_query_service
from app.schemas.races import Race, RaceDetail
from app.services.queries import QueryService

router = APIRouter()


@router.get("/season/{year}", response_model=List[Race])
def races_in_season(year: str, service: QueryService = Depends(get_query_service)):
    return service.run("races_in_season", year=year)


@router.get("/season/{year}/{round}", response_model=Race)
def race_by_round(year: str, round: str, service: QueryService = Depends(get_query_service)):
    return service.run("get_race_by_round", year=year, round=round)


@router.get("/circuits/{ref}", response_model=List[Race])
def races_for_circuit(ref: str, service: QueryService = Depends(get_query_service)):
    return service.run("races_for_circuit", ref=ref)


@router.get("/circuits/{ref}/season/{start}/{end}", response_model=List[Race])
def races_for_circuit_between(
    ref: str,
    start: str,
    end: str,
    service: QueryService = Depends(get_query_service),
):
    """Races at a circuit between two seasons, both inclusive."""
    return service.run("races_for_circuit_between", ref=ref, start=start, end=end)


@router.get("/{race_id}", response_model=RaceDetail)
def get_race(race_id: str, service: QueryService = Depends(get_query_service)):
    return service.run("get_race", race_id=race_id)
