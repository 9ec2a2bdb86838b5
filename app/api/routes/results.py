from fastapi import APIRouter, Depends
from typing import List
from app.db.session import get_query_service
from app.schemas.results import RaceResult, DriverResult
from app.services.queries import QueryService

router = APIRouter()


@router.get("/driver/{ref}", response_model=List[DriverResult])
def driver_results(ref: str, service: QueryService = Depends(get_query_service)):
    return service.run("driver_results", ref=ref)


@router.get("/drivers/{ref}/seasons/{start}/{end}", response_model=List[DriverResult])
def driver_results_between(
    ref: str,
    start: str,
    end: str,
    service: QueryService = Depends(get_query_service),
):
    return service.run("driver_results_between", ref=ref, start=start, end=end)


@router.get("/{race_id}", response_model=List[RaceResult])
def race_results(race_id: str, service: QueryService = Depends(get_query_service)):
    """Classification of a race, ordered by starting grid slot."""
    return service.run("race_results", race_id=race_id)
