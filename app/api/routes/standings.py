from fastapi import APIRouter, Depends
from typing import List
from app.db.session import get_query_service
from app.schemas.results import DriverStandingRow, ConstructorStandingRow
from app.services.queries import QueryService

router = APIRouter()


@router.get("/drivers/{race_id}", response_model=List[DriverStandingRow])
def driver_standings(race_id: str, service: QueryService = Depends(get_query_service)):
    """Drivers' championship table as it stood after the given race."""
    return service.run("driver_standings", race_id=race_id)


@router.get("/constructors/{race_id}", response_model=List[ConstructorStandingRow])
def constructor_standings(race_id: str, service: QueryService = Depends(get_query_service)):
    return service.run("constructor_standings", race_id=race_id)
