from fastapi import APIRouter, Depends
from typing import List
from app.db.session import get_query_service
from app.schemas.reference import Driver
from app.services.queries import QueryService

router = APIRouter()


@router.get("", response_model=List[Driver])
def list_drivers(service: QueryService = Depends(get_query_service)):
    return service.run("list_drivers")


# search routes must be registered before /{ref}
@router.get("/search", response_model=List[Driver])
def search_all_drivers(service: QueryService = Depends(get_query_service)):
    return service.run("search_drivers", prefix="")


@router.get("/search/{prefix}", response_model=List[Driver])
def search_drivers(prefix: str, service: QueryService = Depends(get_query_service)):
    """Drivers whose surname starts with ``prefix``, case-insensitive."""
    return service.run("search_drivers", prefix=prefix)


@router.get("/race/{race_id}", response_model=List[Driver])
def drivers_in_race(race_id: str, service: QueryService = Depends(get_query_service)):
    """Drivers entered in a race, in starting grid order."""
    return service.run("drivers_in_race", race_id=race_id)


@router.get("/{ref}", response_model=Driver)
def get_driver(ref: str, service: QueryService = Depends(get_query_service)):
    return service.run("get_driver", ref=ref)
