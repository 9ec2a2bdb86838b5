from pydantic import BaseModel, ConfigDict
from typing import Optional

# Entity rows are returned whole; columns beyond the declared ones pass through.


class Circuit(BaseModel):
    model_config = ConfigDict(extra="allow")

    circuitId: int
    circuitRef: str
    name: str
    location: Optional[str] = None
    country: Optional[str] = None


class Constructor(BaseModel):
    model_config = ConfigDict(extra="allow")

    constructorId: int
    constructorRef: str
    name: str
    nationality: Optional[str] = None


class Driver(BaseModel):
    model_config = ConfigDict(extra="allow")

    driverId: int
    driverRef: str
    code: Optional[str] = None
    forename: str
    surname: str
