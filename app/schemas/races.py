from pydantic import BaseModel, ConfigDict
from typing import Optional


class Race(BaseModel):
    model_config = ConfigDict(extra="allow")

    raceId: int
    year: int
    round: int
    circuitId: int
    name: str
    date: Optional[str] = None  # ISO date text as stored
    time: Optional[str] = None
    url: Optional[str] = None


class RaceDetail(BaseModel):
    """A race with its circuit inlined in place of ``circuitId``."""
    raceId: int
    year: int
    round: int
    name: str
    date: Optional[str] = None
    time: Optional[str] = None
    url: Optional[str] = None
    circuitName: str
    location: Optional[str] = None
    country: Optional[str] = None
