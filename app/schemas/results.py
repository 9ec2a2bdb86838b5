from pydantic import BaseModel
from typing import Optional, Union

# Ergast dumps write missing values as the text "\N"; numeric cells are
# passed through as stored rather than coerced.
Cell = Optional[Union[int, float, str]]


class RaceInline(BaseModel):
    race_name: str
    race_round: int
    race_year: int
    race_date: Optional[str] = None


class DriverInline(BaseModel):
    driver_ref: str
    driver_code: Optional[str] = None
    driver_forename: str
    driver_surname: str


class ConstructorInline(BaseModel):
    constructor_name: str
    constructor_ref: str
    constructor_nationality: Optional[str] = None


class RaceResult(RaceInline, DriverInline, ConstructorInline):
    resultId: int
    position: Cell = None   # None or "\N" when not classified
    positionText: Cell = None
    points: Cell = None
    grid: Cell = None
    laps: Cell = None
    statusId: Cell = None


class DriverResult(BaseModel):
    """One result of a known driver; race and constructor fields are inlined."""
    resultId: int
    position: Cell = None
    positionText: Cell = None
    points: Cell = None
    grid: Cell = None
    laps: Cell = None
    statusId: Cell = None
    raceId: int
    year: int
    round: int
    name: str
    date: Optional[str] = None
    constructor_name: str
    constructor_ref: str


class QualifyingEntry(RaceInline, DriverInline, ConstructorInline):
    qualifyId: int
    position: Cell = None
    q1: Optional[str] = None
    q2: Optional[str] = None
    q3: Optional[str] = None


class DriverStandingRow(DriverInline):
    position: Cell = None
    points: Cell = None
    wins: Cell = None


class ConstructorStandingRow(ConstructorInline):
    position: Cell = None
    points: Cell = None
    wins: Cell = None
