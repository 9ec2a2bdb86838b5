from sqlalchemy import Column, Integer, String, Float, ForeignKey, Index
from sqlalchemy.orm import relationship
from app.db.base import Base

# Column names follow the Ergast dump the dataset file is built from.


class Circuit(Base):
    __tablename__ = "circuits"
    circuitId = Column(Integer, primary_key=True)
    circuitRef = Column(String, nullable=False, unique=True)
    name = Column(String, nullable=False)
    location = Column(String, nullable=True)
    country = Column(String, nullable=True)
    lat = Column(Float, nullable=True)
    lng = Column(Float, nullable=True)
    alt = Column(Integer, nullable=True)
    url = Column(String, nullable=True)
    races = relationship("Race", back_populates="circuit")


class Constructor(Base):
    __tablename__ = "constructors"
    constructorId = Column(Integer, primary_key=True)
    constructorRef = Column(String, nullable=False, unique=True)
    name = Column(String, nullable=False)
    nationality = Column(String, nullable=True)
    url = Column(String, nullable=True)


class Driver(Base):
    __tablename__ = "drivers"
    driverId = Column(Integer, primary_key=True)
    driverRef = Column(String, nullable=False, unique=True)
    number = Column(Integer, nullable=True)
    code = Column(String, nullable=True)           # three-letter code, absent before 2000s
    forename = Column(String, nullable=False)
    surname = Column(String, nullable=False)
    dob = Column(String, nullable=True)
    nationality = Column(String, nullable=True)
    url = Column(String, nullable=True)


class Race(Base):
    __tablename__ = "races"
    __table_args__ = (Index("ix_races_year_round", "year", "round", unique=True),)
    raceId = Column(Integer, primary_key=True)
    year = Column(Integer, nullable=False)
    round = Column(Integer, nullable=False)
    circuitId = Column(Integer, ForeignKey("circuits.circuitId"), nullable=False)
    name = Column(String, nullable=False)
    date = Column(String, nullable=True)           # ISO date text
    time = Column(String, nullable=True)
    url = Column(String, nullable=True)
    circuit = relationship("Circuit", back_populates="races")


class Result(Base):
    __tablename__ = "results"
    __table_args__ = (Index("ix_results_race_grid", "raceId", "grid"),)
    resultId = Column(Integer, primary_key=True)
    raceId = Column(Integer, ForeignKey("races.raceId"), nullable=False)
    driverId = Column(Integer, ForeignKey("drivers.driverId"), nullable=False)
    constructorId = Column(Integer, ForeignKey("constructors.constructorId"), nullable=False)
    number = Column(Integer, nullable=True)
    grid = Column(Integer, nullable=False)         # 0 = pit lane / did not start from grid
    position = Column(Integer, nullable=True)      # None when not classified
    positionText = Column(String, nullable=False)  # "1".."20", "R", "D", "W", ...
    positionOrder = Column(Integer, nullable=False)
    points = Column(Float, nullable=False, default=0)
    laps = Column(Integer, nullable=False, default=0)
    time = Column(String, nullable=True)
    milliseconds = Column(Integer, nullable=True)
    fastestLap = Column(Integer, nullable=True)
    rank = Column(Integer, nullable=True)
    fastestLapTime = Column(String, nullable=True)
    fastestLapSpeed = Column(String, nullable=True)
    statusId = Column(Integer, nullable=False)

    race = relationship("Race")
    driver = relationship("Driver")
    constructor = relationship("Constructor")


class Qualifying(Base):
    __tablename__ = "qualifying"
    qualifyId = Column(Integer, primary_key=True)
    raceId = Column(Integer, ForeignKey("races.raceId"), nullable=False)
    driverId = Column(Integer, ForeignKey("drivers.driverId"), nullable=False)
    constructorId = Column(Integer, ForeignKey("constructors.constructorId"), nullable=False)
    number = Column(Integer, nullable=True)
    position = Column(Integer, nullable=True)
    q1 = Column(String, nullable=True)             # lap time text, e.g. "1:26.572"
    q2 = Column(String, nullable=True)
    q3 = Column(String, nullable=True)


class DriverStanding(Base):
    __tablename__ = "driverStandings"
    driverStandingsId = Column(Integer, primary_key=True)
    raceId = Column(Integer, ForeignKey("races.raceId"), nullable=False)
    driverId = Column(Integer, ForeignKey("drivers.driverId"), nullable=False)
    points = Column(Float, nullable=False, default=0)
    position = Column(Integer, nullable=True)
    positionText = Column(String, nullable=True)
    wins = Column(Integer, nullable=False, default=0)


class ConstructorStanding(Base):
    __tablename__ = "constructorStandings"
    constructorStandingsId = Column(Integer, primary_key=True)
    raceId = Column(Integer, ForeignKey("races.raceId"), nullable=False)
    constructorId = Column(Integer, ForeignKey("constructors.constructorId"), nullable=False)
    points = Column(Float, nullable=False, default=0)
    position = Column(Integer, nullable=True)
    positionText = Column(String, nullable=True)
    wins = Column(Integer, nullable=False, default=0)
