import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.db.base import Base
from app.main import create_app
from app.models.f1 import (
    Circuit, Constructor, Driver, Race, Result, Qualifying, DriverStanding, ConstructorStanding,
)

MONZA_2020 = 1040


def _circuits():
    return [
        Circuit(circuitId=1, circuitRef="albert_park", name="Albert Park Grand Prix Circuit",
                location="Melbourne", country="Australia"),
        Circuit(circuitId=3, circuitRef="bahrain", name="Bahrain International Circuit",
                location="Sakhir", country="Bahrain"),
        Circuit(circuitId=14, circuitRef="monza", name="Autodromo Nazionale di Monza",
                location="Monza", country="Italy", lat=45.6156, lng=9.28111, alt=162),
        Circuit(circuitId=21, circuitRef="imola", name="Autodromo Enzo e Dino Ferrari",
                location="Imola", country="Italy"),
    ]


def _constructors():
    return [
        Constructor(constructorId=1, constructorRef="mclaren", name="McLaren", nationality="British"),
        Constructor(constructorId=3, constructorRef="williams", name="Williams", nationality="British"),
        Constructor(constructorId=6, constructorRef="ferrari", name="Ferrari", nationality="Italian"),
        Constructor(constructorId=9, constructorRef="red_bull", name="Red Bull", nationality="Austrian"),
        Constructor(constructorId=131, constructorRef="mercedes", name="Mercedes", nationality="German"),
    ]


def _drivers():
    return [
        Driver(driverId=1, driverRef="hamilton", number=44, code="HAM", forename="Lewis", surname="Hamilton"),
        Driver(driverId=30, driverRef="michael_schumacher", code="MSC", forename="Michael", surname="Schumacher"),
        Driver(driverId=23, driverRef="ralf_schumacher", forename="Ralf", surname="Schumacher"),
        Driver(driverId=832, driverRef="sainz", number=55, code="SAI", forename="Carlos", surname="Sainz"),
        Driver(driverId=830, driverRef="max_verstappen", number=33, code="VER", forename="Max", surname="Verstappen"),
        Driver(driverId=844, driverRef="leclerc", number=16, code="LEC", forename="Charles", surname="Leclerc"),
        Driver(driverId=854, driverRef="mick_schumacher", number=47, code="MSC", forename="Mick", surname="Schumacher"),
    ]


def _races():
    # deliberately not in (year, round) order
    return [
        Race(raceId=1040, year=2020, round=8, circuitId=14, name="Italian Grand Prix", date="2020-09-06", time="13:10:00"),
        Race(raceId=1031, year=2020, round=1, circuitId=3, name="Bahrain Grand Prix", date="2020-11-29", time="14:10:00"),
        Race(raceId=1046, year=2020, round=13, circuitId=21, name="Emilia Romagna Grand Prix", date="2020-11-01"),
        Race(raceId=1045, year=2020, round=16, circuitId=3, name="Sakhir Grand Prix", date="2020-12-06"),
        Race(raceId=1065, year=2021, round=14, circuitId=14, name="Italian Grand Prix", date="2021-09-12"),
        Race(raceId=1010, year=2019, round=1, circuitId=1, name="Australian Grand Prix", date="2019-03-17"),
        Race(raceId=1023, year=2019, round=14, circuitId=14, name="Italian Grand Prix", date="2019-09-08"),
        Race(raceId=1077, year=2022, round=4, circuitId=21, name="Emilia Romagna Grand Prix", date="2022-04-24"),
        Race(raceId=1074, year=2022, round=1, circuitId=3, name="Bahrain Grand Prix", date="2022-03-20"),
    ]


def _result(result_id, race_id, driver_id, constructor_id, grid, position, order, points, laps=53, status=1):
    return Result(
        resultId=result_id, raceId=race_id, driverId=driver_id, constructorId=constructor_id,
        grid=grid, position=position,
        positionText=str(position) if position else "R",
        positionOrder=order, points=points, laps=laps, statusId=status,
    )


def _results():
    return [
        # Monza 2020, inserted out of grid order
        _result(24700, MONZA_2020, 844, 6, grid=13, position=None, order=20, points=0, laps=23, status=3),
        _result(24701, MONZA_2020, 832, 1, grid=3, position=2, order=2, points=18),
        _result(24702, MONZA_2020, 830, 9, grid=5, position=None, order=18, points=0, laps=30, status=5),
        _result(24703, MONZA_2020, 1, 131, grid=1, position=7, order=7, points=6),
        # other seasons for driver history
        _result(24000, 1010, 1, 131, grid=1, position=2, order=2, points=18, laps=58),
        _result(24001, 1010, 832, 1, grid=18, position=None, order=19, points=0, laps=9, status=6),
        _result(24500, 1031, 1, 131, grid=1, position=1, order=1, points=25, laps=57),
        _result(25500, 1077, 832, 6, grid=3, position=None, order=20, points=0, laps=0, status=4),
        _result(25600, 1074, 832, 6, grid=3, position=2, order=2, points=18, laps=57),
    ]


def _qualifying():
    return [
        Qualifying(qualifyId=9000, raceId=MONZA_2020, driverId=844, constructorId=6, position=13,
                   q1="1:20.273", q2="1:20.443"),
        Qualifying(qualifyId=9001, raceId=MONZA_2020, driverId=1, constructorId=131, position=1,
                   q1="1:19.514", q2="1:19.092", q3="1:18.887"),
        Qualifying(qualifyId=9002, raceId=MONZA_2020, driverId=830, constructorId=9, position=5,
                   q1="1:20.193", q2="1:19.458", q3="1:19.509"),
        Qualifying(qualifyId=9003, raceId=MONZA_2020, driverId=832, constructorId=1, position=3,
                   q1="1:19.820", q2="1:19.318", q3="1:19.695"),
    ]


def _standings():
    return [
        DriverStanding(driverStandingsId=1, raceId=MONZA_2020, driverId=832, points=41, position=6, positionText="6", wins=0),
        DriverStanding(driverStandingsId=2, raceId=MONZA_2020, driverId=1, points=164, position=1, positionText="1", wins=5),
        DriverStanding(driverStandingsId=3, raceId=MONZA_2020, driverId=844, points=33, position=8, positionText="8", wins=0),
        DriverStanding(driverStandingsId=4, raceId=MONZA_2020, driverId=830, points=110, position=2, positionText="2", wins=1),
        ConstructorStanding(constructorStandingsId=1, raceId=MONZA_2020, constructorId=6, points=61, position=5, positionText="5", wins=0),
        ConstructorStanding(constructorStandingsId=2, raceId=MONZA_2020, constructorId=131, points=325, position=1, positionText="1", wins=6),
        ConstructorStanding(constructorStandingsId=3, raceId=MONZA_2020, constructorId=1, points=98, position=3, positionText="3", wins=0),
        ConstructorStanding(constructorStandingsId=4, raceId=MONZA_2020, constructorId=9, points=173, position=2, positionText="2", wins=1),
    ]


@pytest.fixture(scope="session")
def dataset_path(tmp_path_factory):
    path = tmp_path_factory.mktemp("data") / "f1.db"
    engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        session.add_all(_circuits() + _constructors() + _drivers() + _races())
        session.flush()
        session.add_all(_results() + _qualifying() + _standings())
        session.commit()
    engine.dispose()
    return path


@pytest.fixture(scope="session")
def api(dataset_path):
    return create_app(Settings(database_path=str(dataset_path)))


@pytest.fixture(scope="session")
def client(api):
    with TestClient(api) as c:
        yield c
