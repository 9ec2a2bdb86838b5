"""
Read-only queries over the historical F1 dataset.

Every endpoint is one entry in ``OPERATIONS``: the path parameters that
must be integers, an optional inclusive year range, a fixed SQL template
with named binds and the message used when nothing matches.
``QueryService.run`` is the single dispatch routine that validates,
executes and classifies failures for all of them.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import BadRequestError, DataStoreError, NotFoundError
from app.core.logging import get_logger

logger = get_logger(__name__)

Row = Dict[str, Any]

_INT_RE = re.compile(r"\s*[+-]?[0-9]{1,19}\s*")

# SQLite INTEGER is a signed 64-bit value
INT_MIN, INT_MAX = -(2 ** 63), 2 ** 63 - 1

RANGE_ERROR = "end year must be >= start year."
NO_DATA = "No data found."


@dataclass(frozen=True)
class Operation:
    name: str
    sql: str
    not_found: str
    int_params: Tuple[str, ...] = ()
    int_error: str = ""
    year_range: Optional[Tuple[str, str]] = None
    # params bound as literal LIKE prefixes (wildcards escaped)
    prefix_params: Tuple[str, ...] = ()
    single: bool = False


def parse_int(value: Any) -> Optional[int]:
    """Return ``value`` as an int, or None if it is not a plain integer."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str) and _INT_RE.fullmatch(value):
        value = int(value)
    if isinstance(value, int) and INT_MIN <= value <= INT_MAX:
        return value
    return None


def escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


_RESULT_JOIN_COLUMNS = """
      ra.name   AS race_name,   ra.round AS race_round, ra.year AS race_year, ra.date AS race_date,
      d.driverRef AS driver_ref, d.code AS driver_code, d.forename AS driver_forename, d.surname AS driver_surname,
      c.name AS constructor_name, c.constructorRef AS constructor_ref, c.nationality AS constructor_nationality
"""

_DRIVER_RESULT_COLUMNS = """
      r.resultId, r.position, r.positionText, r.points, r.grid, r.laps, r.statusId,
      ra.raceId, ra.year, ra.round, ra.name, ra.date,
      c.name AS constructor_name, c.constructorRef AS constructor_ref
"""


OPERATIONS: Dict[str, Operation] = {op.name: op for op in (
    # --- circuits ---
    Operation(
        name="list_circuits",
        sql="SELECT * FROM circuits",
        not_found=NO_DATA,
    ),
    Operation(
        name="get_circuit",
        sql="SELECT * FROM circuits WHERE circuitRef = :ref",
        not_found="No circuit found with ref '{ref}'.",
        single=True,
    ),
    Operation(
        name="circuits_for_season",
        sql="""
            SELECT c.*
            FROM circuits c
            JOIN races r ON c.circuitId = r.circuitId
            WHERE r.year = :year
            ORDER BY r.round ASC
        """,
        not_found="No circuits found for season {year}.",
        int_params=("year",),
        int_error="Year must be an integer.",
    ),
    # --- constructors ---
    Operation(
        name="list_constructors",
        sql="SELECT * FROM constructors",
        not_found=NO_DATA,
    ),
    Operation(
        name="get_constructor",
        sql="SELECT * FROM constructors WHERE constructorRef = :ref",
        not_found="No constructor found with ref '{ref}'.",
        single=True,
    ),
    # --- drivers ---
    Operation(
        name="list_drivers",
        sql="SELECT * FROM drivers",
        not_found=NO_DATA,
    ),
    Operation(
        name="get_driver",
        sql="SELECT * FROM drivers WHERE driverRef = :ref",
        not_found="No driver found with ref '{ref}'.",
        single=True,
    ),
    Operation(
        name="search_drivers",
        sql="""
            SELECT * FROM drivers
            WHERE LOWER(surname) LIKE LOWER(:prefix) || '%' ESCAPE '\\'
            ORDER BY surname ASC, forename ASC, driverId ASC
        """,
        not_found="No drivers with surname starting '{prefix}'.",
        prefix_params=("prefix",),
    ),
    Operation(
        name="drivers_in_race",
        sql="""
            SELECT d.*
            FROM results r
            JOIN drivers d ON d.driverId = r.driverId
            WHERE r.raceId = :race_id
            ORDER BY r.grid ASC, r.positionOrder ASC
        """,
        not_found="No drivers found for raceId {race_id}.",
        int_params=("race_id",),
        int_error="raceId must be an integer.",
    ),
    # --- races ---
    Operation(
        name="get_race",
        sql="""
            SELECT
              r.raceId, r.year, r.round, r.name, r.date, r.time, r.url,
              c.name AS circuitName, c.location, c.country
            FROM races r
            JOIN circuits c ON c.circuitId = r.circuitId
            WHERE r.raceId = :race_id
        """,
        not_found="No race found with id {race_id}.",
        int_params=("race_id",),
        int_error="raceId must be an integer.",
        single=True,
    ),
    Operation(
        name="races_in_season",
        sql="SELECT * FROM races WHERE year = :year ORDER BY round ASC",
        not_found="No races for season {year}.",
        int_params=("year",),
        int_error="Year must be an integer.",
    ),
    Operation(
        name="get_race_by_round",
        sql="SELECT * FROM races WHERE year = :year AND round = :round",
        not_found="No race for season {year}, round {round}.",
        int_params=("year", "round"),
        int_error="Year and round must be integers.",
        single=True,
    ),
    Operation(
        name="races_for_circuit",
        sql="""
            SELECT r.*
            FROM races r
            JOIN circuits c ON c.circuitId = r.circuitId
            WHERE c.circuitRef = :ref
            ORDER BY r.year ASC, r.round ASC
        """,
        not_found="No races for circuit '{ref}'.",
    ),
    Operation(
        name="races_for_circuit_between",
        sql="""
            SELECT r.*
            FROM races r
            JOIN circuits c ON c.circuitId = r.circuitId
            WHERE c.circuitRef = :ref
              AND r.year BETWEEN :start AND :end
            ORDER BY r.year ASC, r.round ASC
        """,
        not_found="No races for '{ref}' between {start} and {end}.",
        int_params=("start", "end"),
        int_error="start and end must be integers.",
        year_range=("start", "end"),
    ),
    # --- results ---
    Operation(
        name="race_results",
        sql=f"""
            SELECT
              r.resultId, r.position, r.positionText, r.points, r.grid, r.laps, r.statusId,
              {_RESULT_JOIN_COLUMNS}
            FROM results r
            JOIN races ra       ON ra.raceId = r.raceId
            JOIN drivers d      ON d.driverId = r.driverId
            JOIN constructors c ON c.constructorId = r.constructorId
            WHERE r.raceId = :race_id
            ORDER BY r.grid ASC, r.positionOrder ASC
        """,
        not_found="No results for raceId {race_id}.",
        int_params=("race_id",),
        int_error="raceId must be an integer.",
    ),
    Operation(
        name="driver_results",
        sql=f"""
            SELECT {_DRIVER_RESULT_COLUMNS}
            FROM results r
            JOIN drivers d      ON d.driverId = r.driverId
            JOIN races ra       ON ra.raceId = r.raceId
            JOIN constructors c ON c.constructorId = r.constructorId
            WHERE d.driverRef = :ref
            ORDER BY ra.year ASC, ra.round ASC
        """,
        not_found="No results for driver '{ref}'.",
    ),
    Operation(
        name="driver_results_between",
        sql=f"""
            SELECT {_DRIVER_RESULT_COLUMNS}
            FROM results r
            JOIN drivers d      ON d.driverId = r.driverId
            JOIN races ra       ON ra.raceId = r.raceId
            JOIN constructors c ON c.constructorId = r.constructorId
            WHERE d.driverRef = :ref
              AND ra.year BETWEEN :start AND :end
            ORDER BY ra.year ASC, ra.round ASC
        """,
        not_found="No results for '{ref}' between {start} and {end}.",
        int_params=("start", "end"),
        int_error="start and end must be integers.",
        year_range=("start", "end"),
    ),
    # --- qualifying ---
    Operation(
        name="race_qualifying",
        sql=f"""
            SELECT
              q.qualifyId, q.position, q.q1, q.q2, q.q3,
              {_RESULT_JOIN_COLUMNS}
            FROM qualifying q
            JOIN races ra       ON ra.raceId = q.raceId
            JOIN drivers d      ON d.driverId = q.driverId
            JOIN constructors c ON c.constructorId = q.constructorId
            WHERE q.raceId = :race_id
            ORDER BY q.position ASC
        """,
        not_found="No qualifying for raceId {race_id}.",
        int_params=("race_id",),
        int_error="raceId must be an integer.",
    ),
    # --- standings ---
    Operation(
        name="driver_standings",
        sql="""
            SELECT
              ds.position, ds.points, ds.wins,
              d.driverRef AS driver_ref, d.code AS driver_code,
              d.forename AS driver_forename, d.surname AS driver_surname
            FROM driverStandings ds
            JOIN drivers d ON d.driverId = ds.driverId
            WHERE ds.raceId = :race_id
            ORDER BY ds.position ASC
        """,
        not_found="No driver standings for raceId {race_id}.",
        int_params=("race_id",),
        int_error="raceId must be an integer.",
    ),
    Operation(
        name="constructor_standings",
        sql="""
            SELECT
              cs.position, cs.points, cs.wins,
              c.name AS constructor_name, c.constructorRef AS constructor_ref,
              c.nationality AS constructor_nationality
            FROM constructorStandings cs
            JOIN constructors c ON c.constructorId = cs.constructorId
            WHERE cs.raceId = :race_id
            ORDER BY cs.position ASC
        """,
        not_found="No constructor standings for raceId {race_id}.",
        int_params=("race_id",),
        int_error="raceId must be an integer.",
    ),
)}


class QueryService:
    """Owns the read-only engine and answers every operation in ``OPERATIONS``."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def run(self, name: str, **params: Any) -> Union[Row, List[Row]]:
        op = OPERATIONS[name]
        binds = self.bind(op, params)
        rows = self.fetch(op, binds)
        if not rows:
            message = op.not_found.format(**params)
            logger.info("%s: %s", name, message)
            raise NotFoundError(message)
        return rows[0] if op.single else rows

    def bind(self, op: Operation, params: Dict[str, Any]) -> Dict[str, Any]:
        """Validate raw path parameters and build the bind dict for ``op``."""
        binds = dict(params)

        for key in op.int_params:
            value = parse_int(params.get(key))
            if value is None:
                logger.info("%s: rejected %s=%r", op.name, key, params.get(key))
                raise BadRequestError(op.int_error)
            binds[key] = value

        if op.year_range:
            start, end = op.year_range
            if binds[end] < binds[start]:
                logger.info("%s: rejected range %s..%s", op.name, binds[start], binds[end])
                raise BadRequestError(RANGE_ERROR)

        for key in op.prefix_params:
            binds[key] = escape_like(params.get(key) or "")

        return binds

    def fetch(self, op: Operation, binds: Dict[str, Any]) -> List[Row]:
        try:
            with self.engine.connect() as conn:
                result = conn.execute(text(op.sql), binds).mappings()
                if op.single:
                    row = result.first()
                    return [dict(row)] if row is not None else []
                return [dict(row) for row in result.all()]
        except SQLAlchemyError as exc:
            orig = getattr(exc, "orig", None)
            message = str(orig) if orig is not None else str(exc)
            logger.error("%s failed: %s", op.name, message)
            raise DataStoreError(message) from exc
