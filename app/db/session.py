# app/db/session.py
from pathlib import Path

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine

from app.core.logging import get_logger
from app.services.queries import QueryService

logger = get_logger(__name__)


def readonly_url(database_path: str) -> URL:
    """SQLite URI that opens the dataset file without write access."""
    path = Path(database_path).expanduser().resolve()
    return URL.create(
        "sqlite+pysqlite",
        database=f"file:{path.as_posix()}",
        query={"mode": "ro", "uri": "true"},
    )


def open_readonly_engine(database_path: str, echo: bool = False) -> Engine:
    """
    Open the dataset and check that it is readable.

    SQLite only touches the file on first connect, so the check query
    is what turns a missing or corrupt file into an error at startup.
    """
    engine = create_engine(
        readonly_url(database_path),
        echo=echo,
        connect_args={"check_same_thread": False},
    )
    try:
        with engine.connect() as conn:
            tables = conn.execute(
                text("SELECT COUNT(*) FROM sqlite_master WHERE type = 'table'")
            ).scalar_one()
    except Exception:
        engine.dispose()
        raise
    logger.info("Opened dataset %s (%d tables, read-only)", database_path, tables)
    return engine


# Dependency for FastAPI
def get_query_service(request: Request) -> QueryService:
    return request.app.state.query_service
