from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import ResponseValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.routes import health, circuits, constructors, drivers, races, results, qualifying, standings
from app.core.config import Settings, get_settings
from app.core.exceptions import QueryServiceError, query_error_handler, http_error_handler, response_validation_handler
from app.core.logging import setup_logging, get_logger
from app.db.session import open_readonly_engine
from app.schemas.common import ErrorResponse, IndexResponse
from app.services.queries import QueryService

logger = get_logger(__name__)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Malformed integer or inverted year range"},
    404: {"model": ErrorResponse, "description": "Nothing matched"},
    500: {"model": ErrorResponse, "description": "Dataset query failed"},
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    # Without its dataset the service has nothing to answer; refuse to start.
    try:
        engine = open_readonly_engine(settings.database_path, echo=settings.debug)
    except Exception:
        logger.critical("Could not open dataset %s", settings.database_path, exc_info=True)
        raise
    app.state.query_service = QueryService(engine)

    yield

    logger.info("Shutting down, closing dataset")
    engine.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)
    app.state.settings = settings

    app.add_exception_handler(QueryServiceError, query_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(ResponseValidationError, response_validation_handler)

    # Routers
    prefix = settings.api_prefix
    app.include_router(health.router, tags=["system"])
    for name, module in (
        ("circuits", circuits),
        ("constructors", constructors),
        ("drivers", drivers),
        ("races", races),
        ("results", results),
        ("qualifying", qualifying),
        ("standings", standings),
    ):
        app.include_router(module.router, prefix=f"{prefix}/{name}", tags=[name], responses=ERROR_RESPONSES)

    @app.get("/", response_model=IndexResponse)
    def root():
        return {"ok": True, "message": f"{settings.app_name} running"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("app.main:app", host=settings.host, port=settings.port, reload=settings.debug)
