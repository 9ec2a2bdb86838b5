"""Errors raised by the query service and how they map to HTTP."""

from fastapi import Request, status
from fastapi.exceptions import ResponseValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.logging import get_logger

logger = get_logger(__name__)


class QueryServiceError(Exception):
    """Base error for a request the query service could not answer."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(QueryServiceError):
    """A path parameter failed integer parsing, or a year range is inverted."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(QueryServiceError):
    """The query ran but matched no rows."""

    status_code = status.HTTP_404_NOT_FOUND


class DataStoreError(QueryServiceError):
    """The database engine reported an error while executing a query."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(message: str) -> dict:
    return {"error": message}


async def query_error_handler(request: Request, exc: QueryServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def response_validation_handler(request: Request, exc: ResponseValidationError) -> JSONResponse:
    logger.error("Row from dataset does not fit response model at %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(f"Unexpected data in dataset: {exc.errors()}"),
    )
