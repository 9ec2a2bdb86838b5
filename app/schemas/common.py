from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str


class IndexResponse(BaseModel):
    ok: bool
    message: str


class HealthResponse(BaseModel):
    status: str
