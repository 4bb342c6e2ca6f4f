from typing import Any

from pydantic import BaseModel

from foyer.exceptions import ApplicationError


class Meta(BaseModel):
    offset: int
    limit: int
    total: int


class OkResponse(BaseModel):
    code: int = 0
    message: str = "ok"
    data: Any


class ListResponse(BaseModel):
    code: int = 0
    message: str = "ok"
    data: list[Any]
    meta: Meta


class ErrorResponse(BaseModel):
    code: int
    message: str
    details: Any | None = None

    @classmethod
    def from_error(cls, exc: ApplicationError) -> "ErrorResponse":
        return cls(code=exc.status_code, message=exc.message, details=exc.details or None)
