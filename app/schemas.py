from enum import Enum
from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel


# JSend response statuses
class JSendStatus(str, Enum):
    SUCCESS = "success"
    FAIL = "fail"
    ERROR = "error"


class Response(BaseModel):
    status: JSendStatus
    data: Any = None


class ErrorResponse(BaseModel):
    status: JSendStatus = JSendStatus.ERROR
    message: str


def _render(body: BaseModel, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def success(data: Any = None, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return _render(Response(status=JSendStatus.SUCCESS, data=data), status_code)


def fail(data: Any) -> JSONResponse:
    """Client-correctable problem; data maps the offending field to a message."""
    return _render(Response(status=JSendStatus.FAIL, data=data), status.HTTP_200_OK)


def error(message: str) -> JSONResponse:
    """Server-side problem; message is for humans."""
    return _render(ErrorResponse(message=message), status.HTTP_200_OK)
