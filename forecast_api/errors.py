"""
Error Handlers
Always answer with a JSON envelope so clients can render an error state
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    status: str = "error"
    message: str
    detail: Optional[Any] = None


# Used as `responses=` on routes so the statuses show up in the OpenAPI document
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Malformed request"},
    401: {"model": ErrorResponse, "description": "Unauthorized"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
}


def error_response(
    status_code: int,
    message: str,
    detail: Any = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    body = ErrorResponse(message=message, detail=detail)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body), headers=headers)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    # Malformed requests are a 400, not FastAPI's default 422
    return error_response(400, "Malformed request", exc.errors())


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(500, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
