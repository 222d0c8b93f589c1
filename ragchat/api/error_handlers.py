"""
Exception handlers.

Maps the application exception hierarchy onto HTTP status codes. Every error
body has the shape {"error": "<message>"}.

Dependencies: fastapi, ragchat.core.exceptions
System role: HTTP error translation
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ragchat.core.exceptions import (
    EmptyDocumentError,
    GenerationError,
    IngestionError,
    NoContextAvailableError,
    ParsingError,
    PayloadTooLargeError,
    RAGChatException,
    RetrievalError,
    UnsupportedFormatError,
    ValidationError,
)
from ragchat.models.common import ErrorResponse

logger = logging.getLogger(__name__)

# First match wins, subclasses before their parents.
STATUS_CODES: list[tuple[type[RAGChatException], int]] = [
    (ValidationError, 400),
    (NoContextAvailableError, 400),
    (EmptyDocumentError, 400),
    (ParsingError, 400),
    (UnsupportedFormatError, 415),
    (PayloadTooLargeError, 413),
    (IngestionError, 500),
    (RetrievalError, 500),
    (GenerationError, 500),
]


def status_code_for(exc: RAGChatException) -> int:
    for exc_type, status_code in STATUS_CODES:
        if isinstance(exc, exc_type):
            return status_code
    return 500


async def ragchat_exception_handler(request: Request, exc: RAGChatException) -> JSONResponse:
    status_code = status_code_for(exc)
    log = logger.error if status_code >= 500 else logger.warning
    log(
        f"{__name__}:ragchat_exception_handler - {type(exc).__name__}: {exc.message}",
        extra={"path": request.url.path, "status_code": status_code, "details": exc.details},
    )
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=exc.message).model_dump())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    logger.warning(
        f"{__name__}:request_validation_handler - {message}",
        extra={"path": request.url.path},
    )
    return JSONResponse(status_code=400, content=ErrorResponse(error=message).model_dump())


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        f"{__name__}:unhandled_exception_handler - {type(exc).__name__}",
        extra={"path": request.url.path},
    )
    return JSONResponse(status_code=500, content=ErrorResponse(error="Internal server error").model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to the application."""
    app.add_exception_handler(RAGChatException, ragchat_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
