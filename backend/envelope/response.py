from typing import Any
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from envelope.exceptions import EnvelopeError
from envelope.logger import logger
from envelope.schemas import Response

# Code carried by envelopes rendered for rejected request input
VALIDATION_ERROR_CODE = 422


def success(data: Any = None) -> dict:
    """Returns a standardized success record compatible with Response."""
    return Response.ok(data).to_record()


def fail(error_code: int, status_code: int = 400) -> JSONResponse:
    """Returns a standardized error response compatible with Response."""
    content = Response.err(error_code)
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(content)
    )


def from_exception(exc: EnvelopeError) -> JSONResponse:
    return fail(exc.error_code, status_code=exc.status_code)


def register_exception_handlers(app: FastAPI) -> None:
    """Render EnvelopeError and request validation failures as error envelopes."""

    @app.exception_handler(EnvelopeError)
    async def envelope_exception_handler(request: Request, exc: EnvelopeError):
        logger.warning(f"{request.method} {request.url.path} failed: {exc.message} (error {exc.error_code})")
        return from_exception(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.info(f"{request.method} {request.url.path} rejected: {len(exc.errors())} invalid field(s)")
        return fail(VALIDATION_ERROR_CODE, status_code=422)
