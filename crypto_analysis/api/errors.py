"""Map domain errors to HTTP responses."""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from crypto_analysis.api.schemas import ErrorResponse
from crypto_analysis.domain.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.SYMBOL_NOT_FOUND: 404,
    ErrorCode.VALIDATION_ERROR: 400,
}


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = STATUS_BY_CODE.get(exc.code, 500)
    logger.error(f"{request.method} {request.url.path} failed: [{exc.code.value}] {exc.message}")
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(code=exc.code.value, message=exc.message).model_dump(),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"{request.method} {request.url.path} raised an unexpected error")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(code="INTERNAL_ERROR", message=str(exc) or "Unknown error").model_dump(),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install exception handlers on the app."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
