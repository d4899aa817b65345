"""
Translation of domain errors into HTTP responses.

Every error body has the shape {"error": <message>}. Errors that are not
DomainError never leak their details and become a generic 500.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from webinar_api.core.logging import get_logger
from webinar_api.domain.errors import DomainError, ErrorCode

logger = get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "An error occurred"

STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.WEBINAR_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.WEBINAR_NOT_ORGANIZER: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.WEBINAR_DATES_TOO_SOON: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEBINAR_NOT_ENOUGH_SEATS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEBINAR_TOO_MANY_SEATS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEBINAR_REDUCE_SEATS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEBINAR_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.WEBINAR_UPDATE_CONFLICT: status.HTTP_409_CONFLICT,
}


def status_for(error: DomainError) -> int:
    return STATUS_BY_CODE.get(error.code, status.HTTP_500_INTERNAL_SERVER_ERROR)


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    logger.info("domain_error", code=exc.code.value, status_code=status_code)
    return JSONResponse(status_code=status_code, content={"error": exc.message})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", error_type=type(exc).__name__)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_MESSAGE},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
