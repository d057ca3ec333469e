"""Exception handlers rendering every failure as the uniform error envelope.

Handlers:
    http_exception_handler: HTTPException raised by services or the router
    validation_exception_handler: body/query/path validation failures (400, not 422)
    unhandled_exception_handler: anything else, logged and reported as 500
"""
from datetime import datetime, timezone
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookstock.models.response_model import HTTPError
from bookstock.utils.logger import get_logger

logger = get_logger(__name__)

# First location segment of a validation error -> caller-facing message.
_VALIDATION_MESSAGES = {
    "query": "Invalid query parameters",
    "path": "Invalid path parameters",
}
_DEFAULT_VALIDATION_MESSAGE = "Invalid request payload"


def _status_text(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def error_response(request: Request, status_code: int, message: str, headers=None) -> JSONResponse:
    body = HTTPError(
        code=status_code,
        message=message,
        error=_status_text(status_code),
        timestamp=datetime.now(timezone.utc).isoformat(timespec="seconds"),
        path=request.url.path,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return error_response(request, exc.status_code, message, headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _DEFAULT_VALIDATION_MESSAGE
    for error in exc.errors():
        loc = error.get("loc") or ()
        if loc and loc[0] in _VALIDATION_MESSAGES:
            message = _VALIDATION_MESSAGES[loc[0]]
            break

    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return error_response(request, status.HTTP_400_BAD_REQUEST, message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
