"""Exception handlers rendering every failure as the JSON error envelope.

Expected failures come back from the store as ``Result`` values and are
rendered by the routes. These handlers cover what is left: unknown routes,
malformed bodies and any unexpected exception. The user routes never call
``Result.unwrap()``; ``domain_exception_handler`` only renders a
``DomainError`` raised by ``unwrap()`` in handlers that choose to use it.
Outside production the 500 envelope carries the underlying error and
traceback.
"""

import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from api import config
from api.responses import error_response, failure_response
from domain.model.errors import DomainError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def _request_context(request: Request) -> dict:
    return {
        "url": str(request.url.path),
        "method": request.method,
        "ip": request.client.host if request.client else None,
    }


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404 and exc.detail == "Not Found":
        message = f"Not Found - {request.url.path}"
    else:
        message = str(exc.detail)
    logger.warning(message, extra={**_request_context(request), "statusCode": exc.status_code})
    response = failure_response(exc.status_code, message)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = {
        ".".join(str(part) for part in err["loc"][1:]) or "body": err["msg"]
        for err in exc.errors()
    }
    logger.warning("Malformed request", extra={**_request_context(request), "errors": errors})
    return failure_response(400, "Invalid request body", errors=errors)


async def domain_exception_handler(request: Request, exc: DomainError):
    logger.warning(exc.message, extra={**_request_context(request), "statusCode": exc.status_code})
    return error_response(exc)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled exception",
        exc_info=exc,
        extra={**_request_context(request), "error": str(exc)},
    )
    if config.is_production():
        return failure_response(500, INTERNAL_ERROR_MESSAGE)
    return failure_response(
        500,
        str(exc) or INTERNAL_ERROR_MESSAGE,
        error={"type": type(exc).__name__, "detail": str(exc)},
        stack="".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(DomainError, domain_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
