"""
Exception handlers for the FastAPI application.

``register_exception_handlers`` wires the handlers into an app:

* ``DuplicateExecutionError`` becomes HTTP 429 with the lock key that
  rejected the call, so clients can tell which request is in flight.
* Any other unhandled exception becomes HTTP 500 with the generic
  ``errorCode``/``errorMessage`` body.

``HTTPException`` and request validation errors keep FastAPI's default
handling.
"""

import logging
from datetime import datetime

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from scdemo_api.app.core.exceptions import DuplicateExecutionError
from scdemo_api.app.schemas.common import ExceptionResponse

logger = logging.getLogger(__name__)


async def duplicate_execution_handler(request: Request, exc: DuplicateExecutionError) -> JSONResponse:
    logger.warning("Duplicate execution detected: %s", exc.message)
    body = {
        "timestamp": datetime.now().isoformat(),
        "status": status.HTTP_429_TOO_MANY_REQUESTS,
        "error": "Too Many Requests",
        "message": exc.message,
        "lockKey": exc.lock_key,
    }
    return JSONResponse(status_code=status.HTTP_429_TOO_MANY_REQUESTS, content=body)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # The traceback is logged by RequestLogMiddleware.
    logger.debug("Answering 500 for %s %s", request.method, request.url.path)
    body = ExceptionResponse(error_code="INTERNAL_SERVER_ERROR", error_message=str(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(by_alias=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the application's exception handlers to ``app``."""
    app.add_exception_handler(DuplicateExecutionError, duplicate_execution_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
