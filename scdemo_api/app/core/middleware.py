"""
Request logging middleware.

Every request gets an id, taken from the ``requestId`` header when the
caller supplies one and generated otherwise.  The id is published to
the logging context variable so all records emitted while serving the
request carry it, and it is echoed back in the ``requestId`` response
header.  Timing is logged at DEBUG once the response is ready.

Unhandled exceptions are logged here, while the request id is still
set, and then re-raised for the application's 500 handler.  That
handler runs outside this middleware, so 500 responses carry no
``requestId`` header.
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from .logging_config import request_id_var

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "requestId"


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id and log its handling time."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        token = request_id_var.set(request_id)
        start_time = time.perf_counter()
        try:
            logger.info("Handling %s %s", request.method, request.url.path)
            try:
                response = await call_next(request)
            except Exception:
                logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
                raise
            elapsed_ms = int((time.perf_counter() - start_time) * 1000)
            logger.debug(
                "Request: %s %s %s %dms",
                request.method,
                request.url.path,
                request.url.query,
                elapsed_ms,
            )
            response.headers[REQUEST_ID_HEADER] = request_id
            logger.info("Request completed with status %s", response.status_code)
            return response
        finally:
            request_id_var.reset(token)
