"""
Logging setup.

Records are written as::

    2024-01-01 12:00:00 [INFO] scdemo_api.app.services.order_service [<request id>]: ...

The request id comes from ``request_id_var``, set by
``RequestLogMiddleware`` while a request is served; outside a request
it reads ``-``.
"""

import logging
from contextvars import ContextVar
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


class RequestIdFilter(logging.Filter):
    """Stamp every record with the current request id."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


def _handler(handler: logging.Handler) -> logging.Handler:
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    handler.addFilter(RequestIdFilter())
    return handler


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach console (and optional file) handlers to the root logger.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"``; unknown names fall back to INFO.
    logfile : Optional[str]
        File to append records to, in addition to the console.
    """
    root = logging.getLogger()
    if root.handlers:
        # Configured already (test runner, or a second create_app call).
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.addHandler(_handler(logging.StreamHandler()))
    if logfile:
        root.addHandler(_handler(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")))
