"""
Logging setup for the Products API.

``setup_logging`` installs console (and optionally file) handlers on
the root logger, formatted as ``<time> [<LEVEL>] <logger>: <message>``.
``log_requests`` is an HTTP middleware writing one access line per
incoming request.
"""

import logging
from pathlib import Path
from typing import Awaitable, Callable, List, Optional

from fastapi import Request, Response


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

request_logger = logging.getLogger("product_catalog_api.requests")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach handlers to the root logger unless it already has some.

    ``level`` is a level name such as ``"DEBUG"`` (any case); unknown
    names fall back to INFO.  ``logfile``, when given, adds a UTF-8 file
    handler writing to that path.
    """
    root = logging.getLogger()
    # create_app may run several times in one process (tests)
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)


async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Log method, full URL path and client address of every request."""
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    ip = request.client.host if request.client else "unknown"
    request_logger.info("%s %s - IP: %s", request.method, url, ip)
    return await call_next(request)
