"""
Bookshelf API: Access Log Middleware
=====================================

What:  One access line per request on the "bookshelf.access" logger.
How:   Pure ASGI middleware. It watches the outgoing `http.response.start`
       message for the status and logs once the response is complete (or the
       app raised, which is logged as 500).

Example line (request id added by RequestIDFilter):
    2024-01-15T12:00:00 [INFO] bookshelf.access [a1b2c3d4]: method [POST] path [/book/] status [200] connection from [127.0.0.1:51234] 0.4ms

Request bodies are never logged.
"""

import logging
import time

from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger("bookshelf.access")

# Probes hit this every few seconds
SKIPPED_PATHS = frozenset({"/health"})


def _remote_address(scope: Scope) -> str:
    client = scope.get("client")
    if not client:
        return "unknown"
    host, port = client
    return f"{host}:{port}"


def _level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class AccessLogMiddleware:
    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["path"] in SKIPPED_PATHS:
            await self.app(scope, receive, send)
            return

        started = time.perf_counter()
        status = 500

        async def send_and_record(message: Message) -> None:
            nonlocal status
            if message["type"] == "http.response.start":
                status = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_and_record)
        finally:
            logger.log(
                _level_for(status),
                "method [%s] path [%s] status [%d] connection from [%s] %.1fms",
                scope["method"],
                scope["path"],
                status,
                _remote_address(scope),
                (time.perf_counter() - started) * 1000,
            )
