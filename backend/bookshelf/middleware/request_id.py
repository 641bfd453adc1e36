"""
Bookshelf API: Request ID Middleware
=====================================

What:  Tags every request with a correlation id.
How:   Pure ASGI middleware. The id comes from the client's X-Request-ID
       header or a fresh 8-character hex string; it lives in a ContextVar for
       the lifetime of the request and is appended to the response headers.
       RequestIDFilter copies it onto every log record, so any logger that
       runs inside a request (access log, exception handlers, the store) is
       tagged without passing the id around.
"""

import logging
import uuid
from contextvars import ContextVar

from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

HEADER = "X-Request-ID"

# Coroutine-local: concurrent requests on the same loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


class RequestIDFilter(logging.Filter):
    """Sets `record.request_id`; "-" outside of a request."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


class RequestIDMiddleware:
    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        rid = Headers(scope=scope).get(HEADER) or uuid.uuid4().hex[:8]
        token = request_id_var.set(rid)

        async def send_with_id(message: Message) -> None:
            if message["type"] == "http.response.start":
                MutableHeaders(scope=message)[HEADER] = rid
            await send(message)

        try:
            await self.app(scope, receive, send_with_id)
        finally:
            request_id_var.reset(token)
