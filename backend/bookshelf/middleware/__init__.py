# Middleware package init
"""
Bookshelf API: Middleware Package
==================================

Middleware Chain:
    Request → [Request ID] → [Access Log] → Route Handler

    Both are plain ASGI callables wrapping `send`: the first stamps the
    X-Request-ID header, the second reads the status for its log line.

Responses travel back through the chain in reverse order.
"""
