"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(request, next: Next) -> Response

Built-in middleware:
    CookieSendMiddleware -- Write a CookieManager's cookies onto every response
"""

from crumb.middleware.protocol import Middleware, Next
from crumb.middleware.send import CookieSendMiddleware

__all__ = [
    "CookieSendMiddleware",
    "Middleware",
    "Next",
]
