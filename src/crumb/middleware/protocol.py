"""Middleware protocol and Next type alias.

A middleware is any callable matching::

    async def my_mw(request: Any, next: Next) -> HeaderResponse: ...

No base class required. The pipeline checks the shape, not the lineage.
Requests are passed through untouched, so any request type works; the
response only needs the ``.with_header()`` / ``.without_header()``
transformations, which ``crumb.http.response.Response`` provides.
"""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from crumb.manager import HeaderResponse

# The next handler in the middleware chain
type Next = Callable[[Any], Awaitable[HeaderResponse]]


class Middleware(Protocol):
    """Protocol for crumb middleware.

    Accepts both functions and callable objects::

        # Function middleware
        async def no_store(request: Any, next: Next) -> HeaderResponse:
            response = await next(request)
            return response.with_header("Cache-Control", "no-store")

        # Class middleware
        class CookieSendMiddleware:
            async def __call__(self, request: Any, next: Next) -> HeaderResponse:
                ...
    """

    async def __call__(self, request: Any, next: Next) -> HeaderResponse: ...
