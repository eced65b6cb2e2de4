"""Cookie send middleware — writes a CookieManager onto every response.

Runs the inner handler, then hands the response to
``CookieManager.send()``. Any ``Set-Cookie`` headers the handler set are
dropped first unless ``CookieSendConfig(remove_existing=False)``.
"""

import logging
from typing import Any

from crumb.config import CookieSendConfig
from crumb.manager import CookieManager, HeaderResponse
from crumb.middleware.protocol import Next

logger = logging.getLogger("crumb.middleware")


class CookieSendMiddleware:
    """Emit the managed cookies on the way out.

    Usage::

        from crumb import CookieManager, CookieSendMiddleware

        cookies = CookieManager()
        app.add_middleware(CookieSendMiddleware(cookies))

    Or keep cookies set by handlers::

        from crumb.config import CookieSendConfig

        app.add_middleware(CookieSendMiddleware(
            cookies, CookieSendConfig(remove_existing=False),
        ))
    """

    __slots__ = ("config", "cookies")

    def __init__(self, cookies: CookieManager, config: CookieSendConfig | None = None) -> None:
        self.cookies = cookies
        self.config = config or CookieSendConfig()

    async def __call__(self, request: Any, next: Next) -> HeaderResponse:
        response = await next(request)
        logger.debug("Applying %d managed cookie(s) to response", len(self.cookies))
        return self.cookies.send(response, self.config.remove_existing)
