"""Crumb — build, parse, and emit RFC 6265 ``Set-Cookie`` headers.

Basic usage::

    from crumb import Cookie, CookieManager, parse_set_cookie

    cookie = Cookie("session", "abc123", expires="+1 hour")
    str(cookie)
    # 'session=abc123; Expires=...; Max-Age=3600; Path=/; Secure; HttpOnly; SameSite=Lax'

    parse_set_cookie("theme=dark; Path=/; SameSite=strict").samesite
    # 'Strict'

    cookies = CookieManager([cookie])
    response = cookies.send(response)

Middleware::

    from crumb import CookieSendMiddleware

    app.add_middleware(CookieSendMiddleware(cookies))
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "Cookie",
    "CookieManager",
    "CookieSendConfig",
    "CookieSendMiddleware",
    "CrumbError",
    "FrozenClock",
    "InvalidInput",
    "Middleware",
    "Next",
    "Response",
    "create_cookie",
    "parse_cookie_header",
    "parse_set_cookie",
]

# name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "crumb.errors",
    "Cookie": "crumb.cookie",
    "CookieManager": "crumb.manager",
    "CookieSendConfig": "crumb.config",
    "CookieSendMiddleware": "crumb.middleware.send",
    "CrumbError": "crumb.errors",
    "FrozenClock": "crumb._internal.clock",
    "InvalidInput": "crumb.errors",
    "Middleware": "crumb.middleware.protocol",
    "Next": "crumb.middleware.protocol",
    "Response": "crumb.http.response",
    "create_cookie": "crumb.parser",
    "parse_cookie_header": "crumb.parser",
    "parse_set_cookie": "crumb.parser",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import crumb`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
