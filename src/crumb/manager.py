"""Name-keyed cookie collection that writes itself onto responses.

``CookieManager`` is a plain mutable container — one ``Cookie`` per name,
iterated in insertion order. ``send()`` renders every held cookie as a
``Set-Cookie`` header on a response without mutating the response::

    cookies = CookieManager()
    cookies.set(Cookie("session", token, expires="+1 day"))
    cookies.set(Cookie("theme", "dark", secure=False))
    response = cookies.send(response)

Not thread-safe; serialize access if one manager is shared.
"""

import logging
from collections.abc import Iterable, Iterator
from typing import Protocol, Self

from crumb.cookie import Cookie
from crumb.errors import InvalidInput

logger = logging.getLogger("crumb.manager")


class HeaderResponse(Protocol):
    """Any immutable response exposing the header transformations ``send`` needs."""

    def with_header(self, name: str, value: str) -> Self: ...

    def without_header(self, name: str) -> Self: ...


def _ensure_cookie(cookie: object) -> Cookie:
    if not isinstance(cookie, Cookie):
        msg = (
            "CookieManager can only hold Cookie instances; "
            f"received {type(cookie).__name__!r}."
        )
        raise InvalidInput(msg)
    return cookie


class CookieManager:
    """A collection of outgoing cookies, keyed by cookie name."""

    __slots__ = ("_cookies",)

    def __init__(self, cookies: Iterable[Cookie] = ()) -> None:
        self._cookies: dict[str, Cookie] = {}
        self.set_multiple(cookies)

    def set(self, cookie: Cookie) -> None:
        """Add *cookie*, replacing any held cookie with the same name."""
        self._cookies[_ensure_cookie(cookie).name] = cookie

    def set_multiple(self, cookies: Iterable[Cookie]) -> None:
        """Add several cookies at once.

        Every element is checked before any is stored, so a bad element
        leaves the collection untouched.

        Raises:
            InvalidInput: If any element is not a ``Cookie``.
        """
        checked = [_ensure_cookie(cookie) for cookie in cookies]
        for cookie in checked:
            self._cookies[cookie.name] = cookie

    def get(self, name: str) -> Cookie | None:
        return self._cookies.get(name)

    def get_all(self) -> dict[str, Cookie]:
        """Return a copy of the name-to-cookie mapping."""
        return dict(self._cookies)

    def get_value(self, name: str) -> str | None:
        """Return the value of the cookie called *name*, if held."""
        cookie = self._cookies.get(name)
        return cookie.value if cookie is not None else None

    def has(self, name: str) -> bool:
        return name in self._cookies

    def remove(self, name: str) -> Cookie | None:
        """Drop the cookie called *name* and return it, or ``None`` if absent."""
        return self._cookies.pop(name, None)

    def clear(self) -> None:
        self._cookies.clear()

    def count(self) -> int:
        return len(self._cookies)

    def send[R: HeaderResponse](self, response: R, remove_existing: bool = True) -> R:
        """Return *response* with one ``Set-Cookie`` header per held cookie.

        With ``remove_existing`` (the default) any ``Set-Cookie`` headers
        already on the response are dropped first. Headers are appended in
        iteration order.
        """
        if remove_existing:
            response = response.without_header("set-cookie")
        for cookie in self._cookies.values():
            response = response.with_header("Set-Cookie", cookie.to_header_value())
        logger.debug(
            "Sent %d cookie(s)%s",
            len(self._cookies),
            " after removing existing Set-Cookie headers" if remove_existing else "",
        )
        return response

    def __iter__(self) -> Iterator[Cookie]:
        return iter(list(self._cookies.values()))

    def __len__(self) -> int:
        return len(self._cookies)

    def __contains__(self, name: object) -> bool:
        return name in self._cookies

    def __repr__(self) -> str:
        return f"CookieManager({list(self._cookies.values())!r})"
