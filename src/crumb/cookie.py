"""Immutable ``Set-Cookie`` value object.

A ``Cookie`` validates its attributes when it is built and renders itself
as an RFC 6265 ``Set-Cookie`` header value. It is never mutated: every
``.with_*()`` call returns either the same instance (nothing changed) or a
new, re-validated ``Cookie`` with exactly one attribute replaced::

    cookie = Cookie("session", "abc123", expires="+1 hour")
    cookie = cookie.with_domain("example.com").with_samesite("strict")
    str(cookie)
    # 'session=abc123; Expires=...; Max-Age=3600; Domain=example.com;
    #  Path=/; Secure; HttpOnly; SameSite=Strict'
"""

import re
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Self
from urllib.parse import quote

from crumb._internal.clock import SYSTEM_CLOCK, Clock
from crumb._internal.dates import MAX_TIMESTAMP, format_cookie_date, parse_date
from crumb.errors import InvalidInput

SAME_SITE_NONE = "None"
SAME_SITE_LAX = "Lax"
SAME_SITE_STRICT = "Strict"
SAME_SITE_VALUES = (SAME_SITE_NONE, SAME_SITE_LAX, SAME_SITE_STRICT)

# expire() moves the timestamp one year and one second into the past
EXPIRED_OFFSET = 31536001

# RFC 6265 cookie-name: a token, i.e. US-ASCII minus controls and separators
_NAME_RE = re.compile(r"[A-Za-z0-9!#$%&'*+\-.^_`|~]+")

_NUMERIC_RE = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*")

# Accepted shapes for an expiry: absent, a Unix timestamp, a datetime,
# or a date expression ("+1 day", "Wed, 21-Oct-2026 07:28:00 GMT", ...)
type Expire = datetime | int | str | None


def _validate_name(name: object) -> str:
    if not isinstance(name, str):
        msg = f"The cookie name must be a string; received {type(name).__name__!r}."
        raise InvalidInput(msg)
    if not name:
        msg = "The cookie name cannot be empty."
        raise InvalidInput(msg)
    if not _NAME_RE.fullmatch(name):
        msg = (
            f"The cookie name {name!r} contains invalid characters; must contain any US-ASCII"
            " characters, except control and separator characters, spaces, or tabs."
        )
        raise InvalidInput(msg)
    return name


def _validate_value(value: object) -> str:
    if not isinstance(value, str):
        msg = f"The cookie value must be a string; received {type(value).__name__!r}."
        raise InvalidInput(msg)
    return value


def normalize_expires(expire: Any, clock: Clock = SYSTEM_CLOCK) -> int:
    """Convert any accepted expiry shape into a Unix timestamp.

    ``0`` means "session cookie". Non-positive results also collapse to ``0``.
    Results past 31-Dec-9999 23:59:59 GMT cannot be rendered and are rejected.

    Raises:
        InvalidInput: If *expire* has an unsupported type, is an unparseable
            string, or lies past the last renderable date.
    """
    if isinstance(expire, bool) or not (
        expire is None or isinstance(expire, (int, str, datetime))
    ):
        msg = (
            "The cookie expire time is not valid; must be None, a string, an integer,"
            f" or a datetime instance; received {type(expire).__name__!r}."
        )
        raise InvalidInput(msg)

    if expire is None or expire == "":
        return 0

    if isinstance(expire, datetime):
        timestamp = int(expire.timestamp())
    elif isinstance(expire, int):
        timestamp = expire
    elif _NUMERIC_RE.fullmatch(expire):
        try:
            timestamp = int(float(expire))
        except OverflowError:
            msg = f"The cookie expire time {expire!r} is out of range."
            raise InvalidInput(msg) from None
    else:
        parsed = parse_date(expire, clock.now())
        if parsed is None:
            msg = f"The string representation of the cookie expire time {expire!r} is not valid."
            raise InvalidInput(msg)
        timestamp = parsed

    if timestamp > MAX_TIMESTAMP:
        msg = (
            f"The cookie expire time {expire!r} is out of range;"
            " must not be later than 31-Dec-9999 23:59:59 GMT."
        )
        raise InvalidInput(msg)
    return timestamp if timestamp > 0 else 0


def normalize_samesite(samesite: object) -> str | None:
    """Return the canonical ``None``/``Lax``/``Strict`` spelling, or ``None`` if unset.

    Raises:
        InvalidInput: If *samesite* is not one of the three values.
    """
    if not samesite:
        return None
    if not isinstance(samesite, str):
        msg = f"The sameSite attribute must be a string; received {type(samesite).__name__!r}."
        raise InvalidInput(msg)
    normalized = samesite.lower().capitalize()
    if normalized not in SAME_SITE_VALUES:
        allowed = ", ".join(f'"{item}"' for item in SAME_SITE_VALUES)
        msg = f"The sameSite attribute {samesite!r} is not valid; must be one of ({allowed})."
        raise InvalidInput(msg)
    return normalized


def _empty_to_none(value: str | None) -> str | None:
    return value or None


@dataclass(frozen=True, slots=True)
class Cookie:
    """A single cookie destined for a ``Set-Cookie`` response header.

    ``expires`` accepts ``None``, an integer Unix timestamp (or numeric
    string), a ``datetime``, or a date expression. After construction it
    always holds an integer timestamp (``0`` for a session cookie).

    ``secure`` and ``httponly`` are tri-state: ``None`` renders the same
    as ``False`` but is a distinct value for ``.with_secure()`` /
    ``.with_httponly()`` comparisons.

    ``clock`` supplies "now" for ``max_age``, ``is_expired``, ``expire()``
    and relative expiry expressions. It does not take part in equality.
    """

    name: str
    value: str = ""
    expires: int = 0
    domain: str | None = None
    path: str | None = "/"
    secure: bool | None = True
    httponly: bool | None = True
    samesite: str | None = SAME_SITE_LAX
    clock: Clock = field(default=SYSTEM_CLOCK, repr=False, compare=False)

    def __post_init__(self) -> None:
        _validate_name(self.name)
        _validate_value(self.value)
        object.__setattr__(self, "expires", normalize_expires(self.expires, self.clock))
        object.__setattr__(self, "domain", _empty_to_none(self.domain))
        object.__setattr__(self, "path", _empty_to_none(self.path))
        object.__setattr__(self, "samesite", normalize_samesite(self.samesite))

    # -- Computed attributes --

    @property
    def max_age(self) -> int:
        """Seconds until expiry; ``0`` for session or already expired cookies."""
        if self.is_session:
            return 0
        return max(self.expires - self.clock.now(), 0)

    @property
    def is_secure(self) -> bool:
        return bool(self.secure)

    @property
    def is_httponly(self) -> bool:
        return bool(self.httponly)

    @property
    def is_session(self) -> bool:
        """True when the cookie carries no expiry."""
        return self.expires == 0

    @property
    def is_expired(self) -> bool:
        """True when the expiry lies in the past. Evaluated on every access."""
        return not self.is_session and self.expires < self.clock.now()

    # -- Chainable transformations --

    def with_value(self, value: str) -> Self:
        """Return a cookie with a different value."""
        if value == self.value:
            return self
        return replace(self, value=value)

    def with_expires(self, expire: Expire = None) -> Self:
        """Return a cookie with a different expiry.

        Accepts the same shapes as the constructor's ``expires`` argument.
        """
        expires = normalize_expires(expire, self.clock)
        if expires == self.expires:
            return self
        return replace(self, expires=expires)

    def expire(self) -> Self:
        """Return a cookie that tells the client to delete it.

        An already expired cookie is returned unchanged. The new expiry is
        never earlier than ``1`` so the result is not a session cookie.
        """
        if self.is_expired:
            return self
        return replace(self, expires=max(self.clock.now() - EXPIRED_OFFSET, 1))

    def with_domain(self, domain: str | None) -> Self:
        """Return a cookie with a different ``Domain``. Empty clears it."""
        domain = _empty_to_none(domain)
        if domain == self.domain:
            return self
        return replace(self, domain=domain)

    def with_path(self, path: str | None) -> Self:
        """Return a cookie with a different ``Path``. Empty clears it."""
        path = _empty_to_none(path)
        if path == self.path:
            return self
        return replace(self, path=path)

    def with_secure(self, secure: bool = True) -> Self:
        if secure is self.secure:
            return self
        return replace(self, secure=secure)

    def with_httponly(self, httponly: bool = True) -> Self:
        if httponly is self.httponly:
            return self
        return replace(self, httponly=httponly)

    def with_samesite(self, samesite: str | None) -> Self:
        """Return a cookie with a different ``SameSite`` policy.

        Raises:
            InvalidInput: If *samesite* is not ``None``, ``Lax`` or ``Strict``
                (case-insensitive).
        """
        samesite = normalize_samesite(samesite)
        if samesite == self.samesite:
            return self
        return replace(self, samesite=samesite)

    # -- Rendering --

    def to_header_value(self) -> str:
        """Serialize to a ``Set-Cookie`` header value string."""
        parts = [f"{self.name}={quote(self.value, safe='')}"]
        if not self.is_session:
            parts.append(f"Expires={format_cookie_date(self.expires)}")
            parts.append(f"Max-Age={self.max_age}")
        if self.domain is not None:
            parts.append(f"Domain={self.domain}")
        if self.path is not None:
            parts.append(f"Path={self.path}")
        if self.secure is True:
            parts.append("Secure")
        if self.httponly is True:
            parts.append("HttpOnly")
        if self.samesite is not None:
            parts.append(f"SameSite={self.samesite}")
        return "; ".join(parts)

    def __str__(self) -> str:
        return self.to_header_value()
