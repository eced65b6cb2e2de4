"""Cookie factories: build from fields, parse raw headers.

``create_cookie`` and ``parse_set_cookie`` produce ``Cookie`` objects (the
write side). ``parse_cookie_header`` reads a request ``Cookie`` header into
a plain dict (the read side).
"""

import re
from typing import Any
from urllib.parse import unquote_plus

from crumb._internal.clock import SYSTEM_CLOCK, Clock
from crumb._internal.dates import MAX_TIMESTAMP
from crumb.cookie import SAME_SITE_LAX, Cookie, Expire
from crumb.errors import InvalidInput

_ATTRIBUTE_SPLIT_RE = re.compile(r"\s*;\s*")
_LEADING_INT_RE = re.compile(r"\s*[+-]?\d+")

# Attributes stored as-is; a later occurrence replaces an earlier one
_VALUE_ATTRIBUTES = frozenset(("expires", "domain", "path", "samesite"))
_FLAG_ATTRIBUTES = frozenset(("secure", "httponly"))


def create_cookie(
    name: str,
    value: str = "",
    expires: Expire = None,
    domain: str | None = None,
    path: str | None = "/",
    secure: bool | None = True,
    httponly: bool | None = True,
    samesite: str | None = SAME_SITE_LAX,
    *,
    clock: Clock | None = None,
) -> Cookie:
    """Build a ``Cookie`` from discrete attributes.

    Defaults produce a host-only, whole-site, ``Secure; HttpOnly;
    SameSite=Lax`` session cookie.

    Raises:
        InvalidInput: If any attribute fails validation.
    """
    return Cookie(
        name,
        value,
        expires,
        domain,
        path,
        secure,
        httponly,
        samesite,
        clock=clock or SYSTEM_CLOCK,
    )


def _leading_int(text: str | None) -> int:
    """Integer prefix of *text*, ``0`` if there is none."""
    if not text:
        return 0
    match = _LEADING_INT_RE.match(text)
    return int(match.group()) if match else 0


def parse_set_cookie(raw: str, *, clock: Clock | None = None) -> Cookie:
    """Parse a raw ``Set-Cookie`` header value into a ``Cookie``.

    Attribute names are case-insensitive. ``Max-Age`` is resolved against
    the clock immediately and shares one slot with ``Expires``: whichever
    appears last wins. A ``Max-Age`` reaching past 31-Dec-9999 is capped at
    that date (RFC 6265 section 5.2.2). Unknown attributes are ignored.
    Attributes that do not appear stay unset, including ``Path``.

    Raises:
        InvalidInput: If *raw* holds no attributes, or the resulting cookie
            fails validation (bad name, unknown ``SameSite``, unparseable
            ``Expires``).
    """
    if not isinstance(raw, str):
        msg = f"The raw Set-Cookie header value must be a string; received {type(raw).__name__!r}."
        raise InvalidInput(msg)

    attributes = [part for part in _ATTRIBUTE_SPLIT_RE.split(raw) if part]
    if not attributes:
        msg = f"The raw value of the Set-Cookie header {raw!r} could not be parsed."
        raise InvalidInput(msg)

    clock = clock or SYSTEM_CLOCK
    name, sep, value = attributes[0].partition("=")
    fields: dict[str, Any] = {}

    for attribute in attributes[1:]:
        key, sep_, attr_value = attribute.partition("=")
        key = key.lower()
        if key in _VALUE_ATTRIBUTES:
            fields[key] = attr_value if sep_ else None
        elif key in _FLAG_ATTRIBUTES:
            fields[key] = True
        elif key == "max-age":
            delta = _leading_int(attr_value if sep_ else None)
            fields["expires"] = min(clock.now() + delta, MAX_TIMESTAMP)

    return Cookie(
        name,
        unquote_plus(value) if sep else "",
        fields.get("expires"),
        fields.get("domain"),
        fields.get("path"),
        fields.get("secure"),
        fields.get("httponly"),
        fields.get("samesite"),
        clock=clock,
    )


def parse_cookie_header(header: str) -> dict[str, str]:
    """Parse a request ``Cookie`` header value into a name-value dict.

    Values are URL-decoded. Returns an empty dict for empty or missing
    headers; pairs without ``=`` are skipped and later duplicates win.
    """
    if not header:
        return {}
    cookies: dict[str, str] = {}
    for pair in header.split(";"):
        pair = pair.strip()
        if "=" in pair:
            key, _, value = pair.partition("=")
            cookies[key.strip()] = unquote_plus(value.strip())
    return cookies
