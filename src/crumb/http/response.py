"""HTTP response with chainable .with_*() transformation API.

Each transformation returns a new Response. Immutable by convention,
built incrementally by design. Header names keep the casing they were
added with; lookups and removal are case-insensitive.
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Self

from crumb.cookie import Cookie


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    Construct with a body, then chain ``.with_*()`` calls to set
    status, headers, and cookies. Each call returns a new ``Response``.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/html; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    # -- Chainable transformations --

    def with_status(self, status: int) -> Self:
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Self:
        """Return a new Response with an additional header.

        Existing headers of the same name are kept, so repeatable headers
        such as ``Set-Cookie`` accumulate.
        """
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> Self:
        """Return a new Response with additional headers."""
        new = tuple(headers.items())
        return replace(self, headers=(*self.headers, *new))

    def without_header(self, name: str) -> Self:
        """Return a new Response with every header called *name* removed."""
        name_lower = name.lower()
        kept = tuple(item for item in self.headers if item[0].lower() != name_lower)
        if len(kept) == len(self.headers):
            return self
        return replace(self, headers=kept)

    def with_content_type(self, content_type: str) -> Self:
        """Return a new Response with a different content type."""
        return replace(self, content_type=content_type)

    def with_cookie(self, cookie: Cookie) -> Self:
        """Return a new Response with an additional ``Set-Cookie`` header."""
        return self.with_header("Set-Cookie", cookie.to_header_value())

    # -- Header access --

    def get_header(self, name: str, default: str | None = None) -> str | None:
        """Return the first value for *name*, or *default* if missing."""
        name_lower = name.lower()
        for hname, hvalue in self.headers:
            if hname.lower() == name_lower:
                return hvalue
        return default

    def get_header_list(self, name: str) -> list[str]:
        """Return all values for *name* (e.g. multiple ``Set-Cookie``)."""
        name_lower = name.lower()
        return [hvalue for hname, hvalue in self.headers if hname.lower() == name_lower]

    # -- Body helpers --

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        """Body as string."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body
