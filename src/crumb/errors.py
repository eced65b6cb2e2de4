"""Crumb exception hierarchy.

Shared across Cookie, the parser, the manager, and middleware so every
module raises and catches the same types.
"""


class CrumbError(Exception):
    """Base for all crumb-specific errors."""


class InvalidInput(CrumbError, ValueError):  # noqa: N818
    """Raised when a cookie attribute or raw header fails validation.

    Subclasses ``ValueError`` so callers that already guard against bad
    arguments keep working.
    """


class ConfigurationError(CrumbError):
    """Raised when middleware configuration is invalid."""
