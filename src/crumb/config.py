"""Middleware configuration.

``CookieSendConfig`` holds the options that decide how managed cookies
are merged with the headers a handler already set. It is validated when
built.
"""

from dataclasses import dataclass

from crumb.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class CookieSendConfig:
    """How ``CookieSendMiddleware`` writes cookies onto a response.

    ``remove_existing`` drops any ``Set-Cookie`` headers the inner handler
    already added before the managed cookies are appended::

        config = CookieSendConfig(remove_existing=False)
    """

    remove_existing: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.remove_existing, bool):
            msg = (
                "CookieSendConfig.remove_existing must be a bool; "
                f"received {type(self.remove_existing).__name__!r}."
            )
            raise ConfigurationError(msg)
