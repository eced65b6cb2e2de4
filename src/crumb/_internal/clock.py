"""Time sources for expiry math.

Everything that needs "now" (max-age, expiry checks, ``Max-Age`` parsing,
relative date expressions) asks a ``Clock`` instead of calling
``time.time()`` directly, so tests can pin the current second.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Protocol


class Clock(Protocol):
    """Anything that can report the current Unix time in whole seconds."""

    def now(self) -> int: ...


class SystemClock:
    """Wall-clock time, read on every call."""

    __slots__ = ()

    def now(self) -> int:
        return int(time.time())

    def __repr__(self) -> str:
        return "SystemClock()"


@dataclass(frozen=True, slots=True)
class FrozenClock:
    """A clock stopped at ``at``. Used by tests and replay tooling."""

    at: int

    def now(self) -> int:
        return self.at

    def advance(self, seconds: int) -> FrozenClock:
        """Return a new clock ``seconds`` later."""
        return FrozenClock(self.at + seconds)


SYSTEM_CLOCK = SystemClock()
