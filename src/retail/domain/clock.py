"""Injectable time source.

Handlers take a Clock instead of calling ``datetime.now()`` so that order
timestamps (and therefore list ordering) are deterministic under test.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone


class Clock(ABC):

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime."""


class SystemClock(Clock):

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
