"""Single-slot, time-expiring memo for the weather forecast.

The slot holds one snapshot and the time it was captured, stored together so
the cache is never half-populated. A new snapshot replaces the old one
wholesale. There is no explicit invalidation: entries simply expire.
"""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from farmhand.core.config import settings

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


class ForecastCache:
    def __init__(self, expiry: timedelta | None = None, clock: Clock = utc_now):
        if expiry is None:
            expiry = timedelta(minutes=settings.forecast_cache_minutes)
        self.expiry = expiry
        self.clock = clock
        self._slot: tuple[list, datetime] | None = None

    @property
    def captured_at(self) -> datetime | None:
        return self._slot[1] if self._slot else None

    def get(self) -> list | None:
        """Return a copy of the cached snapshot, or None if empty or expired."""
        if self._slot is None:
            return None
        snapshot, captured_at = self._slot
        if self.clock() - captured_at >= self.expiry:
            return None
        return list(snapshot)

    def store(self, entries: list) -> list:
        """Replace the snapshot with ``entries`` and return a copy of it."""
        self._slot = (list(entries), self.clock())
        return list(entries)
