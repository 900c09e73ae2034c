"""
Time Source

Every temporal decision (past-date rejection, code expiry) asks a Clock
instead of calling ``timezone.now()`` directly, so tests can pin time.

"Today" is always the calendar day in the single reference timezone
(``settings.TIME_ZONE``). Mixing UTC and local date construction is what
produces off-by-one-day availability, so no other code derives dates from
instants on its own.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from django.utils import timezone  # type: ignore


class Clock:
    """System clock backed by Django's timezone utilities."""

    def now(self) -> datetime:
        return timezone.now()

    def today(self) -> date:
        return timezone.localdate(self.now())


class FrozenClock(Clock):
    """
    Clock pinned to a fixed instant

    Usage:
        clock = FrozenClock(datetime(2025, 11, 30, 12, tzinfo=dt_timezone.utc))
        clock.advance(minutes=5)
    """

    def __init__(self, instant: datetime):
        if timezone.is_naive(instant):
            instant = timezone.make_aware(instant)
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def set(self, instant: datetime) -> None:
        if timezone.is_naive(instant):
            instant = timezone.make_aware(instant)
        self._instant = instant

    def advance(self, **kwargs) -> datetime:
        """Move the clock forward by ``timedelta(**kwargs)``."""
        self._instant = self._instant + timedelta(**kwargs)
        return self._instant

    def __repr__(self):
        return f"FrozenClock({self._instant.isoformat()})"


system_clock = Clock()
