"""Clock implementations supplying the anchor time for relative dates."""

from datetime import datetime, timezone

from .interfaces import Clock


class SystemClock(Clock):
    """Reads the local wall clock."""

    def now(self) -> datetime:
        return datetime.now().astimezone()


class FixedClock(Clock):
    """Always returns the same instant. Naive instants are taken as UTC."""

    def __init__(self, instant: datetime) -> None:
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self._instant = instant

    def now(self) -> datetime:
        return self._instant
