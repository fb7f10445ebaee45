from abc import ABC, abstractmethod
from datetime import UTC, datetime, timedelta


def add_hours(instant: datetime, hours: float) -> datetime:
    """Return a new timestamp `hours` after `instant`."""
    return instant + timedelta(hours=hours)


class Clock(ABC):
    @abstractmethod
    def now(self) -> datetime:
        """Current time as naive UTC (the storage format of all timestamps)"""
        pass


class SystemClock(Clock):
    def now(self) -> datetime:
        return datetime.now(UTC).replace(tzinfo=None)
