from abc import ABC, abstractmethod
from datetime import datetime, timezone


class BaseClock(ABC):
    """Source of the current time for freshness checks."""

    @abstractmethod
    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock(BaseClock):
    """Reads the wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock(BaseClock):
    """Always reports the same instant."""

    def __init__(self, instant: datetime) -> None:
        self._instant = instant

    def now(self) -> datetime:
        return self._instant
