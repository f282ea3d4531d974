"""
Clock port.

Services read "now" through a Clock so expiry checks and timestamps
can be pinned in tests.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone


class Clock(ABC):
    """Source of the current time."""

    @abstractmethod
    def now(self) -> datetime:
        """
        Return the current time.

        Returns:
            Timezone-aware datetime in UTC
        """
        pass


class SystemClock(Clock):
    """Clock backed by the system time."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
