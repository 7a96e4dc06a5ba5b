"""IClock port - wall clock in the user's local calendar."""

from abc import ABC, abstractmethod
from datetime import date, datetime


class IClock(ABC):
    """Port for the current time.

    ``today()`` is the user's local calendar day; quota rollover and
    cutoff dates are computed from it.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Current timezone-aware timestamp."""
        pass

    def today(self) -> date:
        """Current calendar day in the clock's timezone."""
        return self.now().date()
