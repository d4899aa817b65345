"""
Clock interface.
Lets use cases read "now" without touching the system clock directly.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class DateGenerator(ABC):
    """
    Source of the current instant.

    Implementations:
    - RealDateGenerator: system clock, UTC
    - FixedDateGenerator: pinned instant for tests
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant as a timezone-aware datetime."""
        pass
