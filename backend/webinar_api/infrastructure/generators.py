"""
Clock and id adapters.

The real ones back the running service; the fixed ones make use cases
deterministic in tests.
"""

import itertools
import uuid
from datetime import datetime, timezone

from webinar_api.domain.webinar import as_utc
from webinar_api.services.interfaces.date_generator import DateGenerator
from webinar_api.services.interfaces.id_generator import IdGenerator


class RealDateGenerator(DateGenerator):
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedDateGenerator(DateGenerator):
    """Always returns the instant it was built with."""

    def __init__(self, instant: datetime):
        self._instant = as_utc(instant)

    def now(self) -> datetime:
        return self._instant


class RealIdGenerator(IdGenerator):
    def generate(self) -> str:
        return str(uuid.uuid4())


class FixedIdGenerator(IdGenerator):
    """Yields id-1, id-2, ... in order."""

    def __init__(self, prefix: str = "id"):
        self._prefix = prefix
        self._counter = itertools.count(1)

    def generate(self) -> str:
        return f"{self._prefix}-{next(self._counter)}"
