"""
OrganizeWebinar use case: validate and persist a new webinar.

Rule order is part of the contract. When several rules are broken at once the
caller sees the first one:
  1. start date inside the lead time  -> WebinarDatesTooSoonError
  2. seats < 1                        -> WebinarNotEnoughSeatsError
  3. seats > 1000                     -> WebinarTooManySeatsError
Nothing reaches the repository until every rule passed.
"""

from dataclasses import dataclass
from datetime import datetime

from webinar_api.core.logging import get_logger
from webinar_api.core.metrics import record_webinar_operation
from webinar_api.domain.errors import DomainError, WebinarDatesTooSoonError
from webinar_api.domain.webinar import MINIMUM_LEAD_TIME, Webinar, as_utc
from webinar_api.services.interfaces import DateGenerator, IdGenerator, WebinarRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class OrganizeWebinarCommand:
    user_id: str
    title: str
    seats: int
    start_date: datetime
    end_date: datetime

    def __post_init__(self):
        object.__setattr__(self, "start_date", as_utc(self.start_date))
        object.__setattr__(self, "end_date", as_utc(self.end_date))


class OrganizeWebinar:
    def __init__(
        self,
        repository: WebinarRepository,
        id_generator: IdGenerator,
        date_generator: DateGenerator,
    ):
        self._repository = repository
        self._id_generator = id_generator
        self._date_generator = date_generator

    async def execute(self, command: OrganizeWebinarCommand) -> dict:
        """Create the webinar and return {"id": <new id>}."""
        try:
            webinar = self._build(command)
        except DomainError as e:
            record_webinar_operation("organize", e.code.value.lower())
            logger.warning(
                "webinar_rejected",
                organizer_id=command.user_id,
                reason=e.code.value,
                seats=command.seats,
                start_date=command.start_date.isoformat(),
            )
            raise

        await self._repository.create(webinar)

        record_webinar_operation("organize", "success")
        logger.info(
            "webinar_organized",
            webinar_id=webinar.id,
            organizer_id=webinar.organizer_id,
            seats=webinar.seats,
        )
        return {"id": webinar.id}

    def _build(self, command: OrganizeWebinarCommand) -> Webinar:
        now = self._date_generator.now()
        if command.start_date < now + MINIMUM_LEAD_TIME:
            raise WebinarDatesTooSoonError()

        return Webinar.organize(
            id_generator=self._id_generator,
            organizer_id=command.user_id,
            title=command.title,
            seats=command.seats,
            start_date=command.start_date,
            end_date=command.end_date,
        )
