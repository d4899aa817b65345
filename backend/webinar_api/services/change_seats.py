"""
ChangeSeats use case: raise the capacity of an existing webinar.

The organizer check runs before any seat rule, so a caller who does not own
the webinar learns nothing about the validity of the requested value.
"""

from dataclasses import dataclass

from webinar_api.core.logging import get_logger
from webinar_api.core.metrics import record_webinar_operation
from webinar_api.domain.errors import (
    DomainError,
    WebinarNotFoundError,
    WebinarNotOrganizerError,
)
from webinar_api.domain.user import User
from webinar_api.services.interfaces import WebinarRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class ChangeSeatsCommand:
    user: User
    webinar_id: str
    seats: int


class ChangeSeats:
    def __init__(self, repository: WebinarRepository):
        self._repository = repository

    async def execute(self, command: ChangeSeatsCommand) -> None:
        try:
            await self._apply(command)
        except DomainError as e:
            record_webinar_operation("change_seats", e.code.value.lower())
            logger.warning(
                "webinar_seat_change_rejected",
                webinar_id=command.webinar_id,
                user_id=command.user.id,
                requested=command.seats,
                reason=e.code.value,
            )
            raise
        record_webinar_operation("change_seats", "success")

    async def _apply(self, command: ChangeSeatsCommand) -> None:
        webinar = await self._repository.find_by_id(command.webinar_id)
        if webinar is None:
            raise WebinarNotFoundError(command.webinar_id)

        if not webinar.is_organized_by(command.user):
            raise WebinarNotOrganizerError(webinar.id, command.user.id)

        previous = webinar.seats
        webinar.update_seats(command.seats)
        await self._repository.update(webinar)

        logger.info(
            "webinar_seats_changed",
            webinar_id=webinar.id,
            previous=previous,
            seats=webinar.seats,
            version=webinar.version,
        )
