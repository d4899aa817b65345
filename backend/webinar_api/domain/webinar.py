"""Webinar entity and the seat rules it owns.

Seat bounds live here only; both the organize path and the seat change path
go through ensure_valid_seat_count. The lead time rule depends on "now" and
is applied by the OrganizeWebinar use case.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from webinar_api.domain.errors import (
    CannotReduceSeatsError,
    WebinarNotEnoughSeatsError,
    WebinarTooManySeatsError,
)
from webinar_api.domain.user import User

if TYPE_CHECKING:
    from webinar_api.services.interfaces.id_generator import IdGenerator

MIN_SEATS = 1
MAX_SEATS = 1000
MINIMUM_LEAD_TIME = timedelta(days=3)


def as_utc(value: datetime) -> datetime:
    """Read a naive datetime as UTC; aware ones are returned unchanged."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def ensure_valid_seat_count(seats: int) -> None:
    """Raise the matching bound error unless MIN_SEATS <= seats <= MAX_SEATS."""
    if seats < MIN_SEATS:
        raise WebinarNotEnoughSeatsError()
    if seats > MAX_SEATS:
        raise WebinarTooManySeatsError()


@dataclass
class Webinar:
    """Domain representation of a Webinar."""

    id: str
    organizer_id: str
    title: str
    start_date: datetime
    end_date: datetime
    seats: int
    # Optimistic concurrency token, bumped by the repository on every update
    version: int = 1

    _WRITE_ONCE = ("id", "organizer_id")

    def __setattr__(self, name, value):
        if name in self._WRITE_ONCE and name in self.__dict__:
            raise AttributeError(f"{name} cannot be changed once set")
        super().__setattr__(name, value)

    @classmethod
    def organize(
        cls,
        id_generator: "IdGenerator",
        organizer_id: str,
        title: str,
        seats: int,
        start_date: datetime,
        end_date: datetime,
    ) -> "Webinar":
        """Build a new webinar. Seats are checked before an id is drawn."""
        ensure_valid_seat_count(seats)
        return cls(
            id=id_generator.generate(),
            organizer_id=organizer_id,
            title=title,
            start_date=start_date,
            end_date=end_date,
            seats=seats,
        )

    def is_organized_by(self, user: User) -> bool:
        return self.organizer_id == user.id

    def update_seats(self, seats: int) -> None:
        """Raise the capacity to `seats`.

        Raises:
            WebinarNotEnoughSeatsError: seats < MIN_SEATS.
            WebinarTooManySeatsError: seats > MAX_SEATS.
            CannotReduceSeatsError: seats is below the current capacity.
        """
        ensure_valid_seat_count(seats)
        if seats < self.seats:
            raise CannotReduceSeatsError(current=self.seats, requested=seats)
        self.seats = seats
