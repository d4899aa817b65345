"""Domain error codes for the webinars module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    WEBINAR_NOT_FOUND = "WEBINAR_NOT_FOUND"
    WEBINAR_NOT_ORGANIZER = "WEBINAR_NOT_ORGANIZER"
    WEBINAR_DATES_TOO_SOON = "WEBINAR_DATES_TOO_SOON"
    WEBINAR_NOT_ENOUGH_SEATS = "WEBINAR_NOT_ENOUGH_SEATS"
    WEBINAR_TOO_MANY_SEATS = "WEBINAR_TOO_MANY_SEATS"
    WEBINAR_REDUCE_SEATS = "WEBINAR_REDUCE_SEATS"
    WEBINAR_ALREADY_EXISTS = "WEBINAR_ALREADY_EXISTS"
    WEBINAR_UPDATE_CONFLICT = "WEBINAR_UPDATE_CONFLICT"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class WebinarNotFoundError(DomainError):
    """Raised when a webinar id has no matching record."""

    def __init__(self, webinar_id: str) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_NOT_FOUND,
            message="Webinar not found",
        )
        self.webinar_id = webinar_id


class WebinarNotOrganizerError(DomainError):
    """Raised when the caller does not organize the webinar."""

    def __init__(self, webinar_id: str, user_id: str) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_NOT_ORGANIZER,
            message="User is not allowed to update this webinar",
        )
        self.webinar_id = webinar_id
        self.user_id = user_id


class WebinarDatesTooSoonError(DomainError):
    """Raised when the start date is inside the minimum lead time."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_DATES_TOO_SOON,
            message="Webinar must be scheduled at least 3 days in advance",
        )


class WebinarNotEnoughSeatsError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_NOT_ENOUGH_SEATS,
            message="Webinar must have at least 1 seat",
        )


class WebinarTooManySeatsError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_TOO_MANY_SEATS,
            message="Webinar must have at most 1000 seats",
        )


class CannotReduceSeatsError(DomainError):
    """Raised when a seat change would lower the capacity."""

    def __init__(self, current: int, requested: int) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_REDUCE_SEATS,
            message="Webinar seats cannot be reduced",
        )
        self.current = current
        self.requested = requested


class WebinarAlreadyExistsError(DomainError):
    def __init__(self, webinar_id: str) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_ALREADY_EXISTS,
            message="Webinar already exists",
        )
        self.webinar_id = webinar_id


class WebinarUpdateConflictError(DomainError):
    """Raised when the stored webinar changed since it was read."""

    def __init__(self, webinar_id: str) -> None:
        super().__init__(
            code=ErrorCode.WEBINAR_UPDATE_CONFLICT,
            message="Webinar was modified concurrently, please retry",
        )
        self.webinar_id = webinar_id


# Creation and seat updates report the same failure kinds.
NotEnoughSeatsError = WebinarNotEnoughSeatsError
TooManySeatsError = WebinarTooManySeatsError
