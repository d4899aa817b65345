from webinar_api.domain.user import User
from webinar_api.domain.webinar import (
    MAX_SEATS,
    MIN_SEATS,
    MINIMUM_LEAD_TIME,
    Webinar,
    ensure_valid_seat_count,
)

__all__ = [
    "User",
    "Webinar",
    "ensure_valid_seat_count",
    "MIN_SEATS",
    "MAX_SEATS",
    "MINIMUM_LEAD_TIME",
]
