from webinar_api.schemas.webinar import (
    ErrorResponse,
    SeatsChange,
    SeatsChanged,
    WebinarCreate,
    WebinarCreated,
    WebinarResponse,
)

__all__ = [
    "WebinarCreate", "WebinarCreated", "WebinarResponse",
    "SeatsChange", "SeatsChanged", "ErrorResponse",
]
