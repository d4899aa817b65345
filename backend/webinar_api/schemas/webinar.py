"""
Pydantic schemas for webinar request/response validation.
JSON keys are camelCase on the wire.

Seat bounds are deliberately not declared here: the domain rejects them with
its own messages, which are part of the API contract.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from webinar_api.domain.webinar import as_utc


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WebinarCreate(CamelModel):
    title: str = Field(..., max_length=255)
    seats: int
    start_date: datetime
    end_date: datetime

    @field_validator("start_date", "end_date")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class WebinarCreated(BaseModel):
    id: str


class SeatsChange(BaseModel):
    # Accepts 30 or "30"
    seats: int


class SeatsChanged(BaseModel):
    message: str = "Seats updated"


class WebinarResponse(CamelModel):
    id: str
    organizer_id: str
    title: str
    start_date: datetime
    end_date: datetime
    seats: int

    model_config = ConfigDict(from_attributes=True)


class ErrorResponse(BaseModel):
    error: str
