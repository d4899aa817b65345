"""
Tests for the OrganizeWebinar use case against the in-memory repository.
"""

from datetime import datetime, timezone

import pytest

from webinar_api.domain.errors import (
    WebinarDatesTooSoonError,
    WebinarNotEnoughSeatsError,
    WebinarTooManySeatsError,
)
from webinar_api.domain.webinar import Webinar
from webinar_api.infrastructure.generators import FixedDateGenerator, FixedIdGenerator
from webinar_api.infrastructure.in_memory_webinar_repository import InMemoryWebinarRepository
from webinar_api.services.organize_webinar import OrganizeWebinar, OrganizeWebinarCommand

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


def command(**overrides) -> OrganizeWebinarCommand:
    values = {
        "user_id": "user-alice-id",
        "title": "Webinar title",
        "seats": 100,
        "start_date": datetime(2024, 1, 10, 10, tzinfo=timezone.utc),
        "end_date": datetime(2024, 1, 10, 11, tzinfo=timezone.utc),
    }
    values.update(overrides)
    return OrganizeWebinarCommand(**values)


@pytest.fixture
def repository() -> InMemoryWebinarRepository:
    return InMemoryWebinarRepository()


@pytest.fixture
def use_case(repository) -> OrganizeWebinar:
    return OrganizeWebinar(repository, FixedIdGenerator(), FixedDateGenerator(NOW))


@pytest.mark.asyncio
async def test_returns_generated_id(use_case):
    """Happy path returns the id from the id generator."""
    result = await use_case.execute(command())
    assert result == {"id": "id-1"}


@pytest.mark.asyncio
async def test_persists_webinar(use_case, repository):
    """The stored webinar matches the command plus id and organizer."""
    await use_case.execute(command())

    assert repository.database["id-1"] == Webinar(
        id="id-1",
        organizer_id="user-alice-id",
        title="Webinar title",
        start_date=datetime(2024, 1, 10, 10, tzinfo=timezone.utc),
        end_date=datetime(2024, 1, 10, 11, tzinfo=timezone.utc),
        seats=100,
    )


@pytest.mark.asyncio
async def test_consecutive_webinars_get_distinct_ids(use_case, repository):
    first = await use_case.execute(command())
    second = await use_case.execute(command(title="Second"))
    assert (first["id"], second["id"]) == ("id-1", "id-2")
    assert len(repository.database) == 2


@pytest.mark.asyncio
async def test_rejects_start_inside_lead_time(use_case, repository):
    """Starting one second short of three days is too soon."""
    too_soon = datetime(2024, 1, 3, 23, 59, 59, tzinfo=timezone.utc)
    with pytest.raises(WebinarDatesTooSoonError) as exc_info:
        await use_case.execute(command(start_date=too_soon, end_date=too_soon))

    assert exc_info.value.message == "Webinar must be scheduled at least 3 days in advance"
    assert repository.database == {}


@pytest.mark.asyncio
async def test_accepts_start_exactly_three_days_ahead(use_case, repository):
    start = datetime(2024, 1, 4, tzinfo=timezone.utc)
    await use_case.execute(command(start_date=start, end_date=start))
    assert "id-1" in repository.database


@pytest.mark.asyncio
async def test_rejects_zero_seats(use_case, repository):
    with pytest.raises(WebinarNotEnoughSeatsError) as exc_info:
        await use_case.execute(command(seats=0))

    assert exc_info.value.message == "Webinar must have at least 1 seat"
    assert repository.database == {}


@pytest.mark.asyncio
async def test_rejects_more_than_thousand_seats(use_case, repository):
    with pytest.raises(WebinarTooManySeatsError) as exc_info:
        await use_case.execute(command(seats=1001))

    assert exc_info.value.message == "Webinar must have at most 1000 seats"
    assert repository.database == {}


@pytest.mark.asyncio
async def test_date_rule_wins_over_seat_rules(use_case):
    """With several rules broken, the lead time error is reported."""
    too_soon = datetime(2024, 1, 2, tzinfo=timezone.utc)
    with pytest.raises(WebinarDatesTooSoonError):
        await use_case.execute(command(start_date=too_soon, seats=0))


@pytest.mark.asyncio
async def test_rejected_request_does_not_consume_an_id(use_case):
    with pytest.raises(WebinarTooManySeatsError):
        await use_case.execute(command(seats=5000))

    result = await use_case.execute(command())
    assert result == {"id": "id-1"}


@pytest.mark.asyncio
async def test_naive_dates_are_read_as_utc(use_case, repository):
    """Callers passing naive datetimes get the same rules as aware ones."""
    result = await use_case.execute(
        command(start_date=datetime(2024, 1, 10, 10), end_date=datetime(2024, 1, 10, 11))
    )

    stored = repository.database[result["id"]]
    assert stored.start_date == datetime(2024, 1, 10, 10, tzinfo=timezone.utc)
    assert stored.end_date == datetime(2024, 1, 10, 11, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_naive_start_inside_lead_time_is_rejected(use_case):
    with pytest.raises(WebinarDatesTooSoonError):
        await use_case.execute(command(start_date=datetime(2024, 1, 2), end_date=datetime(2024, 1, 2, 1)))
