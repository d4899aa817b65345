"""
Webinar endpoints.

Handlers only translate HTTP into use case commands. Domain errors propagate
to the handlers registered in webinar_api.api.errors.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from webinar_api.core.logging import get_logger
from webinar_api.core.security import get_current_user
from webinar_api.db.session import get_db
from webinar_api.domain.user import User
from webinar_api.schemas.webinar import (
    ErrorResponse,
    SeatsChange,
    SeatsChanged,
    WebinarCreate,
    WebinarCreated,
    WebinarResponse,
)
from webinar_api.services.cache_service import (
    get_cached_webinar,
    invalidate_webinar_cache,
    set_cached_webinar,
)
from webinar_api.services.change_seats import ChangeSeats, ChangeSeatsCommand
from webinar_api.services.find_webinar import FindWebinar
from webinar_api.services.organize_webinar import OrganizeWebinar, OrganizeWebinarCommand
from webinar_api.services.use_case_factory import (
    get_change_seats,
    get_find_webinar,
    get_organize_webinar,
)

logger = get_logger(__name__)
router = APIRouter(prefix="/webinars", tags=["Webinars"])


@router.post(
    "",
    response_model=WebinarCreated,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def organize_webinar_endpoint(
    payload: WebinarCreate,
    user: User = Depends(get_current_user),
    use_case: OrganizeWebinar = Depends(get_organize_webinar),
):
    """Organize a webinar on behalf of the current user."""
    result = await use_case.execute(
        OrganizeWebinarCommand(
            user_id=user.id,
            title=payload.title,
            seats=payload.seats,
            start_date=payload.start_date,
            end_date=payload.end_date,
        )
    )
    return WebinarCreated(**result)


@router.post(
    "/{webinar_id}/seats",
    response_model=SeatsChanged,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def change_seats_endpoint(
    webinar_id: str,
    payload: SeatsChange,
    user: User = Depends(get_current_user),
    use_case: ChangeSeats = Depends(get_change_seats),
    db: AsyncSession = Depends(get_db),
):
    """Raise the seat count. Only the organizer may do this."""
    await use_case.execute(
        ChangeSeatsCommand(user=user, webinar_id=webinar_id, seats=payload.seats)
    )
    # Commit first, or a concurrent read could re-cache the old row
    await db.commit()
    await invalidate_webinar_cache(webinar_id)
    return SeatsChanged()


@router.get(
    "/{webinar_id}",
    response_model=WebinarResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_webinar_endpoint(
    webinar_id: str,
    use_case: FindWebinar = Depends(get_find_webinar),
):
    """Get a single webinar. Served from Redis when cached."""
    cached = await get_cached_webinar(webinar_id)
    if cached:
        logger.info("webinar_cache_hit", webinar_id=webinar_id)
        return WebinarResponse(**cached)

    webinar = await use_case.execute(webinar_id)
    response = WebinarResponse.model_validate(webinar)
    await set_cached_webinar(webinar_id, response.model_dump(mode="json"))
    return response
