"""
SQLAlchemy implementation of the WebinarRepository.

CONCURRENCY: Optimistic Locking
===============================

Two ChangeSeats calls can read the same row, mutate it, and write it back;
the second write would silently discard the first. Every update is therefore
conditional:

  UPDATE webinars SET ..., version = :version + 1
  WHERE id = :id AND version = :version

Zero affected rows means the row moved on since it was read (or never
existed) and the caller gets WebinarUpdateConflictError. There is no retry
here; the client re-issues the request.
"""

from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.exc import FlushError
from sqlalchemy.ext.asyncio import AsyncSession

from webinar_api.core.logging import get_logger
from webinar_api.core.metrics import record_db_operation
from webinar_api.domain.errors import WebinarAlreadyExistsError, WebinarUpdateConflictError
from webinar_api.domain.webinar import Webinar, as_utc
from webinar_api.models.webinar import WebinarModel
from webinar_api.services.interfaces.webinar_repository import WebinarRepository

logger = get_logger(__name__)


def _to_entity(model: WebinarModel) -> Webinar:
    # SQLite hands back naive datetimes even for timezone-aware columns
    return Webinar(
        id=model.id,
        organizer_id=model.organizer_id,
        title=model.title,
        start_date=as_utc(model.start_date),
        end_date=as_utc(model.end_date),
        seats=model.seats,
        version=model.version,
    )


class SqlAlchemyWebinarRepository(WebinarRepository):
    """Relational store backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create(self, webinar: Webinar) -> None:
        try:
            # A SAVEPOINT keeps a rejected insert from undoing the rest of the request
            async with self._db.begin_nested():
                self._db.add(
                    WebinarModel(
                        id=webinar.id,
                        organizer_id=webinar.organizer_id,
                        title=webinar.title,
                        start_date=webinar.start_date,
                        end_date=webinar.end_date,
                        seats=webinar.seats,
                        version=webinar.version,
                    )
                )
        except (IntegrityError, FlushError) as e:
            # FlushError: the id is already loaded in this session
            logger.warning("webinar_insert_rejected", webinar_id=webinar.id, error=str(e))
            raise WebinarAlreadyExistsError(webinar.id) from e
        record_db_operation("create")

    async def update(self, webinar: Webinar) -> None:
        result = await self._db.execute(
            update(WebinarModel)
            .where(
                WebinarModel.id == webinar.id,
                WebinarModel.version == webinar.version,
            )
            .values(
                        title=webinar.title,
                        start_date=webinar.start_date,
                        end_date=webinar.end_date,
                        seats=webinar.seats,
                        version=webinar.version + 1,
            )
        )

        if result.rowcount == 0:
            record_db_operation("conflict")
            logger.info(
                "webinar_update_conflict",
                webinar_id=webinar.id,
                expected_version=webinar.version,
            )
            raise WebinarUpdateConflictError(webinar.id)

        webinar.version += 1
        record_db_operation("update")

    async def find_by_id(self, webinar_id: str) -> Optional[Webinar]:
        result = await self._db.execute(
            select(WebinarModel)
            .where(WebinarModel.id == webinar_id)
            .execution_options(populate_existing=True)
        )
        model = result.scalar_one_or_none()
        record_db_operation("read")
        if model is None:
            return None
        return _to_entity(model)
