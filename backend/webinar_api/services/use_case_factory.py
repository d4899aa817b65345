"""
Use case wiring.
Builds use cases from their ports as FastAPI dependencies.

Tests swap adapters through app.dependency_overrides, e.g.
    app.dependency_overrides[get_date_generator] = lambda: FixedDateGenerator(...)
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from webinar_api.db.session import get_db
from webinar_api.infrastructure.generators import RealDateGenerator, RealIdGenerator
from webinar_api.infrastructure.sqlalchemy_webinar_repository import SqlAlchemyWebinarRepository
from webinar_api.services.change_seats import ChangeSeats
from webinar_api.services.find_webinar import FindWebinar
from webinar_api.services.interfaces import DateGenerator, IdGenerator, WebinarRepository
from webinar_api.services.organize_webinar import OrganizeWebinar

# Stateless, shared by all requests
_date_generator: DateGenerator = RealDateGenerator()
_id_generator: IdGenerator = RealIdGenerator()


def get_date_generator() -> DateGenerator:
    return _date_generator


def get_id_generator() -> IdGenerator:
    return _id_generator


def get_webinar_repository(db: AsyncSession = Depends(get_db)) -> WebinarRepository:
    return SqlAlchemyWebinarRepository(db)


def get_organize_webinar(
    repository: WebinarRepository = Depends(get_webinar_repository),
    id_generator: IdGenerator = Depends(get_id_generator),
    date_generator: DateGenerator = Depends(get_date_generator),
) -> OrganizeWebinar:
    return OrganizeWebinar(repository, id_generator, date_generator)


def get_change_seats(
    repository: WebinarRepository = Depends(get_webinar_repository),
) -> ChangeSeats:
    return ChangeSeats(repository)


def get_find_webinar(
    repository: WebinarRepository = Depends(get_webinar_repository),
) -> FindWebinar:
    return FindWebinar(repository)
