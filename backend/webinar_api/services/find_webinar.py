"""
FindWebinar use case: read one webinar by id.
"""

from webinar_api.core.metrics import record_webinar_operation
from webinar_api.domain.errors import WebinarNotFoundError
from webinar_api.domain.webinar import Webinar
from webinar_api.services.interfaces import WebinarRepository


class FindWebinar:
    def __init__(self, repository: WebinarRepository):
        self._repository = repository

    async def execute(self, webinar_id: str) -> Webinar:
        webinar = await self._repository.find_by_id(webinar_id)
        if webinar is None:
            record_webinar_operation("find", "webinar_not_found")
            raise WebinarNotFoundError(webinar_id)
        record_webinar_operation("find", "success")
        return webinar
