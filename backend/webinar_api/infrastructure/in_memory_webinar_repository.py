"""
Dict-backed WebinarRepository with the same contract as the SQL one.
Stores copies so callers cannot mutate persisted state behind its back.
"""

from dataclasses import replace
from typing import Optional

from webinar_api.domain.errors import WebinarAlreadyExistsError, WebinarUpdateConflictError
from webinar_api.domain.webinar import Webinar
from webinar_api.services.interfaces.webinar_repository import WebinarRepository


class InMemoryWebinarRepository(WebinarRepository):
    def __init__(self, webinars: Optional[list[Webinar]] = None):
        self.database: dict[str, Webinar] = {}
        for webinar in webinars or []:
            self.database[webinar.id] = replace(webinar)

    async def create(self, webinar: Webinar) -> None:
        if webinar.id in self.database:
            raise WebinarAlreadyExistsError(webinar.id)
        self.database[webinar.id] = replace(webinar)

    async def update(self, webinar: Webinar) -> None:
        stored = self.database.get(webinar.id)
        if stored is None or stored.version != webinar.version:
            raise WebinarUpdateConflictError(webinar.id)
        webinar.version += 1
        self.database[webinar.id] = replace(webinar)

    async def find_by_id(self, webinar_id: str) -> Optional[Webinar]:
        stored = self.database.get(webinar_id)
        return replace(stored) if stored is not None else None
