"""
Webinar repository interface.
Repositories must be swappable and return domain entities.
"""

from abc import ABC, abstractmethod
from typing import Optional

from webinar_api.domain.webinar import Webinar


class WebinarRepository(ABC):
    """Interface for webinar persistence operations."""

    @abstractmethod
    async def create(self, webinar: Webinar) -> None:
        """
        Persist a new webinar.

        Raises:
            WebinarAlreadyExistsError: A webinar with the same id is stored.
        """
        pass

    @abstractmethod
    async def update(self, webinar: Webinar) -> None:
        """
        Overwrite the stored webinar with the same id.

        The write only applies if the stored version still equals
        webinar.version; on success webinar.version is bumped.

        Raises:
            WebinarUpdateConflictError: The stored version moved on, or the id is unknown.
        """
        pass

    @abstractmethod
    async def find_by_id(self, webinar_id: str) -> Optional[Webinar]:
        """Return the webinar, or None if not found."""
        pass
