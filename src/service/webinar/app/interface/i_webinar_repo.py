from abc import ABC, abstractmethod
from typing import Optional

from src.service.webinar.domain.entity.webinar_entity import Webinar


class IWebinarRepo(ABC):
    """Webinar persistence port; implementations own their transactions."""

    @abstractmethod
    async def create(self, webinar: Webinar) -> None:
        """Persist a new webinar; raises ConflictError when the id is taken."""

    @abstractmethod
    async def update(self, webinar: Webinar) -> None:
        """Persist the mutable fields of an existing webinar."""

    @abstractmethod
    async def find_by_id(self, webinar_id: str) -> Optional[Webinar]:
        """Return the webinar, or None when absent."""
