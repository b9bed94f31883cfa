from typing import Dict, Iterable, Optional

import attrs

from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.service.webinar.app.interface.i_webinar_repo import IWebinarRepo
from src.service.webinar.domain.entity.webinar_entity import Webinar


class InMemoryWebinarRepo(IWebinarRepo):
    """Dict-backed repository used as a test double.

    Stores copies so a caller mutating its own instance never changes
    stored state without going through ``update``.
    """

    def __init__(self, webinars: Iterable[Webinar] = ()) -> None:
        self._webinars: Dict[str, Webinar] = {
            webinar.id: attrs.evolve(webinar) for webinar in webinars
        }

    async def create(self, webinar: Webinar) -> None:
        if webinar.id in self._webinars:
            raise ConflictError(f'Webinar {webinar.id} already exists')
        self._webinars[webinar.id] = attrs.evolve(webinar)

    async def update(self, webinar: Webinar) -> None:
        if webinar.id not in self._webinars:
            raise NotFoundError('Webinar not found')
        self._webinars[webinar.id] = attrs.evolve(webinar)

    async def find_by_id(self, webinar_id: str) -> Optional[Webinar]:
        return self.find_by_id_sync(webinar_id)

    def find_by_id_sync(self, webinar_id: str) -> Optional[Webinar]:
        webinar = self._webinars.get(webinar_id)
        return attrs.evolve(webinar) if webinar else None
