from datetime import datetime
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.webinar.app.interface.i_webinar_repo import IWebinarRepo
from src.service.webinar.domain.entity.webinar_entity import Webinar


class OrganizeWebinarUseCase:
    def __init__(self, *, webinar_repo: IWebinarRepo) -> None:
        self.webinar_repo = webinar_repo

    @classmethod
    @inject
    def depends(
        cls,
        webinar_repo: IWebinarRepo = Depends(Provide[Container.webinar_repo]),
    ) -> Self:
        return cls(webinar_repo=webinar_repo)

    @Logger.io
    async def execute(
        self,
        *,
        webinar_id: str,
        organizer_id: str,
        title: str,
        start_date: datetime,
        end_date: datetime,
        seats: int,
    ) -> str:
        """Persist the webinar as given and return its id."""
        webinar = Webinar(
            id=webinar_id,
            organizer_id=organizer_id,
            title=title,
            start_date=start_date,
            end_date=end_date,
            seats=seats,
        )
        await self.webinar_repo.create(webinar)
        return webinar.id
