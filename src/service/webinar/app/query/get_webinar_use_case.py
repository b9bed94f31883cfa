from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.webinar.app.interface.i_webinar_repo import IWebinarRepo
from src.service.webinar.domain.entity.webinar_entity import Webinar


class GetWebinarUseCase:
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
    async def get_by_id(self, *, webinar_id: str) -> Webinar:
        webinar = await self.webinar_repo.find_by_id(webinar_id)
        if webinar is None:
            raise NotFoundError('Webinar not found')
        return webinar
