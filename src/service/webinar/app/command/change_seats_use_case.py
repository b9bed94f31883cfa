from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import AuthenticationError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.webinar.app.interface.i_webinar_repo import IWebinarRepo
from src.service.webinar.domain.entity.user_entity import UserEntity
from src.service.webinar.domain.entity.webinar_entity import Webinar


class ChangeSeatsUseCase:
    """
    Raise the seat count of a webinar on behalf of its organizer.

    Flow:
    1. Load the webinar (NotFoundError if missing)
    2. Check the user organizes it (AuthenticationError otherwise)
    3. Apply the seat rules on the entity (DomainError on reduction or cap)
    4. Persist the new seat count

    Every check runs before the write, so a failure leaves storage untouched.
    """

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
    async def execute(self, *, user: UserEntity, webinar_id: str, seats: int) -> Webinar:
        webinar = await self.webinar_repo.find_by_id(webinar_id)
        if webinar is None:
            raise NotFoundError('Webinar not found')

        if not webinar.is_organizer(user):
            raise AuthenticationError('User is not allowed to update this webinar')

        webinar.change_seats(seats=seats)
        await self.webinar_repo.update(webinar)

        Logger.base.info(f'[SEATS] Webinar {webinar_id} now has {seats} seats')
        return webinar
