from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.webinar.app.interface.i_webinar_repo import IWebinarRepo
from src.service.webinar.domain.entity.webinar_entity import Webinar
from src.service.webinar.driven_adapter.model.webinar_model import WebinarModel


class WebinarRepoImpl(IWebinarRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, webinar: Webinar) -> None:
        async with self.session_factory() as session:
            session.add(self._entity_to_model(webinar))
            try:
                await session.commit()
            except IntegrityError as e:
                raise ConflictError(f'Webinar {webinar.id} already exists') from e

    @Logger.io
    async def update(self, webinar: Webinar) -> None:
        async with self.session_factory() as session:
            result = await session.execute(
                update(WebinarModel)
                .where(WebinarModel.id == webinar.id)
                .values(
                    title=webinar.title,
                    start_date=webinar.start_date,
                    end_date=webinar.end_date,
                    seats=webinar.seats,
                )
            )
            if result.rowcount == 0:  # type: ignore[attr-defined]
                raise NotFoundError('Webinar not found')
            await session.commit()

    @Logger.io
    async def find_by_id(self, webinar_id: str) -> Optional[Webinar]:
        async with self.session_factory() as session:
            webinar_model = await session.get(WebinarModel, webinar_id)

            if not webinar_model:
                return None

            return self._model_to_entity(webinar_model)

    @staticmethod
    def _entity_to_model(webinar: Webinar) -> WebinarModel:
        return WebinarModel(
            id=webinar.id,
            organizer_id=webinar.organizer_id,
            title=webinar.title,
            start_date=webinar.start_date,
            end_date=webinar.end_date,
            seats=webinar.seats,
        )

    @staticmethod
    def _model_to_entity(webinar_model: WebinarModel) -> Webinar:
        return Webinar(
            id=webinar_model.id,
            organizer_id=webinar_model.organizer_id,
            title=webinar_model.title,
            start_date=webinar_model.start_date,
            end_date=webinar_model.end_date,
            seats=webinar_model.seats,
        )
