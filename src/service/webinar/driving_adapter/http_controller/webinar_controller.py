from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.webinar.app.command.change_seats_use_case import ChangeSeatsUseCase
from src.service.webinar.app.command.organize_webinar_use_case import OrganizeWebinarUseCase
from src.service.webinar.app.query.get_webinar_use_case import GetWebinarUseCase
from src.service.webinar.domain.entity.user_entity import UserEntity
from src.service.webinar.driving_adapter.http_controller.auth.current_user import (
    get_current_user,
)
from src.service.webinar.driving_adapter.schema.webinar_schema import (
    MessageResponse,
    SeatsChangeRequest,
    WebinarCreatedResponse,
    WebinarCreateRequest,
    WebinarResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def organize_webinar(
    request: WebinarCreateRequest,
    use_case: OrganizeWebinarUseCase = Depends(OrganizeWebinarUseCase.depends),
) -> WebinarCreatedResponse:
    webinar_id = await use_case.execute(
        webinar_id=request.id,
        organizer_id=request.organizer_id,
        title=request.title,
        start_date=request.start_date,
        end_date=request.end_date,
        seats=request.seats,
    )
    return WebinarCreatedResponse(id=webinar_id)


@router.get('/{webinar_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_webinar(
    webinar_id: str,
    use_case: GetWebinarUseCase = Depends(GetWebinarUseCase.depends),
) -> WebinarResponse:
    webinar = await use_case.get_by_id(webinar_id=webinar_id)

    return WebinarResponse(
        id=webinar.id,
        organizer_id=webinar.organizer_id,
        title=webinar.title,
        start_date=webinar.start_date,
        end_date=webinar.end_date,
        seats=webinar.seats,
    )


@router.post('/{webinar_id}/seats', status_code=status.HTTP_200_OK)
@Logger.io
async def change_seats(
    webinar_id: str,
    request: SeatsChangeRequest,
    current_user: UserEntity = Depends(get_current_user),
    use_case: ChangeSeatsUseCase = Depends(ChangeSeatsUseCase.depends),
) -> MessageResponse:
    await use_case.execute(user=current_user, webinar_id=webinar_id, seats=request.seats)
    return MessageResponse(message='Seats updated')
