from typing import Optional

from fastapi import Header

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError
from src.service.webinar.domain.entity.user_entity import UserEntity


async def get_current_user(
    x_user_id: Optional[str] = Header(default=None, description='Id of the acting user'),
) -> UserEntity:
    # The fallback only stands in for an absent header, never a blank one
    user_id = settings.AUTH_FALLBACK_USER_ID if x_user_id is None else x_user_id.strip()
    if not user_id:
        raise AuthenticationError('Not authenticated')
    return UserEntity(id=user_id)
