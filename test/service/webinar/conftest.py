from datetime import datetime, timezone

import pytest

from src.service.webinar.domain.entity.user_entity import UserEntity
from src.service.webinar.domain.entity.webinar_entity import Webinar
from src.service.webinar.driven_adapter.repo.in_memory_webinar_repo import InMemoryWebinarRepo
from test.util_constant import (
    ALICE_EMAIL,
    ALICE_ID,
    BOB_EMAIL,
    BOB_ID,
    WEBINAR_ID,
    WEBINAR_SEATS,
    WEBINAR_TITLE,
)


@pytest.fixture
def alice() -> UserEntity:
    return UserEntity(id=ALICE_ID, email=ALICE_EMAIL)


@pytest.fixture
def bob() -> UserEntity:
    return UserEntity(id=BOB_ID, email=BOB_EMAIL)


@pytest.fixture
def webinar(alice: UserEntity) -> Webinar:
    """Webinar organized by alice with 100 seats"""
    return Webinar(
        id=WEBINAR_ID,
        organizer_id=alice.id,
        title=WEBINAR_TITLE,
        start_date=datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc),
        end_date=datetime(2024, 1, 1, 1, 0, tzinfo=timezone.utc),
        seats=WEBINAR_SEATS,
    )


@pytest.fixture
def webinar_repo(webinar: Webinar) -> InMemoryWebinarRepo:
    return InMemoryWebinarRepo([webinar])
