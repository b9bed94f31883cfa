from datetime import datetime, timezone

import pytest

from src.platform.exception.exceptions import ConflictError, DomainError, NotFoundError
from src.service.webinar.app.command.organize_webinar_use_case import OrganizeWebinarUseCase
from src.service.webinar.app.query.get_webinar_use_case import GetWebinarUseCase
from src.service.webinar.domain.entity.webinar_entity import MAX_SEATS
from src.service.webinar.driven_adapter.repo.in_memory_webinar_repo import InMemoryWebinarRepo
from test.util_constant import ALICE_ID, WEBINAR_ID, WEBINAR_TITLE


START = datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)
END = datetime(2024, 1, 1, 1, 0, tzinfo=timezone.utc)


@pytest.mark.unit
class TestOrganizeWebinar:
    @pytest.mark.asyncio
    async def test_webinar_is_persisted_as_given(self):
        # Arrange
        repo = InMemoryWebinarRepo()
        use_case = OrganizeWebinarUseCase(webinar_repo=repo)

        # Act
        webinar_id = await use_case.execute(
            webinar_id='new-webinar',
            organizer_id=ALICE_ID,
            title=WEBINAR_TITLE,
            start_date=START,
            end_date=END,
            seats=MAX_SEATS,
        )

        # Assert
        assert webinar_id == 'new-webinar'
        stored = repo.find_by_id_sync('new-webinar')
        assert stored is not None
        assert stored.organizer_id == ALICE_ID
        assert stored.start_date == START
        assert stored.end_date == END
        # Any count up to the cap is accepted on creation
        assert stored.seats == MAX_SEATS

    @pytest.mark.asyncio
    @pytest.mark.parametrize('seats', [MAX_SEATS + 1, 10**20])
    async def test_more_than_the_maximum_seats_is_rejected(self, seats: int):
        repo = InMemoryWebinarRepo()
        use_case = OrganizeWebinarUseCase(webinar_repo=repo)

        with pytest.raises(DomainError, match=f'Webinar must have at most {MAX_SEATS} seats'):
            await use_case.execute(
                webinar_id='new-webinar',
                organizer_id=ALICE_ID,
                title=WEBINAR_TITLE,
                start_date=START,
                end_date=END,
                seats=seats,
            )

        assert repo.find_by_id_sync('new-webinar') is None

    @pytest.mark.asyncio
    async def test_duplicate_id_is_rejected(self, webinar_repo: InMemoryWebinarRepo):
        use_case = OrganizeWebinarUseCase(webinar_repo=webinar_repo)

        with pytest.raises(ConflictError) as exc_info:
            await use_case.execute(
                webinar_id=WEBINAR_ID,
                organizer_id=ALICE_ID,
                title='Another title',
                start_date=START,
                end_date=END,
                seats=10,
            )

        assert exc_info.value.status_code == 409
        assert webinar_repo.find_by_id_sync(WEBINAR_ID).title == WEBINAR_TITLE  # type: ignore[union-attr]


@pytest.mark.unit
class TestGetWebinar:
    @pytest.mark.asyncio
    async def test_returns_stored_webinar(self, webinar_repo: InMemoryWebinarRepo, webinar):
        use_case = GetWebinarUseCase(webinar_repo=webinar_repo)

        result = await use_case.get_by_id(webinar_id=WEBINAR_ID)

        assert result == webinar

    @pytest.mark.asyncio
    async def test_missing_webinar_raises_not_found(self, webinar_repo: InMemoryWebinarRepo):
        use_case = GetWebinarUseCase(webinar_repo=webinar_repo)

        with pytest.raises(NotFoundError, match='Webinar not found'):
            await use_case.get_by_id(webinar_id='missing')
