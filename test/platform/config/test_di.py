import pytest

from src.platform.config.di import Container
from src.platform.database.orm_db_setting import Database
from src.service.webinar.driven_adapter.repo.webinar_repo_impl import WebinarRepoImpl


@pytest.mark.unit
class TestContainer:
    def test_webinar_repo_is_a_shared_sqlalchemy_repo(self):
        container = Container()

        repo = container.webinar_repo()

        assert isinstance(repo, WebinarRepoImpl)
        assert container.webinar_repo() is repo
        assert isinstance(container.database(), Database)

    def test_container_exposes_only_used_providers(self):
        assert set(Container.providers) == {'database', 'webinar_repo'}
