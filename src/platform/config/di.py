"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.database.orm_db_setting import Database
from src.service.webinar.driven_adapter.repo.webinar_repo_impl import WebinarRepoImpl


class Container(containers.DeclarativeContainer):
    # Database
    database = providers.Singleton(Database)

    # Repositories (stateless - use session_factory per call)
    webinar_repo = providers.Singleton(WebinarRepoImpl, session_factory=database.provided.session)


container = Container()
