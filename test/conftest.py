"""
Test Configuration and Fixtures

This module provides:
- Test environment variables (SQLite database file, log dir, fallback user)
- Database schema setup once per session and row cleanup per integration test
- Session-scoped TestClient for HTTP tests

Architecture:
- Unit tests (marked `unit`): in-memory repository, no database
- Integration tests: real SQLAlchemy engine on SQLite via aiosqlite
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time by src.platform.config.core_setting
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    db_path = Path(tempfile.gettempdir()) / f'webinar_service_test_{worker_id}.db'
    os.environ['TEST_DB_PATH'] = str(db_path)
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{db_path}'
    os.environ['AUTH_FALLBACK_USER_ID'] = 'test-organizer'

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


# Call immediately to set env vars before any imports
_early_setup_test_environment()

import asyncio  # noqa: E402
from collections.abc import AsyncGenerator, Generator  # noqa: E402
from typing import Any  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import delete  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from src.platform.database.orm_db_setting import Base  # noqa: E402
from src.service.webinar.driven_adapter.model.webinar_model import WebinarModel  # noqa: E402


# =============================================================================
# Pytest Hooks
# =============================================================================
def pytest_sessionstart(session: pytest.Session) -> None:
    asyncio.run(_setup_test_database())


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            # Wipe tables before any fixture seeds rows
            item.fixturenames.insert(0, 'clean_database')


# =============================================================================
# Database Setup and Cleanup
# =============================================================================
def _get_test_database_url() -> str:
    return os.environ['DATABASE_URL']


async def _setup_test_database() -> None:
    Path(os.environ['TEST_DB_PATH']).unlink(missing_ok=True)

    engine = create_async_engine(_get_test_database_url())
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()


async def _clean_all_tables() -> None:
    engine = create_async_engine(_get_test_database_url())
    try:
        async with engine.begin() as conn:
            await conn.execute(delete(WebinarModel))
    finally:
        await engine.dispose()


@pytest.fixture(scope='function')
async def clean_database() -> AsyncGenerator[None, None]:
    await _clean_all_tables()
    yield


# =============================================================================
# Session-scoped Fixtures
# =============================================================================
@pytest.fixture(scope='session')
def client() -> Generator[Any, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
