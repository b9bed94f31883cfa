import logging

import pytest

from src.platform.logging.loguru_io import Logger, LoguruIO
from src.platform.logging.loguru_io_config import custom_logger
from src.platform.logging.loguru_io_utils import (
    MASK,
    MAX_CONTENT_LENGTH,
    mask_sensitive,
    normalize_args_kwargs,
    should_mask_keyword,
    truncate_content,
)


@pytest.mark.unit
class TestMasking:
    def test_keyword_value_pairs_are_masked(self):
        masked = mask_sensitive("connect(password='hunter2', user='alice')")

        assert 'hunter2' not in masked
        assert MASK in masked
        assert "user='alice'" in masked

    def test_plain_data_is_returned_untouched(self):
        data = {'seats': 30}

        assert mask_sensitive(data) is data

    @pytest.mark.parametrize('key', ['password', 'api_token', 'CLIENT_SECRET'])
    def test_sensitive_keys_are_masked(self, key: str):
        assert should_mask_keyword(key, 'value') == MASK

    def test_other_keys_keep_their_value(self):
        assert should_mask_keyword('seats', 30) == 30

    def test_nested_structures_are_masked_by_key(self):
        loguru_io = LoguruIO(custom_logger, truncate_content=False)

        result = loguru_io.mask_sensitive({'user': 'alice', 'auth': {'token': 'abc'}, 'ids': [1, 2]})

        assert result == {'user': 'alice', 'auth': {'token': MASK}, 'ids': [1, 2]}


@pytest.mark.unit
class TestTruncate:
    def test_short_content_is_kept(self):
        assert truncate_content('short') == 'short'

    def test_long_content_is_truncated(self):
        result = truncate_content('x' * (MAX_CONTENT_LENGTH + 10))

        assert result.startswith('x' * MAX_CONTENT_LENGTH)
        assert result.endswith(f'({MAX_CONTENT_LENGTH + 10} chars)')


@pytest.mark.unit
class TestNormalizeArgsKwargs:
    def test_unknown_kwargs_are_dropped(self):
        def func(a, *, b):
            return a, b

        args, kwargs = normalize_args_kwargs(func, 1, b=2, c=3)

        assert args == (1,)
        assert kwargs == {'b': 2}


@pytest.mark.unit
class TestLoggerIo:
    @pytest.mark.asyncio
    async def test_async_function_result_is_returned(self):
        @Logger.io
        async def add(a: int, b: int) -> int:
            return a + b

        assert await add(1, 2) == 3

    def test_exception_is_reraised(self):
        @Logger.io
        def fail() -> None:
            raise ValueError('boom')

        with pytest.raises(ValueError, match='boom'):
            fail()

    def test_exception_is_swallowed_without_reraise(self):
        @Logger.io(reraise=False)
        def fail() -> None:
            raise ValueError('boom')

        assert fail() is None


@pytest.mark.unit
class TestStdlibInterception:
    @pytest.mark.parametrize('logger_name', ['sqlalchemy.engine', 'aiosqlite'])
    def test_database_loggers_are_capped_at_warning(self, logger_name: str):
        assert logging.getLogger(logger_name).getEffectiveLevel() == logging.WARNING
