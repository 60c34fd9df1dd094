"""Unit tests for the Laravel-style logger."""

from __future__ import annotations

import logging

import pytest

from collectkit.Utils import LaravelStyleLogger, get_logger
from config import settings


class TestLaravelStyleLogger:
    """Handler setup and context formatting."""

    def test_wraps_stdlib_logger(self) -> None:
        log = get_logger('collectkit.tests.wraps')
        assert isinstance(log, LaravelStyleLogger)
        assert log.logger is logging.getLogger('collectkit.tests.wraps')

    def test_handler_is_added_once(self) -> None:
        get_logger('collectkit.tests.once')
        log = get_logger('collectkit.tests.once')
        assert len(log.logger.handlers) == 1

    def test_level_comes_from_settings(self) -> None:
        log = get_logger('collectkit.tests.level')
        assert log.logger.level == logging.getLevelName(settings.LOG_LEVEL)

    def test_context_is_appended(self, caplog: pytest.LogCaptureFixture) -> None:
        log = get_logger('collectkit.tests.context')
        caplog.set_level(logging.DEBUG, logger='collectkit.tests.context')

        log.debug('Collection built', {'count': 3, 'source': 'list'})
        log.debug('No context')

        assert caplog.messages == [
            'Collection built | count=3 | source=list',
            'No context',
        ]
