"""Tests for logging configuration (logging_setup.py)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from unittest.mock import MagicMock

import pytest

from sample_helper.core.arguments import Argument, ArgumentTable
from sample_helper.core.parser import parse_arguments
from sample_helper.logging_setup import (
    LOG_LEVEL_ENV,
    PACKAGE_LOGGER_NAME,
    configure_logging,
    resolve_env_log_level,
)


class TestResolveEnvLogLevel:
    def test_unset(self) -> None:
        assert resolve_env_log_level() is None

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("info", logging.INFO),
            ("warn", logging.WARNING),
            ("15", 15),
        ],
    )
    def test_known_values(
        self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: int,
    ) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, raw)
        assert resolve_env_log_level() == expected

    def test_unknown_value_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
        assert resolve_env_log_level() is None


class TestConfigureLogging:
    def test_defaults_to_warning(self) -> None:
        logger = configure_logging()
        assert logger.name == PACKAGE_LOGGER_NAME
        assert logger.level == logging.WARNING

    def test_env_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
        assert configure_logging().level == logging.DEBUG

    def test_explicit_level_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
        assert configure_logging(logging.ERROR).level == logging.ERROR

    def test_handlers_do_not_stack(self) -> None:
        configure_logging()
        logger = configure_logging(logging.DEBUG)
        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.DEBUG

    def test_parser_logs_assignments_at_debug(
        self, caplog: pytest.LogCaptureFixture,
    ) -> None:
        @dataclass
        class _Flags:
            quiet: bool = False

        table = ArgumentTable(_Flags, (Argument("quiet", value_type=bool),))
        sink = MagicMock()

        with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER_NAME):
            parse_arguments(_Flags(), ["--quiet", "loose"], output=sink, table=table)

        assert "Set quiet = True" in caplog.text
        assert "Unresolved argument 'loose'" in caplog.text
