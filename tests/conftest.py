"""Shared pytest fixtures and configuration for the sample-helper test suite.

Guidelines
----------
* No terminal interaction in any test; questionary is mocked at the
  lazy-import seam.
* Core tests must be pure; diagnostics are collected by a recording sink.
* Console output is asserted through ``capsys``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

import pytest

from sample_helper.logging_setup import PACKAGE_LOGGER_NAME


@dataclass
class RecordingSink:
    """Diagnostic sink collecting lines instead of printing them."""

    actions: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def action(self, text: str) -> None:
        self.actions.append(text)

    def error(self, text: str) -> None:
        self.errors.append(text)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture(autouse=True)
def _no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep Rich output free of escape codes."""
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("SAMPLE_HELPER_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop handlers installed by ``configure_logging`` during a test."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
