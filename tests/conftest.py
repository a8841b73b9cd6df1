"""Shared test configuration and fixtures."""

import logging
import os
from collections.abc import Iterator
from datetime import datetime
from typing import Callable
from unittest.mock import MagicMock, patch

import pytest

from htmlwidgets.config.settings import reset_settings


@pytest.fixture(autouse=True)
def isolated_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> Iterator[None]:
    """Keep user config, .env files and HTMLWIDGETS_* variables out of tests."""
    for key in list(os.environ):
        if key.upper().startswith("HTMLWIDGETS_"):
            monkeypatch.delenv(key, raising=False)

    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(home)

    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Drop handlers added by setup_logging so they never outlive a test."""
    logger = logging.getLogger("htmlwidgets")
    original_level = logger.level
    yield
    logger.handlers.clear()
    logger.setLevel(original_level)


@pytest.fixture
def fixed_now() -> Iterator[Callable[[datetime], MagicMock]]:
    """Freeze the clock seen by the calendar grid module.

    Defaults to 2024-02-14; call the fixture value to move the clock:
        fixed_now(datetime(2024, 3, 31))
    """
    patcher = patch("htmlwidgets.display.calendar_grid.datetime")
    mock_datetime = patcher.start()

    def _set(moment: datetime) -> MagicMock:
        mock_datetime.now.return_value = moment
        return mock_datetime

    _set(datetime(2024, 2, 14, 9, 30, 0))
    yield _set
    patcher.stop()
