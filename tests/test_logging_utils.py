"""Mini README: Tests for the logging helpers and the log level setting."""

from __future__ import annotations

import logging

import pydantic
import pytest

from pennywise.configuration import PennywiseSettings
from pennywise.logging_utils import configure_root_logger, get_logger, resolve_level


def test_resolve_level_accepts_names_and_numbers() -> None:
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(" Warning ") == logging.WARNING
    assert resolve_level(logging.ERROR) == logging.ERROR
    with pytest.raises(ValueError):
        resolve_level("chatty")


def test_configure_root_logger_installs_one_handler_and_updates_level() -> None:
    root = logging.getLogger()
    previous_level = root.level
    get_logger("pennywise.tests")
    handlers_before = list(root.handlers)

    try:
        configure_root_logger("DEBUG")
        assert root.level == logging.DEBUG
        configure_root_logger(logging.WARNING)
        assert root.level == logging.WARNING
        assert root.handlers == handlers_before
    finally:
        root.setLevel(previous_level)


def test_settings_normalise_and_validate_log_level(tmp_path) -> None:
    assert PennywiseSettings(data_directory=tmp_path, log_level="debug").log_level == "DEBUG"
    with pytest.raises(pydantic.ValidationError):
        PennywiseSettings(data_directory=tmp_path, log_level="chatty")
