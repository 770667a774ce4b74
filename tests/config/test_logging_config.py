"""Tests for logging configuration."""

import logging

import pytest

from auth_dashboard.config.logging_config import (
    FORMAT_STRINGS,
    LoggingConfig,
    get_log_level_from_verbosity,
    get_logger,
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ("LOG_LEVEL", "LOG_VERBOSITY", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)


@pytest.mark.parametrize("verbosity,level", [
    ("quiet", "ERROR"),
    ("NORMAL", "WARNING"),
    ("verbose", "INFO"),
    ("DEBUG", "DEBUG"),
    ("chatty", "WARNING"),
])
def test_verbosity_mapping(verbosity, level):
    assert get_log_level_from_verbosity(verbosity) == level


def test_default_config():
    config = LoggingConfig.build_config()

    assert config["root"]["level"] == "WARNING"
    assert config["formatters"]["default"]["format"] == FORMAT_STRINGS["simple"]


def test_explicit_level_wins(monkeypatch):
    monkeypatch.setenv("LOG_VERBOSITY", "QUIET")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert LoggingConfig.build_config()["root"]["level"] == "DEBUG"


def test_unknown_level_falls_back_to_verbosity(monkeypatch):
    monkeypatch.setenv("LOG_VERBOSITY", "VERBOSE")
    monkeypatch.setenv("LOG_LEVEL", "LOUD")

    assert LoggingConfig.build_config()["root"]["level"] == "INFO"


def test_detailed_format(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "DETAILED")

    config = LoggingConfig.build_config()

    assert config["formatters"]["default"]["format"] == FORMAT_STRINGS["detailed"]


def test_http_libraries_only_log_errors():
    loggers = LoggingConfig.build_config()["loggers"]

    assert loggers["httpx"]["level"] == "ERROR"
    assert loggers["httpcore"]["propagate"] is False


def test_set_module_level():
    LoggingConfig.set_module_level("auth_dashboard.tests.sample", "info")
    assert get_logger("auth_dashboard.tests.sample").level == logging.INFO

    LoggingConfig.silence_module("auth_dashboard.tests.sample")
    assert get_logger("auth_dashboard.tests.sample").level == logging.CRITICAL
