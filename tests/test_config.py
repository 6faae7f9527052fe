"""
Test course advisor configuration.

Verifies that settings come from the environment with sensible defaults.
"""
import logging

import pytest

from course_advisor.config import load_settings, parse_log_level


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("COURSE_ADVISOR_DATA_FILE", "COURSE_ADVISOR_LOG_LEVEL", "VERBOSE"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    """Test settings with nothing configured."""
    settings = load_settings()

    assert settings.data_file is None
    assert settings.log_level == logging.WARNING
    assert settings.verbose is False


def test_environment_overrides(monkeypatch):
    """Test that environment variables are picked up."""
    monkeypatch.setenv("COURSE_ADVISOR_DATA_FILE", "data/courses.csv")
    monkeypatch.setenv("COURSE_ADVISOR_LOG_LEVEL", "info")

    settings = load_settings()

    assert settings.data_file == "data/courses.csv"
    assert settings.log_level == logging.INFO


def test_verbose_forces_debug(monkeypatch):
    """Test that VERBOSE wins over the configured level."""
    monkeypatch.setenv("COURSE_ADVISOR_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("VERBOSE", "yes")

    settings = load_settings()

    assert settings.verbose is True
    assert settings.log_level == logging.DEBUG


def test_invalid_log_level(monkeypatch):
    """Test that an unknown level name is rejected."""
    monkeypatch.setenv("COURSE_ADVISOR_LOG_LEVEL", "chatty")

    with pytest.raises(ValueError):
        load_settings()


def test_parse_log_level():
    assert parse_log_level("debug") == logging.DEBUG
    assert parse_log_level(" Warning ") == logging.WARNING
    with pytest.raises(ValueError):
        parse_log_level("")
