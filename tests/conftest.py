"""Shared pytest fixtures."""

import logging

import pytest
import pytz

from formatkit.config.settings import Settings


@pytest.fixture(autouse=True)
def server_tz_utc(monkeypatch):
    """Pin the server timezone so results do not depend on the host .env"""
    monkeypatch.setattr(Settings, "SERVER_TZ", pytz.UTC)
    monkeypatch.setattr(Settings, "INVALID_DATE_TEXT", "Invalid Date")
    monkeypatch.setattr(Settings, "DEFAULT_DATE_FORMAT", "d/m/Y H:i")
    return Settings.SERVER_TZ


@pytest.fixture
def restore_root_logging():
    """Drop the handlers setup_logger() installs and restore the root level"""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
