"""
Tests for the root logger setup.
"""
import logging

from senderos.core import logging as log_setup


def test_configure_logging_uses_level_and_format(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    log_setup.configure_logging("DEBUG")

    assert calls == [{"level": "DEBUG", "format": log_setup.LOG_FORMAT}]
