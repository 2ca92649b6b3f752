"""Tests for settings and logging setup."""

from __future__ import annotations

import logging

from irisreveal.config import Settings, configure_logging


def test_defaults():
    s = Settings()
    assert s.irisreveal_log_level == "info"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("IRISREVEAL_LOG_LEVEL", "warning")
    assert Settings().irisreveal_log_level == "warning"


def test_configure_logging_level():
    assert configure_logging(Settings(irisreveal_log_level="debug")) == logging.DEBUG
    assert logging.getLogger("irisreveal").level == logging.DEBUG


def test_unknown_level_falls_back_to_info():
    assert configure_logging(Settings(irisreveal_log_level="chatty")) == logging.INFO
    assert configure_logging(Settings(irisreveal_log_level="basic_format")) == logging.INFO
