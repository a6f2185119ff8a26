"""Tests for root logger setup."""

import logging

import pytest

from standup_scheduler.app.core.logging_config import QUIET_LOGGERS, setup_logging


@pytest.fixture
def bare_root(monkeypatch):
    """Root logger with no handlers; levels are restored afterwards."""
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    for name in QUIET_LOGGERS:
        quiet = logging.getLogger(name)
        monkeypatch.setattr(quiet, "level", logging.NOTSET)
    yield root
    for handler in root.handlers:
        handler.close()


def test_configures_only_once(bare_root):
    setup_logging("INFO")
    setup_logging("DEBUG")
    assert len(bare_root.handlers) == 1
    assert bare_root.level == logging.INFO


def test_unknown_level_means_info(bare_root):
    setup_logging("chatty")
    assert bare_root.level == logging.INFO


def test_file_handler_writes_records(bare_root, tmp_path):
    logfile = tmp_path / "standups.log"
    setup_logging("INFO", str(logfile))
    logging.getLogger("standup_scheduler.test").warning("team %s has no chair", 7)
    for handler in bare_root.handlers:
        handler.flush()
    assert "[WARNING] standup_scheduler.test: team 7 has no chair" in logfile.read_text(encoding="utf-8")


def test_sqlalchemy_loggers_quiet_unless_debug(bare_root):
    setup_logging("INFO")
    assert all(logging.getLogger(name).level == logging.WARNING for name in QUIET_LOGGERS)


def test_sqlalchemy_loggers_left_alone_at_debug(bare_root):
    setup_logging("DEBUG")
    assert all(logging.getLogger(name).level == logging.NOTSET for name in QUIET_LOGGERS)
