from __future__ import annotations

import logging
from pathlib import Path

import pytest

from pitaval import logging_setup
from pitaval.logging_setup import get_logger, log_call, setup_logging


def test_verbose_sets_debug(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PITAVAL_LOG_DIR", raising=False)
    setup_logging(verbose=True, force=True)
    assert logging.getLogger().level == logging.DEBUG


def test_level_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PITAVAL_LOG_DIR", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "info")
    setup_logging(force=True)
    assert logging.getLogger().level == logging.INFO


def test_file_handler_when_log_dir_set(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PITAVAL_LOG_DIR", str(tmp_path / "logs"))
    setup_logging(force=True)
    logging.getLogger("pitaval.test").warning("hello file")
    for h in logging.getLogger().handlers:
        h.flush()
    assert "hello file" in (tmp_path / "logs" / "pitaval.log").read_text(encoding="utf-8")
    monkeypatch.delenv("PITAVAL_LOG_DIR")


def test_log_call_traces_entry_and_exit(caplog: pytest.LogCaptureFixture) -> None:
    @log_call()
    def double(x: int) -> int:
        return x * 2

    caplog.set_level(logging.DEBUG, logger=__name__)
    assert double(21) == 42
    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("ENTER") and "double" in m for m in messages)
    assert any(m.startswith("EXIT") and "42" in m for m in messages)


def test_get_logger_configures_on_first_use(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PITAVAL_LOG_DIR", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.setattr(setup_logging, "_configured", False, raising=False)
    for h in logging_setup._installed:
        logging.getLogger().removeHandler(h)
    logging_setup._installed.clear()

    log = get_logger("pitaval.ingestion")

    assert log is logging.getLogger("pitaval.ingestion")
    assert len(logging_setup._installed) == 1
    assert logging_setup._installed[0] in logging.getLogger().handlers
    assert logging.getLogger().level == logging.WARNING


def test_get_logger_does_not_reconfigure(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PITAVAL_LOG_DIR", raising=False)
    setup_logging(force=True)
    before = list(logging_setup._installed)
    get_logger("pitaval.pipeline")
    assert logging_setup._installed == before
