"""
Tests pour le système de logging avec sessions et création lazy.
"""

import logging

import pytest
from pathlib import Path

from digest_mailer.config import Logger_Level
from digest_mailer.logger import (
    LogSession,
    LazyFileHandler,
    setup_logger,
    get_logger,
)


@pytest.fixture(autouse=True)
def reset_log_session():
    """Reset la session de logs entre chaque test."""
    LogSession.reset()
    yield
    LogSession.reset()


def _record(msg: str) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_log_session_singleton():
    """Test que LogSession est bien un singleton."""
    session1 = LogSession()
    session2 = LogSession()
    assert session1 is session2
    assert LogSession.get_session_dir() == LogSession.get_session_dir()


def test_log_session_dir_is_not_created_eagerly():
    """Le répertoire de session n'est créé qu'au premier message."""
    session_dir = LogSession.get_session_dir()
    assert session_dir.name.startswith("run_")
    assert session_dir.parent == Path("logs")
    assert not session_dir.exists()


def test_lazy_file_handler_creates_file_only_on_emit(tmp_path):
    """Test que LazyFileHandler ne crée le fichier qu'au premier log."""
    log_file = tmp_path / "nested" / "test_lazy.log"

    handler = LazyFileHandler(log_file, mode="w")
    handler.setFormatter(logging.Formatter("%(message)s"))

    assert not log_file.exists(), "Le fichier ne doit pas exister avant le premier log"

    handler.emit(_record("Test message"))
    handler.close()

    assert log_file.read_text(encoding="utf-8").strip() == "Test message"


def test_setup_logger_without_file_logging():
    """Par défaut, seul le handler console est installé."""
    logger = setup_logger("digest_mailer.tests.console_only")
    assert len(logger.handlers) == 1
    assert not isinstance(logger.handlers[0], LazyFileHandler)


def test_setup_logger_with_log_dir(tmp_path):
    """Un log_dir explicite active la sortie fichier."""
    logger = setup_logger(
        "digest_mailer.tests.with_file", log_dir=str(tmp_path), log_filename="x.log"
    )
    file_handlers = [h for h in logger.handlers if isinstance(h, LazyFileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].filename == tmp_path / "x.log"

    logger.warning("written")
    file_handlers[0].close()
    assert "written" in (tmp_path / "x.log").read_text(encoding="utf-8")


def test_file_logging_from_config(monkeypatch):
    """Logger_Level.file_logging active le fichier de session."""
    monkeypatch.setattr(Logger_Level, "file_logging", True)
    logger = setup_logger("digest_mailer.tests.session_file")
    file_handlers = [h for h in logger.handlers if isinstance(h, LazyFileHandler)]
    assert file_handlers[0].filename == LogSession.get_session_dir() / "digest_mailer.log"


def test_get_logger_reuses_handlers():
    """get_logger ne duplique pas les handlers."""
    logger1 = get_logger("digest_mailer.tests.reuse")
    logger2 = get_logger("digest_mailer.tests.reuse")
    assert logger1 is logger2
    assert len(logger2.handlers) == 1

