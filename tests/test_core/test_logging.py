"""Tests for setup_logging."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from snow_connector.core.config import LoggingConfig
from snow_connector.core.logging import setup_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestSetupLogging:
    def test_defaults_to_stderr_only(self) -> None:
        setup_logging()
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_level_override(self) -> None:
        setup_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_level_from_config(self) -> None:
        setup_logging(config=LoggingConfig(level="2"))
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self) -> None:
        setup_logging(level="chatty")
        assert logging.getLogger().level == logging.INFO

    def test_logfile_handler(self, tmp_path: Path) -> None:
        log_path = tmp_path / "connector.log"
        setup_logging(fmt="json", config=LoggingConfig(logfile=str(log_path)))
        handlers = logging.getLogger().handlers
        assert any(isinstance(h, logging.FileHandler) for h in handlers)

        structlog.get_logger("test").warning("hostname_not_found", host_id=3)
        for h in handlers:
            h.flush()
        content = log_path.read_text()
        assert "hostname_not_found" in content
        assert '"host_id": 3' in content

    def test_logfile_argument(self, tmp_path: Path) -> None:
        log_path = tmp_path / "arg.log"
        setup_logging(logfile=str(log_path))
        file_handlers = [
            h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)
        ]
        assert len(file_handlers) == 1
        assert file_handlers[0].baseFilename == str(log_path)

    def test_empty_logfile_override(self, tmp_path: Path) -> None:
        config = LoggingConfig(logfile=str(tmp_path / "x.log"))
        setup_logging(logfile="", config=config)
        handlers = logging.getLogger().handlers
        assert not any(isinstance(h, logging.FileHandler) for h in handlers)
