# document_renamer/K_tests/K16_test_logging.py
"""
Tests for A_core.A00_logging module.
"""

from __future__ import annotations

import logging

import pytest

from A_core.A00_logging import LOGGER_NAMESPACE, LogContext, configure_logging, get_logger


@pytest.fixture
def namespace_logger():
    logger = logging.getLogger(LOGGER_NAMESPACE)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


class TestGetLogger:
    def test_namespaced(self):
        assert get_logger("B_parsing.B01_date_extractor").name == f"{LOGGER_NAMESPACE}.B_parsing.B01_date_extractor"

    def test_already_namespaced(self):
        assert get_logger(f"{LOGGER_NAMESPACE}.cli").name == f"{LOGGER_NAMESPACE}.cli"


class TestConfigureLogging:
    def test_log_file_named_after_run_id(self, tmp_path, namespace_logger):
        configure_logging(
            log_dir=tmp_path,
            log_level=logging.DEBUG,
            run_id="batch42",
            enable_file_logging=True,
            enable_console_logging=False,
        )
        get_logger("test").info("planned 3 renames")
        for handler in namespace_logger.handlers:
            handler.flush()

        log_file = tmp_path / "renamer_batch42.log"
        assert log_file.exists()
        assert "planned 3 renames" in log_file.read_text(encoding="utf-8")

    def test_reconfigure_replaces_handlers(self, tmp_path, namespace_logger):
        configure_logging(log_dir=tmp_path, run_id="a", enable_file_logging=True)
        configure_logging(log_dir=tmp_path, run_id="b", enable_file_logging=True)
        assert len(namespace_logger.handlers) == 2


class TestLogContext:
    def test_start_and_completion(self, caplog):
        logger = get_logger("test")
        with caplog.at_level(logging.INFO, logger=LOGGER_NAMESPACE):
            with LogContext(logger, "rename batch"):
                pass
        messages = [r.getMessage() for r in caplog.records]
        assert "Starting: rename batch" in messages
        assert any(m.startswith("Completed: rename batch") for m in messages)
