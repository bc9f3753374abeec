# document_renamer/A_core/A00_logging.py
"""
Centralized logging configuration for the document renamer.

Provides consistent logging across all modules with:
- Colored console output for different log levels
- Optional file logging with rotation
- A context manager for timing batch operations

Usage:
    from A_core.A00_logging import get_logger, LogContext

    logger = get_logger(__name__)
    logger.info("Renaming started")

    with LogContext(logger, "rename batch"):
        # ... rename files ...
"""

from __future__ import annotations

import logging
import sys
import time
from contextlib import contextmanager
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Generator, Optional, Union

LOGGER_NAMESPACE = "document_renamer"

# Default configuration
DEFAULT_LOG_DIR = Path("logs")
DEFAULT_LOG_LEVEL = logging.INFO
DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_SIZE = 5 * 1024 * 1024  # 5 MB
BACKUP_COUNT = 3

# ANSI color codes for console output
COLORS = {
    "DEBUG": "\033[36m",     # Cyan
    "INFO": "\033[32m",      # Green
    "WARNING": "\033[33m",   # Yellow
    "ERROR": "\033[31m",     # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}


class ColoredFormatter(logging.Formatter):
    """
    Formatter that colors the level name on TTY consoles.

    Attributes:
        use_colors: Whether to apply ANSI color codes.
    """

    def __init__(
        self,
        fmt: Optional[str] = None,
        datefmt: Optional[str] = None,
        use_colors: bool = True,
    ) -> None:
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors:
            return super().format(record)
        # Color a copy so file handlers sharing the record stay plain
        colored = logging.makeLogRecord(record.__dict__)
        level_color = COLORS.get(record.levelname, COLORS["RESET"])
        colored.levelname = f"{level_color}{record.levelname}{COLORS['RESET']}"
        return super().format(colored)


class PipelineLogger:
    """
    Singleton logger manager for the renamer.

    Attributes:
        _instance: Singleton instance.
        _initialized: Whether the manager has been set up.
    """

    _instance: Optional["PipelineLogger"] = None
    _initialized: bool = False

    def __new__(cls) -> "PipelineLogger":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if PipelineLogger._initialized:
            return

        self._log_dir: Path = DEFAULT_LOG_DIR
        self._log_level: int = DEFAULT_LOG_LEVEL
        self._run_id: Optional[str] = None

        PipelineLogger._initialized = True

    def configure(
        self,
        log_dir: Optional[Union[str, Path]] = None,
        log_level: int = DEFAULT_LOG_LEVEL,
        run_id: Optional[str] = None,
        enable_file_logging: bool = False,
        enable_console_logging: bool = True,
    ) -> None:
        """
        Configure the logging system.

        Args:
            log_dir: Directory for log files. Created if it doesn't exist.
            log_level: Minimum log level to capture.
            run_id: Identifier used in the log file name.
            enable_file_logging: Whether to write logs to a rotating file.
            enable_console_logging: Whether to log to stderr.
        """
        self._log_level = log_level
        self._run_id = run_id or datetime.now().strftime("%Y%m%d_%H%M%S")

        if log_dir:
            self._log_dir = Path(log_dir)

        root_logger = logging.getLogger(LOGGER_NAMESPACE)
        root_logger.setLevel(log_level)
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()

        if enable_console_logging:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(log_level)
            console_handler.setFormatter(
                ColoredFormatter(fmt="%(levelname)-8s | %(message)s", datefmt=DEFAULT_DATE_FORMAT)
            )
            root_logger.addHandler(console_handler)

        if enable_file_logging:
            self._log_dir.mkdir(parents=True, exist_ok=True)
            log_file = self._log_dir / f"renamer_{self._run_id}.log"
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=MAX_LOG_SIZE,
                backupCount=BACKUP_COUNT,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(logging.Formatter(fmt=DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
            root_logger.addHandler(file_handler)

    def get_logger(self, name: str) -> logging.Logger:
        """Return a logger placed under the renamer namespace."""
        if not name.startswith(LOGGER_NAMESPACE):
            name = f"{LOGGER_NAMESPACE}.{name}"
        return logging.getLogger(name)


_logger_manager = PipelineLogger()


def configure_logging(
    log_dir: Optional[Union[str, Path]] = None,
    log_level: int = DEFAULT_LOG_LEVEL,
    run_id: Optional[str] = None,
    enable_file_logging: bool = False,
    enable_console_logging: bool = True,
) -> None:
    """
    Configure the renamer logging system. Call once at startup.

    Example:
        >>> configure_logging(log_dir="logs", log_level=logging.DEBUG, enable_file_logging=True)
    """
    _logger_manager.configure(
        log_dir=log_dir,
        log_level=log_level,
        run_id=run_id,
        enable_file_logging=enable_file_logging,
        enable_console_logging=enable_console_logging,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Date extracted")
    """
    return _logger_manager.get_logger(name)


@contextmanager
def LogContext(
    logger: logging.Logger,
    operation: str,
    level: int = logging.INFO,
) -> Generator[None, None, None]:
    """
    Context manager logging the start, end and duration of an operation.

    Example:
        >>> with LogContext(logger, "rename batch"):
        ...     apply_renames(proposals)
        INFO | Starting: rename batch
        INFO | Completed: rename batch (0.02s)
    """
    start_time = time.perf_counter()
    logger.log(level, f"Starting: {operation}")
    try:
        yield
    except Exception as e:
        elapsed = time.perf_counter() - start_time
        logger.error(f"Failed: {operation} ({elapsed:.2f}s) - {type(e).__name__}: {e}")
        raise
    else:
        elapsed = time.perf_counter() - start_time
        logger.log(level, f"Completed: {operation} ({elapsed:.2f}s)")


__all__ = [
    "ColoredFormatter",
    "PipelineLogger",
    "configure_logging",
    "get_logger",
    "LogContext",
    "LOGGER_NAMESPACE",
]
