"""
Logging setup for climagro.

Warnings and errors go to the console; everything at the configured level and
above goes to a log file so a whole fetch/analysis run can be traced.
"""

import logging
import os
import time
from pathlib import Path
from typing import Optional

DEFAULT_LOG_FILE = "logs/climagro.log"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(module)s:%(lineno)d) %(message)s"
CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logger(
    name: str = "climagro",
    log_file: Optional[str] = None,
    log_level: str = "INFO",
    console_level: str = "WARNING"
) -> logging.Logger:
    """
    Configure the application logger.

    Calling it again for the same name replaces the handlers instead of
    stacking new ones.

    Args:
        name: Logger name
        log_file: Log file path; falls back to the LOG_FILE env var, then
                  logs/climagro.log
        log_level: Level of the logger and its file handler
        console_level: Minimum level echoed to the console

    Returns:
        Configured logger
    """
    path = Path(log_file or os.getenv("LOG_FILE", DEFAULT_LOG_FILE))
    path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(console_level.upper())
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT, DATE_FORMAT))

    log_handler = logging.FileHandler(path, encoding="utf-8")
    log_handler.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))

    logger.addHandler(console)
    logger.addHandler(log_handler)
    logger.propagate = False

    logger.debug(f"Logging to {path} at {logging.getLevelName(logger.level)}")
    return logger


class LoggerContext:
    """Log the start, duration and outcome of one step of a run."""

    def __init__(self, logger: logging.Logger, operation: str):
        self.logger = logger
        self.operation = operation
        self.elapsed: Optional[float] = None
        self._started = 0.0

    def __enter__(self):
        self._started = time.perf_counter()
        self.logger.info(f"{self.operation}: started")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed = time.perf_counter() - self._started

        if exc_type is None:
            self.logger.info(f"{self.operation}: done in {self.elapsed:.2f}s")
        else:
            self.logger.error(
                f"{self.operation}: failed after {self.elapsed:.2f}s ({exc_type.__name__}: {exc_val})"
            )
        # Never suppress the exception
        return False
