"""Loguru setup for the Mapty process."""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path

from loguru import logger


# Libraries that log through the standard logging module.
FORWARDED_LOGGERS: tuple[str, ...] = ("nicegui", "uvicorn", "uvicorn.error", "uvicorn.access")


class _ForwardToLoguru(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(exception=record.exc_info).bind(origin=record.name).log(
            level, record.getMessage()
        )


def setup_logger(level: str = "INFO", log_dir: Path | None = None) -> Path | None:
    """Send Mapty and web server logs to stderr, plus one file per run.

    Returns the session log file path when ``log_dir`` is given.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
        "<cyan>{extra[origin]}</cyan> - <level>{message}</level>",
        level=level,
        colorize=True,
    )
    logger.configure(extra={"origin": "mapty"})

    log_path: Path | None = None
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / f"session-{datetime.now():%Y%m%d-%H%M%S}.log"
        logger.add(
            log_path,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[origin]} | {message}",
            level=level,
        )

    handler = _ForwardToLoguru()
    for name in FORWARDED_LOGGERS:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [handler]
        std_logger.propagate = False
        std_logger.setLevel(level)

    logger.debug(f"Logging at {level}" + (f" to {log_path}" if log_path else ""))
    return log_path
