from __future__ import annotations

import logging
from pathlib import Path

from loguru import logger

from mapty.core.logger import setup_logger


def test_session_log_file_collects_app_and_nicegui_messages(tmp_path: Path) -> None:
    log_path = setup_logger(level="INFO", log_dir=tmp_path / "logs")
    try:
        assert log_path is not None
        assert log_path.parent == tmp_path / "logs"
        assert log_path.name.startswith("session-")

        logger.info("workout stored")
        logging.getLogger("nicegui").warning("client disconnected")
        logger.debug("hidden below INFO")
        logger.complete()

        content = log_path.read_text(encoding="utf-8")
    finally:
        logger.remove()

    assert "workout stored" in content
    assert "client disconnected" in content
    assert "| nicegui |" in content
    assert "hidden below INFO" not in content


def test_without_log_dir_no_file_is_written(tmp_path: Path) -> None:
    try:
        assert setup_logger(level="DEBUG") is None
    finally:
        logger.remove()

    assert list(tmp_path.iterdir()) == []
