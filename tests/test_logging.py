"""Tests for cemdoc.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from cemdoc.logging import configure_logging, get_logger


def test_get_logger_nests_under_package_logger() -> None:
    assert get_logger("render.tables").name == "cemdoc.render.tables"
    assert get_logger().name == "cemdoc"


def test_configure_logging_replaces_handlers_and_writes_file(tmp_path: Path) -> None:
    log_file = tmp_path / "nested" / "run.log"

    configure_logging()
    logger = configure_logging(verbose=True, log_file=log_file)
    get_logger("converter").debug("tree built")

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    assert "DEBUG cemdoc.converter: tree built" in log_file.read_text(encoding="utf-8")

    configure_logging()
    assert len(logger.handlers) == 1
