from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.logging_config import configure_logging, resolve_level


@pytest.fixture()
def root_logger():
    logger = logging.getLogger()
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)


def test_configure_logging_adds_file_handler_once(root_logger: logging.Logger, tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "render.log"
    configure_logging("debug", str(log_file))
    configure_logging("DEBUG", str(log_file))

    target = os.path.abspath(log_file)
    file_handlers = [
        handler
        for handler in root_logger.handlers
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == target
    ]
    assert len(file_handlers) == 1
    assert root_logger.level == logging.DEBUG

    logging.getLogger("src.catalog").debug("serialisation skipped")
    file_handlers[0].flush()
    assert "[DEBUG] src.catalog: serialisation skipped" in log_file.read_text(encoding="utf-8")


def test_configure_logging_unknown_level_defaults_to_info(root_logger: logging.Logger) -> None:
    configure_logging("verbose")
    assert root_logger.level == logging.INFO
    configure_logging(logging.WARNING)
    assert root_logger.level == logging.WARNING


@pytest.mark.parametrize(
    ("level", "expected"),
    [(" warning ", logging.WARNING), ("Error", logging.ERROR), ("", logging.INFO), (None, logging.INFO), (5, 5)],
)
def test_resolve_level(level: object, expected: int) -> None:
    assert resolve_level(level) == expected
