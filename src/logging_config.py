"""Logging setup for the snapshot renderer."""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: str | int | None) -> int:
    """Translate ``"debug"``, ``" INFO "`` or a numeric level; unknown names fall back to INFO."""

    if isinstance(level, int):
        return level
    name = (level or "").strip().upper()
    numeric = logging.getLevelName(name) if name else logging.INFO
    return numeric if isinstance(numeric, int) else logging.INFO


def _attach(root: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)


def _file_handler_for(root: logging.Logger, path: Path) -> logging.FileHandler | None:
    target = os.path.abspath(path)
    for handler in root.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == target:
            return handler
    return None


def configure_logging(level: str | int = "INFO", log_file: Optional[str] = None) -> None:
    """Configure root logging handlers for the command line renderer.

    Diagnostics go to stderr so stdout carries only rendered labels. Repeated
    calls re-level existing handlers and never duplicate the file handler.
    """

    numeric_level = resolve_level(level)
    root = logging.getLogger()
    root.setLevel(numeric_level)
    for handler in root.handlers:
        handler.setLevel(numeric_level)

    if not root.handlers:
        _attach(root, logging.StreamHandler(sys.stderr), numeric_level)

    if log_file:
        path = Path(log_file)
        if _file_handler_for(root, path) is None:
            path.parent.mkdir(parents=True, exist_ok=True)
            _attach(root, logging.FileHandler(path, encoding="utf-8"), numeric_level)


__all__ = ["LOG_FORMAT", "configure_logging", "resolve_level"]
