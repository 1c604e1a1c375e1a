"""Project-wide logging setup.

Logs go to text/log_file.log at the repo root (or CRIB_LOG_FILE) and to
stdout. Safe to call more than once; handlers are only added when missing.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

from .constants import CRIB_LOG_FILE, CRIB_LOG_LEVEL

FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
STREAM_FORMAT = "%(levelname)s %(name)s: %(message)s"


def default_log_path() -> Path:
    if CRIB_LOG_FILE.strip() == "":
        return Path(__file__).resolve().parent.parent / "text" / "log_file.log"
    return Path(CRIB_LOG_FILE).expanduser()


def _writes_to(handler: logging.Handler, log_path: Path) -> bool:
    return isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == log_path.absolute()


def _is_console(handler: logging.Handler) -> bool:
    return type(handler) is logging.StreamHandler and handler.stream in (sys.stdout, sys.stderr)


def configure_logging(log_path: Path | None = None, level: str | int = CRIB_LOG_LEVEL) -> logging.Logger:
    log_path = Path(log_path) if log_path is not None else default_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(level)
    wanted = []
    if not any(_writes_to(h, log_path) for h in root.handlers):
        wanted.append((logging.FileHandler(log_path, encoding="utf-8"), FILE_FORMAT))
    if not any(_is_console(h) for h in root.handlers):
        wanted.append((logging.StreamHandler(sys.stdout), STREAM_FORMAT))
    for handler, fmt in wanted:
        handler.setFormatter(logging.Formatter(fmt))
        handler.setLevel(level)
        root.addHandler(handler)
    return root
