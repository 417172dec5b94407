"""Logging setup for entry-points (CLI, scripts).

Library modules only call `logging.getLogger(__name__)`; handlers are
attached here, once, by whoever owns the process.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "libogame"

_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"


def _file_handler(log_file: Path) -> RotatingFileHandler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(
    level: int | str = logging.WARNING,
    log_file: Path | None = None,
    console: Console | None = None,
) -> logging.Logger:
    """Attach a rich console handler (and optionally a rotating file) to the
    library loggers.

    Repeated calls update the level and add a file handler for any `log_file`
    not attached yet; the console handler is only created once.
    """

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    names = (ROOT_LOGGER_NAME, "core", "adapters", "cli")
    loggers = [logging.getLogger(name) for name in names]
    for logger in loggers:
        logger.setLevel(level)

    root = loggers[0]
    handlers: list[logging.Handler] = []
    if not getattr(root, "_libogame_configured", False):
        handlers.append(
            RichHandler(
                console=console or Console(stderr=True),
                show_path=False,
                rich_tracebacks=True,
            )
        )
        root._libogame_configured = True  # type: ignore[attr-defined]

    if log_file is not None:
        attached = {
            getattr(h, "baseFilename", None) for h in root.handlers if isinstance(h, RotatingFileHandler)
        }
        if os.path.abspath(log_file) not in attached:
            handlers.append(_file_handler(Path(log_file)))

    for logger in loggers:
        for handler in handlers:
            logger.addHandler(handler)
        logger.propagate = False

    return root
