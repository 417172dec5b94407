"""Default `LogSink`: forwards `(tag, message)` pairs to stdlib logging."""

from __future__ import annotations

import logging

from core.logging_config import ROOT_LOGGER_NAME


class StdlibLogSink:
    def __init__(self, logger: logging.Logger | None = None, level: int = logging.DEBUG) -> None:
        self._logger = logger or logging.getLogger(ROOT_LOGGER_NAME)
        self._level = level

    def println(self, tag: str, message: str) -> None:
        self._logger.log(self._level, "[%s] %s", tag, message)
