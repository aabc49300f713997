"""
Central logging setup for facetchef.

One line per record, pipe separated:
<Date>|<Time>|<Level>|<File:Line>|<Module.Func>|<Detail>

Modules call ``get_logger(__name__)``; the CLI calls ``init_logging`` once
with the configured level.
"""

from __future__ import annotations

import datetime
import logging

ROOT_LOGGER = "facetchef"


class PipeFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        dt = datetime.datetime.fromtimestamp(record.created)
        line = (
            f"{dt:%Y-%m-%d}|{dt:%H:%M:%S}|{record.levelname}|"
            f"{record.filename}:{record.lineno}|{record.module}.{record.funcName}|"
            f"{record.getMessage()}"
        )
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def parse_level(level: object) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level or "").strip().upper())
    if isinstance(value, int):
        return value
    return logging.WARNING


def init_logging(level: object = logging.WARNING) -> logging.Logger:
    """Attach the pipe formatter to the package logger, once."""
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(parse_level(level))
    if logger.handlers:
        # Already configured, avoid double handlers
        return logger
    handler = logging.StreamHandler()
    handler.setFormatter(PipeFormatter())
    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
