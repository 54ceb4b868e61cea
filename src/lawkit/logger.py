"""Console logging sink for example scripts.

log(level, message, *context) prints "<level>: <message>" followed by every
context value pretty-printed on its own tab-indented line:

    info: monoid_point.combine(p1, p2):
    	{'x': 4, 'y': 8}
"""

from __future__ import annotations

import logging
import os
import pprint
import sys
from typing import Any, Literal

Level = Literal["debug", "info", "warn", "error"]

LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

_NAMES = {value: key for key, value in LEVELS.items()}

logger = logging.getLogger("lawkit")


class ContextFormatter(logging.Formatter):
    """Render the message, then each context value indented with a tab."""

    def format(self, record: logging.LogRecord) -> str:
        level = _NAMES.get(record.levelno, record.levelname.lower())
        lines = [f"{level}: {record.getMessage()}"]
        for value in getattr(record, "context", ()):
            rendered = pprint.pformat(value)
            lines.append("\t" + rendered.replace("\n", "\n\t"))
        return "\n".join(lines)


def configure(level: str | None = None, stream: Any = None) -> logging.Logger:
    """Attach the console handler to the "lawkit" logger.

    Args:
        level: One of debug/info/warn/error; defaults to LAWKIT_LOG_LEVEL or debug
        stream: Output stream, stderr by default

    Returns:
        The configured logger
    """
    name = (level or os.environ.get("LAWKIT_LOG_LEVEL") or "debug").lower()
    if name not in LEVELS:
        raise ValueError(f"Unknown log level: {name!r}")
    for handler in list(logger.handlers):
        if isinstance(handler.formatter, ContextFormatter):
            logger.removeHandler(handler)
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(ContextFormatter())
    logger.addHandler(handler)
    logger.setLevel(LEVELS[name])
    return logger


def log(level: Level, message: str, *context: Any) -> None:
    """Log message with any number of inspectable context values.

    Raises:
        ValueError: If level is not one of debug, info, warn, error
    """
    if level not in LEVELS:
        raise ValueError(f"Unknown log level: {level!r}")
    logger.log(LEVELS[level], message, extra={"context": context})
