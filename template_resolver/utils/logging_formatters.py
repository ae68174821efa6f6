import logging
import os
import sys

import colorama
from uvicorn.logging import AccessFormatter

# Windows legacy consoles need this for ANSI; no-op elsewhere.
colorama.just_fix_windows_console()

USE_COLOR = (
    os.getenv("LOG_COLOR", "1").lower() not in {"0", "false", "no"}
    and hasattr(sys.stdout, "isatty")
    and sys.stdout.isatty()
)


def code(s: str) -> str:
    return s if USE_COLOR else ""


RESET = code("\x1b[0m")
DIM = code("\x1b[90m")
BLUE = code("\x1b[34m")
CYAN = code("\x1b[36m")
GREEN = code("\x1b[32m")
YELLOW = code("\x1b[33m")
RED = code("\x1b[31m")
MAGENTA = code("\x1b[35m")

_LEVEL_COLORS = (
    (logging.CRITICAL, MAGENTA),
    (logging.ERROR, RED),
    (logging.WARNING, YELLOW),
    (logging.INFO, GREEN),
)


def color_for_level(levelno: int) -> str:
    for threshold, color in _LEVEL_COLORS:
        if levelno >= threshold:
            return color
    return BLUE


def _decorate(record: logging.LogRecord, alias: str) -> None:
    # levelname_colored/src_module/src_lineno are referenced by LOG_FMT and ACCESS_FMT
    record.levelname_colored = f"{color_for_level(record.levelno)}{record.levelname}{RESET}"
    logger_name = "uvicorn" if record.name == alias else record.name
    if not hasattr(record, "src_module"):
        record.src_module = logger_name.rsplit(".", 1)[-1]
    if not hasattr(record, "src_lineno"):
        record.src_lineno = record.lineno


class ColorFormatter(logging.Formatter):
    """Colored, non-padded level name plus short module name and line."""

    def format(self, record: logging.LogRecord) -> str:
        _decorate(record, "uvicorn.error")
        return super().format(record)


class ColorAccessFormatter(AccessFormatter):
    """uvicorn access formatter with the same level/module decoration."""

    def format(self, record: logging.LogRecord) -> str:
        _decorate(record, "uvicorn.access")
        return super().format(record)
