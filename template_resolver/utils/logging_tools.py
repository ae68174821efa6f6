import inspect
import logging
from typing import Optional, Tuple

_THIS_MODULE = __name__
_ROOT = "template_resolver"


def _caller_info() -> Tuple[str, int, int]:
    """Return (short module name, line, stack depth) of the first frame outside this module."""
    frame = inspect.currentframe()
    depth = 0
    while frame is not None:
        modname = frame.f_globals.get("__name__", "")
        if modname != _THIS_MODULE:
            return modname.rsplit(".", 1)[-1] or _ROOT, frame.f_lineno, depth
        depth += 1
        frame = frame.f_back
    return _ROOT, 0, depth


def log(
    msg: str,
    *args,
    level: int = logging.INFO,
    category: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
    **kwargs,
) -> None:
    """Log under ``template_resolver.<caller module>`` with the caller's line number.

    ``category`` is prefixed to the message as "[category] ".
    """
    module, lineno, depth = _caller_info()
    if logger is None:
        logger = logging.getLogger(f"{_ROOT}.{module}")
    if category:
        msg = f"[{category}] {msg}"
    extra = {"src_module": module, "src_lineno": lineno}
    logger.log(level, msg, *args, stacklevel=depth, extra=extra, **kwargs)


def debug(msg: str, *args, **kwargs) -> None:
    log(msg, *args, level=logging.DEBUG, **kwargs)


def info(msg: str, *args, **kwargs) -> None:
    log(msg, *args, level=logging.INFO, **kwargs)


def warning(msg: str, *args, **kwargs) -> None:
    log(msg, *args, level=logging.WARNING, **kwargs)


def error(msg: str, *args, **kwargs) -> None:
    log(msg, *args, level=logging.ERROR, **kwargs)


def critical(msg: str, *args, **kwargs) -> None:
    log(msg, *args, level=logging.CRITICAL, **kwargs)


__all__ = [
    "log",
    "debug",
    "info",
    "warning",
    "error",
    "critical",
]
