import logging
from .logging_formatters import ColorFormatter, DIM, RESET, CYAN

LOG_FMT = f"{DIM}%(asctime)s{RESET} | %(levelname_colored)s {CYAN}%(src_module)s:%(src_lineno)d{RESET} - %(message)s"
DATE_FMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int | str = logging.INFO) -> None:
    """Configure the root logger with the colored template_resolver format.

    Does nothing when the root logger already has handlers (uvicorn, pytest).
    """
    root = logging.getLogger()
    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(ColorFormatter(fmt=LOG_FMT, datefmt=DATE_FMT))
    root.setLevel(level)
    root.addHandler(handler)


logger = logging.getLogger("template_resolver")
