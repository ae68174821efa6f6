import uvicorn
from template_resolver.config import settings
from template_resolver.utils.logging import LOG_FMT, DATE_FMT
from template_resolver.utils.logging_formatters import DIM, RESET, YELLOW

ACCESS_FMT = (
    f"{DIM}%(asctime)s{RESET} | %(levelname_colored)s {YELLOW}%(client_addr)s{RESET} - \"%(request_line)s\" %(status_code)s"
)

log_config = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "()": "template_resolver.utils.logging_formatters.ColorFormatter",
            "format": LOG_FMT,
            "datefmt": DATE_FMT,
        },
        "access": {
            "()": "template_resolver.utils.logging_formatters.ColorAccessFormatter",
            "format": ACCESS_FMT,
            "datefmt": DATE_FMT,
        },
    },
    "handlers": {
        "default": {
            "formatter": "default",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
        },
        "access": {
            "formatter": "access",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
        },
    },
    "root": {"handlers": ["default"], "level": settings.LOG_LEVEL.upper()},
    "loggers": {
        "uvicorn": {"handlers": ["default"], "level": "INFO", "propagate": False},
        "uvicorn.error": {"handlers": ["default"], "level": "INFO", "propagate": False},
        "uvicorn.access": {"handlers": ["access"], "level": "INFO", "propagate": False},
    },
}

if __name__ == "__main__":
    # No uvicorn reload: template edits are picked up on the next lookup.
    uvicorn.run("template_resolver.main:app", host=settings.HOST, port=settings.PORT,
                access_log=True, log_config=log_config)
