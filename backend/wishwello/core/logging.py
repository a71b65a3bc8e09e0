# backend/wishwello/core/logging.py
"""
Central logging configuration.

One stdout handler on the root logger; every module logs through
logging.getLogger(__name__). Safe to call more than once (reloaders,
the API and the weekly job share it).
"""
import logging
from logging.config import dictConfig

from wishwello.core.config import settings


def _dict_config(level: str) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)s:%(name)s:%(message)s",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "default",
                "stream": "ext://sys.stdout",
            }
        },
        "root": {"level": level, "handlers": ["console"]},
        "loggers": {
            "uvicorn": {"level": "INFO", "handlers": ["console"], "propagate": False},
            "uvicorn.error": {"level": "INFO", "handlers": ["console"], "propagate": False},
            "uvicorn.access": {"level": "INFO", "handlers": ["console"], "propagate": False},
        },
    }


def configure_logging(level: str | None = None) -> None:
    """Install the console handler once; no-op if the root logger already has one."""
    root = logging.getLogger()
    if root.handlers:
        return
    dictConfig(_dict_config((level or settings.LOG_LEVEL).upper()))
