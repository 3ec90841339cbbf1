"""Logging configuration based on environment."""

import logging
import sys

from triviaboard.config import settings

# Development format: cleaner
DEV_FORMAT = "%(levelname)s:     %(name)s - %(message)s"

# Production format: full details for debugging
PROD_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that are too chatty at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def get_uvicorn_log_config() -> dict:
    """Get uvicorn's dictConfig, routing app and server logs through one handler."""
    is_dev = settings.is_development
    access_fmt = (
        '%(levelprefix)s "%(request_line)s" %(status_code)s'
        if is_dev
        else '%(asctime)s %(levelprefix)s %(client_addr)s - "%(request_line)s" %(status_code)s'
    )

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "access": {"()": "uvicorn.logging.AccessFormatter", "fmt": access_fmt},
            "default": {"format": DEV_FORMAT if is_dev else PROD_FORMAT},
        },
        "handlers": {
            "access": {
                "class": "logging.StreamHandler",
                "formatter": "access",
                "stream": "ext://sys.stdout",
            },
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "uvicorn.access": {"handlers": ["access"], "level": "INFO", "propagate": False},
            **{name: {"level": "WARNING"} for name in NOISY_LOGGERS},
        },
        "root": {"handlers": ["default"], "level": settings.log_level},
    }


def setup_logging(level: str | None = None) -> None:
    """Configure logging for CLI runs.

    Args:
        level: Override for the configured log level (e.g. from --verbose)
    """
    logging.basicConfig(
        level=getattr(logging, level or settings.log_level),
        format=DEV_FORMAT if settings.is_development else PROD_FORMAT,
        stream=sys.stderr,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
