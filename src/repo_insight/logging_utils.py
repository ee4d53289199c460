"""Logging setup for the command-line entry points."""
from __future__ import annotations

import logging
import logging.config
from typing import Any

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_logging_config(level: str = "WARNING") -> dict[str, Any]:
    """Return a dictConfig mapping that sends records to stderr.

    stdout is reserved for scan output and model replies.
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT},
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            # The SDKs log every HTTP request at INFO.
            "httpx": {"level": "WARNING"},
            "openai": {"level": "WARNING"},
        },
        "root": {"level": level.upper(), "handlers": ["stderr"]},
    }


def configure_logging(level: str = "WARNING") -> None:
    """Apply the repo-insight logging configuration."""
    logging.config.dictConfig(build_logging_config(level))
