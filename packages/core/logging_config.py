from __future__ import annotations

import logging
import logging.config
import os
import sys
from typing import Any, Dict, Optional


LOGGER_NAMESPACE = "reminders"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def _log_destination() -> str:
    return os.getenv("LOG_DESTINATION", "stdout").lower()


def _log_file_path() -> Optional[str]:
    return os.getenv("LOG_FILE")


def _handler_config() -> Dict[str, Any]:
    destination = _log_destination()
    if destination == "file":
        log_file = _log_file_path()
        if not log_file:
            raise RuntimeError("LOG_FILE is required when LOG_DESTINATION=file")
        return {
            "class": "logging.FileHandler",
            "level": _log_level(),
            "filename": log_file,
            "formatter": "standard",
        }
    if destination not in ("stdout", "stderr"):
        raise RuntimeError(f"Unsupported LOG_DESTINATION {destination!r}")
    return {
        "class": "logging.StreamHandler",
        "level": _log_level(),
        "stream": sys.stdout if destination == "stdout" else sys.stderr,
        "formatter": "standard",
    }


def build_logging_config() -> Dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"standard": {"format": LOG_FORMAT}},
        "handlers": {"default": _handler_config()},
        "loggers": {
            LOGGER_NAMESPACE: {"level": _log_level(), "propagate": True},
        },
        "root": {"handlers": ["default"], "level": _log_level()},
    }


def configure_logging() -> None:
    logging.config.dictConfig(build_logging_config())


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")
