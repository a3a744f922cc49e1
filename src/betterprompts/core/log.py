"""Logging setup driven by LoggingSettings."""

import json
import logging
from typing import Optional

from .config import LoggingSettings, get_settings


TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(settings: Optional[LoggingSettings] = None) -> None:
    """
    Configure the package logger.

    Args:
        settings: Logging settings (defaults to the global settings)
    """
    settings = settings or get_settings().logging

    handler = logging.StreamHandler()
    if settings.format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    logger = logging.getLogger("betterprompts")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(settings.level.upper())
    logger.propagate = False
