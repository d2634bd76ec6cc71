"""Logging setup: JSON or human-readable output on a stream handler.

The library only emits records through module loggers; nothing is printed
until an application calls setup_logging.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from numeralsys.core.config import LoggingConfig, ParserSettings

_EXTRA_FIELDS = ("radix", "source", "reason")


class JSONFormatter(logging.Formatter):
    """Format records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(
    settings: ParserSettings | LoggingConfig | None = None,
    logger_name: str = "numeralsys",
) -> logging.Handler:
    """Attach a stream handler to the numeralsys logger and set its level."""
    if settings is None:
        settings = ParserSettings()
    config = settings.logging if isinstance(settings, ParserSettings) else settings

    handler = logging.StreamHandler()
    if config.format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logger = logging.getLogger(logger_name)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, config.level.upper(), logging.WARNING))
    return handler
