"""Structured logging helpers."""

from __future__ import annotations

import json
import logging
from logging.handlers import RotatingFileHandler
import sys
from typing import Any

from .config import LoggingConfig

# Attributes every LogRecord carries; anything else arrived through ``extra=``.
_RECORD_ATTRIBUTES = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Format log records as JSON, including structured ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRIBUTES:
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(config: LoggingConfig) -> None:
    """Configure root logger."""

    level = getattr(logging, config.level.upper(), logging.INFO)
    handler: logging.Handler
    if config.log_file:
        handler = RotatingFileHandler(
            config.log_file,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
        )
    else:
        # Standard output carries MTIE data, so diagnostics go to stderr.
        handler = logging.StreamHandler(sys.stderr)

    formatter: logging.Formatter
    if config.json_format:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter("%(levelname)s %(name)s %(message)s")
    handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=[handler], force=True)
