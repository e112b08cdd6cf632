"""Logging configuration.

Console logging with either a plain text or a JSON formatter. Ledger and
service log calls pass ``tenant_id``/``person_id`` through ``extra`` so the
JSON formatter can emit them as fields.
"""

from __future__ import annotations

import logging
import logging.config
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

CONTEXT_FIELDS = ("tenant_id", "person_id", "kind", "direction")


class ContextJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter that adds timestamp/level and the attendance context fields."""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]):
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["logger"] = record.name

        for field in CONTEXT_FIELDS:
            if hasattr(record, field):
                log_record[field] = getattr(record, field)


def build_logging_config(level: str = "INFO", *, json_format: bool = False) -> Dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            },
            "json": {
                "()": ContextJsonFormatter,
                "format": "%(timestamp)s %(level)s %(logger)s %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json" if json_format else "standard",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "karma_manager": {
                "handlers": ["console"],
                "level": level.upper(),
                "propagate": True,
            },
        },
    }


def configure_logging(level: str = "INFO", *, json_format: bool = False) -> None:
    logging.config.dictConfig(build_logging_config(level, json_format=json_format))
