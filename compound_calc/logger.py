"""JSON-formatted logging for the API and domain modules."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

ROOT_LOGGER = "compound_calc"


class JSONFormatter(logging.Formatter):
    """Render a record as one JSON object per line.

    Fields: timestamp (ISO-8601, UTC), level, logger_name, message, and
    ``extra`` holding anything passed through the ``extra`` kwarg.
    """

    _STANDARD_ATTRS = frozenset(
        logging.LogRecord(
            name="", level=0, pathname="", lineno=0, msg="", args=(), exc_info=None
        ).__dict__.keys()
    ) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger_name": record.name,
            "message": record.getMessage(),
        }

        extra = {
            key: str(value)
            for key, value in record.__dict__.items()
            if key not in self._STANDARD_ATTRS
        }
        if extra:
            entry["extra"] = extra

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False)


def configure_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a JSON stream handler to the package logger (once)."""
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(level.upper())

    if not root.handlers:
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(JSONFormatter())
        root.addHandler(handler)

    return root


def get_logger(name: str) -> logging.Logger:
    """Module logger under the package namespace, e.g. get_logger(__name__)."""
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
