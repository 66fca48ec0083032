"""
Log formatters for modelerrors.

``JsonFormatter`` renders records as one JSON object per line. Error context
passed through ``extra=`` (attribute, kind, tried translation keys, locale)
is included when present, so missing translations can be traced from
structured logs.
"""

import json
import logging
from datetime import datetime

# Fields callers may attach with ``logger.warning(..., extra={...})``
CONTEXT_FIELDS = ("attribute", "kind", "keys", "locale")


class JsonFormatter(logging.Formatter):
    """Format log records as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the specified record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string with timestamp, level, logger name, message, any
            error context fields and the formatted exception if there is one
        """
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=str)
