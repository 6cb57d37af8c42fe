"""Structured Logging: JSON formatter and setup for the kata service layer.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (exercise, error_code, duration_ms) surfaced when present
    - JSON format by default, human-readable "text" format on request
    - setup_logging is idempotent: calling it twice does not duplicate output

Design Decisions:
    - JSONFormatter over third-party libs: stdlib logging only
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_KEYS = ("exercise", "error_code", "duration_ms", "status")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class _KatasHandler(logging.StreamHandler):
    """Marker type so setup_logging can find its own handler."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging. Returns the installed handler."""
    for existing in list(logging.root.handlers):
        if isinstance(existing, _KatasHandler):
            logging.root.removeHandler(existing)

    handler = _KatasHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
