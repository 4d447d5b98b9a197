"""Structured Logging — JSON formatter and setup for storefront observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (user_id, page, product_id, error_code, ...) surfaced when present
    - setup_logging is idempotent: repeated calls replace, never duplicate, its handler

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once by the composition root (storefront.main)
"""

import logging
import json
from datetime import datetime, timezone

_installed_handler: logging.Handler | None = None

_EXTRA_KEYS = (
    "user_id", "page", "product_id", "error_code", "quantity", "status",
)


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
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging for the storefront."""
    global _installed_handler
    if _installed_handler is not None:
        logging.root.removeHandler(_installed_handler)

    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    _installed_handler = handler
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
