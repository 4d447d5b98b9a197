"""Notifications — logging-backed implementation of the Notifier protocol.

Invariants:
    - Messages pass through verbatim (no prefix, no translation)
    - success → INFO, warning → WARNING, error → ERROR on the "storefront.notify" logger

Design Decisions:
    - Stand-in for toast/alert presentation: a UI shell supplies its own Notifier
"""

import logging

logger = logging.getLogger("storefront.notify")


class LoggingNotifier:
    """Notifier that records every notification as a log line."""

    def success(self, message: str) -> None:
        logger.info(message, extra={"status": "success"})

    def warning(self, message: str) -> None:
        logger.warning(message, extra={"status": "warning"})

    def error(self, message: str) -> None:
        logger.error(message, extra={"status": "error"})
