"""Error Notification — routes a StorefrontError to the matching Notifier channel.

Invariants:
    - Channel chosen from to_notification()["level"]; message passed verbatim
    - Severities without their own channel (info) fall back to warning

Design Decisions:
    - Shared by every controller so severity → channel is defined once
"""

from storefront.core.boundary_protocols import Notifier
from storefront.core.errors import ErrorSeverity, StorefrontError


def notify_error(notifier: Notifier, error: StorefrontError) -> None:
    """Surface error through the notification channel."""
    event = error.to_notification()
    if event["level"] == ErrorSeverity.ERROR.value:
        notifier.error(event["message"])
    else:
        notifier.warning(event["message"])
