"""Error Hierarchy — typed, categorized outcomes for every storefront failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - All errors are recoverable by the caller; none terminates the process
    - Core functions return these as values; only the shell ever raises or catches
    - message is the exact user-facing text surfaced through the notification channel

Design Decisions:
    - Single hierarchy with StorefrontError base: one shape for results and notifications
    - Exception subclass even though core returns them: shells may still raise/chain them
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    AUTHENTICATION = "authentication"
    EXTERNAL_SERVICE = "external_service"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    page: str | None = None
    product_id: str | None = None
    debug_info: dict[str, Any] | None = None


class StorefrontError(Exception):
    """Base exception for all storefront outcomes that are not success."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def extra_fields(self) -> dict:
        """Error-specific fields merged into to_result()."""
        return {}

    def to_result(self) -> dict:
        """Convert to the uniform error result dict."""
        return {
            "status": "error",
            "error_code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "recoverable": True,
            **self.extra_fields(),
        }

    def to_notification(self) -> dict:
        """Convert to a notification-channel event."""
        return {"level": self.severity.value, "message": self.message}


# ─── Reconciliation Errors ──────────────────────────────────────

class InvalidProductError(StorefrontError):
    """Product record has no identifier."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid product", "INVALID_PRODUCT",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, context,
        )


class InvalidQuantityError(StorefrontError):
    """Requested quantity is zero or negative."""
    def __init__(self, requested: int, context: ErrorContext | None = None):
        super().__init__(
            "Quantity must be greater than 0", "INVALID_QUANTITY",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, context,
        )
        self.requested = requested

    def extra_fields(self) -> dict:
        return {"requested": self.requested}


class QuantityExceedsStockError(StorefrontError):
    """Requested quantity alone is above the stock ceiling."""
    def __init__(self, stock: int, context: ErrorContext | None = None):
        super().__init__(
            f"Only {stock} items available in stock", "QUANTITY_EXCEEDS_STOCK",
            ErrorCategory.BUSINESS_RULE, ErrorSeverity.ERROR, context,
        )
        self.stock = stock

    def extra_fields(self) -> dict:
        return {"stock": self.stock}


class CombinedExceedsStockError(StorefrontError):
    """Cart quantity plus requested quantity is above the stock ceiling."""
    def __init__(
        self, requested: int, remaining: int, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Cannot add {requested} items. Only {remaining} more available",
            "COMBINED_EXCEEDS_STOCK",
            ErrorCategory.BUSINESS_RULE, ErrorSeverity.ERROR, context,
        )
        self.requested = requested
        self.remaining = remaining

    def extra_fields(self) -> dict:
        return {"requested": self.requested, "remaining": self.remaining}


# ─── Navigation Errors ──────────────────────────────────────────

class NavigationDeniedError(StorefrontError):
    """Navigation requested while no user is logged in."""
    def __init__(self, target: str, context: ErrorContext | None = None):
        super().__init__(
            "Please login to access other pages.", "NAVIGATION_DENIED",
            ErrorCategory.AUTHENTICATION, ErrorSeverity.WARNING, context,
        )
        self.target = target

    def extra_fields(self) -> dict:
        return {"target": self.target}


class LoginFormError(StorefrontError):
    """Login submitted with an empty username or password."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Username and password are required.", "LOGIN_FIELDS_REQUIRED",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, context,
        )


# ─── Submission Errors ──────────────────────────────────────────

class SubmissionFailedError(StorefrontError):
    """The delegated cart-mutation call failed."""
    def __init__(
        self, cause: BaseException | None = None, context: ErrorContext | None = None,
    ):
        super().__init__(
            "Failed to add item to cart. Please try again.", "SUBMISSION_FAILED",
            ErrorCategory.EXTERNAL_SERVICE, ErrorSeverity.ERROR, context,
        )
        self.cause = cause

    def extra_fields(self) -> dict:
        if self.cause is None:
            return {}
        return {"cause": type(self.cause).__name__}


class SubmissionInProgressError(StorefrontError):
    """A submission for the same product is still in flight."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "An add to cart request is already in progress.",
            "SUBMISSION_IN_PROGRESS",
            ErrorCategory.CONFLICT, ErrorSeverity.WARNING, context,
        )
