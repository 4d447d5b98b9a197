"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId and ProductId wrap str — never use bare str for identifiers in domain logic
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: compare equal to their raw value, so shells may pass "settings"
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
ProductId = NewType("ProductId", str)


# ─── Limits ──────────────────────────────────────────────────────

MAX_INPUT_QUANTITY: int = 99
LOW_STOCK_THRESHOLD: int = 5


# ─── Enums ───────────────────────────────────────────────────────

class Page(str, Enum):
    """Views the navigator can select."""
    LOGIN = "login"
    PROFILE = "profile"
    SETTINGS = "settings"


class RequestStatus(str, Enum):
    """Lifecycle of a single delegated add-to-cart request."""
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class Theme(str, Enum):
    """Interface themes a user may choose in settings."""
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"
