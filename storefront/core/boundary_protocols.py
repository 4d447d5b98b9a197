"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - CartService.add_to_cart is async because implementations do IO; the
      reconciler that precedes it is never async itself
    - add_to_cart takes a plain payload dict: the service contract is the
      {id, name, price, image, quantity} record, not a core type
"""

from typing import Protocol

from storefront.core.cart_types import CartItem
from storefront.core.session_state import Identity


class IdentityProvider(Protocol):
    """Supplies the identity record for a username — trusted fully."""
    def identify(self, username: str) -> Identity: ...


class CartService(Protocol):
    """Cart-mutation service: owns the cart collection. Adds to existing lines."""
    def cart_items(self) -> list[CartItem]: ...
    async def add_to_cart(self, payload: dict) -> None: ...


class Notifier(Protocol):
    """Notification/alert channel (toasts, alerts) — implemented by shell."""
    def success(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
