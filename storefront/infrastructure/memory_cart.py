"""In-Memory Cart Service — reference implementation of the cart-mutation contract.

Invariants:
    - At most one CartItem per product id (dict keyed by id)
    - add_to_cart ADDS the payload quantity to an existing line, else creates one
    - Payloads are validated with CartPayload before any mutation; an invalid
      payload raises pydantic.ValidationError and leaves the cart unchanged

Design Decisions:
    - In-memory, not persisted: state loss on restart is acceptable
    - Optional latency simulates a remote cart backend
"""

import asyncio
import logging
from dataclasses import replace

from storefront.core.cart_types import CartItem
from storefront.schemas.cart import CartPayload

logger = logging.getLogger(__name__)


class InMemoryCartService:
    """Cart collection owner for a single session."""

    def __init__(self, latency_ms: int = 0):
        self.latency_ms = latency_ms
        self._items: dict[str, CartItem] = {}

    def cart_items(self) -> list[CartItem]:
        return list(self._items.values())

    async def add_to_cart(self, payload: dict) -> None:
        """Validate payload, then add it to the cart."""
        item = CartPayload.model_validate(payload).to_cart_item()
        if self.latency_ms:
            await asyncio.sleep(self.latency_ms / 1000)

        existing = self._items.get(item.id)
        if existing is not None:
            item = replace(existing, quantity=existing.quantity + item.quantity)
        self._items[item.id] = item
        logger.debug(
            "Cart line updated",
            extra={"product_id": item.id, "quantity": item.quantity},
        )

    @property
    def total(self) -> float:
        return sum(item.subtotal for item in self._items.values())
