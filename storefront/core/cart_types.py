"""Cart Types — read-only product records, cart contents, and the upsert proposal.

Invariants:
    - Product.stock is the non-negative stock ceiling
    - CartItem.quantity is a positive integer; at most one CartItem per product id
    - CartEntry carries the requested DELTA, never the merged total

Design Decisions:
    - Frozen dataclasses: the reconciler reads cart contents, it never mutates them
    - Product.id is Optional so a missing identifier is an outcome, not a TypeError
"""

from dataclasses import dataclass

from storefront.core.domain_types import ProductId


@dataclass(frozen=True)
class Product:
    """Catalog product as shown on the add-to-cart widget."""
    id: ProductId | None
    name: str
    price: float
    stock: int
    image: str = ""


@dataclass(frozen=True)
class CartItem:
    """One line of the cart, owned by the cart-mutation service."""
    id: ProductId
    name: str
    price: float
    quantity: int
    image: str = ""

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity


@dataclass(frozen=True)
class CartEntry:
    """Validated upsert proposal handed to the cart-mutation service."""
    id: ProductId
    name: str
    price: float
    image: str
    quantity: int

    def to_payload(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "image": self.image,
            "quantity": self.quantity,
        }
