"""Cart Schemas — catalog product records and the cart-service upsert payload.

Invariants:
    - ProductRecord.price >= 0, stock >= 0; id may be absent (reported by the
      reconciler as InvalidProduct, not rejected here)
    - CartPayload.quantity >= 1, price >= 0, id non-empty

Design Decisions:
    - ProductRecord tolerates a missing id so the reconciler, not pydantic,
      owns that outcome and its user-facing message
"""

from pydantic import BaseModel, Field

from storefront.core.cart_types import CartItem, Product
from storefront.core.domain_types import ProductId


class ProductRecord(BaseModel):
    """Catalog product as supplied to the add-to-cart widget."""
    id: str | None = None
    name: str = Field(min_length=1)
    price: float = Field(ge=0)
    stock: int = Field(ge=0)
    image: str = ""

    def to_product(self) -> Product:
        return Product(
            id=ProductId(self.id) if self.id else None,
            name=self.name,
            price=self.price,
            stock=self.stock,
            image=self.image,
        )


class CartPayload(BaseModel):
    """Upsert request accepted by the cart-mutation service."""
    id: str = Field(min_length=1)
    name: str
    price: float = Field(ge=0)
    image: str = ""
    quantity: int = Field(ge=1)

    def to_cart_item(self) -> CartItem:
        return CartItem(
            id=ProductId(self.id),
            name=self.name,
            price=self.price,
            quantity=self.quantity,
            image=self.image,
        )
