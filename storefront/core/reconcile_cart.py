"""Cart Quantity Reconciliation — validates a requested addition against the stock ceiling.

Invariants:
    - All functions are PURE: no IO, no async, cart contents never mutated
    - Return error value on violation, None on success
    - validate_add_to_cart chains all checks in order — first error wins:
      product id → positive quantity → individual stock → combined stock
    - CombinedExceedsStockError reports remaining = stock - quantity already in cart
    - A successful result proposes the requested quantity, not the merged total

Design Decisions:
    - Checks return values, not exceptions: the shell maps every outcome to a
      notification uniformly (ADR: uniform result shape)
    - The cart-mutation service decides add-vs-increment; the reconciler only
      validates and proposes the delta (ADR: "service adds")
"""

import math
import re
from dataclasses import dataclass
from typing import Iterable

from storefront.core.cart_types import CartEntry, CartItem, Product
from storefront.core.domain_types import (
    LOW_STOCK_THRESHOLD, MAX_INPUT_QUANTITY, ProductId,
)
from storefront.core.errors import (
    CombinedExceedsStockError,
    ErrorContext,
    InvalidProductError,
    InvalidQuantityError,
    QuantityExceedsStockError,
    StorefrontError,
)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class ReconcileResult:
    """Outcome of validate_add_to_cart: exactly one of entry / error is set."""
    entry: CartEntry | None = None
    error: StorefrontError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class StockFlags:
    """Display flags recomputed from product stock."""
    is_out_of_stock: bool
    is_low_stock: bool
    max_quantity: int


def check_product_identity(product: Product | None) -> InvalidProductError | None:
    """Rule 1: product must carry an identifier."""
    if product is None or not product.id:
        return InvalidProductError()
    return None


def check_quantity_positive(
    product: Product, requested: int,
) -> InvalidQuantityError | None:
    """Rule 2: requested quantity must be at least 1."""
    if requested <= 0:
        return InvalidQuantityError(requested, ErrorContext(product_id=product.id))
    return None


def check_within_stock(
    product: Product, requested: int,
) -> QuantityExceedsStockError | None:
    """Rule 3: requested quantity alone may not exceed stock."""
    if requested > product.stock:
        return QuantityExceedsStockError(
            product.stock, ErrorContext(product_id=product.id),
        )
    return None


def check_combined_stock(
    product: Product, requested: int, existing: CartItem | None,
) -> CombinedExceedsStockError | None:
    """Rule 4: quantity already in cart plus requested may not exceed stock."""
    prior = existing.quantity if existing is not None else 0
    if prior + requested > product.stock:
        return CombinedExceedsStockError(
            requested,
            product.stock - prior,
            ErrorContext(product_id=product.id),
        )
    return None


def validate_add_to_cart(
    product: Product | None, requested: int, existing: CartItem | None = None,
) -> ReconcileResult:
    """Chain all reconciliation checks. Returns first error or the upsert entry."""
    error = check_product_identity(product)
    if error:
        return ReconcileResult(error=error)

    error = (
        check_quantity_positive(product, requested)
        or check_within_stock(product, requested)
        or check_combined_stock(product, requested, existing)
    )
    if error:
        return ReconcileResult(error=error)

    return ReconcileResult(entry=CartEntry(
        id=product.id,
        name=product.name,
        price=product.price,
        image=product.image,
        quantity=requested,
    ))


def find_cart_item(
    cart_items: Iterable[CartItem], product_id: ProductId | None,
) -> CartItem | None:
    """Cart line for product_id, if any."""
    if product_id is None:
        return None
    return next((item for item in cart_items if item.id == product_id), None)


def parse_quantity_input(raw: object) -> int | None:
    """Leading integer of a free-form input, parseInt-style. None if not numeric."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None
    if isinstance(raw, str):
        match = _LEADING_INT.match(raw)
        return int(match.group(1)) if match else None
    return None


def max_input_quantity(stock: int, limit: int = MAX_INPUT_QUANTITY) -> int:
    """Upper bound of the quantity input."""
    return min(stock, limit)


def clamp_input(
    raw: object, stock: int, current: int = 1, limit: int = MAX_INPUT_QUANTITY,
) -> int:
    """Accept raw into [1, min(stock, limit)]; otherwise keep current."""
    value = parse_quantity_input(raw)
    if value is None or not 1 <= value <= max_input_quantity(stock, limit):
        return current
    return value


def stock_flags(
    product: Product,
    low_stock_threshold: int = LOW_STOCK_THRESHOLD,
    limit: int = MAX_INPUT_QUANTITY,
) -> StockFlags:
    """Out-of-stock / low-stock flags for display."""
    return StockFlags(
        is_out_of_stock=product.stock == 0,
        is_low_stock=0 < product.stock <= low_stock_threshold,
        max_quantity=max_input_quantity(product.stock, limit),
    )
