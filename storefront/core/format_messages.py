"""Message Formatting — pure functions for user-facing notification and display text.

Invariants:
    - All functions are pure (no IO, no async)
    - Notification strings are part of the observable contract: reproduced verbatim,
      existing UI tests match on them
    - Prices render with exactly two decimals

Design Decisions:
    - Error messages live on the error classes (core/errors.py); only success and
      display text is formatted here
"""

from storefront.core.cart_types import CartEntry, Product
from storefront.core.domain_types import LOW_STOCK_THRESHOLD
from storefront.core.quantity_form import QuantityForm


def format_added_to_cart(entry: CartEntry) -> str:
    """Success notification after the cart service accepted the entry."""
    return f"{entry.quantity} {entry.name}(s) added to cart!"


def format_stock_label(product: Product) -> str:
    if product.stock > 0:
        return f"{product.stock} in stock"
    return "Out of stock"


def format_low_stock_warning(
    product: Product, threshold: int = LOW_STOCK_THRESHOLD,
) -> str | None:
    """Warning shown only while 0 < stock <= threshold."""
    if 0 < product.stock <= threshold:
        return f"Only {product.stock} left in stock!"
    return None


def format_submit_label(product: Product, form: QuantityForm) -> str:
    """Add-to-cart button text for the current form state."""
    if form.in_flight:
        return "Adding..."
    if product.stock == 0:
        return "Out of Stock"
    total = product.price * form.quantity
    return f"Add {form.quantity} to Cart - ${total:.2f}"
