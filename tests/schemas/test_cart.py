"""Cart Schemas — product records and the cart-service payload.

Tests cover:
    - ProductRecord tolerates a missing id (reconciler reports it)
    - Negative price / stock rejected
    - CartPayload requires quantity >= 1
"""

import pytest
from pydantic import ValidationError

from storefront.core.reconcile_cart import validate_add_to_cart
from storefront.schemas.cart import CartPayload, ProductRecord


def test_product_record_converts():
    product = ProductRecord(id="p1", name="Mug", price=4.5, stock=3).to_product()
    assert product.id == "p1"
    assert product.stock == 3
    assert product.image == ""


def test_product_without_id_reaches_reconciler_as_invalid():
    product = ProductRecord(name="Mug", price=4.5, stock=3).to_product()
    assert product.id is None
    assert validate_add_to_cart(product, 1).error.code == "INVALID_PRODUCT"


@pytest.mark.parametrize("field, value", [("price", -1), ("stock", -1)])
def test_negative_values_rejected(field, value):
    data = {"id": "p1", "name": "Mug", "price": 1.0, "stock": 1, field: value}
    with pytest.raises(ValidationError):
        ProductRecord.model_validate(data)


def test_payload_requires_positive_quantity():
    with pytest.raises(ValidationError):
        CartPayload(id="p1", name="Mug", price=1.0, quantity=0)


def test_payload_round_trip_from_entry(product_factory):
    entry = validate_add_to_cart(product_factory(), 2).entry
    item = CartPayload.model_validate(entry.to_payload()).to_cart_item()
    assert item.id == "p1"
    assert item.quantity == 2
    assert item.subtotal == pytest.approx(39.98)
