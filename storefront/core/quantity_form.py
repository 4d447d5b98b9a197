"""Quantity Form — caller-owned lifecycle of one add-to-cart request.

Invariants:
    - status moves IDLE/SUCCEEDED/FAILED → IN_FLIGHT → SUCCEEDED | FAILED
    - While IN_FLIGHT the quantity input is frozen and no new submission may start
    - Success resets quantity to 1; failure keeps the validated quantity for retry

Design Decisions:
    - Lives beside, not inside, the reconciler: the reconciler stays stateless
      and the busy flag belongs to the caller
"""

from dataclasses import dataclass, replace

from storefront.core.cart_types import Product
from storefront.core.domain_types import MAX_INPUT_QUANTITY, RequestStatus
from storefront.core.reconcile_cart import clamp_input


@dataclass(frozen=True)
class QuantityForm:
    """Selected quantity and the state of the request that would submit it."""

    quantity: int = 1
    status: RequestStatus = RequestStatus.IDLE

    @property
    def in_flight(self) -> bool:
        return self.status == RequestStatus.IN_FLIGHT

    def can_submit(self, product: Product) -> bool:
        return product.stock > 0 and not self.in_flight and self.quantity > 0

    def input_enabled(self, product: Product) -> bool:
        return product.stock > 0 and not self.in_flight


def change_quantity(
    form: QuantityForm, raw: object, stock: int, limit: int = MAX_INPUT_QUANTITY,
) -> QuantityForm:
    """Apply a raw input value; out-of-range input leaves the form unchanged."""
    if form.in_flight:
        return form
    quantity = clamp_input(raw, stock, form.quantity, limit)
    if quantity == form.quantity:
        return form
    return replace(form, quantity=quantity)


def begin_submission(form: QuantityForm) -> QuantityForm:
    return replace(form, status=RequestStatus.IN_FLIGHT)


def complete_submission(form: QuantityForm) -> QuantityForm:
    return replace(form, quantity=1, status=RequestStatus.SUCCEEDED)


def fail_submission(form: QuantityForm) -> QuantityForm:
    return replace(form, status=RequestStatus.FAILED)
