"""Add-to-Cart Controller — input guard, reconciliation, and the one delegated async call.

Invariants:
    - Only one submission per controller may be in flight; a second one is
      rejected with SubmissionInProgressError and never reaches the cart service
    - Validation failures never touch the cart service or the request status
    - Any exception from the cart service becomes SubmissionFailedError; the
      form keeps its quantity so the same validated amount can be retried
    - A cancelled submission ends FAILED, never stuck IN_FLIGHT
    - Every outcome (success or failure) produces exactly one notification

Design Decisions:
    - The controller (caller) owns the busy flag via QuantityForm; the
      reconciler in core stays stateless and synchronous
    - Broad except around the delegated call only: the service contract allows
      opaque failures (ADR: nothing a cart backend raises may crash the UI)
"""

import logging
from dataclasses import dataclass

from storefront.core.boundary_protocols import CartService, Notifier
from storefront.core.cart_types import CartEntry, Product
from storefront.core.domain_types import (
    LOW_STOCK_THRESHOLD, MAX_INPUT_QUANTITY, RequestStatus,
)
from storefront.core.errors import (
    ErrorContext,
    StorefrontError,
    SubmissionFailedError,
    SubmissionInProgressError,
)
from storefront.core.format_messages import (
    format_added_to_cart,
    format_low_stock_warning,
    format_stock_label,
    format_submit_label,
)
from storefront.core.quantity_form import (
    QuantityForm,
    begin_submission,
    change_quantity,
    complete_submission,
    fail_submission,
)
from storefront.core.reconcile_cart import (
    find_cart_item,
    stock_flags,
    validate_add_to_cart,
)
from storefront.services.notify import notify_error

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of one submit: the accepted entry, or the error."""
    entry: CartEntry | None = None
    error: StorefrontError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class AddToCartView:
    """Everything a presentation layer needs to draw the widget."""
    quantity: int
    max_quantity: int
    stock_label: str
    low_stock_warning: str | None
    submit_label: str
    input_enabled: bool
    submit_enabled: bool
    is_out_of_stock: bool
    is_low_stock: bool
    status: RequestStatus


class AddToCartController:
    """Per-product add-to-cart widget state and submission."""

    def __init__(
        self,
        product: Product,
        cart_service: CartService,
        notifier: Notifier,
        max_input_quantity: int = MAX_INPUT_QUANTITY,
        low_stock_threshold: int = LOW_STOCK_THRESHOLD,
    ):
        self.product = product
        self.cart_service = cart_service
        self.notifier = notifier
        self.max_input_quantity = max_input_quantity
        self.low_stock_threshold = low_stock_threshold
        self.form = QuantityForm()

    def change_quantity(self, raw: object) -> int:
        """Apply a raw quantity input. Returns the (possibly unchanged) quantity."""
        self.form = change_quantity(
            self.form, raw, self.product.stock, self.max_input_quantity,
        )
        return self.form.quantity

    async def submit(self) -> SubmissionResult:
        """Validate the selected quantity and delegate it to the cart service."""
        if self.form.in_flight:
            return self._reject(SubmissionInProgressError(self._context()))

        existing = find_cart_item(self.cart_service.cart_items(), self.product.id)
        result = validate_add_to_cart(self.product, self.form.quantity, existing)
        if not result.ok:
            return self._reject(result.error)

        entry = result.entry
        self.form = begin_submission(self.form)
        try:
            await self.cart_service.add_to_cart(entry.to_payload())
        except Exception as e:
            logger.error(
                f"Error adding to cart: {e}",
                exc_info=True,
                extra={
                    "error_code": "SUBMISSION_FAILED",
                    "product_id": entry.id,
                    "quantity": entry.quantity,
                },
            )
            self.form = fail_submission(self.form)
            error = SubmissionFailedError(cause=e, context=self._context())
            notify_error(self.notifier, error)
            return SubmissionResult(error=error)
        else:
            self.form = complete_submission(self.form)
        finally:
            # CancelledError skips both branches
            if self.form.in_flight:
                self.form = fail_submission(self.form)

        logger.info(
            "Added to cart",
            extra={"product_id": entry.id, "quantity": entry.quantity},
        )
        self.notifier.success(format_added_to_cart(entry))
        return SubmissionResult(entry=entry)

    def view(self) -> AddToCartView:
        flags = stock_flags(
            self.product, self.low_stock_threshold, self.max_input_quantity,
        )
        return AddToCartView(
            quantity=self.form.quantity,
            max_quantity=flags.max_quantity,
            stock_label=format_stock_label(self.product),
            low_stock_warning=format_low_stock_warning(
                self.product, self.low_stock_threshold,
            ),
            submit_label=format_submit_label(self.product, self.form),
            input_enabled=self.form.input_enabled(self.product),
            submit_enabled=self.form.can_submit(self.product),
            is_out_of_stock=flags.is_out_of_stock,
            is_low_stock=flags.is_low_stock,
            status=self.form.status,
        )

    def _reject(self, error: StorefrontError) -> SubmissionResult:
        logger.info(
            error.message,
            extra={"error_code": error.code, "product_id": self.product.id},
        )
        notify_error(self.notifier, error)
        return SubmissionResult(error=error)

    def _context(self) -> ErrorContext:
        return ErrorContext(product_id=self.product.id)
