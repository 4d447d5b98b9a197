"""Storefront — composition root wiring settings, logging, and controllers.

Invariants:
    - Logging is configured exactly here, from Settings
    - Every collaborator is injectable; defaults are the in-process adapters
    - One Storefront per user session (no shared mutable state between them)

Design Decisions:
    - Factory function over module-level singletons: tests build isolated instances
"""

import logging
from dataclasses import dataclass

from storefront.config import Settings, get_settings
from storefront.core.boundary_protocols import CartService, IdentityProvider, Notifier
from storefront.core.cart_types import Product
from storefront.infrastructure.memory_cart import InMemoryCartService
from storefront.infrastructure.notifications import LoggingNotifier
from storefront.infrastructure.observability import setup_logging
from storefront.services.add_to_cart import AddToCartController
from storefront.services.session_controller import SessionController

logger = logging.getLogger(__name__)


@dataclass
class Storefront:
    """Wired controllers for one user session."""
    settings: Settings
    session: SessionController
    cart_service: CartService
    notifier: Notifier

    def add_to_cart(self, product: Product) -> AddToCartController:
        """Controller for one product's add-to-cart widget."""
        return AddToCartController(
            product,
            self.cart_service,
            self.notifier,
            max_input_quantity=self.settings.max_input_quantity,
            low_stock_threshold=self.settings.low_stock_threshold,
        )


def create_storefront(
    identity_provider: IdentityProvider,
    settings: Settings | None = None,
    notifier: Notifier | None = None,
    cart_service: CartService | None = None,
    configure_logging: bool = True,
) -> Storefront:
    """Build a Storefront from settings and collaborators."""
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings.log_level, settings.log_format)

    notifier = notifier or LoggingNotifier()
    cart_service = cart_service or InMemoryCartService(settings.cart_latency_ms)
    logger.info("Storefront session initialized")
    return Storefront(
        settings=settings,
        session=SessionController(identity_provider, notifier),
        cart_service=cart_service,
        notifier=notifier,
    )
