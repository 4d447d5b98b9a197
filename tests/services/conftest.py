"""Service test fixtures — controllers wired to protocol fakes.

Invariants:
    - Every test gets a fresh controller and an empty cart
    - cart_service is an AsyncMock-backed fake unless the test asks for the
      in-memory implementation
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from storefront.infrastructure.memory_cart import InMemoryCartService
from storefront.services.add_to_cart import AddToCartController
from storefront.services.session_controller import SessionController


@pytest.fixture
def session_controller(identity_provider, notifier) -> SessionController:
    return SessionController(identity_provider, notifier)


@pytest.fixture
def mock_cart_service():
    """Cart service whose contents and add_to_cart are fully scripted."""
    service = MagicMock()
    service.cart_items = MagicMock(return_value=[])
    service.add_to_cart = AsyncMock(return_value=None)
    return service


@pytest.fixture
def memory_cart() -> InMemoryCartService:
    return InMemoryCartService()


@pytest.fixture
def controller_factory(notifier):
    def _make(product, cart_service) -> AddToCartController:
        return AddToCartController(product, cart_service, notifier)
    return _make
