"""Root conftest — shared fixtures and protocol fakes.

Fakes:
    - RecordingNotifier: captures (level, message) pairs in order
    - FakeIdentityProvider: returns a fixed Identity, records requested usernames
"""

import os

import pytest

from storefront.core.cart_types import CartItem, Product
from storefront.core.domain_types import ProductId, Theme, UserId
from storefront.core.session_state import Identity, UserSettings

# Ensure tests never pick up a developer's .env overrides for log output
os.environ.setdefault("STOREFRONT_LOG_FORMAT", "text")


class RecordingNotifier:
    """Notifier fake — keeps every notification for assertions."""

    def __init__(self):
        self.events: list[tuple[str, str]] = []

    def success(self, message: str) -> None:
        self.events.append(("success", message))

    def warning(self, message: str) -> None:
        self.events.append(("warning", message))

    def error(self, message: str) -> None:
        self.events.append(("error", message))

    @property
    def messages(self) -> list[str]:
        return [message for _, message in self.events]


class FakeIdentityProvider:
    """IdentityProvider fake — same identity for everyone."""

    def __init__(self, identity: Identity):
        self.identity = identity
        self.requested: list[str] = []

    def identify(self, username: str) -> Identity:
        self.requested.append(username)
        return self.identity


@pytest.fixture
def identity_record() -> dict:
    return {
        "id": "u123",
        "name": "Alex Doe",
        "email": "alex.doe@example.com",
        "bio": "Loves building innovative testing solutions.",
        "settings": {"notifications": True, "theme": "dark"},
    }


@pytest.fixture
def identity() -> Identity:
    return Identity(
        id=UserId("u123"),
        name="Alex Doe",
        email="alex.doe@example.com",
        bio="Loves building innovative testing solutions.",
        settings=UserSettings(notifications=True, theme=Theme.DARK),
    )


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def identity_provider(identity) -> FakeIdentityProvider:
    return FakeIdentityProvider(identity)


def make_product(stock: int = 10, price: float = 19.99, **overrides) -> Product:
    """Helper: product with sensible defaults."""
    fields = {
        "id": ProductId("p1"),
        "name": "Mug",
        "price": price,
        "stock": stock,
        "image": "mug.png",
    }
    fields.update(overrides)
    return Product(**fields)


def make_cart_item(quantity: int, product_id: str = "p1") -> CartItem:
    """Helper: cart line for the default product."""
    return CartItem(
        id=ProductId(product_id), name="Mug", price=19.99,
        quantity=quantity, image="mug.png",
    )


@pytest.fixture
def product_factory():
    return make_product


@pytest.fixture
def cart_item_factory():
    return make_cart_item
