"""Composition Root — end-to-end flow through create_storefront.

Tests cover:
    - Default adapters wired from settings
    - Login → add to cart → logout with a recording notifier
"""

import pytest

from storefront.config import Settings
from storefront.core.domain_types import Page
from storefront.infrastructure.identity import StaticIdentityProvider
from storefront.infrastructure.memory_cart import InMemoryCartService
from storefront.main import create_storefront


@pytest.mark.asyncio
async def test_full_session_flow(identity_record, notifier, product_factory):
    store = create_storefront(
        StaticIdentityProvider(identity_record),
        settings=Settings(_env_file=None, low_stock_threshold=3),
        notifier=notifier,
        configure_logging=False,
    )
    assert isinstance(store.cart_service, InMemoryCartService)

    assert store.session.navigate(Page.PROFILE) is not None
    store.session.login("alex", "secret")
    assert store.session.view == Page.PROFILE

    widget = store.add_to_cart(product_factory(stock=4))
    assert not widget.view().is_low_stock
    widget.change_quantity(2)
    assert (await widget.submit()).ok

    store.session.logout()
    assert store.session.view == Page.LOGIN
    assert notifier.messages == [
        "Please login to access other pages.",
        "2 Mug(s) added to cart!",
    ]


def test_settings_limits_reach_controller(identity_record, notifier, product_factory):
    store = create_storefront(
        StaticIdentityProvider(identity_record),
        settings=Settings(_env_file=None, max_input_quantity=3),
        notifier=notifier,
        configure_logging=False,
    )
    widget = store.add_to_cart(product_factory(stock=10))
    assert widget.change_quantity(4) == 1
    assert widget.view().max_quantity == 3
