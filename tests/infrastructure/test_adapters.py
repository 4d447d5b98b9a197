"""Adapters — tests for the static identity provider and logging notifier.

Tests cover:
    - StaticIdentityProvider validates its record once and ignores the username
    - LoggingNotifier logs verbatim messages at the matching level
"""

import logging

import pytest
from pydantic import ValidationError

from storefront.infrastructure.identity import StaticIdentityProvider
from storefront.infrastructure.notifications import LoggingNotifier


def test_static_provider_returns_same_identity(identity_record, identity):
    provider = StaticIdentityProvider(identity_record)
    assert provider.identify("alex") == identity
    assert provider.identify("someone-else") == identity


def test_static_provider_rejects_bad_record(identity_record):
    identity_record["email"] = ""
    with pytest.raises(ValidationError):
        StaticIdentityProvider(identity_record)


def test_logging_notifier_levels(caplog):
    notifier = LoggingNotifier()
    with caplog.at_level(logging.INFO, logger="storefront.notify"):
        notifier.success("2 Mug(s) added to cart!")
        notifier.warning("Please login to access other pages.")
        notifier.error("Invalid product")
    assert [(r.levelname, r.getMessage()) for r in caplog.records] == [
        ("INFO", "2 Mug(s) added to cart!"),
        ("WARNING", "Please login to access other pages."),
        ("ERROR", "Invalid product"),
    ]
