"""Session State — tests for the immutable session record.

Tests cover:
    - Fresh session is logged out on the login page
    - Logged-out sessions cannot sit on a non-login page
    - Session is frozen
"""

import dataclasses

import pytest

from storefront.core.domain_types import Page, Theme
from storefront.core.session_state import Session, UserSettings


def test_new_session_is_logged_out_on_login_page():
    session = Session()
    assert session.user is None
    assert session.active_page == Page.LOGIN
    assert not session.is_authenticated
    assert session.user_id is None


def test_logged_out_session_on_profile_is_rejected():
    with pytest.raises(ValueError):
        Session(user=None, active_page=Page.PROFILE)


def test_authenticated_session_may_hold_any_page(identity):
    for page in Page:
        session = Session(user=identity, active_page=page)
        assert session.is_authenticated
        assert session.user_id == "u123"


def test_session_is_frozen(identity):
    session = Session(user=identity, active_page=Page.PROFILE)
    with pytest.raises(dataclasses.FrozenInstanceError):
        session.active_page = Page.SETTINGS


def test_user_settings_defaults():
    settings = UserSettings()
    assert settings.notifications is True
    assert settings.theme == Theme.SYSTEM


def test_raw_page_name_is_coerced(identity):
    session = Session(user=identity, active_page="settings")
    assert session.active_page is Page.SETTINGS


def test_logged_out_session_on_raw_page_name_is_rejected():
    with pytest.raises(ValueError):
        Session(user=None, active_page="profile")
