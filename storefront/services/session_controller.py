"""Session Controller — state container around the pure navigation core.

Invariants:
    - self.session is the only mutable reference to the Session value
    - Listeners are called with the new Session after every state change,
      never after a denial (denials leave state unchanged)
    - Navigation denial is surfaced through the Notifier, never a blocking dialog
    - login asks the identity provider only after check_login_form passes

Design Decisions:
    - Controller is synchronous: login/logout/navigate have no IO beyond the
      trusted identity provider (ADR: single conceptual thread per session)
"""

import logging
from typing import Callable

from storefront.core.boundary_protocols import IdentityProvider, Notifier
from storefront.core.domain_types import Page
from storefront.core.errors import LoginFormError, NavigationDeniedError
from storefront.core.navigation import (
    NavLink,
    check_login_form,
    current_view,
    login,
    logout,
    nav_links,
    navigate,
)
from storefront.core.session_state import Session
from storefront.services.notify import notify_error

logger = logging.getLogger(__name__)

SessionListener = Callable[[Session], None]


class SessionController:
    """Owns the current Session and applies login/logout/navigate to it."""

    def __init__(self, identity_provider: IdentityProvider, notifier: Notifier):
        self.identity_provider = identity_provider
        self.notifier = notifier
        self.session = Session()
        self._listeners: list[SessionListener] = []

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a re-render callback. Returns an unsubscribe function."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def login(self, username: str, password: str) -> LoginFormError | None:
        """Validate the login form, fetch the identity, land on the profile."""
        error = check_login_form(username, password)
        if error:
            notify_error(self.notifier, error)
            return error

        identity = self.identity_provider.identify(username.strip())
        self._commit(login(self.session, identity))
        logger.info(
            f"{username.strip()} logged in successfully.",
            extra={"user_id": identity.id},
        )
        return None

    def logout(self) -> None:
        user_id = self.session.user_id
        self._commit(logout(self.session))
        logger.info("User logged out.", extra={"user_id": user_id})

    def navigate(self, target: Page | str) -> NavigationDeniedError | None:
        """Select a page. Unknown page names raise ValueError."""
        result = navigate(self.session, Page(target))
        if result.denied:
            logger.warning(
                result.error.message,
                extra={"error_code": result.error.code, "page": result.error.target},
            )
            notify_error(self.notifier, result.error)
            return result.error

        if result.session is not self.session:
            self._commit(result.session)
        return None

    @property
    def view(self) -> Page:
        return current_view(self.session)

    @property
    def links(self) -> list[NavLink]:
        return nav_links(self.session)

    def _commit(self, session: Session) -> None:
        self.session = session
        for listener in list(self._listeners):
            listener(session)
