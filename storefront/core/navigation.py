"""Session Navigation — pure transitions of the authentication-gated view state machine.

Invariants:
    - All functions are PURE: take a Session, return a new Session (or a result wrapping one)
    - current_view is LOGIN whenever no user is present
    - login always lands on PROFILE; logout always lands on LOGIN
    - navigate while logged out leaves the session untouched and reports NavigationDeniedError

Design Decisions:
    - Denial is a returned value, not an exception or blocking dialog: the shell
      chooses how to surface it (ADR: caller-chosen notification strategy)
    - current_view is a projection, not active_page: a stale LOGIN active_page keeps
      showing the login view until the next navigate/login
"""

from dataclasses import dataclass, replace

from storefront.core.domain_types import Page
from storefront.core.errors import ErrorContext, LoginFormError, NavigationDeniedError
from storefront.core.session_state import Identity, Session


NAV_LABELS: dict[Page, str] = {
    Page.PROFILE: "Profile",
    Page.SETTINGS: "Settings",
}


@dataclass(frozen=True)
class NavigationResult:
    """Outcome of navigate: the next session and the denial, if any."""
    session: Session
    error: NavigationDeniedError | None = None

    @property
    def denied(self) -> bool:
        return self.error is not None


@dataclass(frozen=True)
class NavLink:
    """One header navigation entry."""
    page: Page
    label: str
    is_active: bool


def login(session: Session, identity: Identity) -> Session:
    """Authenticate and land on the profile page, whatever the prior state."""
    return replace(session, user=identity, active_page=Page.PROFILE)


def logout(session: Session) -> Session:
    """Clear the user and force the login page."""
    return replace(session, user=None, active_page=Page.LOGIN)


def navigate(session: Session, target: Page) -> NavigationResult:
    """Select target page. Denied when logged out; idempotent when logged in."""
    if not session.is_authenticated:
        return NavigationResult(
            session=session,
            error=NavigationDeniedError(
                target.value, ErrorContext(page=target.value),
            ),
        )
    if session.active_page == target:
        return NavigationResult(session=session)
    return NavigationResult(session=replace(session, active_page=target))


def current_view(session: Session) -> Page:
    """Page that must be rendered for this session."""
    if not session.is_authenticated or session.active_page == Page.LOGIN:
        return Page.LOGIN
    return session.active_page


def nav_links(session: Session) -> list[NavLink]:
    """Header links — none while logged out."""
    if not session.is_authenticated:
        return []
    return [
        NavLink(page=page, label=label, is_active=session.active_page == page)
        for page, label in NAV_LABELS.items()
    ]


def check_login_form(username: str, password: str) -> LoginFormError | None:
    """Both credentials must be non-blank before an identity is requested."""
    if not (username or "").strip() or not (password or "").strip():
        return LoginFormError()
    return None
