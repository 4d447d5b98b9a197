"""Session State — immutable record of current identity and active view.

Invariants:
    - active_page != LOGIN implies user is present (checked on construction)
    - Session is frozen: transitions build a new value, never mutate
    - A fresh Session is logged out and on the login page

Design Decisions:
    - Frozen dataclass over mutable state: the shell owns the single mutable reference
    - Identity is opaque to the core and trusted fully (no credential checks here)
"""

from dataclasses import dataclass, field

from storefront.core.domain_types import Page, Theme, UserId


@dataclass(frozen=True)
class UserSettings:
    """Per-user application preferences."""
    notifications: bool = True
    theme: Theme = Theme.SYSTEM


@dataclass(frozen=True)
class Identity:
    """Identity record supplied by the identity provider on login."""
    id: UserId
    name: str
    email: str
    bio: str = ""
    settings: UserSettings = field(default_factory=UserSettings)


@dataclass(frozen=True)
class Session:
    """Current user plus the page the user last selected."""

    user: Identity | None = None
    active_page: Page = Page.LOGIN

    def __post_init__(self) -> None:
        object.__setattr__(self, "active_page", Page(self.active_page))
        if self.user is None and self.active_page != Page.LOGIN:
            raise ValueError(
                f"Logged-out session cannot be on page '{self.active_page.value}'",
            )

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def user_id(self) -> str | None:
        return self.user.id if self.user is not None else None
