"""Identity Schemas — validation of identity records supplied by the identity provider.

Invariants:
    - id, name, email non-empty after stripping
    - settings.theme is one of light / dark / system

Design Decisions:
    - field_validator for side-effect-free transforms (strip) — keeps models pure
    - Email checked by pattern, not email-validator: the provider is trusted,
      this only guards against malformed fixtures
"""

from pydantic import BaseModel, Field, field_validator

from storefront.core.domain_types import Theme, UserId
from storefront.core.session_state import Identity, UserSettings


class UserSettingsRecord(BaseModel):
    """Preferences block of an identity record."""
    notifications: bool = True
    theme: Theme = Theme.SYSTEM

    def to_settings(self) -> UserSettings:
        return UserSettings(notifications=self.notifications, theme=self.theme)


class IdentityRecord(BaseModel):
    """Identity record as delivered by an identity provider."""
    id: str = Field(min_length=1)
    name: str = Field(min_length=1, max_length=200)
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    bio: str = Field("", max_length=2000)
    settings: UserSettingsRecord = Field(default_factory=UserSettingsRecord)

    @field_validator("id", "name", "email")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty or whitespace")
        return v

    def to_identity(self) -> Identity:
        return Identity(
            id=UserId(self.id),
            name=self.name,
            email=self.email,
            bio=self.bio,
            settings=self.settings.to_settings(),
        )
