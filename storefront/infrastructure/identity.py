"""Static Identity Provider — resolves every username to one validated identity record.

Invariants:
    - The record is validated once, at construction (IdentityRecord)
    - identify() never fails: credentials are not checked in this layer

Design Decisions:
    - One fixed record for all usernames mirrors a demo login backend; real
      deployments supply their own IdentityProvider
"""

from typing import Any, Mapping

from storefront.core.session_state import Identity
from storefront.schemas.identity import IdentityRecord


class StaticIdentityProvider:
    """IdentityProvider returning the same identity for any username."""

    def __init__(self, record: Mapping[str, Any] | IdentityRecord):
        if not isinstance(record, IdentityRecord):
            record = IdentityRecord.model_validate(record)
        self._identity = record.to_identity()

    def identify(self, username: str) -> Identity:
        return self._identity
