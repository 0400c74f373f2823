"""
PendingReset Value Object

An outstanding password reset request attached to a user.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PendingReset:
    """
    Hash and expiry of the single live reset token of a user.

    Business Rules:
    - token_hash is the SHA-256 hex digest of the token, never the token itself
    - Expiry is not a stored state: a reset is live while expires_at > now
    """

    token_hash: str
    expires_at: datetime

    def is_live(self, now: datetime) -> bool:
        return self.expires_at > now
