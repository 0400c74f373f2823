"""
Reset Token Manager

Lifecycle of single-use password reset tokens.
"""

import hashlib
import secrets
from datetime import datetime, timedelta
from typing import Callable, Optional

from src.app.repositories.user_repository import IUserRepository
from src.domain.clock import utcnow
from src.domain.entities import PendingReset, User

RESET_TOKEN_TTL = timedelta(hours=1)
RESET_TOKEN_BYTES = 32


def hash_reset_token(token: str) -> str:
    """SHA-256 hex digest used to store and look up reset tokens"""
    return hashlib.sha256(token.encode()).hexdigest()


class ResetTokenManager:
    """
    Issues, verifies and consumes password reset tokens.

    Business Rules:
    - Token is 32 random bytes (256 bits), URL-safe encoded
    - Only the SHA-256 hash is stored, the plaintext is returned once
    - Token expires after ttl (1 hour by default)
    - At most one live token per user: issuing overwrites the previous one
    - Consuming replaces the password and clears the token in one update

    The manager never commits; the caller owns the transaction.
    """

    def __init__(
        self,
        users: IUserRepository,
        ttl: timedelta = RESET_TOKEN_TTL,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.users = users
        self.ttl = ttl
        self.clock = clock

    async def issue(self, user: User) -> str:
        token = secrets.token_urlsafe(RESET_TOKEN_BYTES)
        user.start_reset(
            PendingReset(
                token_hash=hash_reset_token(token),
                expires_at=self.clock() + self.ttl,
            )
        )
        await self.users.update(user)
        return token

    async def verify(self, token: str) -> Optional[User]:
        if not token:
            return None
        return await self.users.get_by_reset_token_hash(
            hash_reset_token(token), self.clock()
        )

    async def consume(self, token: str, new_password_hash: str) -> Optional[User]:
        user = await self.verify(token)
        if user is None:
            return None

        user.password_hash = new_password_hash
        user.clear_reset()
        return await self.users.update(user)
