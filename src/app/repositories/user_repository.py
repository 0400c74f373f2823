from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from src.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address (normalized before lookup)"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user, raises DuplicateEmailError if the email is taken"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass

    @abstractmethod
    async def get_by_reset_token_hash(
        self, token_hash: str, now: datetime
    ) -> Optional[User]:
        """Get user whose live reset token hashes to token_hash"""
        pass
