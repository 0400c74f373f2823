"""
User Entity

Represents a registered account and its outstanding password reset, if any.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .pending_reset import PendingReset
from ..clock import utcnow


def normalize_email(email: str) -> str:
    return email.strip().lower()


def normalize_name(name: str) -> str:
    return name.strip()


class User(SQLModel, table=True):
    """
    User entity - a person who can log in and reset their password.

    Business Rules:
    - Email must be unique across all users (stored trimmed and lower-cased)
    - Password stored as bcrypt hash, never plaintext
    - Reset columns are written together through start_reset()/clear_reset()
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Password reset (SHA-256 hex digest + expiry)
    reset_token_hash: Optional[str] = Field(default=None, index=True, max_length=64)
    reset_token_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime, nullable=True)
    )

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_reset_expires_at", "reset_token_expires_at"),)

    @property
    def pending_reset(self) -> Optional[PendingReset]:
        if self.reset_token_hash is None or self.reset_token_expires_at is None:
            return None
        return PendingReset(
            token_hash=self.reset_token_hash,
            expires_at=self.reset_token_expires_at,
        )

    def start_reset(self, pending: PendingReset) -> None:
        """Attach a reset request, replacing any previous one"""
        self.reset_token_hash = pending.token_hash
        self.reset_token_expires_at = pending.expires_at

    def clear_reset(self) -> None:
        self.reset_token_hash = None
        self.reset_token_expires_at = None
