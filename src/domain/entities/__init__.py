"""
Auth Service Domain Entities
"""

from .pending_reset import PendingReset
from .user import User, normalize_email, normalize_name

__all__ = [
    "PendingReset",
    "User",
    "normalize_email",
    "normalize_name",
]
