"""
Reset Password Use Case

Completes a password reset with a token received by email.
"""

import logging
from datetime import datetime
from typing import Callable

from libs.result import Error, Result, Return
from src.app.services.password_hasher import PasswordHasher
from src.app.services.reset_token_manager import ResetTokenManager
from src.app.services.unit_of_work import UnitOfWork
from src.domain.clock import utcnow
from .dtos import ResetPasswordResponse

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class ResetPasswordUseCase:
    """
    Use case for completing a password reset.

    Business Rules:
    - Password is validated before the token is looked up
    - Token must match a stored hash and be unexpired
    - Token is single-use: cleared together with the password update
    """

    def __init__(
        self,
        uow: UnitOfWork,
        hasher: PasswordHasher,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.uow = uow
        self.hasher = hasher
        self.clock = clock

    def _validate_password(self, password: str) -> Result[None]:
        if len(password) < MIN_PASSWORD_LENGTH:
            return Return.err(
                Error(
                    "INVALID_PASSWORD",
                    f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
                )
            )
        return Return.ok(None)

    async def execute(self, token: str, new_password: str) -> Result[ResetPasswordResponse]:
        """
        Execute reset password use case.

        Args:
            token: Password reset token (plain text from email)
            new_password: New password to set

        Returns:
            Result with confirmation status, or Error

        Errors:
            - VALIDATION_ERROR: Token or password missing
            - INVALID_PASSWORD: Password shorter than the minimum
            - INVALID_TOKEN: Token unknown, expired or already used
        """
        if not token or not new_password:
            return Return.err(
                Error("VALIDATION_ERROR", "Please provide token and new password")
            )

        password_validation = self._validate_password(new_password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        async with self.uow:
            manager = ResetTokenManager(self.uow.users, clock=self.clock)
            user = await manager.consume(token, self.hasher.hash(new_password))

            if user is None:
                return Return.err(
                    Error("INVALID_TOKEN", "Invalid or expired password reset token")
                )

            await self.uow.commit()

            logger.info(f"Password reset completed: {user.id}")
            return Return.ok(
                ResetPasswordResponse(message="Password has been reset successfully")
            )
