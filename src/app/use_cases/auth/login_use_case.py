"""
Login Use Case

Handles user authentication and returns a signed session token.
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_issuer import TokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from .dtos import LoginResponse

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for user login and session token issuance.

    Business Rules:
    - Unknown email and wrong password yield the same INVALID_CREDENTIALS error
    - A password hash is computed even when the user is not found
    - Token embeds the user id and expires after 7 days
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher, issuer: TokenIssuer):
        self.uow = uow
        self.hasher = hasher
        self.issuer = issuer

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with LoginResponse containing the token, or Error
        """
        if not email or not password:
            return Return.err(
                Error("VALIDATION_ERROR", "Please provide email and password")
            )

        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                # Hash dummy password to maintain constant time
                self.hasher.hash("dummy_password")
                logger.info(f"Login failed, unknown email: {email}")
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            if not self.hasher.verify(password, user.password_hash):
                logger.info(f"Login failed, wrong password: {email}")
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            token = self.issuer.issue(user.id)

            logger.info(f"Login successful: {user.id}")
            return Return.ok(
                LoginResponse(
                    token=token,
                    user_id=str(user.id),
                    message="Login successful",
                )
            )
