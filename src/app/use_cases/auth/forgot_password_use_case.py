"""
Forgot Password Use Case

Issues a password reset token and hands the reset link to the notifier.
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Callable, Optional

from libs.result import Error, Result, Return
from src.app.services.notifier import Notifier, build_reset_url
from src.app.services.reset_token_manager import RESET_TOKEN_TTL, ResetTokenManager
from src.app.services.unit_of_work import UnitOfWork
from src.domain.clock import utcnow
from .dtos import ForgotPasswordResponse

logger = logging.getLogger(__name__)

GENERIC_MESSAGE = "If an account with that email exists, a password reset link has been sent"

# Receives a coroutine function and its arguments, e.g. BackgroundTasks.add_task
Scheduler = Callable[..., Any]


async def deliver_password_reset(
    notifier: Notifier, email: str, name: str, reset_url: str
) -> None:
    """Send the reset link; failures are logged, never raised"""
    try:
        await notifier.send_password_reset(email, name, reset_url)
    except Exception:
        logger.exception(f"Failed to send password reset email to {email}")


class ForgotPasswordUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - No email enumeration (same response for registered and unknown emails)
    - A new token replaces any token issued before
    - Token is committed before the email is dispatched
    - With a scheduler, dispatch happens after the response, so response
      time does not depend on whether the account exists
    - Email delivery failures are logged, never reported to the caller
    """

    def __init__(
        self,
        uow: UnitOfWork,
        notifier: Notifier,
        reset_url_base: str,
        ttl: timedelta = RESET_TOKEN_TTL,
        clock: Callable[[], datetime] = utcnow,
        schedule: Optional[Scheduler] = None,
    ):
        self.uow = uow
        self.notifier = notifier
        self.reset_url_base = reset_url_base
        self.ttl = ttl
        self.clock = clock
        self.schedule = schedule

    async def execute(self, email: str) -> Result[ForgotPasswordResponse]:
        """
        Execute forgot password use case.

        Args:
            email: User's email address

        Returns:
            Result with the generic response, or Error(VALIDATION_ERROR)
            when no email was given
        """
        if not email or not email.strip():
            return Return.err(Error("VALIDATION_ERROR", "Please provide an email"))

        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                logger.info(f"Password reset requested for unknown email: {email}")
                return Return.ok(ForgotPasswordResponse(message=GENERIC_MESSAGE))

            manager = ResetTokenManager(self.uow.users, ttl=self.ttl, clock=self.clock)
            token = await manager.issue(user)
            await self.uow.commit()
            logger.info(f"Password reset token issued: {user.id}")

            args = (
                self.notifier,
                user.email,
                user.name,
                build_reset_url(self.reset_url_base, token),
            )

        if self.schedule is None:
            await deliver_password_reset(*args)
        else:
            self.schedule(deliver_password_reset, *args)

        return Return.ok(ForgotPasswordResponse(message=GENERIC_MESSAGE))
