from datetime import datetime
from typing import Callable

from libs.result import Error, Result, Return
from src.app.services.reset_token_manager import ResetTokenManager
from src.app.services.unit_of_work import UnitOfWork
from src.domain.clock import utcnow
from .dtos import VerifyResetTokenResponse


class VerifyResetTokenUseCase:
    """Reports whether a reset token is live without consuming it"""

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(self, token: str) -> Result[VerifyResetTokenResponse]:
        async with self.uow:
            manager = ResetTokenManager(self.uow.users, clock=self.clock)
            user = await manager.verify(token)

            if user is None:
                return Return.err(
                    Error("INVALID_TOKEN", "Invalid or expired password reset token")
                )

            return Return.ok(VerifyResetTokenResponse(valid=True))
