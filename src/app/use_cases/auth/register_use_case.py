import logging

from libs.result import Error, Result, Return

from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User, normalize_email, normalize_name
from src.domain.exceptions import DuplicateEmailError
from .dtos import RegisterCommand, RegisterResponse

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (validated business intent)
    - Output: Result[RegisterResponse] (structured response)

    Business Logic:
    1. Normalize name (trimmed) and email (trimmed, lower-cased)
    2. Reject empty fields
    3. Check if email already exists
    4. Hash password with the configured hasher
    5. Create User and commit
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(self, command: RegisterCommand) -> Result[RegisterResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with name, email, password

        Returns:
            Result[RegisterResponse] with the new user id
            or Error(EMAIL_ALREADY_EXISTS) if email exists
            or Error(VALIDATION_ERROR) if a field is empty
        """
        name = normalize_name(command.name)
        email = normalize_email(command.email)

        if not name or not email or not command.password:
            return Return.err(
                Error("VALIDATION_ERROR", "Please provide name, email and password")
            )

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(email)
            if existing_user:
                logger.info(f"Registration rejected, email exists: {email}")
                return Return.err(Error("EMAIL_ALREADY_EXISTS", "Email already exists"))

            user = User(
                name=name,
                email=email,
                password_hash=self.hasher.hash(command.password),
            )
            try:
                user = await self.uow.users.create(user)
            except DuplicateEmailError:
                # Lost a race with a concurrent registration
                logger.info(f"Registration rejected, email exists: {email}")
                return Return.err(Error("EMAIL_ALREADY_EXISTS", "Email already exists"))

            await self.uow.commit()

            logger.info(f"User registered: {user.id}")
            return Return.ok(
                RegisterResponse(
                    user_id=str(user.id),
                    message="Account created successfully",
                )
            )
