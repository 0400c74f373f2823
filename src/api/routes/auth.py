from datetime import timedelta
from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Depends, status
from pydantic import BaseModel, BeforeValidator, EmailStr, Field

from src.api.error import ClientError, ServerError
from src.app.services.notifier import Notifier
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_issuer import TokenIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    RegisterCommand,
    RegisterUseCase,
    LoginUseCase,
    ForgotPasswordUseCase,
    ResetPasswordUseCase,
    VerifyResetTokenUseCase,
    RegisterResponse,
    LoginResponse,
    ForgotPasswordResponse,
    ResetPasswordResponse,
    VerifyResetTokenResponse,
)
from src.depends import (
    get_notifier,
    get_password_hasher,
    get_reset_token_ttl,
    get_reset_url_base,
    get_token_issuer,
    get_unit_of_work,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


def _strip(value):
    return value.strip() if isinstance(value, str) else value


TrimmedEmail = Annotated[EmailStr, BeforeValidator(_strip)]
TrimmedStr = Annotated[str, BeforeValidator(_strip)]


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    API layer responsibility: HTTP validation and serialization.
    """

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: TrimmedEmail = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=RegisterResponse
)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    User Registration

    Creates a new user account with a bcrypt-hashed password.

    Raises:
        - 400 Bad Request: Missing fields or email already exists
        - 500 Internal Server Error: Server error
    """
    command = RegisterCommand(
        name=request.name, email=request.email, password=request.password
    )

    use_case = RegisterUseCase(uow, hasher)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code in ("EMAIL_ALREADY_EXISTS", "VALIDATION_ERROR"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: TrimmedStr = Field(..., min_length=1, description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    """
    User Login

    Authenticates user and returns a signed session token (7-day expiry).

    Raises:
        - 400 Bad Request: Missing fields
        - 401 Unauthorized: Invalid credentials (same for unknown email and wrong password)
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow, hasher, issuer)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


class ForgotPasswordRequest(BaseModel):
    """Forgot password HTTP request payload"""

    email: TrimmedEmail = Field(..., description="User email address")


@router.post(
    "/forgot-password", status_code=status.HTTP_200_OK, response_model=ForgotPasswordResponse
)
async def forgot_password(
    request: ForgotPasswordRequest,
    background_tasks: BackgroundTasks,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: Notifier = Depends(get_notifier),
    reset_url_base: str = Depends(get_reset_url_base),
    ttl: timedelta = Depends(get_reset_token_ttl),
):
    """
    Forgot Password

    Issues a reset token (1-hour expiry). The reset email is sent as a
    background task after the response, so registered and unknown emails
    answer in the same time.

    Security:
        - No email enumeration (same response for valid/invalid emails)
        - Email delivery failures are logged, not reported

    Returns:
        - 200 OK: Always returns the generic message
        - 400 Bad Request: Missing email
        - 500 Internal Server Error: Server error
    """
    use_case = ForgotPasswordUseCase(
        uow, notifier, reset_url_base, ttl=ttl, schedule=background_tasks.add_task
    )
    result = await use_case.execute(request.email)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


class ResetPasswordRequest(BaseModel):
    """Reset password HTTP request payload"""

    token: str = Field(..., min_length=1, description="Password reset token from email")
    password: str = Field(..., min_length=1, description="New password (min 6 chars)")


@router.post(
    "/reset-password", status_code=status.HTTP_200_OK, response_model=ResetPasswordResponse
)
async def reset_password(
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Reset Password

    Consumes a reset token and replaces the user's password.

    Raises:
        - 400 Bad Request: Missing fields, short password, invalid or expired token
        - 500 Internal Server Error: Server error
    """
    use_case = ResetPasswordUseCase(uow, hasher)
    result = await use_case.execute(request.token, request.password)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_TOKEN", "INVALID_PASSWORD", "VALIDATION_ERROR"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


class VerifyResetTokenRequest(BaseModel):
    """Verify reset token HTTP request payload"""

    token: str = Field(..., min_length=1, description="Password reset token from email")


@router.post(
    "/verify-reset-token",
    status_code=status.HTTP_200_OK,
    response_model=VerifyResetTokenResponse,
)
async def verify_reset_token(
    request: VerifyResetTokenRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Verify Reset Token

    Reports whether a reset token is live without consuming it.

    Raises:
        - 400 Bad Request: Missing token, or invalid/expired token (body has valid=false)
        - 500 Internal Server Error: Server error
    """
    use_case = VerifyResetTokenUseCase(uow)
    result = await use_case.execute(request.token)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_TOKEN":
            raise ClientError(
                error, status_code=status.HTTP_400_BAD_REQUEST, extra={"valid": False}
            )
        raise ServerError(error)

    return result.value
