"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """
    Register command - represents validated registration intent

    Created by API layer after request validation passes.
    Contains only business-relevant data (no HTTP concerns).
    """

    name: str
    email: str
    password: str


# ============================================================================
# Response DTOs
# ============================================================================


class RegisterResponse(BaseModel):
    """Response for register use case"""

    status: str = "success"
    user_id: str
    message: str


class LoginResponse(BaseModel):
    """Response for user login use case"""

    status: str = "success"
    token: str
    user_id: str
    message: str


class ForgotPasswordResponse(BaseModel):
    """Response for forgot password use case"""

    status: str = "success"
    message: str


class ResetPasswordResponse(BaseModel):
    """Response for reset password use case"""

    status: str = "success"
    message: str


class VerifyResetTokenResponse(BaseModel):
    """Response for verify reset token use case"""

    status: str = "success"
    valid: bool
