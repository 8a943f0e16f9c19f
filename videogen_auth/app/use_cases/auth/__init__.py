"""
Authentication Use Cases

Registration, verification, login, token refresh and password reset.
"""

from .register_use_case import RegisterUseCase
from .verify_email_use_case import VerifyEmailUseCase
from .resend_verification_use_case import ResendVerificationUseCase
from .login_use_case import LoginUseCase
from .refresh_token_use_case import RefreshTokenUseCase
from .forgot_password_use_case import FORGOT_PASSWORD_MESSAGE, ForgotPasswordUseCase
from .verify_reset_code_use_case import VerifyResetCodeUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .common import DEFAULT_CODE_TTL
from .dtos import (
    AuthResponse,
    MessageResponse,
    RefreshTokenResponse,
    RegisterCommand,
    RegisterResponse,
    UserView,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "VerifyEmailUseCase",
    "ResendVerificationUseCase",
    "LoginUseCase",
    "RefreshTokenUseCase",
    "ForgotPasswordUseCase",
    "VerifyResetCodeUseCase",
    "ResetPasswordUseCase",
    # Constants
    "DEFAULT_CODE_TTL",
    "FORGOT_PASSWORD_MESSAGE",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "RegisterResponse",
    "AuthResponse",
    "RefreshTokenResponse",
    "MessageResponse",
    # DTOs - Nested Models
    "UserView",
]
