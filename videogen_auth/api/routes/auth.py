from datetime import timedelta
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field, field_validator

from videogen_auth.api.error import http_error
from videogen_auth.api.utils.response import ApiResponse
from videogen_auth.api.utils.validation import (
    CODE_PATTERN,
    NAME_MAX_LENGTH,
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
    check_name,
    check_password_strength,
)
from videogen_auth.app.services.code_generator import ICodeGenerator
from videogen_auth.app.services.notification_gateway import INotificationGateway
from videogen_auth.app.services.password_hasher import IPasswordHasher
from videogen_auth.app.services.token_service import ITokenService
from videogen_auth.app.services.unit_of_work import UnitOfWork
from videogen_auth.app.use_cases.auth import (
    AuthResponse,
    ForgotPasswordUseCase,
    LoginUseCase,
    RefreshTokenResponse,
    RefreshTokenUseCase,
    RegisterCommand,
    RegisterResponse,
    RegisterUseCase,
    ResendVerificationUseCase,
    ResetPasswordUseCase,
    VerifyEmailUseCase,
    VerifyResetCodeUseCase,
)
from videogen_auth.depends import (
    get_code_generator,
    get_code_ttl,
    get_notification_gateway,
    get_password_hasher,
    get_token_service,
    get_unit_of_work,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="Display name")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
        description="Password with at least one letter and one number",
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return check_name(value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return check_password_strength(value)


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=ApiResponse[RegisterResponse],
)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: IPasswordHasher = Depends(get_password_hasher),
    code_generator: ICodeGenerator = Depends(get_code_generator),
    notifier: INotificationGateway = Depends(get_notification_gateway),
    code_ttl: timedelta = Depends(get_code_ttl),
):
    """
    Register - step 1 of sign-up

    Creates (or refreshes, if still unverified) the account and emails a
    6-digit verification code.

    Raises:
        - 409 Conflict: Email belongs to a verified account
        - 400 Bad Request: Invalid input
        - 500 Internal Server Error: Code email could not be sent
    """
    command = RegisterCommand(name=request.name, email=request.email, password=request.password)

    use_case = RegisterUseCase(uow, hasher, code_generator, notifier, code_ttl)
    result = await use_case.execute(command)

    if result.is_err():
        raise http_error(result.error)

    return ApiResponse(message=result.value.message, data=result.value)


class VerifyEmailRequest(BaseModel):
    user_id: UUID = Field(..., description="temp_user_id returned by register")
    code: str = Field(..., pattern=CODE_PATTERN, description="6-digit verification code")


@router.post(
    "/verify-email",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[AuthResponse],
)
async def verify_email(
    request: VerifyEmailRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: ITokenService = Depends(get_token_service),
    notifier: INotificationGateway = Depends(get_notification_gateway),
):
    """
    Verify Email - step 2 of sign-up

    Marks the email verified and logs the user in.

    Raises:
        - 404 Not Found: Unknown user
        - 400 Bad Request: Already verified
        - 401 Unauthorized: Missing, expired or wrong code
    """
    use_case = VerifyEmailUseCase(uow, tokens, notifier)
    result = await use_case.execute(request.user_id, request.code)

    if result.is_err():
        raise http_error(result.error)

    return ApiResponse(message="Email verified successfully", data=result.value)


class ResendVerificationRequest(BaseModel):
    user_id: UUID = Field(..., description="temp_user_id returned by register")


@router.post("/resend-verification", status_code=status.HTTP_200_OK, response_model=ApiResponse)
async def resend_verification(
    request: ResendVerificationRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    code_generator: ICodeGenerator = Depends(get_code_generator),
    notifier: INotificationGateway = Depends(get_notification_gateway),
    code_ttl: timedelta = Depends(get_code_ttl),
):
    """
    Resend Verification Code

    Replaces the previous code with a new one valid for 10 minutes.

    Raises:
        - 404 Not Found: Unknown user
        - 400 Bad Request: Already verified
        - 500 Internal Server Error: Code email could not be sent
    """
    use_case = ResendVerificationUseCase(uow, code_generator, notifier, code_ttl)
    result = await use_case.execute(request.user_id)

    if result.is_err():
        raise http_error(result.error)

    return ApiResponse(message=result.value.message)


class LoginRequest(BaseModel):
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=ApiResponse[AuthResponse])
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: IPasswordHasher = Depends(get_password_hasher),
    tokens: ITokenService = Depends(get_token_service),
):
    """
    User Login

    Raises:
        - 401 Unauthorized: Invalid credentials or email not verified
    """
    use_case = LoginUseCase(uow, hasher, tokens)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        raise http_error(result.error)

    return ApiResponse(message="Login successful", data=result.value)


class RefreshRequest(BaseModel):
    refresh_token: str = Field(..., min_length=1, description="Refresh token")


@router.post(
    "/refresh",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[RefreshTokenResponse],
)
async def refresh(
    request: RefreshRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    tokens: ITokenService = Depends(get_token_service),
):
    """
    Refresh Tokens

    Issues a new access/refresh pair.

    Raises:
        - 401 Unauthorized: Invalid or expired refresh token, or user gone
    """
    use_case = RefreshTokenUseCase(uow, tokens)
    result = await use_case.execute(request.refresh_token)

    if result.is_err():
        raise http_error(result.error)

    return ApiResponse(message="Token refreshed successfully", data=result.value)


class ForgotPasswordRequest(BaseModel):
    email: EmailStr = Field(..., description="User email address")


@router.post("/forgot-password", status_code=status.HTTP_200_OK, response_model=ApiResponse)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    code_generator: ICodeGenerator = Depends(get_code_generator),
    notifier: INotificationGateway = Depends(get_notification_gateway),
    code_ttl: timedelta = Depends(get_code_ttl),
):
    """
    Forgot Password

    Security:
        - Same response whether or not the email exists (no enumeration)

    Returns:
        - 200 OK: Always, unless the code email for an existing account fails
        - 500 Internal Server Error: Code email could not be sent
    """
    use_case = ForgotPasswordUseCase(uow, code_generator, notifier, code_ttl)
    result = await use_case.execute(request.email)

    if result.is_err():
        raise http_error(result.error)

    return ApiResponse(message=result.value.message)


class VerifyResetCodeRequest(BaseModel):
    email: EmailStr = Field(..., description="User email address")
    code: str = Field(..., pattern=CODE_PATTERN, description="6-digit reset code")


@router.post("/verify-reset-code", status_code=status.HTTP_200_OK, response_model=ApiResponse)
async def verify_reset_code(
    request: VerifyResetCodeRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Verify Reset Code (does not consume it)

    Raises:
        - 401 Unauthorized: Invalid or expired reset code
    """
    use_case = VerifyResetCodeUseCase(uow)
    result = await use_case.execute(request.email, request.code)

    if result.is_err():
        raise http_error(result.error)

    return ApiResponse(message=result.value.message)


class ResetPasswordRequest(BaseModel):
    email: EmailStr = Field(..., description="User email address")
    code: str = Field(..., pattern=CODE_PATTERN, description="6-digit reset code")
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
        description="New password",
    )

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return check_password_strength(value)


@router.post(
    "/reset-password",
    status_code=status.HTTP_200_OK,
    response_model=ApiResponse[AuthResponse],
)
async def reset_password(
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: IPasswordHasher = Depends(get_password_hasher),
    tokens: ITokenService = Depends(get_token_service),
    notifier: INotificationGateway = Depends(get_notification_gateway),
):
    """
    Reset Password

    Consumes the reset code, sets the new password and logs the user in.

    Raises:
        - 401 Unauthorized: Invalid or expired reset code
    """
    use_case = ResetPasswordUseCase(uow, hasher, tokens, notifier)
    result = await use_case.execute(request.email, request.code, request.password)

    if result.is_err():
        raise http_error(result.error)

    return ApiResponse(message="Password reset successfully", data=result.value)
