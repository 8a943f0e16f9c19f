from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field, field_validator

from videogen_auth.api.error import http_error
from videogen_auth.api.utils.response import ApiResponse
from videogen_auth.api.utils.validation import (
    NAME_MAX_LENGTH,
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
    check_name,
    check_password_strength,
)
from videogen_auth.app.services.notification_gateway import INotificationGateway
from videogen_auth.app.services.password_hasher import IPasswordHasher
from videogen_auth.app.services.unit_of_work import UnitOfWork
from videogen_auth.app.use_cases.auth import UserView
from videogen_auth.app.use_cases.users import (
    ChangePasswordUseCase,
    DeleteAccountUseCase,
    GetProfileUseCase,
    UpdateProfileUseCase,
)
from videogen_auth.depends import (
    CurrentUser,
    get_current_user,
    get_notification_gateway,
    get_password_hasher,
    get_unit_of_work,
)

router = APIRouter(prefix="/auth", tags=["User"])


class ProfileResponse(BaseModel):
    user: UserView


@router.get("/me", status_code=status.HTTP_200_OK, response_model=ApiResponse[ProfileResponse])
async def get_me(
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current User Profile

    Raises:
        - 401 Unauthorized: Missing, invalid or expired access token
        - 404 Not Found: Account no longer exists
    """
    use_case = GetProfileUseCase(uow)
    result = await use_case.execute(current_user.id)

    if result.is_err():
        raise http_error(result.error)

    return ApiResponse(
        message="Profile retrieved successfully",
        data=ProfileResponse(user=result.value),
    )


class UpdateProfileRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, description="Display name")

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        return check_name(value)


@router.put("/profile", status_code=status.HTTP_200_OK, response_model=ApiResponse[ProfileResponse])
async def update_profile(
    request: UpdateProfileRequest,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Profile (display name only)

    Raises:
        - 401 Unauthorized: Missing, invalid or expired access token
        - 404 Not Found: Account no longer exists
    """
    use_case = UpdateProfileUseCase(uow)
    result = await use_case.execute(current_user.id, request.name)

    if result.is_err():
        raise http_error(result.error)

    return ApiResponse(
        message="Profile updated successfully",
        data=ProfileResponse(user=result.value),
    )


class ChangePasswordRequest(BaseModel):
    current_password: str = Field(..., min_length=1, description="Current password")
    new_password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
        description="New password",
    )

    @field_validator("new_password")
    @classmethod
    def validate_new_password(cls, value: str) -> str:
        return check_password_strength(value)


@router.put("/change-password", status_code=status.HTTP_200_OK, response_model=ApiResponse)
async def change_password(
    request: ChangePasswordRequest,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: IPasswordHasher = Depends(get_password_hasher),
    notifier: INotificationGateway = Depends(get_notification_gateway),
):
    """
    Change Password

    Raises:
        - 401 Unauthorized: Bad access token or current password incorrect
        - 404 Not Found: Account no longer exists
    """
    use_case = ChangePasswordUseCase(uow, hasher, notifier)
    result = await use_case.execute(
        current_user.id, request.current_password, request.new_password
    )

    if result.is_err():
        raise http_error(result.error)

    return ApiResponse(message=result.value.message)


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=ApiResponse)
async def logout(current_user: CurrentUser = Depends(get_current_user)):
    """
    Logout

    Tokens are stateless and not revoked server-side; the client discards them.
    """
    return ApiResponse(message="Logged out successfully")


class DeleteAccountRequest(BaseModel):
    password: str = Field(..., min_length=1, description="Current password")


@router.delete("/account", status_code=status.HTTP_200_OK, response_model=ApiResponse)
async def delete_account(
    request: DeleteAccountRequest,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: IPasswordHasher = Depends(get_password_hasher),
):
    """
    Delete Account (permanent)

    Raises:
        - 401 Unauthorized: Bad access token or password incorrect
        - 404 Not Found: Account no longer exists
    """
    use_case = DeleteAccountUseCase(uow, hasher)
    result = await use_case.execute(current_user.id, request.password)

    if result.is_err():
        raise http_error(result.error)

    return ApiResponse(message=result.value.message)
