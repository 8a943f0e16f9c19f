"""
User Use Cases

Profile and account management for authenticated users.
"""

from .get_profile_use_case import GetProfileUseCase
from .update_profile_use_case import UpdateProfileUseCase
from .change_password_use_case import ChangePasswordUseCase
from .delete_account_use_case import DeleteAccountUseCase

__all__ = [
    "GetProfileUseCase",
    "UpdateProfileUseCase",
    "ChangePasswordUseCase",
    "DeleteAccountUseCase",
]
