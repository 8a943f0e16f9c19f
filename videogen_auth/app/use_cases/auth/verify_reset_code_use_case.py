"""
Verify Reset Code Use Case

Read-only check that a reset code is still usable, so a client can move
to the "choose new password" screen before submitting one.
"""

from datetime import datetime
from typing import Optional

from videogen_auth.app.services.unit_of_work import UnitOfWork
from videogen_auth.app.use_cases import errors
from videogen_auth.domain.base import normalize_email, utcnow
from videogen_auth.domain.entities import CodeStatus, User
from videogen_auth.libs.result import Error, Result, Return
from .dtos import MessageResponse

INVALID_RESET_CODE_ERROR = Error(errors.INVALID_RESET_CODE, "Invalid or expired reset code")


async def find_user_with_reset_code(
    uow: UnitOfWork, email: str, code: str, now: datetime
) -> Optional[User]:
    """Return the user only if the email matches and its reset code is valid now."""
    user = await uow.users.get_by_email(normalize_email(email))
    if user is None:
        return None
    if user.check_reset_code(code, now) != CodeStatus.valid:
        return None
    return user


class VerifyResetCodeUseCase:
    """
    Use case for checking a password reset code without consuming it.

    Business Rules:
    - Missing, expired and wrong codes all give INVALID_RESET_CODE
    - Does not modify the account
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, code: str) -> Result[MessageResponse]:
        async with self.uow:
            user = await find_user_with_reset_code(self.uow, email, code, utcnow())

        if user is None:
            return Return.err(INVALID_RESET_CODE_ERROR)

        return Return.ok(MessageResponse(message="Reset code verified successfully"))
