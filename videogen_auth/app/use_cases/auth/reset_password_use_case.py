"""
Reset Password Use Case

Consumes a reset code and sets a new password.
"""

import logging

from videogen_auth.app.services.notification_gateway import INotificationGateway
from videogen_auth.app.services.password_hasher import IPasswordHasher
from videogen_auth.app.services.token_service import ITokenService
from videogen_auth.app.services.unit_of_work import UnitOfWork
from videogen_auth.domain.base import utcnow
from videogen_auth.libs.result import Result, Return
from .common import authenticated
from .dtos import AuthResponse
from .verify_reset_code_use_case import INVALID_RESET_CODE_ERROR, find_user_with_reset_code

logger = logging.getLogger(__name__)


class ResetPasswordUseCase:
    """
    Use case for resetting a password with an emailed code.

    Business Rules:
    - Email and code must match a stored, unexpired reset code
    - New password is hashed with bcrypt
    - Reset code pair is cleared (single use)
    - Stamps last_login_at and issues a fresh token pair
    - Previously issued tokens stay valid until they expire (no revocation)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        hasher: IPasswordHasher,
        tokens: ITokenService,
        notifier: INotificationGateway,
    ):
        self.uow = uow
        self.hasher = hasher
        self.tokens = tokens
        self.notifier = notifier

    async def execute(self, email: str, code: str, new_password: str) -> Result[AuthResponse]:
        async with self.uow:
            now = utcnow()
            user = await find_user_with_reset_code(self.uow, email, code, now)

            if user is None:
                return Return.err(INVALID_RESET_CODE_ERROR)

            user.set_password(new_password, self.hasher)
            user.clear_reset_code()
            user.record_login(now)
            user = await self.uow.users.update(user)

            await self.uow.commit()

        response = authenticated(user, self.tokens)

        if not await self.notifier.send_password_changed(user.email, user.name):
            logger.warning(f"Password change notice could not be sent to user {user.id}")

        logger.info(f"User {user.id} reset password")
        return Return.ok(response)
