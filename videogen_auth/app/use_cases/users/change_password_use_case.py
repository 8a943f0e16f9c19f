"""
Change Password Use Case

Replaces the password of an authenticated user after re-checking the
current one.
"""

import logging
from uuid import UUID

from videogen_auth.app.services.notification_gateway import INotificationGateway
from videogen_auth.app.services.password_hasher import IPasswordHasher
from videogen_auth.app.services.unit_of_work import UnitOfWork
from videogen_auth.app.use_cases import errors
from videogen_auth.app.use_cases.auth.dtos import MessageResponse
from videogen_auth.domain.base import utcnow
from videogen_auth.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


class ChangePasswordUseCase:
    """
    Use case for changing a password.

    Business Rules:
    - Current password must verify; otherwise the stored hash is untouched
    - New password is hashed with bcrypt
    - Confirmation email is best effort
    """

    def __init__(
        self,
        uow: UnitOfWork,
        hasher: IPasswordHasher,
        notifier: INotificationGateway,
    ):
        self.uow = uow
        self.hasher = hasher
        self.notifier = notifier

    async def execute(
        self, user_id: UUID, current_password: str, new_password: str
    ) -> Result[MessageResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)

            if user is None:
                return Return.err(Error(errors.USER_NOT_FOUND, "User not found"))

            if not user.verify_password(current_password, self.hasher):
                return Return.err(
                    Error(errors.INCORRECT_PASSWORD, "Current password is incorrect")
                )

            user.set_password(new_password, self.hasher)
            user.touch(utcnow())
            user = await self.uow.users.update(user)

            await self.uow.commit()

        if not await self.notifier.send_password_changed(user.email, user.name):
            logger.warning(f"Password change notice could not be sent to user {user.id}")

        logger.info(f"User {user.id} changed password")
        return Return.ok(MessageResponse(message="Password changed successfully"))
