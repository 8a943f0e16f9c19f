"""
Forgot Password Use Case

Generates a password reset code and emails it.
"""

import logging
from datetime import timedelta

from videogen_auth.app.services.code_generator import ICodeGenerator
from videogen_auth.app.services.notification_gateway import INotificationGateway
from videogen_auth.app.services.unit_of_work import UnitOfWork
from videogen_auth.app.use_cases import errors
from videogen_auth.domain.base import normalize_email, utcnow
from videogen_auth.libs.result import Error, Result, Return
from .common import DEFAULT_CODE_TTL
from .dtos import MessageResponse

logger = logging.getLogger(__name__)

FORGOT_PASSWORD_MESSAGE = (
    "If an account with that email exists, a password reset code has been sent"
)


class ForgotPasswordUseCase:
    """
    Use case for requesting a password reset code.

    Business Rules:
    - Same response for unknown, unverified and verified emails
      (no email enumeration)
    - Only verified accounts get a code
    - New code replaces any previous reset code, valid for 10 minutes
    - If the email cannot be delivered, the just-written code is cleared
      again and the failure is reported
    """

    def __init__(
        self,
        uow: UnitOfWork,
        code_generator: ICodeGenerator,
        notifier: INotificationGateway,
        code_ttl: timedelta = DEFAULT_CODE_TTL,
    ):
        self.uow = uow
        self.code_generator = code_generator
        self.notifier = notifier
        self.code_ttl = code_ttl

    async def execute(self, email: str) -> Result[MessageResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_email(normalize_email(email))

            if user is None:
                return Return.ok(MessageResponse(message=FORGOT_PASSWORD_MESSAGE))

            if not user.is_email_verified:
                logger.info(f"Password reset skipped for unverified user {user.id}")
                return Return.ok(MessageResponse(message=FORGOT_PASSWORD_MESSAGE))

            code = self.code_generator.generate()
            user.issue_reset_code(code, utcnow(), self.code_ttl)
            user = await self.uow.users.update(user)

            await self.uow.commit()

        if not await self.notifier.send_password_reset_code(user.email, user.name, code):
            logger.error(f"Password reset code delivery failed for user {user.id}")
            await self._withdraw_code(user.id, code)
            return Return.err(
                Error(
                    errors.EMAIL_DELIVERY_FAILED,
                    "Could not send password reset code. Please try again.",
                )
            )

        return Return.ok(MessageResponse(message=FORGOT_PASSWORD_MESSAGE))

    async def _withdraw_code(self, user_id, code: str) -> None:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            # A newer request may already have replaced the code
            if user is None or user.password_reset_code != code:
                return

            user.clear_reset_code()
            user.touch(utcnow())
            await self.uow.users.update(user)

            await self.uow.commit()
