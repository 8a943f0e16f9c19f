"""
Resend Verification Use Case

Issues a new verification code for an account that is still unverified.
"""

import logging
from datetime import timedelta
from uuid import UUID

from videogen_auth.app.services.code_generator import ICodeGenerator
from videogen_auth.app.services.notification_gateway import INotificationGateway
from videogen_auth.app.services.unit_of_work import UnitOfWork
from videogen_auth.app.use_cases import errors
from videogen_auth.domain.base import utcnow
from videogen_auth.libs.result import Error, Result, Return
from .common import DEFAULT_CODE_TTL
from .dtos import MessageResponse

logger = logging.getLogger(__name__)


class ResendVerificationUseCase:
    """
    Use case for resending the email verification code.

    Business Rules:
    - New code replaces the old one (previous code stops working)
    - Expiry reset to 10 minutes from now
    - Verified accounts are rejected
    - Failure to deliver the code is reported to the caller
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

    async def execute(self, user_id: UUID) -> Result[MessageResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)

            if user is None:
                return Return.err(Error(errors.USER_NOT_FOUND, "User not found"))

            if user.is_email_verified:
                return Return.err(
                    Error(errors.EMAIL_ALREADY_VERIFIED, "Email already verified")
                )

            code = self.code_generator.generate()
            user.issue_verification_code(code, utcnow(), self.code_ttl)
            user = await self.uow.users.update(user)

            await self.uow.commit()

        if not await self.notifier.send_verification_code(user.email, user.name, code):
            logger.error(f"Verification code delivery failed for user {user.id}")
            return Return.err(
                Error(
                    errors.EMAIL_DELIVERY_FAILED,
                    "Could not send verification code. Please try again.",
                )
            )

        return Return.ok(MessageResponse(message="Verification code sent to your email"))
