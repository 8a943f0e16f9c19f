"""
Verify Email Use Case

Completes registration with the 6-digit code sent by email.
"""

import logging
from uuid import UUID

from videogen_auth.app.services.notification_gateway import INotificationGateway
from videogen_auth.app.services.token_service import ITokenService
from videogen_auth.app.services.unit_of_work import UnitOfWork
from videogen_auth.app.use_cases import errors
from videogen_auth.domain.base import utcnow
from videogen_auth.domain.entities import CodeStatus
from videogen_auth.libs.result import Error, Result, Return
from .common import authenticated
from .dtos import AuthResponse

logger = logging.getLogger(__name__)

_CODE_ERRORS = {
    CodeStatus.missing: Error(
        errors.VERIFICATION_CODE_MISSING,
        "No verification code found. Please request a new one.",
    ),
    CodeStatus.expired: Error(
        errors.VERIFICATION_CODE_EXPIRED,
        "Verification code has expired. Please request a new one.",
    ),
    CodeStatus.mismatch: Error(
        errors.INVALID_VERIFICATION_CODE,
        "Invalid verification code",
    ),
}


class VerifyEmailUseCase:
    """
    Use case for email verification.

    Business Rules:
    - Code must match the stored code and be presented before expiry
    - Sets is_email_verified, clears the code pair (single use)
    - Stamps last_login_at and issues a token pair
    - Already verified accounts are rejected, not re-verified
    - Welcome email is best effort and never undoes verification
    """

    def __init__(
        self,
        uow: UnitOfWork,
        tokens: ITokenService,
        notifier: INotificationGateway,
    ):
        self.uow = uow
        self.tokens = tokens
        self.notifier = notifier

    async def execute(self, user_id: UUID, code: str) -> Result[AuthResponse]:
        """
        Execute email verification use case.

        Args:
            user_id: Id returned by registration (temp_user_id)
            code: 6-digit code from the verification email

        Returns:
            Result with user view and token pair, or Error

        Errors:
            - USER_NOT_FOUND
            - EMAIL_ALREADY_VERIFIED
            - VERIFICATION_CODE_MISSING / VERIFICATION_CODE_EXPIRED /
              INVALID_VERIFICATION_CODE
        """
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)

            if user is None:
                return Return.err(Error(errors.USER_NOT_FOUND, "User not found"))

            if user.is_email_verified:
                return Return.err(
                    Error(errors.EMAIL_ALREADY_VERIFIED, "Email already verified")
                )

            now = utcnow()
            code_status = user.check_verification_code(code, now)
            if code_status != CodeStatus.valid:
                return Return.err(_CODE_ERRORS[code_status])

            user.mark_email_verified(now)
            user = await self.uow.users.update(user)

            await self.uow.commit()

        response = authenticated(user, self.tokens)

        if not await self.notifier.send_welcome(user.email, user.name):
            logger.warning(f"Welcome email could not be sent to user {user.id}")

        logger.info(f"User {user.id} verified email")
        return Return.ok(response)
