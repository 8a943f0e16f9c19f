"""
Login Use Case

Handles credential authentication and returns a JWT token pair.
"""

import logging

from videogen_auth.app.services.password_hasher import IPasswordHasher
from videogen_auth.app.services.token_service import ITokenService
from videogen_auth.app.services.unit_of_work import UnitOfWork
from videogen_auth.app.use_cases import errors
from videogen_auth.domain.base import normalize_email, utcnow
from videogen_auth.libs.result import Error, Result, Return
from .common import authenticated
from .dtos import AuthResponse

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Unknown email and wrong password give the same INVALID_CREDENTIALS
      error (no account enumeration)
    - A hash check runs even when the user is not found (uniform timing)
    - Unverified accounts are rejected even with the right password
    - Updates user.last_login_at
    """

    def __init__(self, uow: UnitOfWork, hasher: IPasswordHasher, tokens: ITokenService):
        self.uow = uow
        self.hasher = hasher
        self.tokens = tokens

    async def execute(self, email: str, password: str) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with AuthResponse containing user view and tokens, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(normalize_email(email))

            if user is None:
                self.hasher.dummy_verify(password)
                return Return.err(
                    Error(errors.INVALID_CREDENTIALS, "Invalid email or password")
                )

            if not user.verify_password(password, self.hasher):
                return Return.err(
                    Error(errors.INVALID_CREDENTIALS, "Invalid email or password")
                )

            if not user.is_email_verified:
                return Return.err(
                    Error(
                        errors.EMAIL_NOT_VERIFIED,
                        "Please verify your email before logging in. "
                        "Check your email for verification code.",
                    )
                )

            user.record_login(utcnow())
            user = await self.uow.users.update(user)

            await self.uow.commit()

        logger.info(f"User {user.id} logged in")
        return Return.ok(authenticated(user, self.tokens))
