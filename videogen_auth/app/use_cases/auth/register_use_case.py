import logging
from datetime import timedelta

from videogen_auth.app.services.code_generator import ICodeGenerator
from videogen_auth.app.services.notification_gateway import INotificationGateway
from videogen_auth.app.services.password_hasher import IPasswordHasher
from videogen_auth.app.services.unit_of_work import UnitOfWork
from videogen_auth.app.use_cases import errors
from videogen_auth.domain.base import normalize_email, utcnow
from videogen_auth.domain.entities import User
from videogen_auth.libs.result import Error, Result, Return
from .common import DEFAULT_CODE_TTL
from .dtos import RegisterCommand, RegisterResponse

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case - step 1 of sign-up

    Command/Response Pattern:
    - Input: RegisterCommand (validated business intent)
    - Output: Result[RegisterResponse] (message + id to verify against)

    Business Logic:
    1. Reject if a verified account already owns the email
    2. Re-use an unverified record with the same email (retry overwrites
       name, password and code) or create a new one
    3. Hash password, issue a fresh 6-digit code valid for 10 minutes
    4. Commit, then email the code; delivery failure is an error since the
       user has no other way to obtain the code
    """

    def __init__(
        self,
        uow: UnitOfWork,
        hasher: IPasswordHasher,
        code_generator: ICodeGenerator,
        notifier: INotificationGateway,
        code_ttl: timedelta = DEFAULT_CODE_TTL,
    ):
        self.uow = uow
        self.hasher = hasher
        self.code_generator = code_generator
        self.notifier = notifier
        self.code_ttl = code_ttl

    async def execute(self, command: RegisterCommand) -> Result[RegisterResponse]:
        email = normalize_email(command.email)

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(email)
            if existing_user is not None and existing_user.is_email_verified:
                return Return.err(
                    Error(errors.EMAIL_ALREADY_EXISTS, "User with this email already exists")
                )

            now = utcnow()
            code = self.code_generator.generate()

            if existing_user is None:
                user = User(name=command.name, email=email)
                user.set_password(command.password, self.hasher)
                user.issue_verification_code(code, now, self.code_ttl)
                user = await self.uow.users.create(user)
            else:
                user = existing_user
                user.name = command.name
                user.set_password(command.password, self.hasher)
                user.issue_verification_code(code, now, self.code_ttl)
                user = await self.uow.users.update(user)

            await self.uow.commit()

        sent = await self.notifier.send_verification_code(user.email, user.name, code)
        if not sent:
            logger.error(f"Verification code delivery failed for user {user.id}")
            return Return.err(
                Error(
                    errors.EMAIL_DELIVERY_FAILED,
                    "Could not send verification code. Please try again.",
                )
            )

        logger.info(f"User {user.id} registered, awaiting email verification")
        return Return.ok(
            RegisterResponse(
                message="Verification code sent to your email",
                temp_user_id=str(user.id),
            )
        )
