import logging
from uuid import UUID

from videogen_auth.app.services.password_hasher import IPasswordHasher
from videogen_auth.app.services.unit_of_work import UnitOfWork
from videogen_auth.app.use_cases import errors
from videogen_auth.app.use_cases.auth.dtos import MessageResponse
from videogen_auth.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


class DeleteAccountUseCase:
    """
    Use case for permanently deleting an account.

    Business Rules:
    - Password must be re-entered and verify
    - Record is removed from the store (no soft delete)
    - Tokens already issued keep working until they expire, but refresh
      fails because the subject is gone
    """

    def __init__(self, uow: UnitOfWork, hasher: IPasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(self, user_id: UUID, password: str) -> Result[MessageResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)

            if user is None:
                return Return.err(Error(errors.USER_NOT_FOUND, "User not found"))

            if not user.verify_password(password, self.hasher):
                return Return.err(Error(errors.INCORRECT_PASSWORD, "Password is incorrect"))

            await self.uow.users.delete(user)

            await self.uow.commit()

        logger.info(f"User {user_id} deleted account")
        return Return.ok(MessageResponse(message="Account deleted successfully"))
