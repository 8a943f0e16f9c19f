from uuid import UUID

from videogen_auth.app.services.unit_of_work import UnitOfWork
from videogen_auth.app.use_cases import errors
from videogen_auth.app.use_cases.auth.dtos import UserView
from videogen_auth.libs.result import Error, Result, Return


class GetProfileUseCase:
    """Load the current user's profile by the id carried in the access token."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UserView]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)

            if user is None:
                return Return.err(Error(errors.USER_NOT_FOUND, "User not found"))

            # Loaded instances expire once the block rolls back
            return Return.ok(UserView.from_entity(user))
