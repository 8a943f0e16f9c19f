from uuid import UUID

from videogen_auth.app.services.unit_of_work import UnitOfWork
from videogen_auth.app.use_cases import errors
from videogen_auth.app.use_cases.auth.dtos import UserView
from videogen_auth.domain.base import utcnow
from videogen_auth.libs.result import Error, Result, Return


class UpdateProfileUseCase:
    """
    Use case for editing the profile.

    Business Rules:
    - Only the display name can be changed here
    - Email, plan and admin flag are not user-editable
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, name: str) -> Result[UserView]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)

            if user is None:
                return Return.err(Error(errors.USER_NOT_FOUND, "User not found"))

            user.name = name
            user.touch(utcnow())
            user = await self.uow.users.update(user)

            await self.uow.commit()

        return Return.ok(UserView.from_entity(user))
