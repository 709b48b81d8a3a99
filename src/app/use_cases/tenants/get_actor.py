"""GetActor Use Case

Resolves an authenticated user ID to the actor whose company scopes all
subsequent reads and writes.
"""

from libs.result import Error, Result, Return
from src.app.repositories.user_repository import UserRepository
from .dtos import ActorDTO


class GetActor:
    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def execute(self, user_id: int) -> Result[ActorDTO]:
        user = await self.user_repo.get_by_id(user_id)

        if not user:
            return Return.err(
                Error(
                    code="USER_NOT_FOUND",
                    message=f"User {user_id} not found",
                )
            )

        return Return.ok(ActorDTO.from_user(user))
