"""UserRepository Protocol — interface contract for persistence layer."""

from typing import Protocol

from src.gs_common.database import DbSession
from src.gs_user.domain.models import User


class UserRepositoryProtocol(Protocol):
    async def save(self, user: User, db: DbSession) -> None: ...

    async def get_by_id(self, user_id: str, db: DbSession) -> User | None: ...

    async def get_by_username(self, username: str, db: DbSession) -> User | None: ...
