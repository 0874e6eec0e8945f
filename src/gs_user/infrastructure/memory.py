"""In-memory UserRepository over MemoryDatabase."""

from dataclasses import replace

from src.gs_common.errors import UsernameExistsError
from src.gs_common.memory_db import MemorySession
from src.gs_user.domain.models import User


class MemoryUserRepository:
    async def save(self, user: User, db: MemorySession) -> None:
        if any(u.username == user.username for u in db.tables.users.values()):
            raise UsernameExistsError(user.username)
        db.put(db.tables.users, user.id, replace(user))

    async def get_by_id(self, user_id: str, db: MemorySession) -> User | None:
        user = db.tables.users.get(user_id)
        return replace(user) if user else None

    async def get_by_username(self, username: str, db: MemorySession) -> User | None:
        for user in db.tables.users.values():
            if user.username == username:
                return replace(user)
        return None
