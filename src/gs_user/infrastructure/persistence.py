"""UserRepository — raw SQL persistence implementation."""

from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.gs_common.errors import UsernameExistsError
from src.gs_user.domain.models import User

_INSERT_USER_SQL = text("""
    INSERT INTO users (id, username, email, created_at)
    VALUES (:id, :username, :email, :created_at)
""")

_GET_USER_BY_ID_SQL = text("""
    SELECT id, username, email, created_at FROM users WHERE id = :id
""")

_GET_USER_BY_USERNAME_SQL = text("""
    SELECT id, username, email, created_at FROM users WHERE username = :username
""")


def _row_to_user(row: Any) -> User:
    return User(
        id=row.id,
        username=row.username,
        email=row.email,
        created_at=row.created_at,
    )


class UserRepository:
    """Concrete implementation of UserRepositoryProtocol using raw SQL."""

    async def save(self, user: User, db: AsyncSession) -> None:
        try:
            await db.execute(
                _INSERT_USER_SQL,
                {
                    "id": user.id,
                    "username": user.username,
                    "email": user.email,
                    "created_at": user.created_at,
                },
            )
        except IntegrityError as exc:
            # UNIQUE(username) is the final guard against concurrent registrations
            raise UsernameExistsError(user.username) from exc

    async def get_by_id(self, user_id: str, db: AsyncSession) -> User | None:
        row = (await db.execute(_GET_USER_BY_ID_SQL, {"id": user_id})).fetchone()
        return _row_to_user(row) if row else None

    async def get_by_username(self, username: str, db: AsyncSession) -> User | None:
        row = (
            await db.execute(_GET_USER_BY_USERNAME_SQL, {"username": username})
        ).fetchone()
        return _row_to_user(row) if row else None
