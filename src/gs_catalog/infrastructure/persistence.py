"""GameRepository — raw SQL persistence implementation."""

from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.gs_catalog.domain.models import Game

_SELECT_COLUMNS = """
    id, title, description, price_cents, genre, platform, image_path, created_at
"""

_INSERT_GAME_SQL = text("""
    INSERT INTO games (id, title, description, price_cents, genre, platform,
        image_path, created_at)
    VALUES (:id, :title, :description, :price_cents, :genre, :platform,
        :image_path, :created_at)
""")

_GET_GAME_BY_ID_SQL = text(f"""
    SELECT {_SELECT_COLUMNS} FROM games WHERE id = :id
""")

_LIST_GAMES_BY_TITLE_SQL = text(f"""
    SELECT {_SELECT_COLUMNS} FROM games WHERE title = :title ORDER BY id
""")

_LIST_GAMES_SQL = text(f"""
    SELECT {_SELECT_COLUMNS} FROM games ORDER BY title, id
""")


def _row_to_game(row: Any) -> Game:
    return Game(
        id=row.id,
        title=row.title,
        description=row.description,
        price_cents=row.price_cents,
        genre=row.genre,
        platform=row.platform,
        image_path=row.image_path,
        created_at=row.created_at,
    )


class GameRepository:
    """Concrete implementation of GameRepositoryProtocol using raw SQL."""

    async def save(self, game: Game, db: AsyncSession) -> None:
        await db.execute(
            _INSERT_GAME_SQL,
            {
                "id": game.id,
                "title": game.title,
                "description": game.description,
                "price_cents": game.price_cents,
                "genre": game.genre,
                "platform": game.platform,
                "image_path": game.image_path,
                "created_at": game.created_at,
            },
        )

    async def get_by_id(self, game_id: str, db: AsyncSession) -> Game | None:
        row = (await db.execute(_GET_GAME_BY_ID_SQL, {"id": game_id})).fetchone()
        return _row_to_game(row) if row else None

    async def list_by_title(self, title: str, db: AsyncSession) -> list[Game]:
        rows = (await db.execute(_LIST_GAMES_BY_TITLE_SQL, {"title": title})).fetchall()
        return [_row_to_game(row) for row in rows]

    async def list_all(self, db: AsyncSession) -> list[Game]:
        rows = (await db.execute(_LIST_GAMES_SQL)).fetchall()
        return [_row_to_game(row) for row in rows]
