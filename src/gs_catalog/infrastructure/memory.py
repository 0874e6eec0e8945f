"""In-memory GameRepository over MemoryDatabase."""

from dataclasses import replace

from src.gs_catalog.domain.models import Game
from src.gs_common.memory_db import MemorySession


class MemoryGameRepository:
    async def save(self, game: Game, db: MemorySession) -> None:
        db.put(db.tables.games, game.id, replace(game))

    async def get_by_id(self, game_id: str, db: MemorySession) -> Game | None:
        game = db.tables.games.get(game_id)
        return replace(game) if game else None

    async def list_by_title(self, title: str, db: MemorySession) -> list[Game]:
        return [replace(g) for g in db.tables.games.values() if g.title == title]

    async def list_all(self, db: MemorySession) -> list[Game]:
        games = sorted(db.tables.games.values(), key=lambda g: (g.title, g.id))
        return [replace(g) for g in games]
