"""GameRepository Protocol: the catalog is append-only, so there is no update."""

from typing import Protocol

from src.gs_catalog.domain.models import Game
from src.gs_common.database import DbSession


class GameRepositoryProtocol(Protocol):
    async def save(self, game: Game, db: DbSession) -> None: ...

    async def get_by_id(self, game_id: str, db: DbSession) -> Game | None: ...

    async def list_by_title(self, title: str, db: DbSession) -> list[Game]: ...

    async def list_all(self, db: DbSession) -> list[Game]: ...
