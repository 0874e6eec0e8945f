"""In-memory storage backend.

Tables are plain dicts shared by every session of one MemoryDatabase.
Writes apply immediately; each session keeps an undo journal, so rollback()
restores exactly what that session changed since its last commit().

Callers must hold the engine's per-entity lock from the first write until
commit()/rollback(), otherwise an undo could clobber another session's write.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

_MISSING = object()


@dataclass
class MemoryTables:
    users: dict[str, Any] = field(default_factory=dict)
    games: dict[str, Any] = field(default_factory=dict)
    stock_levels: dict[str, Any] = field(default_factory=dict)
    orders: dict[str, Any] = field(default_factory=dict)
    order_lines: dict[tuple[str, str], Any] = field(default_factory=dict)
    payments: dict[str, Any] = field(default_factory=dict)


class MemoryDatabase:
    def __init__(self) -> None:
        self.tables = MemoryTables()

    def session(self) -> "MemorySession":
        return MemorySession(self)


class MemorySession:
    """Unit of work over a MemoryDatabase; mirrors the AsyncSession calls the engine uses."""

    def __init__(self, database: MemoryDatabase) -> None:
        self.database = database
        self._undo: list[Callable[[], None]] = []

    @property
    def tables(self) -> MemoryTables:
        return self.database.tables

    @property
    def has_pending_changes(self) -> bool:
        return bool(self._undo)

    def put(self, table: dict[Any, Any], key: Any, value: Any) -> None:
        """Insert or replace table[key], journaling the previous state."""
        previous = table.get(key, _MISSING)
        table[key] = value
        if previous is _MISSING:
            self._undo.append(lambda: table.pop(key, None))
        else:
            self._undo.append(lambda: table.__setitem__(key, previous))

    async def commit(self) -> None:
        self._undo.clear()

    async def rollback(self) -> None:
        while self._undo:
            self._undo.pop()()

    async def close(self) -> None:
        # Uncommitted work is discarded, as with AsyncSession.close()
        await self.rollback()

    async def __aenter__(self) -> "MemorySession":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
