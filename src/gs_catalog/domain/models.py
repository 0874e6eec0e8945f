"""Catalog domain model — pure dataclass, no SQLAlchemy dependency."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Game:
    id: str
    title: str
    price_cents: int  # >= 0, checked before the row exists
    genre: str
    platform: str
    description: str | None = None
    image_path: str | None = None
    created_at: datetime | None = None
