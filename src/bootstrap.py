"""Process start-up and shutdown for whatever layer embeds the engine.

    configure_logging()
    await startup()
    engine = get_consistency_engine()
    async with open_session() as db:
        await engine.create_order(db, user_id)
    await shutdown()
"""

import logging

from sqlalchemy import text

from config.settings import Settings, settings
from src.gs_common.database import create_schema, dispose_engine, get_engine
from src.gs_engine.application.service import reset

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(cfg: Settings = settings) -> None:
    level = logging.DEBUG if cfg.DEBUG else cfg.LOG_LEVEL.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)


async def startup(cfg: Settings = settings) -> None:
    """SQL backend: verify the connection and create missing tables."""
    if cfg.STORAGE_BACKEND != "sql":
        return
    engine = get_engine()
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
    await create_schema(engine)
    logging.getLogger(__name__).info("Storage ready: %s", engine.url.render_as_string())


async def shutdown(cfg: Settings = settings) -> None:
    if cfg.STORAGE_BACKEND == "sql":
        await dispose_engine()
    reset()
