# db.py
import logging

import asyncpg
from sqlalchemy.dialects import postgresql
from sqlalchemy.schema import CreateTable

from config import settings
from models.item import ItemRecord

log = logging.getLogger(__name__)

_pool = None

# Starter menu written on first boot, in wheel order.
DEFAULT_ITEMS = [
    {"label": "麻辣烫", "weight": 30},
    {"label": "沙拉", "weight": 15},
    {"label": "面条", "weight": 20},
    {"label": "汉堡", "weight": 10},
    {"label": "自热火锅", "weight": 25},
]

async def init_db():
    """
    Creates the global PostgreSQL pool and returns it.
    """
    global _pool
    _pool = await asyncpg.create_pool(
        dsn=settings.PG_DSN,
        min_size=settings.PG_POOL_MIN,
        max_size=settings.PG_POOL_MAX
    )
    log.info("Connected to PostgreSQL database.")
    return _pool   # stored on app.state.db by the lifespan hook

async def close_db():
    global _pool
    if _pool is not None:
        await _pool.close()
        _pool = None
        log.info("PostgreSQL pool closed.")

def items_ddl() -> str:
    table = CreateTable(ItemRecord.__table__, if_not_exists=True)
    return str(table.compile(dialect=postgresql.dialect())).strip()

async def ensure_schema(pool):
    async with pool.acquire() as conn:
        await conn.execute(items_ddl())
    log.info("Schema ready: %s", ItemRecord.__tablename__)

async def seed_default_items(store) -> bool:
    """
    Writes DEFAULT_ITEMS when the table is empty. Returns True if it seeded.
    """
    if await store.count() > 0:
        return False
    await store.replace_all(DEFAULT_ITEMS)
    log.info("Inserted %d default items.", len(DEFAULT_ITEMS))
    return True
