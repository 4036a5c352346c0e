# store.py
import logging

import asyncpg

from errors import StorageError
from models.schemas import Item, parse_items
from utils.db import db_transaction

log = logging.getLogger(__name__)

# asyncpg raises these for server-side failures, closed connections and
# unreachable hosts (TimeoutError is an OSError).
STORAGE_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)

SELECT_ITEMS = "SELECT label, weight FROM items ORDER BY seq, id"
COUNT_ITEMS = "SELECT COUNT(*) FROM items"
# Serialises concurrent replaces; plain reads (ACCESS SHARE) are not blocked.
LOCK_ITEMS = "LOCK TABLE items IN SHARE ROW EXCLUSIVE MODE"
DELETE_ITEMS = "DELETE FROM items"
INSERT_ITEM = "INSERT INTO items (seq, label, weight) VALUES ($1, $2, $3)"


class ItemStore:
    """Ordered (label, weight) list persisted in the `items` table."""

    def __init__(self, pool):
        self.pool = pool

    def _require_pool(self):
        if self.pool is None:
            raise StorageError("Database pool is not initialised.")
        return self.pool

    async def get_all(self) -> list[Item]:
        pool = self._require_pool()
        try:
            async with pool.acquire() as conn:
                rows = await conn.fetch(SELECT_ITEMS)
        except STORAGE_ERRORS as e:
            log.error("Item fetch failed: %s", e)
            raise StorageError(f"Database fetch error: {e}") from e
        return [Item(label=row["label"], weight=row["weight"]) for row in rows]

    async def count(self) -> int:
        pool = self._require_pool()
        try:
            async with pool.acquire() as conn:
                return await conn.fetchval(COUNT_ITEMS)
        except STORAGE_ERRORS as e:
            log.error("Item count failed: %s", e)
            raise StorageError(f"Database fetch error: {e}") from e

    async def replace_all(self, new_items) -> list[Item]:
        """
        Discards the stored list and writes `new_items` in order, as one
        transaction. Validation happens before any connection is taken, so a
        rejected payload never touches the prior list.
        """
        items = parse_items(new_items)
        pool = self._require_pool()
        try:
            async with db_transaction(pool) as conn:
                await conn.execute(LOCK_ITEMS)
                await conn.execute(DELETE_ITEMS)
                await conn.executemany(
                    INSERT_ITEM,
                    [(seq, item.label, item.weight) for seq, item in enumerate(items)],
                )
        except STORAGE_ERRORS as e:
            log.error("Item replace rolled back: %s", e)
            raise StorageError(f"Update failed: {e}") from e
        log.info("Replaced roulette items (%d entries).", len(items))
        return items
