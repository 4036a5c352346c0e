from contextlib import asynccontextmanager

@asynccontextmanager
async def db_transaction(pool, isolation: str = "read_committed"):
    """
    Usage:
    async with db_transaction(app.state.db) as conn:
        await conn.execute(...)

    Commits on a clean exit, rolls back and re-raises on any exception.
    """
    async with pool.acquire() as conn:
        async with conn.transaction(isolation=isolation):
            yield conn
