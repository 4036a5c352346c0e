import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config import settings
from db import close_db, ensure_schema, init_db, seed_default_items
from errors import RouletteError, StorageError
from routes import items
from store import STORAGE_ERRORS, ItemStore

# --- Logging setup ---
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # A database failure at boot is logged, not raised; item requests then
    # fail individually with a 500.
    app.state.db = None
    try:
        app.state.db = await init_db()
        await ensure_schema(app.state.db)
        if settings.SEED_DEFAULT_ITEMS:
            await seed_default_items(ItemStore(app.state.db))
    except (StorageError, *STORAGE_ERRORS) as e:
        log.error("Database initialisation failed: %s", e)
    else:
        log.info("Food roulette is ready!")
    try:
        yield
    finally:
        await close_db()


app = FastAPI(title="Food Roulette", lifespan=lifespan)
app.include_router(items.router)


@app.exception_handler(RouletteError)
async def on_roulette_error(request: Request, exc: RouletteError):
    if exc.status_code >= 500:
        log.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        log.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def main():
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
