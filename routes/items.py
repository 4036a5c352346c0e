import logging
import random

from fastapi import APIRouter, Depends, Request

from errors import ValidationError
from rng import spin
from store import ItemStore

log = logging.getLogger(__name__)

router = APIRouter(prefix="/items", tags=["Items"])


def get_store(request: Request) -> ItemStore:
    # state.db stays None when the database was down at boot
    return ItemStore(getattr(request.app.state, "db", None))


def get_rng():
    """Source of random units in [0, 1). Overridden in tests."""
    return random.random


def dump(items) -> list[dict]:
    return [item.model_dump() for item in items]


# GET /items: current wheel contents, in the order the selector uses
@router.get("")
async def list_items(store: ItemStore = Depends(get_store)):
    return dump(await store.get_all())


@router.post("/replace")
async def replace_items(request: Request, store: ItemStore = Depends(get_store)):
    try:
        payload = await request.json()
    except ValueError as e:
        raise ValidationError("Request body must be a JSON array of items.") from e

    items = await store.replace_all(payload)
    return {"message": "Roulette items updated successfully.", "count": len(items)}


# POST /items/select: the list is read and drawn from in one request so the
# returned items match the slice layout the pick was made against.
@router.post("/select")
async def select_item(store: ItemStore = Depends(get_store), rng=Depends(get_rng)):
    selection = spin(await store.get_all(), rng)
    log.debug("Selected %r (draw %d/%d)", selection.selected, selection.draw, selection.total_weight)
    return {"selected": selection.selected, "items": dump(selection.items)}
