# rng.py
import math
import random
from dataclasses import dataclass

from errors import EmptyListError

@dataclass(frozen=True)
class Selection:
    selected: str
    items: list     # the exact list the draw was made against
    draw: int       # 1-indexed, in [1, total_weight]
    total_weight: int

def choose(items, random_unit: float) -> Selection:
    # items: ordered list[Item], random_unit in [0, 1)
    if not items:
        raise EmptyListError("No items available.")
    if not 0.0 <= random_unit < 1.0:
        raise ValueError(f"random_unit must be in [0, 1), got {random_unit!r}")

    items = list(items)
    total = sum(item.weight for item in items)
    draw = math.floor(random_unit * total) + 1
    upto = 0
    for item in items:
        upto += item.weight
        if upto >= draw:
            return Selection(item.label, items, draw, total)
    return Selection(items[-1].label, items, draw, total)

def spin(items, rng=random.random) -> Selection:
    return choose(items, rng())
