from __future__ import annotations

import random
from typing import Iterable, Optional, Tuple

from .board import Tile, coords, empty_cells
from .registry import TileRegistry

# Probability that a spawned tile is a 2 rather than a 4.
TWO_PROBABILITY = 0.9


def _rng_or_default(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def spawn_value(rng: random.Random) -> int:
    return 2 if rng.random() < TWO_PROBABILITY else 4


def spawn(
    tiles: Iterable[Tile],
    registry: TileRegistry,
    rng: Optional[random.Random] = None,
) -> Tuple[Tile, ...]:
    """Adds one tile on a random empty cell. A full board is returned unchanged."""
    current = tuple(tiles)
    empty = empty_cells(current)
    if not empty:
        return current
    rng = _rng_or_default(rng)
    r, c = rng.choice(empty)
    value = spawn_value(rng)
    return current + (registry.create(value, r, c, just_created=True),)


def initial_tiles(registry: TileRegistry, rng: Optional[random.Random] = None) -> Tuple[Tile, ...]:
    """Creates the opening layout: two 2-tiles on two distinct random cells."""
    rng = _rng_or_default(rng)
    first, second = rng.sample(list(coords()), 2)
    return (
        registry.create(2, first[0], first[1], just_created=True),
        registry.create(2, second[0], second[1], just_created=True),
    )
