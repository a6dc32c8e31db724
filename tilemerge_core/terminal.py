from __future__ import annotations

from typing import Iterable

from .board import Tile, is_full, neighbors, occupants


def has_adjacent_pair(tiles: Iterable[Tile]) -> bool:
    """True if any two orthogonally adjacent tiles share a value."""
    grid = occupants(tiles)
    for coord, tile in grid.items():
        for nb in neighbors(coord):
            other = grid.get(nb)
            if other is not None and other.value == tile.value:
                return True
    return False


def is_terminal(tiles: Iterable[Tile]) -> bool:
    """The game is over when every cell is filled and no merge is possible in any direction."""
    tile_list = list(tiles)
    if not is_full(tile_list):
        return False
    return not has_adjacent_pair(tile_list)
