from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Iterable, List, Set, Tuple, Union

from .board import GRID_SIZE, Coord, Tile, in_bounds, occupants


class Direction(Enum):
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'


VECTORS: Dict[Direction, Coord] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


@dataclass(frozen=True)
class Merge:
    """One merge performed during a move: source slid into target, which now holds value."""
    source_id: int
    target_id: int
    value: int


@dataclass(frozen=True)
class MoveResult:
    tiles: Tuple[Tile, ...]
    score_delta: int
    moved: bool
    merges: Tuple[Merge, ...] = ()


def parse_direction(value: Union[Direction, str]) -> Direction:
    """Maps a Direction or its name ('up', 'LEFT', ...) to a Direction."""
    if isinstance(value, Direction):
        return value
    if isinstance(value, str):
        try:
            return Direction(value.strip().lower())
        except ValueError:
            pass
    raise ValueError(f'Unknown direction: {value!r}')


def traversal(direction: Direction) -> List[Coord]:
    """
    Order in which cells are visited for a move.
    The cell nearest the destination wall comes first, so every tile slides
    toward tiles that have already been resolved.
    """
    rows = list(range(GRID_SIZE))
    cols = list(range(GRID_SIZE))
    if direction is Direction.DOWN:
        rows.reverse()
    if direction is Direction.RIGHT:
        cols.reverse()
    return [(r, c) for r in rows for c in cols]


def resolve(direction: Union[Direction, str], tiles: Iterable[Tile]) -> MoveResult:
    """Slides and merges every tile toward direction. The input tiles are left untouched."""
    direction = parse_direction(direction)
    dr, dc = VECTORS[direction]

    # Flags from the previous move are cleared before anything slides.
    grid: Dict[Coord, Tile] = {
        coord: replace(tile, just_created=False, just_merged=False)
        for coord, tile in occupants(tiles).items()
    }
    merged_ids: Set[int] = set()
    merges: List[Merge] = []
    score_delta = 0
    moved = False

    for start in traversal(direction):
        tile = grid.get(start)
        if tile is None:
            continue
        current = start
        absorbed = False
        while True:
            nxt = (current[0] + dr, current[1] + dc)
            if not in_bounds(nxt):
                break
            other = grid.get(nxt)
            if other is None:
                current = nxt
                continue
            if (
                other.value == tile.value
                and other.id not in merged_ids
                and tile.id not in merged_ids
            ):
                doubled = other.value * 2
                grid[nxt] = replace(other, value=doubled, just_merged=True)
                del grid[start]
                merged_ids.add(tile.id)
                merged_ids.add(other.id)
                merges.append(Merge(source_id=tile.id, target_id=other.id, value=doubled))
                score_delta += doubled
                absorbed = True
            break

        if absorbed:
            moved = True
        elif current != start:
            del grid[start]
            grid[current] = replace(tile, row=current[0], col=current[1])
            moved = True

    new_tiles = tuple(sorted(grid.values(), key=lambda t: t.id))
    return MoveResult(tiles=new_tiles, score_delta=score_delta, moved=moved, merges=tuple(merges))


def can_move(direction: Union[Direction, str], tiles: Iterable[Tile]) -> bool:
    return resolve(direction, tiles).moved


def legal_directions(tiles: Iterable[Tile]) -> List[Direction]:
    """Directions that would change the board, in UP, DOWN, LEFT, RIGHT order."""
    tile_list = list(tiles)
    return [d for d in Direction if can_move(d, tile_list)]
