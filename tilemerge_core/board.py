from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Tuple

Coord = Tuple[int, int]

GRID_SIZE = 4
CELL_COUNT = GRID_SIZE * GRID_SIZE


def is_power_of_two(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0


@dataclass(frozen=True)
class Tile:
    """A single numbered piece. Identity is stable; position, value and flags change via replace()."""
    id: int
    value: int
    row: int
    col: int
    just_created: bool = False
    just_merged: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValueError(f'Tile value must be an int, got {self.value!r}')
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in (self.row, self.col)):
            raise ValueError(f'Tile position must be ints, got {(self.row, self.col)!r}')
        if self.value < 2 or not is_power_of_two(self.value):
            raise ValueError(f'Tile value must be a power of two >= 2, got {self.value}')
        if not in_bounds((self.row, self.col)):
            raise ValueError(f'Tile position out of grid: {(self.row, self.col)}')

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)


def in_bounds(coord: Coord) -> bool:
    r, c = coord
    return 0 <= r < GRID_SIZE and 0 <= c < GRID_SIZE


def coords() -> Iterator[Coord]:
    """Iterates over all coordinates on the board in row-major order."""
    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            yield (r, c)


def neighbors(coord: Coord) -> List[Coord]:
    """Gets the on-grid orthogonal neighbors of a coordinate (no wrap-around)."""
    r, c = coord
    candidates = [(r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)]
    return [p for p in candidates if in_bounds(p)]


def occupants(tiles: Iterable[Tile]) -> Dict[Coord, Tile]:
    """Builds a cell -> tile lookup. Two tiles on one cell is a construction bug."""
    grid: Dict[Coord, Tile] = {}
    for tile in tiles:
        if tile.coord in grid:
            raise ValueError(
                f'Cell {tile.coord} occupied by tiles {grid[tile.coord].id} and {tile.id}'
            )
        grid[tile.coord] = tile
    return grid


def empty_cells(tiles: Iterable[Tile]) -> List[Coord]:
    """All unoccupied cells in row-major order; the candidate domain for spawning."""
    taken = occupants(tiles)
    return [coord for coord in coords() if coord not in taken]


def is_full(tiles: Iterable[Tile]) -> bool:
    return len(list(tiles)) == CELL_COUNT


def pretty(tiles: Iterable[Tile]) -> str:
    """Generates a human-readable grid; '.' marks an empty cell."""
    grid = occupants(tiles)
    width = max([len(str(t.value)) for t in grid.values()] + [1])
    lines: List[str] = []
    for r in range(GRID_SIZE):
        row: List[str] = []
        for c in range(GRID_SIZE):
            tile = grid.get((r, c))
            cell = str(tile.value) if tile is not None else '.'
            row.append(cell.rjust(width))
        lines.append(' '.join(row))
    return '\n'.join(lines)
