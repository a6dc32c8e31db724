from __future__ import annotations

# Facade module that re-exports the tile merge engine.
# The Flask app, the CLI entry point and the tests import from here.
# Single-responsibility modules live under tilemerge_core/*.

from tilemerge_core.board import (
    CELL_COUNT,
    GRID_SIZE,
    Coord,
    Tile,
    coords,
    empty_cells,
    in_bounds,
    is_full,
    is_power_of_two,
    neighbors,
    occupants,
    pretty,
)
from tilemerge_core.registry import TileRegistry
from tilemerge_core.moves import (
    VECTORS,
    Direction,
    Merge,
    MoveResult,
    can_move,
    legal_directions,
    parse_direction,
    resolve,
    traversal,
)
from tilemerge_core.spawn import initial_tiles, spawn, spawn_value
from tilemerge_core.terminal import has_adjacent_pair, is_terminal
from tilemerge_core.state import SessionState
from tilemerge_core.session import GameSession


def main() -> None:
    # CLI driver delegated to tilemerge_core.cli
    from tilemerge_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
