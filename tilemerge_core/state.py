from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .board import Tile


@dataclass(frozen=True)
class SessionState:
    """Read-only snapshot published to callers after every start or move."""
    tiles: Tuple[Tile, ...]
    score: int
    is_terminal: bool

    def tile_at(self, row: int, col: int) -> Optional[Tile]:
        for tile in self.tiles:
            if tile.row == row and tile.col == col:
                return tile
        return None

    def max_value(self) -> int:
        return max((t.value for t in self.tiles), default=0)
