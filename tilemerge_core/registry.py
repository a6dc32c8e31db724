from __future__ import annotations

from .board import Tile


class TileRegistry:
    """Hands out tile identities for one session. Identities start at 1 and only grow."""

    def __init__(self) -> None:
        self._next_id = 1

    @property
    def next_id(self) -> int:
        return self._next_id

    def reset(self) -> None:
        self._next_id = 1

    def create(
        self,
        value: int,
        row: int,
        col: int,
        just_created: bool = False,
        just_merged: bool = False,
    ) -> Tile:
        tile = Tile(
            id=self._next_id,
            value=value,
            row=row,
            col=col,
            just_created=just_created,
            just_merged=just_merged,
        )
        self._next_id += 1
        return tile
