from __future__ import annotations

import logging
import random
from typing import Optional, Union

from .moves import Direction, parse_direction, resolve
from .registry import TileRegistry
from .spawn import initial_tiles, spawn
from .state import SessionState
from .terminal import is_terminal

logger = logging.getLogger(__name__)


class GameSession:
    """
    Owns one game: tiles, score and the terminal flag.

    States are Active and Terminal. start_game() always returns to Active;
    apply_move() does nothing once Terminal is reached. Each call swaps in a
    complete SessionState, so callers never see a half-resolved board.
    """

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)
        self._registry = TileRegistry()
        self._state = SessionState(tiles=(), score=0, is_terminal=False)
        self.start_game()

    @property
    def state(self) -> SessionState:
        return self._state

    def start_game(self) -> SessionState:
        self._registry.reset()
        tiles = initial_tiles(self._registry, self._rng)
        self._state = SessionState(tiles=tiles, score=0, is_terminal=False)
        logger.debug('new game: tiles at %s', [t.coord for t in tiles])
        return self._state

    def apply_move(self, direction: Union[Direction, str]) -> SessionState:
        """Resolves one move, then spawns and re-checks the terminal condition."""
        direction = parse_direction(direction)
        current = self._state
        if current.is_terminal:
            logger.debug('move %s ignored: game is over', direction.value)
            return current

        result = resolve(direction, current.tiles)
        if not result.moved:
            logger.debug('move %s changed nothing', direction.value)
            return current

        tiles = spawn(result.tiles, self._registry, self._rng)
        terminal = is_terminal(tiles)
        self._state = SessionState(
            tiles=tiles,
            score=current.score + result.score_delta,
            is_terminal=terminal,
        )
        logger.debug(
            'move %s: %d merge(s), +%d, score %d',
            direction.value, len(result.merges), result.score_delta, self._state.score,
        )
        if terminal:
            logger.info('game over with score %d', self._state.score)
        return self._state
