"""
Tilemerge core Python package.

This package contains the rule engine of the 4x4 sliding-tile merge puzzle.
Everything here is pure logic; presentation lives in game.py, app.py and cli.py.
Modules:
- board.py: Tile, Coord, occupancy helpers
- registry.py: TileRegistry
- moves.py: Direction, resolve
- spawn.py: spawn, initial_tiles
- terminal.py: is_terminal
- state.py / session.py: SessionState, GameSession
"""
