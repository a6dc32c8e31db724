from __future__ import annotations

import argparse
from typing import Dict, Optional

from .board import pretty
from .config import configure_logging
from .moves import Direction, legal_directions
from .session import GameSession
from .state import SessionState

KEY_DIRECTIONS: Dict[str, Direction] = {
    'w': Direction.UP,
    's': Direction.DOWN,
    'a': Direction.LEFT,
    'd': Direction.RIGHT,
    'up': Direction.UP,
    'down': Direction.DOWN,
    'left': Direction.LEFT,
    'right': Direction.RIGHT,
}


def key_to_direction(text: str) -> Optional[Direction]:
    """Maps typed input to a direction; anything unrecognized maps to None."""
    return KEY_DIRECTIONS.get(text.strip().lower())


def render(state: SessionState) -> str:
    lines = [pretty(state.tiles), f'Score: {state.score}']
    if state.is_terminal:
        lines.append('Game over!')
    return '\n'.join(lines)


def main() -> None:
    parser = argparse.ArgumentParser(description='Play the 4x4 tile merge puzzle in a terminal')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for tile placement')
    parser.add_argument('--show-moves', action='store_true', help='List directions that change the board')
    args = parser.parse_args()

    configure_logging()
    session = GameSession(seed=args.seed)
    state = session.state
    print('Commands: w/a/s/d or up/down/left/right, n (new game), q (quit)')
    print(render(state))

    while True:
        if args.show_moves and not state.is_terminal:
            print('Moves:', ', '.join(d.value for d in legal_directions(state.tiles)))
        text = input('> ').strip().lower()
        if text == 'q':
            break
        if text == 'n':
            state = session.start_game()
            print(render(state))
            continue
        direction = key_to_direction(text)
        if direction is None:
            continue
        before = state
        state = session.apply_move(direction)
        if state is before:
            if state.is_terminal:
                print('Game over! Press n for a new game or q to quit.')
            continue
        print(render(state))
    print(f'Final score: {state.score}')


if __name__ == '__main__':
    main()
