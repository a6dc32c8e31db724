import io
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from game import Direction, GameSession
from tilemerge_core import cli


class TestCli(unittest.TestCase):
    def test_given_keys_when_mapping_then_directions_or_none(self):
        self.assertIs(cli.key_to_direction('w'), Direction.UP)
        self.assertIs(cli.key_to_direction('A'), Direction.LEFT)
        self.assertIs(cli.key_to_direction(' down '), Direction.DOWN)
        self.assertIs(cli.key_to_direction('d'), Direction.RIGHT)
        self.assertIsNone(cli.key_to_direction('x'))
        self.assertIsNone(cli.key_to_direction(''))

    def test_given_state_when_rendering_then_grid_and_score(self):
        text = cli.render(GameSession(seed=1).state)
        self.assertIn('Score: 0', text)
        self.assertEqual(text.count('2'), 2)
        self.assertNotIn('Game over', text)

    def test_given_scripted_input_when_running_main_then_ignores_junk_and_quits(self):
        buf = io.StringIO()
        inputs = iter(['zz', 'a', 'w', 'n', 'q'])
        with patch('sys.argv', ['tilemerge', '--seed', '4', '--show-moves']), \
                patch('builtins.input', lambda _prompt='': next(inputs)), \
                redirect_stdout(buf):
            cli.main()
        out = buf.getvalue()
        self.assertIn('Commands:', out)
        self.assertIn('Moves:', out)
        self.assertIn('Final score:', out)


if __name__ == '__main__':
    unittest.main()
