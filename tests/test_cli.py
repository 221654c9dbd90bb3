import io
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from anchorhex_core.cli import main, parse_move, result_line
from game import GameState, Player, board_from_rows, fingerprint


class TestCli(unittest.TestCase):
    def _run(self, argv):
        buf = io.StringIO()
        with redirect_stdout(buf):
            main(argv)
        return buf.getvalue()

    def test_given_move_text_when_parsing_then_coords_or_none(self):
        self.assertEqual(parse_move('3,4'), (3, 4))
        self.assertEqual(parse_move('3 4'), (3, 4))
        self.assertEqual(parse_move(' 7 , 0 '), (7, 0))
        self.assertIsNone(parse_move('a,b'))
        self.assertIsNone(parse_move('1,2,3'))
        self.assertIsNone(parse_move(''))

    def test_given_no_play_flag_when_running_then_board_and_summary_printed(self):
        out = self._run(['--size', '8'])
        self.assertIn('Initial board:', out)
        self.assertIn('BLACK to move, 62 legal moves', out)
        self.assertIn('White 0', out)

    def test_given_hot_seat_session_when_playing_then_rejections_explained_and_undo_works(self):
        inputs = ['7,4', 'zz', '6,4', 'p', 'u', 'u', 'q']
        with patch('builtins.input', side_effect=inputs) as prompt:
            buf = io.StringIO()
            with redirect_stdout(buf):
                main(['--size', '8', '--play'])
        out = buf.getvalue()
        prompts = [call.args[0] for call in prompt.call_args_list]
        self.assertEqual(prompts[3], 'Move #2 WHITE> ')
        self.assertIn('That cell is occupied.', out)
        self.assertIn('Could not parse.', out)
        self.assertIn('You can only pass when you have no legal move.', out)
        self.assertIn('Nothing to undo.', out)

    def test_given_finished_board_when_reporting_then_draw_announced(self):
        board = board_from_rows([
            "oooWoooo",
            "oooooooo",
            "oooooooo",
            "oooooooo",
            "xxxxxxxx",
            "xxxxxxxx",
            "xxxxxxxx",
            "xxxxBxxx",
        ])
        s = GameState(board=board, turn=Player.BLACK, history=(fingerprint(board),))
        self.assertEqual(result_line(s), 'Game over. Draw 31 : 31')


if __name__ == '__main__':
    unittest.main(verbosity=2)
