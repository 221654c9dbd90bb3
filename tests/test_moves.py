import unittest

from game import (
    Cell,
    LAYOUT_8X8,
    LegalityPolicy,
    Player,
    Rejection,
    board_from_rows,
    fingerprint,
    legal_moves,
    make_initial_board,
    mask_coords,
    place_stone,
    rejection_reason,
)

# Both players have a lone stone that one placement can cut off:
# black (7,1) seals white (7,0); white (1,1) seals black (0,0).
CAPTURE_PAIR = [
    "xo.W....",
    "o.......",
    "........",
    "........",
    "........",
    "........",
    "x.......",
    "o...B...",
]


class TestPlaceStone(unittest.TestCase):
    def test_given_empty_reachable_cell_when_placing_then_new_board_returned(self):
        board = make_initial_board(LAYOUT_8X8)
        nxt = place_stone(board, Player.BLACK, 6, 4)
        self.assertIsNotNone(nxt)
        self.assertEqual(nxt.at(6, 4), Cell.BLACK_STONE)
        self.assertEqual(board.at(6, 4), Cell.EMPTY)

    def test_given_bad_coordinates_when_placing_then_rejected(self):
        board = make_initial_board(LAYOUT_8X8)
        self.assertIsNone(place_stone(board, Player.BLACK, -1, 0))
        self.assertIsNone(place_stone(board, Player.BLACK, 0, 8))
        self.assertIsNone(place_stone(board, Player.BLACK, 0, 3))  # white base
        self.assertIsNone(place_stone(board, Player.WHITE, 7, 4))  # black base
        occupied = place_stone(board, Player.WHITE, 1, 3)
        self.assertIsNone(place_stone(occupied, Player.BLACK, 1, 3))

    def test_given_cut_off_cell_when_placing_then_rejected_as_illegal(self):
        board = board_from_rows(CAPTURE_PAIR)
        after = place_stone(board, Player.WHITE, 1, 1)
        # (0,0) is now sealed by white; black may not drop back in
        self.assertIsNone(place_stone(after, Player.BLACK, 0, 0))
        self.assertEqual(rejection_reason(after, Player.BLACK, 0, 0), Rejection.ILLEGAL)

    def test_given_capturing_move_when_placing_then_opponent_stone_removed(self):
        board = board_from_rows(CAPTURE_PAIR)
        after = place_stone(board, Player.BLACK, 7, 1)
        self.assertEqual(after.at(7, 1), Cell.BLACK_STONE)
        self.assertEqual(after.at(7, 0), Cell.EMPTY)
        self.assertEqual(after.at(6, 0), Cell.BLACK_STONE)
        self.assertEqual(after.at(0, 0), Cell.BLACK_STONE)  # untouched elsewhere

    def test_given_forbidden_result_when_placing_then_rejected_and_mask_cleared(self):
        board = make_initial_board(LAYOUT_8X8)
        target = place_stone(board, Player.BLACK, 6, 4)
        forbidden = {fingerprint(board), fingerprint(target)}
        for policy in LegalityPolicy:
            self.assertIsNone(place_stone(board, Player.BLACK, 6, 4, forbidden, policy))
            mask = legal_moves(board, Player.BLACK, forbidden, policy)
            self.assertFalse(mask[6][4])
            # Every other empty cell stays playable
            self.assertEqual(len(mask_coords(mask)), 61)
        self.assertEqual(rejection_reason(board, Player.BLACK, 6, 4, forbidden), Rejection.REPETITION)

    def test_given_legal_moves_when_placing_each_then_all_accepted(self):
        board = place_stone(board_from_rows(CAPTURE_PAIR), Player.BLACK, 7, 1)
        forbidden = {fingerprint(board)}
        for player in (Player.WHITE, Player.BLACK):
            for r, c in mask_coords(legal_moves(board, player, forbidden)):
                nxt = place_stone(board, player, r, c, forbidden)
                self.assertIsNotNone(nxt)
                self.assertEqual(nxt.at(r, c), player.stone())


class TestRejectionReason(unittest.TestCase):
    def test_given_each_rejection_kind_when_explaining_then_distinct_reasons(self):
        board = board_from_rows(CAPTURE_PAIR)
        self.assertEqual(rejection_reason(board, Player.BLACK, 8, 0), Rejection.OUT_OF_BOUNDS)
        self.assertEqual(rejection_reason(board, Player.BLACK, 0, 1), Rejection.OCCUPIED)
        self.assertEqual(rejection_reason(board, Player.BLACK, 7, 4), Rejection.OCCUPIED)
        self.assertIsNone(rejection_reason(board, Player.BLACK, 7, 1))
        self.assertIsNone(rejection_reason(board, Player.BLACK, 7, 1, {fingerprint(board)}))


if __name__ == "__main__":
    unittest.main(verbosity=2)
