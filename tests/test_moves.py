import random
import unittest

from game import (
    DIM,
    Board,
    Direction,
    GameState,
    push,
    left,
    right,
    up,
    down,
)


def state_with_row(row, r=0):
    rows = [[0] * DIM for _ in range(DIM)]
    rows[r] = list(row)
    return GameState(board=Board.from_rows(rows), score=0)


def random_board(rng):
    return Board(grid=[rng.choice([0, 0, 2, 2, 4, 8]) for _ in range(DIM * DIM)])


# (row before a left push, row after, score gained)
LEFT_CASES = [
    ([0, 2, 0, 2], [4, 0, 0, 0], 4),
    ([4, 0, 4, 4], [8, 4, 0, 0], 8),
    ([2, 2, 2, 2], [4, 4, 0, 0], 8),
    ([2, 4, 4, 2], [2, 8, 2, 0], 8),
    ([0, 0, 0, 2], [2, 0, 0, 0], 0),
    ([2, 4, 8, 16], [2, 4, 8, 16], 0),
    ([4, 4, 8, 8], [8, 16, 0, 0], 24),
]


class TestPushLeft(unittest.TestCase):
    def test_given_documented_rows_when_pushed_left_then_expected_rows_and_score(self):
        for before, after, gained in LEFT_CASES:
            with self.subTest(row=before):
                s = state_with_row(before)
                changed = left(s)
                self.assertEqual(s.board.rows()[0], after)
                self.assertEqual(s.score, gained)
                self.assertEqual(changed, before != after)

    def test_given_four_equal_tiles_when_pushed_left_twice_then_merges_once_per_push(self):
        s = state_with_row([2, 2, 2, 2])
        self.assertTrue(left(s))
        self.assertEqual(s.board.rows()[0], [4, 4, 0, 0])
        self.assertTrue(left(s))
        self.assertEqual(s.board.rows()[0], [8, 0, 0, 0])
        self.assertEqual(s.score, 16)

    def test_given_mixed_row_when_pushed_left_then_new_pair_merges_only_on_next_push(self):
        s = state_with_row([2, 2, 4, 2])
        self.assertTrue(left(s))
        self.assertEqual(s.board.rows()[0], [4, 4, 2, 0])
        self.assertTrue(left(s))
        self.assertEqual(s.board.rows()[0], [8, 2, 0, 0])
        self.assertFalse(left(s))
        self.assertEqual(s.score, 12)

    def test_given_score_when_pushing_then_score_accumulates(self):
        s = state_with_row([2, 2, 0, 0])
        s.score = 100
        left(s)
        self.assertEqual(s.score, 104)

    def test_given_rows_when_pushed_then_other_rows_are_independent(self):
        s = GameState(board=Board.from_rows([
            [2, 2, 0, 0],
            [0, 0, 0, 0],
            [4, 0, 0, 4],
            [2, 4, 2, 4],
        ]))
        self.assertTrue(left(s))
        self.assertEqual(s.board.rows(), [
            [4, 0, 0, 0],
            [0, 0, 0, 0],
            [8, 0, 0, 0],
            [2, 4, 2, 4],
        ])
        self.assertEqual(s.score, 12)

    def test_given_empty_board_when_pushed_then_unchanged(self):
        for d in Direction:
            s = GameState()
            self.assertFalse(push(s, d))
            self.assertEqual(s.board.grid, [0] * (DIM * DIM))


class TestPushSymmetry(unittest.TestCase):
    def test_given_left_cases_when_mirrored_then_right_matches(self):
        for before, after, gained in LEFT_CASES:
            with self.subTest(row=before):
                s = state_with_row(list(reversed(before)), r=2)
                right(s)
                self.assertEqual(s.board.rows()[2], list(reversed(after)))
                self.assertEqual(s.score, gained)

    def test_given_left_cases_when_transposed_then_up_matches(self):
        for before, after, gained in LEFT_CASES:
            with self.subTest(row=before):
                rows = [[0] * DIM for _ in range(DIM)]
                for i, v in enumerate(before):
                    rows[i][1] = v
                s = GameState(board=Board.from_rows(rows))
                up(s)
                self.assertEqual([s.board.at(i, 1) for i in range(DIM)], after)
                self.assertEqual(s.score, gained)

    def test_given_left_cases_when_transposed_and_mirrored_then_down_matches(self):
        for before, after, gained in LEFT_CASES:
            with self.subTest(row=before):
                rows = [[0] * DIM for _ in range(DIM)]
                for i, v in enumerate(reversed(before)):
                    rows[i][3] = v
                s = GameState(board=Board.from_rows(rows))
                changed = down(s)
                self.assertEqual([s.board.at(i, 3) for i in range(DIM)], list(reversed(after)))
                self.assertEqual(s.score, gained)
                self.assertEqual(changed, before != after)


class TestPushProperties(unittest.TestCase):
    def test_given_random_boards_when_pushed_until_settled_then_next_push_is_noop(self):
        rng = random.Random(2048)
        for _ in range(200):
            board = random_board(rng)
            for d in Direction:
                s = GameState(board=board.copy())
                # a line of DIM tiles settles after at most DIM - 1 changing pushes
                for _ in range(DIM):
                    if not push(s, d):
                        break
                settled = list(s.board.grid)
                score = s.score
                self.assertFalse(push(s, d))
                self.assertEqual(s.board.grid, settled)
                self.assertEqual(s.score, score)

    def test_given_random_boards_when_pushed_then_tile_sum_preserved_and_flag_matches_change(self):
        rng = random.Random(7)
        for _ in range(200):
            board = random_board(rng)
            for d in Direction:
                s = GameState(board=board.copy())
                changed = push(s, d)
                self.assertEqual(sum(s.board.grid), sum(board.grid))
                self.assertEqual(changed, s.board.grid != board.grid)
                self.assertTrue(s.board.is_valid())


class TestDirectionParse(unittest.TestCase):
    def test_given_names_and_keys_when_parsed_then_directions(self):
        self.assertIs(Direction.parse('left'), Direction.LEFT)
        self.assertIs(Direction.parse(' UP '), Direction.UP)
        self.assertIs(Direction.parse('w'), Direction.UP)
        self.assertIs(Direction.parse('a'), Direction.LEFT)
        self.assertIs(Direction.parse('s'), Direction.DOWN)
        self.assertIs(Direction.parse('D'), Direction.RIGHT)

    def test_given_unknown_text_when_parsed_then_value_error(self):
        with self.assertRaises(ValueError):
            Direction.parse('sideways')
        with self.assertRaises(ValueError):
            Direction.parse('')


if __name__ == '__main__':
    unittest.main(verbosity=2)
