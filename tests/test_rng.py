import unittest

from tetris_engine import new_game
from tetris_grid import Cell
from tetris_rng import PieceRandom


class PieceRandomTests(unittest.TestCase):
    def test_seed_replays_sequence(self):
        a = PieceRandom(1234)
        b = PieceRandom(1234)
        self.assertEqual([a.next_piece() for _ in range(50)], [b.next_piece() for _ in range(50)])

    def test_reset(self):
        r = PieceRandom(99)
        first = [r.next_piece() for _ in range(20)]
        r.reset()
        self.assertEqual([r.next_piece() for _ in range(20)], first)

    def test_reset_replays_a_new_game(self):
        r = PieceRandom(5)
        first = new_game(r)
        for _ in range(10):
            r.next_piece()
        r.reset()
        self.assertEqual(new_game(r), first)

    def test_never_deals_empty_and_covers_all_families(self):
        r = PieceRandom(0)
        seen = {r.next_piece() for _ in range(500)}
        self.assertNotIn(Cell.EMPTY, seen)
        self.assertEqual(seen, set(PieceRandom.PIECES))


if __name__ == "__main__":
    unittest.main()
