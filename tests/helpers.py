from tetris_grid import Cell


class FixedRandom:
    """Stand-in for PieceRandom that deals a fixed cycle of families."""
    def __init__(self, *pieces: Cell):
        self.pieces = list(pieces)
        self.i = 0

    def next_piece(self) -> Cell:
        p = self.pieces[self.i % len(self.pieces)]
        self.i += 1
        return p
