"""Piece model, shapes, rotation"""
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Dict, Iterator, Tuple

from tetris_grid import COLS, Cell

if TYPE_CHECKING:
    from tetris_rng import PieceRandom

Shape = Tuple[Tuple[int, ...], ...]


def _shape(rows) -> Shape:
    return tuple(tuple(r) for r in rows)


SHAPES: Dict[Cell, Shape] = {
    Cell.I: _shape([[0,1,0,0],[0,1,0,0],[0,1,0,0],[0,1,0,0]]),
    Cell.J: _shape([[0,2,0],[0,2,0],[2,2,0]]),
    Cell.L: _shape([[0,3,0],[0,3,0],[0,3,3]]),
    Cell.O: _shape([[4,4],[4,4]]),
    Cell.S: _shape([[0,5,5],[5,5,0],[0,0,0]]),
    Cell.T: _shape([[0,6,0],[6,6,6],[0,0,0]]),
    Cell.Z: _shape([[7,7,0],[0,7,7],[0,0,0]]),
}


def rotate_cw(m: Shape) -> Shape:
    """Row c of the result is column c of ``m`` read bottom-to-top."""
    return tuple(zip(*m[::-1]))


@dataclass(frozen=True)
class Piece:
    color: Cell
    shape: Shape
    x: int
    y: int

    @property
    def width(self) -> int:
        return len(self.shape[0]) if self.shape else 0

    @property
    def height(self) -> int:
        return len(self.shape)

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Board coordinates of every occupied cell, unclipped."""
        for dy, row in enumerate(self.shape):
            for dx, v in enumerate(row):
                if v:
                    yield self.x + dx, self.y + dy

    @staticmethod
    def of(color: Cell, cols: int = COLS) -> "Piece":
        s = SHAPES[color]
        return Piece(color, s, cols // 2 - len(s[0]) // 2, 0)


def translate(piece: Piece, dx: int, dy: int) -> Piece:
    return replace(piece, x=piece.x + dx, y=piece.y + dy)


def rotated(piece: Piece) -> Piece:
    return replace(piece, shape=rotate_cw(piece.shape))


def spawn(rng: PieceRandom, cols: int = COLS) -> Piece:
    return Piece.of(rng.next_piece(), cols)
