"""Grid helpers: empty, cell_at, merge, clear_full_rows"""
from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Iterable, Iterator, List, Sequence, Tuple

if TYPE_CHECKING:
    from tetris_piece import Piece

COLS, ROWS = 10, 20


class Cell(IntEnum):
    # tag order follows the shape families; EMPTY is 0
    EMPTY = 0
    I = 1
    J = 2
    L = 3
    O = 4
    S = 5
    T = 6
    Z = 7


class OutOfRangeError(IndexError):
    """Raised when a cell is queried outside the grid."""
    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"cell ({x}, {y}) outside {width}x{height} grid")
        self.x, self.y = x, y


Row = Tuple[Cell, ...]


@dataclass(frozen=True)
class Grid:
    """Settled blocks only. Every operation returns a new Grid."""
    cells: Tuple[Row, ...]

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def rows(self) -> Iterator[Row]:
        return iter(self.cells)

    def to_lists(self) -> List[List[Cell]]:
        return [list(r) for r in self.cells]


def empty(width: int = COLS, height: int = ROWS) -> Grid:
    if width <= 0 or height <= 0:
        raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
    row = (Cell.EMPTY,) * width
    return Grid((row,) * height)


def from_rows(rows: Sequence[Iterable[int]]) -> Grid:
    """Build a Grid from nested lists of cell values (top row first)."""
    cells = tuple(tuple(Cell(v) for v in r) for r in rows)
    if not cells or not cells[0]:
        raise ValueError("grid needs at least one row and one column")
    w = len(cells[0])
    for y, r in enumerate(cells):
        if len(r) != w:
            raise ValueError(f"row {y} has {len(r)} cells, expected {w}")
    return Grid(cells)


def cell_at(grid: Grid, x: int, y: int) -> Cell:
    if not grid.in_bounds(x, y):
        raise OutOfRangeError(x, y, grid.width, grid.height)
    return grid.cells[y][x]


def merge(grid: Grid, piece: Piece) -> Grid:
    """Write the piece's cells into a copy of the grid (no collision check).

    Cells above the top edge or outside the side walls are dropped.
    """
    rows = grid.to_lists()
    for bx, by in piece.cells():
        if grid.in_bounds(bx, by):
            rows[by][bx] = piece.color
    return Grid(tuple(tuple(r) for r in rows))


def is_full(row: Row) -> bool:
    return all(v != Cell.EMPTY for v in row)


def full_rows(grid: Grid) -> List[int]:
    return [y for y, r in enumerate(grid.cells) if is_full(r)]


def clear_full_rows(grid: Grid) -> Grid:
    kept = [r for r in grid.cells if not is_full(r)]
    missing = grid.height - len(kept)
    if not missing:
        return grid
    blank = (Cell.EMPTY,) * grid.width
    return Grid((blank,) * missing + tuple(kept))
