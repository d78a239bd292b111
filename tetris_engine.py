"""Simulation engine: collision, gravity tick, commands, composite view.

Functions are pure apart from drawing pieces from the injected randomizer.
The driver keeps a single ``State`` and replaces it with whatever ``step``/``command`` return.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, NamedTuple

from tetris_grid import COLS, ROWS, Cell, Grid, clear_full_rows, empty, full_rows, merge
from tetris_piece import Piece, rotated, spawn, translate
from tetris_rng import PieceRandom

logger = logging.getLogger(__name__)

View = List[List[Cell]]


class Command(Enum):
    MOVE_LEFT = "left"
    MOVE_RIGHT = "right"
    MOVE_DOWN = "down"
    ROTATE = "rotate"


MOVES = {
    Command.MOVE_LEFT: (-1, 0),
    Command.MOVE_RIGHT: (1, 0),
    Command.MOVE_DOWN: (0, 1),
}


class TickResult(NamedTuple):
    piece: Piece
    grid: Grid
    locked: bool
    cleared: int = 0
    topped_out: bool = False


def can_place(piece: Piece, grid: Grid) -> bool:
    """True if every occupied cell is inside the walls, above the floor and
    not on a settled block. Rows above the top (y < 0) are allowed."""
    for bx, by in piece.cells():
        if bx < 0 or bx >= grid.width or by >= grid.height:
            return False
        if by >= 0 and grid.cells[by][bx] != Cell.EMPTY:
            return False
    return True


def tick(piece: Piece, grid: Grid, rng: PieceRandom) -> TickResult:
    candidate = translate(piece, 0, 1)
    if can_place(candidate, grid):
        return TickResult(candidate, grid, False)
    merged = merge(grid, piece)
    cleared = len(full_rows(merged))
    next_grid = clear_full_rows(merged) if cleared else merged
    nxt = spawn(rng, next_grid.width)
    topped_out = not can_place(nxt, next_grid)
    logger.debug("locked %s at (%d, %d), cleared %d", piece.color.name, piece.x, piece.y, cleared)
    if topped_out:
        logger.info("spawned %s cannot be placed, board topped out", nxt.color.name)
    return TickResult(nxt, next_grid, True, cleared, topped_out)


def apply_command(piece: Piece, grid: Grid, cmd: Command) -> Piece:
    """Move or rotate if legal. Never locks, even on MOVE_DOWN."""
    if cmd is Command.ROTATE:
        candidate = rotated(piece)
    else:
        dx, dy = MOVES[cmd]
        candidate = translate(piece, dx, dy)
    return candidate if can_place(candidate, grid) else piece


def render(grid: Grid, piece: Piece) -> View:
    """Grid with the active piece drawn on top; read-only, never merged back."""
    view = grid.to_lists()
    for bx, by in piece.cells():
        if 0 <= by < grid.height and 0 <= bx < grid.width:
            view[by][bx] = piece.color
    return view


# ---------- Simulation state ----------

class Status(Enum):
    RUNNING = "running"
    LOCKED_OUT = "locked_out"


@dataclass(frozen=True)
class State:
    grid: Grid
    piece: Piece
    status: Status = Status.RUNNING

    @property
    def over(self) -> bool:
        return self.status is Status.LOCKED_OUT


def new_game(rng: PieceRandom, cols: int = COLS, rows: int = ROWS) -> State:
    grid = empty(cols, rows)
    piece = spawn(rng, cols)
    status = Status.RUNNING if can_place(piece, grid) else Status.LOCKED_OUT
    return State(grid, piece, status)


def step(state: State, rng: PieceRandom) -> State:
    """One gravity tick. A locked-out state is terminal."""
    if state.over:
        return state
    res = tick(state.piece, state.grid, rng)
    if not res.locked:
        return replace(state, piece=res.piece)
    status = Status.LOCKED_OUT if res.topped_out else Status.RUNNING
    return State(res.grid, res.piece, status)


def command(state: State, cmd: Command) -> State:
    if state.over:
        return state
    piece = apply_command(state.piece, state.grid, cmd)
    if piece is state.piece:
        return state
    return replace(state, piece=piece)
