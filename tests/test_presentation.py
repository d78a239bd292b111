import unittest

import pygame

from tetris_config import CONFIG
from tetris_engine import Command
from tetris_grid import COLS, ROWS, Cell
from tetris_input import KEYMAP, command_for_key
from tetris_layout import compute_dims
from tetris_render import COLOR_NAMES, color_for


class InputTests(unittest.TestCase):
    def test_arrow_keys(self):
        self.assertEqual(command_for_key(pygame.K_LEFT), Command.MOVE_LEFT)
        self.assertEqual(command_for_key(pygame.K_RIGHT), Command.MOVE_RIGHT)
        self.assertEqual(command_for_key(pygame.K_DOWN), Command.MOVE_DOWN)
        self.assertEqual(command_for_key(pygame.K_UP), Command.ROTATE)
        self.assertEqual(set(KEYMAP.values()), set(Command))

    def test_other_keys_ignored(self):
        self.assertIsNone(command_for_key(pygame.K_SPACE))


class ColorTests(unittest.TestCase):
    def test_color_names(self):
        self.assertEqual(
            [COLOR_NAMES[c] for c in Cell],
            ["transparent", "cyan", "blue", "orange", "yellow", "lime", "purple", "red"],
        )

    def test_empty_is_transparent(self):
        self.assertIsNone(color_for(Cell.EMPTY))
        self.assertEqual(color_for(Cell.I), (0, 255, 255))
        self.assertEqual(color_for(7), (255, 0, 0))


class LayoutTests(unittest.TestCase):
    def test_dims(self):
        d = compute_dims(COLS, ROWS)
        cell = CONFIG["CELL_SIZE"]
        self.assertEqual((d.board_w, d.board_h), (COLS * cell, ROWS * cell))
        self.assertEqual(d.total_w, d.board_w + 2 * d.margin)
        self.assertEqual((d.board_x, d.board_y), (d.margin, d.margin))


if __name__ == "__main__":
    unittest.main()
