"""Arrow keys -> engine commands"""
from typing import Dict, Optional
import pygame
from tetris_engine import Command

KEYMAP: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.MOVE_DOWN,
    pygame.K_UP: Command.ROTATE,
}

def command_for_key(key: int) -> Optional[Command]:
    return KEYMAP.get(key)
