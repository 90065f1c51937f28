"""Fixed mapping from platform key codes and characters to game actions."""

from enum import Enum
from typing import Optional

import pygame


class GameKey(str, Enum):
    """Keys the game reacts to."""
    LEFT = "left"
    RIGHT = "right"
    FIRE = "fire"
    PAUSE = "pause"
    ESCAPE = "escape"


KEY_CODES = {
    pygame.K_LEFT: GameKey.LEFT,
    pygame.K_RIGHT: GameKey.RIGHT,
    pygame.K_SPACE: GameKey.FIRE,
    pygame.K_ESCAPE: GameKey.ESCAPE,
}

# Typed characters: 'P' (80) and 'p' (112) toggle pause, ESC (27) quits
TYPED_CHARS = {
    'p': GameKey.PAUSE,
    'P': GameKey.PAUSE,
    '\x1b': GameKey.ESCAPE,
}


def key_for_code(code: Optional[int]) -> Optional[GameKey]:
    """Game key bound to a key code, or None when unmapped."""
    if code is None:
        return None
    return KEY_CODES.get(code)


def key_for_char(char: Optional[str]) -> Optional[GameKey]:
    """Game key bound to a typed character, or None when unmapped."""
    if char is None:
        return None
    return TYPED_CHARS.get(char)
