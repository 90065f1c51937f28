"""Keyboard input: event model, key table, controller and pygame source."""
from invaders.input.key_event import KeyEvent, KeyEventKind
from invaders.input.keymap import GameKey
from invaders.input.controller import InputController
from invaders.input.pygame_source import PygameKeySource

__all__ = [
    'KeyEvent',
    'KeyEventKind',
    'GameKey',
    'InputController',
    'PygameKeySource',
]
