"""
Space Invaders entity model.

Entities with sub-pixel movement, wall-clock animation and polymorphic
collision handling, plus the keyboard controller and game session that
drive them.

Usage:
    >>> from invaders import GameSession, SpriteStore
    >>> session = GameSession(SpriteStore('sprites'))
"""

from invaders.game_state import GameState, GameStateFlags
from invaders.sprites import Sprite, SpriteConfig, SpriteLoadError, SpriteStore
from invaders.entities import (
    Entity,
    AlienEntity,
    AlienShotEntity,
    ShipEntity,
    ShotEntity,
)
from invaders.collision import CollisionEngine
from invaders.world import EntityWorld
from invaders.clock import TickClock
from invaders.input import InputController, KeyEvent, KeyEventKind, PygameKeySource
from invaders.session import GameSession

__all__ = [
    "GameState",
    "GameStateFlags",
    "Sprite",
    "SpriteConfig",
    "SpriteLoadError",
    "SpriteStore",
    "Entity",
    "AlienEntity",
    "AlienShotEntity",
    "ShipEntity",
    "ShotEntity",
    "CollisionEngine",
    "EntityWorld",
    "TickClock",
    "InputController",
    "KeyEvent",
    "KeyEventKind",
    "PygameKeySource",
    "GameSession",
]
