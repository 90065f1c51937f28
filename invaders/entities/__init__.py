"""Game entities: the shared Entity base and the concrete actor kinds."""
from invaders.entities.base import Entity, monotonic_ms
from invaders.entities.alien import AlienEntity
from invaders.entities.ship import ShipEntity
from invaders.entities.shot import ShotEntity
from invaders.entities.alien_shot import AlienShotEntity

__all__ = [
    'Entity',
    'monotonic_ms',
    'AlienEntity',
    'ShipEntity',
    'ShotEntity',
    'AlienShotEntity',
]
