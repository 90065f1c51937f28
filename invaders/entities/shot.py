"""Shots fired by the player."""

from typing import TYPE_CHECKING, Sequence, Union

from invaders import config
from invaders.entities.alien import AlienEntity
from invaders.entities.base import Entity
from invaders.logging import get_logger
from invaders.sprites import SpriteStore

if TYPE_CHECKING:
    from invaders.session import GameSession

log = get_logger('entities')


class ShotEntity(Entity):
    """A shot travelling up from the ship.

    Attributes:
        used: Set once the shot has killed an alien; a used shot ignores
            every later collision, even one reported in the same sweep.
    """

    def __init__(
        self,
        game: 'GameSession',
        store: SpriteStore,
        ref: Union[str, Sequence[str]],
        x: float,
        y: float,
        speed: float = config.SHOT_SPEED,
        top_limit: float = config.SHOT_TOP_LIMIT,
        **kwargs,
    ):
        super().__init__(store, ref, x, y, **kwargs)
        self.game = game
        self.dy = speed
        self.top_limit = top_limit
        self.used = False

    def move(self, delta: int) -> None:
        super().move(delta)

        if self.y < self.top_limit:
            log.debug("Shot left the screen at y=%.1f", self.y)
            self.game.remove_entity(self)

    def collided_with(self, other: Entity) -> None:
        if self.used:
            return

        if isinstance(other, AlienEntity):
            # Another shot already got this alien earlier in the sweep
            if self.game.is_removed(other):
                return
            self.game.remove_entity(self)
            self.game.remove_entity(other)
            self.game.notify_alien_killed()
            self.used = True
