"""Shots fired by the aliens."""

from typing import TYPE_CHECKING, Sequence, Union

from invaders import config
from invaders.entities.base import Entity
from invaders.entities.ship import ShipEntity
from invaders.logging import get_logger
from invaders.sprites import SpriteStore

if TYPE_CHECKING:
    from invaders.session import GameSession

log = get_logger('entities')


class AlienShotEntity(Entity):
    """A shot fired by an alien at the player's ship.

    The shot removes itself once it passes `top_limit` or `bottom_limit`. Hitting the ship removes both and
    ends the round.

    Attributes:
        used: Set once the shot has hit the ship
    """

    def __init__(
        self,
        game: 'GameSession',
        store: SpriteStore,
        ref: Union[str, Sequence[str]],
        x: float,
        y: float,
        speed: float = config.ALIEN_SHOT_SPEED,
        top_limit: float = config.SHOT_TOP_LIMIT,
        bottom_limit: float = config.SCREEN_HEIGHT - config.SHOT_TOP_LIMIT,
        **kwargs,
    ):
        super().__init__(store, ref, x, y, **kwargs)
        self.game = game
        self.dy = speed
        self.top_limit = top_limit
        self.bottom_limit = bottom_limit
        self.used = False

    def move(self, delta: int) -> None:
        super().move(delta)

        if self.y < self.top_limit or self.y > self.bottom_limit:
            log.debug("Removing alien shot at y=%.1f", self.y)
            self.game.remove_entity(self)

    def collided_with(self, other: Entity) -> None:
        # A shot that already hit must not kill twice
        if self.used:
            return

        if isinstance(other, ShipEntity):
            if self.game.is_removed(other):
                return
            self.game.remove_entity(self)
            self.game.remove_entity(other)
            self.game.notify_death()
            self.used = True
