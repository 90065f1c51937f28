"""The player's ship."""

from typing import TYPE_CHECKING, Sequence, Union

from invaders import config
from invaders.entities.alien import AlienEntity
from invaders.entities.base import Entity
from invaders.sprites import SpriteStore

if TYPE_CHECKING:
    from invaders.session import GameSession


class ShipEntity(Entity):
    """The entity steered by the player.

    The ship never leaves the screen sideways: a move that would push it
    past either margin is skipped.
    """

    def __init__(
        self,
        game: 'GameSession',
        store: SpriteStore,
        ref: Union[str, Sequence[str]],
        x: float,
        y: float,
        **kwargs,
    ):
        super().__init__(store, ref, x, y, **kwargs)
        self.game = game
        self.min_x = config.SHIP_MIN_X
        self.max_x = config.SCREEN_WIDTH - config.SHIP_MAX_X_MARGIN

    def move(self, delta: int) -> None:
        if self.dx < 0 and self.x < self.min_x:
            return
        if self.dx > 0 and self.x > self.max_x:
            return
        super().move(delta)

    def collided_with(self, other: Entity) -> None:
        if isinstance(other, AlienEntity):
            self.game.notify_death()
