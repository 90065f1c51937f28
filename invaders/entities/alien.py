"""Aliens marching across the screen."""

from typing import TYPE_CHECKING, Sequence, Union

from invaders import config
from invaders.entities.base import Entity
from invaders.sprites import SpriteStore

if TYPE_CHECKING:
    from invaders.session import GameSession


class AlienEntity(Entity):
    """An alien in the invading fleet.

    Aliens only move sideways on their own. When one reaches a screen edge
    it asks the session for a logic pass, and every alien then reverses and
    steps down in do_logic().
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
        self.dx = -config.ALIEN_SPEED
        self.min_x = config.ALIEN_EDGE_MARGIN
        self.max_x = config.SCREEN_WIDTH - config.ALIEN_SPACING
        self.drop = config.ALIEN_DROP
        self.landing_y = config.ALIEN_LANDING_Y

    def move(self, delta: int) -> None:
        if self.dx < 0 and self.x < self.min_x:
            self.game.update_logic()
        if self.dx > 0 and self.x > self.max_x:
            self.game.update_logic()

        super().move(delta)

    def do_logic(self) -> None:
        self.dx = -self.dx
        self.y += self.drop

        if self.y > self.landing_y:
            self.game.notify_death()

    def collided_with(self, other: Entity) -> None:
        # Shots and the ship resolve their own collisions with aliens
        pass
