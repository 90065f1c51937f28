"""
A game session: the owner of the live entities.

GameSession provides the callbacks entities use (remove_entity,
notify_death, notify_alien_killed, update_logic), builds the ship and the
alien fleet when a round starts, and runs one simulation step per tick:

    read flags -> move everything -> collision sweep -> apply removals
    -> logic pass

Removals and logic passes requested during a step only take effect at the
end of it.
"""

import random
from typing import Callable, List, Optional

import pygame

from invaders import config
from invaders.clock import TickClock
from invaders.collision import CollisionEngine
from invaders.entities import (
    AlienEntity,
    AlienShotEntity,
    Entity,
    ShipEntity,
    ShotEntity,
    monotonic_ms,
)
from invaders.game_state import GameState, GameStateFlags
from invaders.input.controller import InputController
from invaders.logging import get_logger
from invaders.sprites import SpriteStore
from invaders.world import EntityWorld

log = get_logger('session')

WAITING_MESSAGE = "Press any key"
DEATH_MESSAGE = "Oh no! They got you, try again?"
WIN_MESSAGE = "Well done! You Win!"


class GameSession:
    """One game of Space Invaders.

    Attributes:
        flags: Input flags written by the controller
        controller: Keyboard controller bound to the flags
        world: Live entities
        ship: The player's ship for the current round
        message: Status text for the UI, empty while playing
        alien_count: Aliens still alive this round
        kills: Aliens destroyed this round

    Examples:
        >>> session = GameSession(store)
        >>> session.controller.handle(KeyEvent.typed('x'))   # any key starts
        >>> session.tick(10)
    """

    def __init__(
        self,
        store: SpriteStore,
        clock: Callable[[], int] = monotonic_ms,
        rng: Optional[random.Random] = None,
        alien_fire_chance: float = config.ALIEN_FIRE_CHANCE,
        on_quit: Optional[Callable[[], None]] = None,
    ):
        """Create a session waiting for its first key press.

        Args:
            store: Sprite store for entity images
            clock: Wall clock in milliseconds (animation, firing interval)
            rng: Random source for alien fire
            alien_fire_chance: Chance per alien per tick of firing
            on_quit: Escape handler; exits the process when None
        """
        self.store = store
        self._clock = clock
        self._rng = rng or random.Random()
        self.alien_fire_chance = alien_fire_chance

        self.flags = GameStateFlags()
        self.controller = InputController(self.flags, on_start=self.start_game,
                                          on_quit=on_quit)
        self.world = EntityWorld()
        self.collisions = CollisionEngine()
        self.tick_clock = TickClock(clock)

        self.ship: Optional[ShipEntity] = None
        self.message = WAITING_MESSAGE
        self.alien_count = 0
        self.kills = 0
        self._logic_required = False
        self._last_fire: Optional[int] = None

    @property
    def state(self) -> GameState:
        return self.flags.state

    # -------------------------------------------------------------------------
    # Round setup
    # -------------------------------------------------------------------------

    def start_game(self) -> None:
        """Start a fresh round: new ship, new fleet, cleared input."""
        self.world.clear()
        self.flags.reset()
        self.flags.waiting_for_key_press = False
        self.message = ""
        self.kills = 0
        self._logic_required = False
        self._last_fire = None
        self._init_entities()
        self.tick_clock.reset()
        log.info("New game started with %d aliens", self.alien_count)

    def _init_entities(self) -> None:
        self.ship = ShipEntity(self, self.store, config.SHIP_SPRITE,
                               config.SCREEN_WIDTH // 2 - 30, config.SCREEN_HEIGHT - 50,
                               clock=self._clock)
        self.world.add(self.ship)

        self.alien_count = 0
        for row in range(config.ALIEN_ROWS):
            for col in range(config.ALIEN_COLUMNS):
                alien = AlienEntity(self, self.store, config.ALIEN_SPRITES,
                                    100 + col * config.ALIEN_SPACING, 50 + row * 30,
                                    clock=self._clock)
                self.world.add(alien)
                self.alien_count += 1

    @property
    def aliens(self) -> List[AlienEntity]:
        return [e for e in self.world.entities if isinstance(e, AlienEntity)]

    # -------------------------------------------------------------------------
    # Callbacks used by entities
    # -------------------------------------------------------------------------

    def remove_entity(self, entity: Entity) -> None:
        """Remove an entity at the end of the current tick. Idempotent."""
        self.world.remove(entity)

    def is_removed(self, entity: Entity) -> bool:
        """True if the entity is already marked for removal this tick."""
        return self.world.is_pending_removal(entity)

    def notify_death(self) -> None:
        """The player was killed; wait for a key before the next round."""
        if self.flags.waiting_for_key_press:
            return
        log.info("Player died after %d kills", self.kills)
        self.message = DEATH_MESSAGE
        self.controller.await_start()

    def notify_win(self) -> None:
        """Every alien is dead; wait for a key before the next round."""
        if self.flags.waiting_for_key_press:
            return
        log.info("Player won")
        self.message = WIN_MESSAGE
        self.controller.await_start()

    def notify_alien_killed(self) -> None:
        """An alien was destroyed; the rest speed up."""
        self.alien_count -= 1
        self.kills += 1

        if self.alien_count == 0:
            self.notify_win()

        for alien in self.aliens:
            alien.set_horizontal_movement(alien.get_horizontal_movement() * config.ALIEN_SPEEDUP)

    def update_logic(self) -> None:
        """Ask for a logic pass over every entity at the end of the tick."""
        self._logic_required = True

    # -------------------------------------------------------------------------
    # Firing
    # -------------------------------------------------------------------------

    def try_to_fire(self) -> bool:
        """Fire a shot from the ship unless the firing interval has not passed.

        Returns:
            True if a shot was fired
        """
        if self.ship is None:
            return False

        now = self._clock()
        if self._last_fire is not None and now - self._last_fire < config.FIRING_INTERVAL_MS:
            return False

        self._last_fire = now
        shot = ShotEntity(self, self.store, config.SHOT_SPRITE,
                          self.ship.screen_x + 10, self.ship.screen_y - 30,
                          clock=self._clock)
        self.world.add(shot)
        return True

    def _aliens_fire(self) -> None:
        for alien in self.aliens:
            if self.world.is_pending_removal(alien):
                continue
            if self._rng.random() < self.alien_fire_chance:
                sprite = alien.sprite
                shot = AlienShotEntity(self, self.store, config.ALIEN_SHOT_SPRITE,
                                       alien.screen_x + sprite.width // 2,
                                       alien.screen_y + sprite.height,
                                       clock=self._clock)
                self.world.add(shot)

    # -------------------------------------------------------------------------
    # Simulation
    # -------------------------------------------------------------------------

    def update(self) -> int:
        """Run one tick using the session's own clock.

        While waiting or paused nothing moves and the delta baseline keeps
        being reset, so resuming never applies the idle time.

        Returns:
            The delta applied in milliseconds (0 when idle)
        """
        if self.state != GameState.PLAYING:
            self.tick_clock.reset()
            return 0

        delta = self.tick_clock.tick()
        self.tick(delta)
        return delta

    def tick(self, delta: int) -> bool:
        """Advance the simulation by `delta` milliseconds.

        Args:
            delta: Milliseconds since the previous tick

        Returns:
            True if the simulation advanced (False while waiting or paused)

        Raises:
            ValueError: If delta is negative
        """
        if delta < 0:
            raise ValueError(f"delta must be non-negative, got {delta}")
        if self.state != GameState.PLAYING:
            return False

        self._steer_ship()
        if self.flags.fire_pressed:
            self.try_to_fire()
        self._aliens_fire()

        for entity in self.world.entities:
            entity.move(delta)

        self.collisions.sweep(self.world.entities)
        self.world.apply_removals()

        if self._logic_required:
            for entity in self.world.entities:
                entity.do_logic()
            self._logic_required = False

        return True

    def _steer_ship(self) -> None:
        if self.ship is None:
            return
        self.ship.set_horizontal_movement(0)
        if self.flags.left_pressed and not self.flags.right_pressed:
            self.ship.set_horizontal_movement(-config.SHIP_SPEED)
        elif self.flags.right_pressed and not self.flags.left_pressed:
            self.ship.set_horizontal_movement(config.SHIP_SPEED)

    def render(self, surface: pygame.Surface) -> None:
        """Draw every live entity."""
        for entity in self.world.entities:
            entity.draw(surface)
            if config.SHOW_BOUNDING_BOXES:
                pygame.draw.rect(surface, config.Colors.RED, entity.bounds, 1)
