"""
Base entity for every actor on screen.

An entity owns a sub-pixel position, a velocity in pixels per second and a
sequence of animation frames. Positions are floats so that an entity can
move part of a pixel per tick without losing accuracy; they are truncated
to integers only when drawing or testing collisions.
"""

import time
from abc import ABC, abstractmethod
from typing import Callable, List, Sequence, Tuple, Union

import pygame

from invaders import config
from invaders.sprites import Sprite, SpriteStore


def monotonic_ms() -> int:
    """Wall clock in whole milliseconds."""
    return int(time.monotonic() * 1000)


class Entity(ABC):
    """Abstract game actor.

    Subclasses must implement:
        - collided_with(other): React to overlapping another entity

    Optional overrides:
        - move(delta): Call super().move(delta), then apply boundary rules
        - do_logic(): Respond to a session-wide logic pass

    Attributes:
        x: Horizontal position in pixels (float)
        y: Vertical position in pixels (float)
        dx: Horizontal speed in pixels per second
        dy: Vertical speed in pixels per second

    Examples:
        >>> shot = AlienShotEntity(session, store, 'alien_shot.gif', 100, 500)
        >>> shot.move(100)  # 100 ms at 300 px/s
        >>> shot.y
        530.0
    """

    def __init__(
        self,
        store: SpriteStore,
        ref: Union[str, Sequence[str]],
        x: float,
        y: float,
        frame_hold_ms: int = config.FRAME_HOLD_MS,
        clock: Callable[[], int] = monotonic_ms,
    ):
        """Create an entity from one sprite reference or a list of them.

        Args:
            store: Sprite store used to resolve references
            ref: A single reference, or the animation frames in order
            x: Initial horizontal position
            y: Initial vertical position
            frame_hold_ms: Time each animation frame stays on screen
            clock: Wall clock in milliseconds, sampled to pace animation

        Raises:
            ValueError: If no sprite reference is given or frame_hold_ms
                is not positive
        """
        refs = [ref] if isinstance(ref, str) else list(ref)
        if not refs:
            raise ValueError("An entity needs at least one sprite reference")
        if frame_hold_ms <= 0:
            raise ValueError(f"frame_hold_ms must be positive, got {frame_hold_ms}")

        self._frames: List[Sprite] = [store.get_sprite(r) for r in refs]
        self._sprite_index = 0
        self._frame_hold_ms = frame_hold_ms
        self._clock = clock
        self._last_frame_change = clock()

        self.x = float(x)
        self.y = float(y)
        self.dx = 0.0
        self.dy = 0.0

    # -------------------------------------------------------------------------
    # Movement
    # -------------------------------------------------------------------------

    def move(self, delta: int) -> None:
        """Advance the position by the time elapsed since the last tick.

        Args:
            delta: Milliseconds since the previous tick
        """
        self.x += (delta * self.dx) / 1000
        self.y += (delta * self.dy) / 1000

    def set_horizontal_movement(self, dx: float) -> None:
        self.dx = dx

    def set_vertical_movement(self, dy: float) -> None:
        self.dy = dy

    def get_horizontal_movement(self) -> float:
        return self.dx

    def get_vertical_movement(self) -> float:
        return self.dy

    @property
    def screen_x(self) -> int:
        """Horizontal position truncated to a pixel."""
        return int(self.x)

    @property
    def screen_y(self) -> int:
        """Vertical position truncated to a pixel."""
        return int(self.y)

    @property
    def screen_position(self) -> Tuple[int, int]:
        return int(self.x), int(self.y)

    # -------------------------------------------------------------------------
    # Animation
    # -------------------------------------------------------------------------

    @property
    def frame_count(self) -> int:
        return len(self._frames)

    @property
    def sprite_index(self) -> int:
        """Index of the frame currently shown."""
        return self._sprite_index

    @property
    def sprite(self) -> Sprite:
        """The frame currently shown."""
        return self._frames[self._sprite_index]

    @property
    def frame_hold_ms(self) -> int:
        return self._frame_hold_ms

    def advance_animation(self) -> int:
        """Step the animation according to the wall clock.

        The frame moves on once for every full hold period since the last
        change; reaching the hold period exactly counts. Sampling more often
        never advances faster, so this is safe to call from both the tick
        and the draw.

        Returns:
            Number of frame steps taken
        """
        now = self._clock()
        steps = int((now - self._last_frame_change) // self._frame_hold_ms)
        if steps <= 0:
            return 0

        self._last_frame_change += steps * self._frame_hold_ms
        self._sprite_index = (self._sprite_index + steps) % len(self._frames)
        return steps

    def draw(self, surface: pygame.Surface) -> None:
        """Advance the animation, then draw the current frame.

        Args:
            surface: Surface to draw on
        """
        self.advance_animation()
        self.sprite.draw(surface, int(self.x), int(self.y))

    # -------------------------------------------------------------------------
    # Collision
    # -------------------------------------------------------------------------

    @property
    def bounds(self) -> pygame.Rect:
        """Collision rectangle from the truncated position and current frame."""
        sprite = self.sprite
        return pygame.Rect(int(self.x), int(self.y), sprite.width, sprite.height)

    def collides_with(self, other: 'Entity') -> bool:
        """Check if this entity's rectangle overlaps the other's.

        Rectangles that only share an edge do not overlap.
        """
        return self.bounds.colliderect(other.bounds)

    @abstractmethod
    def collided_with(self, other: 'Entity') -> None:
        """Notification that this entity collided with another.

        Args:
            other: The entity this one overlapped
        """
        pass

    def do_logic(self) -> None:
        """Run game logic requested by the session. Does nothing by default."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x:.2f}, y={self.y:.2f})"
