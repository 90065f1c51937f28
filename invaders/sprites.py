"""Sprite handles and the sprite store.

A Sprite is an opaque handle around a pygame surface. Entities only ask it
for its size and to draw itself; they never touch pixel data. SpriteStore
resolves string references to sprites and caches them, so every entity
created from the same reference shares one surface.
"""

from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import pygame
from pydantic import BaseModel, ConfigDict, Field

from invaders.logging import get_logger

log = get_logger('sprites')


class SpriteLoadError(Exception):
    """Raised when a sprite reference cannot be resolved to an image."""


class SpriteConfig(BaseModel):
    """Placeholder sprite definition used when no image file is available."""
    model_config = ConfigDict(frozen=True)

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    color: Tuple[int, int, int, int] = (255, 255, 255, 255)


class Sprite:
    """A drawable image with a fixed size."""

    def __init__(self, image: pygame.Surface):
        self._image = image

    @property
    def image(self) -> pygame.Surface:
        return self._image

    @property
    def width(self) -> int:
        return self._image.get_width()

    @property
    def height(self) -> int:
        return self._image.get_height()

    def draw(self, surface: pygame.Surface, x: int, y: int) -> None:
        """Blit the sprite with its top-left corner at (x, y)."""
        surface.blit(self._image, (x, y))

    def __repr__(self) -> str:
        return f"Sprite({self.width}x{self.height})"


class SpriteStore:
    """Loads and caches sprites keyed by reference.

    Handles:
    - Image files relative to an assets directory
    - Placeholder rectangles registered from SpriteConfig
    - Surfaces registered directly (tests, generated art)
    """

    def __init__(self, assets_dir: Optional[Union[str, Path]] = None):
        self._sprites: Dict[str, Sprite] = {}
        self._assets_dir = Path(assets_dir) if assets_dir else None

    def get_sprite(self, ref: str) -> Sprite:
        """Get the sprite for a reference, loading it on first use.

        Raises:
            SpriteLoadError: If the reference is unknown and no image file
                exists for it.
        """
        sprite = self._sprites.get(ref)
        if sprite is None:
            sprite = self._load(ref)
            self._sprites[ref] = sprite
        return sprite

    def has_sprite(self, ref: str) -> bool:
        """Check if a sprite is already loaded."""
        return ref in self._sprites

    def register(self, ref: str, image: pygame.Surface) -> Sprite:
        """Register an already built surface under a reference."""
        sprite = Sprite(image)
        self._sprites[ref] = sprite
        return sprite

    def register_placeholder(self, ref: str, config: SpriteConfig) -> Sprite:
        """Register a solid rectangle sprite for a reference."""
        image = pygame.Surface((config.width, config.height), pygame.SRCALPHA)
        image.fill(config.color)
        return self.register(ref, image)

    def _load(self, ref: str) -> Sprite:
        path = Path(ref)
        if not path.is_absolute() and self._assets_dir:
            path = self._assets_dir / ref

        if not path.exists():
            log.error("Sprite file not found: %s", path)
            raise SpriteLoadError(f"Can't find ref: {ref}")

        try:
            image = pygame.image.load(str(path))
        except pygame.error as e:
            log.error("Failed to load sprite '%s': %s", ref, e)
            raise SpriteLoadError(f"Failed to load: {ref}") from e

        # convert() needs a display; keep the raw surface when there is none
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            image = image.convert_alpha()

        log.debug("Loaded sprite %s (%dx%d)", ref, image.get_width(), image.get_height())
        return Sprite(image)
