"""
Main game engine for Space Invaders.

This module provides the pygame window, the event pump and the frame loop
around a GameSession.
"""

from pathlib import Path
from typing import Optional

import pygame

from invaders import config
from invaders.input.pygame_source import PygameKeySource
from invaders.logging import get_logger
from invaders.session import WAITING_MESSAGE, GameSession
from invaders.sprites import SpriteConfig, SpriteStore

log = get_logger('engine')

# Used for any sprite whose image file is missing from the assets directory
PLACEHOLDER_SPRITES = {
    config.SHIP_SPRITE: SpriteConfig(width=30, height=20, color=config.Colors.GREEN),
    config.SHOT_SPRITE: SpriteConfig(width=4, height=12, color=config.Colors.WHITE),
    config.ALIEN_SHOT_SPRITE: SpriteConfig(width=4, height=12, color=config.Colors.RED),
    config.ALIEN_SPRITES[0]: SpriteConfig(width=30, height=20, color=config.Colors.CYAN),
    config.ALIEN_SPRITES[1]: SpriteConfig(width=30, height=18, color=config.Colors.MAGENTA),
    config.ALIEN_SPRITES[2]: SpriteConfig(width=30, height=20, color=config.Colors.YELLOW),
}


def create_sprite_store(assets_dir: Optional[str] = None) -> SpriteStore:
    """Build a sprite store, filling in placeholders for missing images."""
    assets = Path(assets_dir or config.ASSETS_DIR)
    store = SpriteStore(assets)
    for ref, sprite_config in PLACEHOLDER_SPRITES.items():
        if not (assets / ref).exists():
            log.debug("No image for %s, using placeholder", ref)
            store.register_placeholder(ref, sprite_config)
    return store


class GameEngine:
    """Owns the pygame display and drives a GameSession every frame.

    Attributes:
        screen: Pygame display surface
        clock: Pygame clock for frame pacing
        running: Whether the game loop should continue
        session: The game session being played
        key_source: Keyboard events from pygame

    Examples:
        >>> engine = GameEngine()
        >>> engine.run()
    """

    def __init__(self, assets_dir: Optional[str] = None):
        pygame.init()

        self.screen = pygame.display.set_mode((config.SCREEN_WIDTH, config.SCREEN_HEIGHT))
        pygame.display.set_caption("Space Invaders")

        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 28)
        self.running = True

        self.session = GameSession(create_sprite_store(assets_dir))
        self.key_source = PygameKeySource()

    def handle_events(self) -> None:
        """Pump pygame events into the session's input controller."""
        for event in self.key_source.update():
            if event.type == pygame.QUIT:
                self.running = False

        self.session.controller.handle_all(self.key_source.poll_events())

    def update(self) -> None:
        self.session.update()

    def render(self) -> None:
        self.screen.fill(config.Colors.BACKGROUND)
        self.session.render(self.screen)

        if self.session.message:
            self._draw_centered(self.session.message, config.SCREEN_HEIGHT // 2 - 20)
            if self.session.message != WAITING_MESSAGE:
                self._draw_centered(WAITING_MESSAGE, config.SCREEN_HEIGHT // 2 + 20)
        elif self.session.flags.paused:
            self._draw_centered("Paused", config.SCREEN_HEIGHT // 2)

        pygame.display.flip()

    def _draw_centered(self, text: str, y: int) -> None:
        surface = self.font.render(text, True, config.Colors.MESSAGE)
        self.screen.blit(surface, ((config.SCREEN_WIDTH - surface.get_width()) // 2, y))

    def run(self) -> None:
        """Run the game loop until the window is closed."""
        while self.running:
            self.handle_events()
            self.update()
            self.render()
            self.clock.tick(config.FPS)

    def quit(self) -> None:
        pygame.quit()
