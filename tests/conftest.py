"""Shared fixtures: headless pygame, in-memory sprites and a fake clock."""
import os

# Must be set before pygame creates any display
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

from typing import List
from unittest.mock import MagicMock

import pygame
import pytest

from invaders import config
from invaders.sprites import SpriteStore
from invaders.world import EntityWorld


class FakeClock:
    """Millisecond wall clock moved by hand."""

    def __init__(self, now: int = 0):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class RecordingGame:
    """Session stand-in that defers removals through an EntityWorld."""

    def __init__(self):
        self.world = EntityWorld()
        self.deaths = 0
        self.alien_kills = 0
        self.logic_requests = 0
        self.removed: List = []

    def remove_entity(self, entity) -> None:
        self.removed.append(entity)
        self.world.remove(entity)

    def is_removed(self, entity) -> bool:
        return self.world.is_pending_removal(entity)

    def notify_death(self) -> None:
        self.deaths += 1

    def notify_alien_killed(self) -> None:
        self.alien_kills += 1

    def update_logic(self) -> None:
        self.logic_requests += 1


def _solid(width: int, height: int, color=(255, 255, 255)) -> pygame.Surface:
    surface = pygame.Surface((width, height))
    surface.fill(color)
    return surface


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> SpriteStore:
    """Sprite store with every game sprite plus a few test shapes."""
    store = SpriteStore()
    store.register(config.SHIP_SPRITE, _solid(30, 20, (0, 255, 0)))
    store.register(config.SHOT_SPRITE, _solid(4, 12))
    store.register(config.ALIEN_SHOT_SPRITE, _solid(4, 12, (255, 0, 0)))
    for ref in config.ALIEN_SPRITES:
        store.register(ref, _solid(30, 20, (0, 255, 255)))
    store.register('small', _solid(10, 10, (255, 0, 0)))
    store.register('medium', _solid(10, 10, (0, 0, 255)))
    store.register('big', _solid(20, 20, (0, 255, 0)))
    return store


@pytest.fixture
def game() -> RecordingGame:
    return RecordingGame()


@pytest.fixture
def mock_game() -> MagicMock:
    game = MagicMock()
    game.is_removed.return_value = False
    return game
