"""
Space Invaders - Configuration loader.

Loads settings from a .env file next to the package, with sensible defaults.
Speeds are in pixels per second, durations in milliseconds.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from package directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Display
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 800)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 600)
FPS = _get_int('FPS', 100)
ASSETS_DIR = os.getenv('ASSETS_DIR', str(Path(__file__).parent / 'sprites'))

# Animation
FRAME_HOLD_MS = _get_int('FRAME_HOLD_MS', 1000)  # time each animation frame is shown

# Player ship
SHIP_SPEED = _get_float('SHIP_SPEED', 300.0)
SHIP_MIN_X = _get_int('SHIP_MIN_X', 10)  # ship stops at this left margin
SHIP_MAX_X_MARGIN = _get_int('SHIP_MAX_X_MARGIN', 50)  # distance from right edge

# Shots
SHOT_SPEED = _get_float('SHOT_SPEED', -300.0)  # player shots travel up
ALIEN_SHOT_SPEED = _get_float('ALIEN_SHOT_SPEED', 300.0)  # alien shots travel down
FIRING_INTERVAL_MS = _get_int('FIRING_INTERVAL_MS', 500)
SHOT_TOP_LIMIT = _get_float('SHOT_TOP_LIMIT', -100.0)  # removed once y drops below
ALIEN_FIRE_CHANCE = _get_float('ALIEN_FIRE_CHANCE', 0.002)  # per alien per tick

# Aliens
ALIEN_SPEED = _get_float('ALIEN_SPEED', 75.0)
ALIEN_ROWS = _get_int('ALIEN_ROWS', 5)
ALIEN_COLUMNS = _get_int('ALIEN_COLUMNS', 12)
ALIEN_SPACING = _get_int('ALIEN_SPACING', 50)
ALIEN_EDGE_MARGIN = _get_int('ALIEN_EDGE_MARGIN', 10)
ALIEN_DROP = _get_float('ALIEN_DROP', 10.0)  # pixels moved down at each edge
ALIEN_SPEEDUP = _get_float('ALIEN_SPEEDUP', 1.02)  # applied per kill
ALIEN_LANDING_Y = _get_int('ALIEN_LANDING_Y', 570)

# Input
# Typed events swallowed after a game over before "any key" restarts play
START_ECHO_EVENTS = _get_int('START_ECHO_EVENTS', 1)

# Debug
SHOW_BOUNDING_BOXES = _get_bool('SHOW_BOUNDING_BOXES', False)


# Sprite references used by the game
SHIP_SPRITE = 'ship.gif'
SHOT_SPRITE = 'shot.gif'
ALIEN_SHOT_SPRITE = 'alien_shot.gif'
ALIEN_SPRITES = ('alien.gif', 'alien2.gif', 'alien3.gif')


class Colors:
    """Color constants for placeholder sprites and UI text."""
    BLACK = (0, 0, 0, 255)
    WHITE = (255, 255, 255, 255)
    GREEN = (0, 255, 0, 255)
    RED = (255, 0, 0, 255)
    YELLOW = (255, 255, 0, 255)
    CYAN = (0, 255, 255, 255)
    MAGENTA = (255, 0, 255, 255)
    BACKGROUND = BLACK
    MESSAGE = WHITE
