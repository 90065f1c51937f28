"""
Entry point for Space Invaders.

Run with:
    python -m invaders
"""

from invaders.engine import GameEngine


def main():
    """Initialize and run the game."""
    engine = GameEngine()

    try:
        engine.run()
    finally:
        engine.quit()


if __name__ == "__main__":
    main()
