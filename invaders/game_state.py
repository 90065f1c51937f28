"""Game state shared between the input controller and the session.

GameStateFlags is written by the InputController and read by the session
once per tick. The GameState enum is a read-only view of the flags.
"""
from dataclasses import dataclass
from enum import Enum


class GameState(str, Enum):
    """States of a game session.

    Attributes:
        WAITING_FOR_START: Waiting for "any key" before play starts
        PLAYING: Active gameplay
        PAUSED: Gameplay suspended by the pause key
    """
    WAITING_FOR_START = "waiting_for_start"
    PLAYING = "playing"
    PAUSED = "paused"


@dataclass
class GameStateFlags:
    """Mutable input flags for one game session.

    Attributes:
        left_pressed: Left movement key is held
        right_pressed: Right movement key is held
        fire_pressed: Fire key is held
        waiting_for_key_press: Session is gated on "press any key"
        paused: Gameplay is paused
    """
    left_pressed: bool = False
    right_pressed: bool = False
    fire_pressed: bool = False
    waiting_for_key_press: bool = True
    paused: bool = False

    def reset(self) -> None:
        """Restore session-start defaults."""
        self.left_pressed = False
        self.right_pressed = False
        self.fire_pressed = False
        self.waiting_for_key_press = True
        self.paused = False

    def release_all(self) -> None:
        """Clear the movement and fire flags."""
        self.left_pressed = False
        self.right_pressed = False
        self.fire_pressed = False

    @property
    def state(self) -> GameState:
        if self.waiting_for_key_press:
            return GameState.WAITING_FOR_START
        if self.paused:
            return GameState.PAUSED
        return GameState.PLAYING
