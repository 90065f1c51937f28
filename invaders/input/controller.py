"""
Keyboard controller for the game.

Turns key events into writes on GameStateFlags: movement and fire intent
while playing, the pause toggle, the "press any key" start gate and quit.
The controller never moves anything itself; the session reads the flags
at the start of every tick.
"""

import sys
from typing import Callable, Iterable, Optional

from invaders import config
from invaders.game_state import GameState, GameStateFlags
from invaders.input.key_event import KeyEvent, KeyEventKind
from invaders.input.keymap import GameKey, key_for_char, key_for_code
from invaders.logging import get_logger

log = get_logger('input')


def _exit_process() -> None:
    sys.exit(0)


class InputController:
    """Maps key events onto the session's game state flags.

    States:
        WAITING_FOR_START: press/release are ignored. A typed event first
            drains any pending echo (the release of a key that was held
            when the gate opened); the first typed event with no echo
            pending starts the session.
        PLAYING / PAUSED: left, right and fire set their flag on press and
            clear it on release.

    Typing 'p' or 'P' toggles pause in any state, except for the typed
    event that starts the session. Escape quits the process with status 0.

    Attributes:
        flags: Flags shared with the session
        suppressed_count: Typed events swallowed as echoes by the start gate

    Examples:
        >>> flags = GameStateFlags()
        >>> controller = InputController(flags, on_start=session.start_game)
        >>> controller.handle(KeyEvent.typed('x'))
        >>> flags.state
        <GameState.PLAYING: 'playing'>
    """

    def __init__(
        self,
        flags: GameStateFlags,
        on_start: Optional[Callable[[], None]] = None,
        on_quit: Optional[Callable[[], None]] = None,
    ):
        """Initialize the controller.

        Args:
            flags: Flags to write to
            on_start: Called when the start gate opens
            on_quit: Called on Escape; exits the process by default
        """
        if not isinstance(flags, GameStateFlags):
            raise TypeError(
                f"flags must be an instance of GameStateFlags, got {type(flags).__name__}"
            )
        self.flags = flags
        self._on_start = on_start
        self._on_quit = on_quit or _exit_process
        self._pending_echoes = 0
        self.suppressed_count = 0

    @property
    def state(self) -> GameState:
        return self.flags.state

    @property
    def pending_echoes(self) -> int:
        return self._pending_echoes

    def await_start(self, echo_events: int = config.START_ECHO_EVENTS) -> None:
        """Close the start gate, e.g. after the player died.

        Args:
            echo_events: Typed events to swallow before one may start play.
                A player usually still holds a key when the round ends; its
                release arrives as a typed event that must not restart.
        """
        if echo_events < 0:
            raise ValueError(f"echo_events must be non-negative, got {echo_events}")
        self.flags.waiting_for_key_press = True
        self.flags.release_all()
        self._pending_echoes = echo_events
        self.suppressed_count = 0

    # -------------------------------------------------------------------------
    # Event entry points
    # -------------------------------------------------------------------------

    def handle(self, event: KeyEvent) -> None:
        """Dispatch a key event by kind."""
        if event.kind == KeyEventKind.PRESSED:
            self.key_pressed(event.key)
        elif event.kind == KeyEventKind.RELEASED:
            self.key_released(event.key)
        elif event.kind == KeyEventKind.TYPED:
            self.key_typed(event.char)

    def handle_all(self, events: Iterable[KeyEvent]) -> None:
        for event in events:
            self.handle(event)

    def key_pressed(self, code: Optional[int]) -> None:
        """A key went down (not yet released)."""
        key = key_for_code(code)

        if key == GameKey.ESCAPE:
            self.quit()
            return

        # While waiting for "any key" a bare press means nothing
        if self.flags.waiting_for_key_press:
            return

        self._set_intent(key, True)

    def key_released(self, code: Optional[int]) -> None:
        """A key came up."""
        if self.flags.waiting_for_key_press:
            return

        self._set_intent(key_for_code(code), False)

    def key_typed(self, char: Optional[str]) -> None:
        """A key was pressed and released, producing a character."""
        key = key_for_char(char)

        if key == GameKey.ESCAPE:
            self.quit()
            return

        if self.flags.waiting_for_key_press:
            if self._pending_echoes > 0:
                self._pending_echoes -= 1
                self.suppressed_count += 1
                log.trace("Ignoring typed %r while waiting (%d suppressed)",
                          char, self.suppressed_count)
            else:
                self._start()
                return

        if key == GameKey.PAUSE:
            self.toggle_pause()

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def toggle_pause(self) -> None:
        self.flags.paused = not self.flags.paused
        log.info("Game %s", "paused" if self.flags.paused else "resumed")

    def quit(self) -> None:
        log.info("Escape pressed, quitting")
        self._on_quit()

    def _start(self) -> None:
        self.flags.waiting_for_key_press = False
        self._pending_echoes = 0
        log.info("Start key received")
        if self._on_start is not None:
            self._on_start()

    def _set_intent(self, key: Optional[GameKey], pressed: bool) -> None:
        if key == GameKey.LEFT:
            self.flags.left_pressed = pressed
        elif key == GameKey.RIGHT:
            self.flags.right_pressed = pressed
        elif key == GameKey.FIRE:
            self.flags.fire_pressed = pressed
        else:
            log.trace("Unmapped key ignored")
