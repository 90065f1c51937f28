"""
Tests for keyboard input.

Tests cover:
- KeyEvent validation
- The fixed key table
- InputController state machine (start gate, movement, pause, quit)
- PygameKeySource event conversion
"""

from unittest.mock import MagicMock

import pygame
import pytest
from pydantic import ValidationError

from invaders.game_state import GameState, GameStateFlags
from invaders.input.controller import InputController
from invaders.input.key_event import KeyEvent, KeyEventKind
from invaders.input.keymap import GameKey, key_for_char, key_for_code
from invaders.input.pygame_source import PygameKeySource


@pytest.fixture
def flags() -> GameStateFlags:
    return GameStateFlags()


@pytest.fixture
def on_start() -> MagicMock:
    return MagicMock()


@pytest.fixture
def controller(flags, on_start) -> InputController:
    return InputController(flags, on_start=on_start, on_quit=MagicMock())


@pytest.fixture
def playing(controller) -> InputController:
    """Controller whose session has already started."""
    controller.key_typed('x')
    return controller


def press_and_release(controller: InputController, key: int, char=None) -> None:
    controller.handle(KeyEvent.pressed(key))
    controller.handle(KeyEvent.released(key))
    controller.handle(KeyEvent.typed(char, key=key))


# ============================================================================
# KeyEvent and key table
# ============================================================================


class TestKeyEvent:
    """Test the KeyEvent model."""

    def test_constructors(self):
        """Test the convenience constructors set the kind."""
        assert KeyEvent.pressed(pygame.K_LEFT).kind == KeyEventKind.PRESSED
        assert KeyEvent.released(pygame.K_LEFT).kind == KeyEventKind.RELEASED

        typed = KeyEvent.typed('a')
        assert typed.kind == KeyEventKind.TYPED
        assert typed.char == 'a'

    def test_multi_character_rejected(self):
        """Test typed characters must be a single code point."""
        with pytest.raises(ValidationError):
            KeyEvent.typed('ab')

    def test_negative_timestamp_rejected(self):
        """Test timestamps must be non-negative."""
        with pytest.raises(ValidationError) as exc_info:
            KeyEvent.pressed(pygame.K_LEFT, timestamp=-1.0)
        assert "non-negative" in str(exc_info.value)

    def test_events_are_frozen(self):
        """Test events cannot be modified."""
        event = KeyEvent.pressed(pygame.K_LEFT)
        with pytest.raises(ValidationError):
            event.key = pygame.K_RIGHT

    def test_str(self):
        """Test string form names the kind."""
        assert "typed 'p'" in str(KeyEvent.typed('p'))
        assert "pressed" in str(KeyEvent.pressed(pygame.K_SPACE))


class TestKeyMap:
    """Test the fixed key table."""

    def test_movement_and_fire_codes(self):
        assert key_for_code(pygame.K_LEFT) == GameKey.LEFT
        assert key_for_code(pygame.K_RIGHT) == GameKey.RIGHT
        assert key_for_code(pygame.K_SPACE) == GameKey.FIRE
        assert key_for_code(pygame.K_ESCAPE) == GameKey.ESCAPE

    def test_pause_is_case_insensitive(self):
        assert key_for_char('p') == GameKey.PAUSE
        assert key_for_char('P') == GameKey.PAUSE

    def test_escape_character(self):
        assert key_for_char('\x1b') == GameKey.ESCAPE

    def test_unmapped(self):
        assert key_for_code(pygame.K_a) is None
        assert key_for_code(None) is None
        assert key_for_char('z') is None
        assert key_for_char(None) is None


# ============================================================================
# InputController
# ============================================================================


class TestControllerConstruction:
    """Test controller construction."""

    def test_initial_state_is_waiting(self, controller):
        assert controller.state == GameState.WAITING_FOR_START
        assert controller.suppressed_count == 0
        assert controller.pending_echoes == 0

    def test_rejects_non_flags(self):
        """Test the controller needs a GameStateFlags instance."""
        with pytest.raises(TypeError) as exc_info:
            InputController({'paused': False})  # type: ignore
        assert "GameStateFlags" in str(exc_info.value)


class TestStartGate:
    """Test the "press any key" gate."""

    def test_press_and_release_ignored_while_waiting(self, controller, flags, on_start):
        """Test movement flags do not change while waiting."""
        controller.handle(KeyEvent.pressed(pygame.K_LEFT))
        assert not flags.left_pressed
        controller.handle(KeyEvent.pressed(pygame.K_SPACE))
        assert not flags.fire_pressed
        controller.handle(KeyEvent.released(pygame.K_LEFT))

        on_start.assert_not_called()
        assert flags.state == GameState.WAITING_FOR_START

    def test_first_typed_key_starts(self, controller, flags, on_start):
        """Test the first typed event of a new session starts play."""
        controller.handle(KeyEvent.typed('x'))

        assert flags.state == GameState.PLAYING
        on_start.assert_called_once()

    def test_typed_after_start_does_not_restart(self, playing, on_start):
        """Test typed events while playing do not call on_start again."""
        playing.handle(KeyEvent.typed('x'))
        playing.handle(KeyEvent.typed('y'))
        on_start.assert_called_once()

    def test_echo_after_game_over_is_suppressed(self, playing, flags, on_start):
        """Test the release echo of a held key does not restart."""
        playing.await_start(echo_events=1)
        on_start.reset_mock()

        press_and_release(playing, pygame.K_LEFT)

        assert playing.suppressed_count == 1
        assert not flags.left_pressed
        assert flags.state == GameState.WAITING_FOR_START
        on_start.assert_not_called()

        playing.handle(KeyEvent.typed('a'))

        assert flags.state == GameState.PLAYING
        on_start.assert_called_once()

    def test_await_start_without_echo(self, playing, flags, on_start):
        """Test a gate with no echo opens on the first typed event."""
        playing.await_start(echo_events=0)
        on_start.reset_mock()

        playing.handle(KeyEvent.typed('a'))

        assert flags.state == GameState.PLAYING
        assert playing.suppressed_count == 0
        on_start.assert_called_once()

    def test_await_start_clears_intent(self, playing, flags):
        """Test held keys are forgotten when the gate closes."""
        playing.handle(KeyEvent.pressed(pygame.K_LEFT))
        playing.handle(KeyEvent.pressed(pygame.K_SPACE))

        playing.await_start()

        assert not flags.left_pressed
        assert not flags.fire_pressed
        assert flags.waiting_for_key_press

    def test_await_start_rejects_negative(self, controller):
        with pytest.raises(ValueError):
            controller.await_start(echo_events=-1)

    def test_start_without_callback(self, flags):
        """Test the gate works with no start callback."""
        controller = InputController(flags, on_quit=MagicMock())
        controller.handle(KeyEvent.typed('x'))
        assert flags.state == GameState.PLAYING


class TestMovementKeys:
    """Test left/right/fire intent while playing."""

    @pytest.mark.parametrize("key,attr", [
        (pygame.K_LEFT, 'left_pressed'),
        (pygame.K_RIGHT, 'right_pressed'),
        (pygame.K_SPACE, 'fire_pressed'),
    ])
    def test_press_sets_release_clears(self, playing, flags, key, attr):
        playing.handle(KeyEvent.pressed(key))
        assert getattr(flags, attr)

        playing.handle(KeyEvent.released(key))
        assert not getattr(flags, attr)

    def test_keys_are_independent(self, playing, flags):
        playing.handle(KeyEvent.pressed(pygame.K_LEFT))
        playing.handle(KeyEvent.pressed(pygame.K_SPACE))
        playing.handle(KeyEvent.released(pygame.K_LEFT))

        assert not flags.left_pressed
        assert flags.fire_pressed
        assert not flags.right_pressed

    def test_flags_follow_keys_while_paused(self, playing, flags):
        """Test intent is still tracked while paused."""
        playing.handle(KeyEvent.typed('p'))
        playing.handle(KeyEvent.pressed(pygame.K_RIGHT))
        assert flags.right_pressed

    def test_unmapped_keys_ignored(self, playing, flags):
        """Test unknown keys change nothing."""
        before = (flags.left_pressed, flags.right_pressed, flags.fire_pressed, flags.paused)
        playing.handle(KeyEvent.pressed(pygame.K_a))
        playing.handle(KeyEvent.released(pygame.K_a))
        playing.handle(KeyEvent.typed('z'))
        after = (flags.left_pressed, flags.right_pressed, flags.fire_pressed, flags.paused)
        assert before == after


class TestPause:
    """Test the pause toggle."""

    @pytest.mark.parametrize("char", ['p', 'P'])
    def test_toggle_both_directions(self, playing, flags, char):
        playing.handle(KeyEvent.typed(char))
        assert flags.state == GameState.PAUSED

        playing.handle(KeyEvent.typed(char))
        assert flags.state == GameState.PLAYING

    def test_starting_key_does_not_pause(self, controller, flags):
        """Test 'p' as the start key only starts the session."""
        controller.handle(KeyEvent.typed('p'))

        assert flags.state == GameState.PLAYING
        assert not flags.paused

    def test_pause_toggles_while_waiting(self, playing, flags):
        """Test a suppressed 'p' toggles the flag while the gate is up."""
        playing.await_start(echo_events=1)

        playing.handle(KeyEvent.typed('p'))

        assert flags.paused
        assert flags.state == GameState.WAITING_FOR_START


class TestQuit:
    """Test escape handling."""

    def test_escape_exits_with_status_zero(self, flags):
        """Test the default quit handler exits the process with 0."""
        controller = InputController(flags)

        with pytest.raises(SystemExit) as exc_info:
            controller.handle(KeyEvent.typed('\x1b'))

        assert exc_info.value.code == 0

    @pytest.mark.parametrize("setup", ['waiting', 'playing', 'paused'])
    def test_escape_in_any_state(self, flags, setup):
        controller = InputController(flags)
        if setup in ('playing', 'paused'):
            controller.handle(KeyEvent.typed('x'))
        if setup == 'paused':
            controller.handle(KeyEvent.typed('p'))

        with pytest.raises(SystemExit) as exc_info:
            controller.handle(KeyEvent.pressed(pygame.K_ESCAPE))

        assert exc_info.value.code == 0

    def test_escape_does_not_start(self, controller, on_start):
        """Test escape while waiting quits instead of starting."""
        controller.handle(KeyEvent.typed('\x1b'))
        on_start.assert_not_called()

    def test_custom_quit_handler(self, flags):
        on_quit = MagicMock()
        controller = InputController(flags, on_quit=on_quit)

        controller.handle(KeyEvent.pressed(pygame.K_ESCAPE))

        on_quit.assert_called_once()


# ============================================================================
# PygameKeySource
# ============================================================================


class TestPygameKeySource:
    """Test conversion of pygame keyboard events."""

    def test_keydown_keyup_produce_press_release_typed(self):
        source = PygameKeySource()

        assert source.feed(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a, unicode='a'))
        assert source.feed(pygame.event.Event(pygame.KEYUP, key=pygame.K_a))

        events = source.poll_events()
        assert [e.kind for e in events] == [
            KeyEventKind.PRESSED, KeyEventKind.RELEASED, KeyEventKind.TYPED,
        ]
        assert events[0].key == pygame.K_a
        assert events[2].char == 'a'

    def test_arrow_keys_type_without_character(self):
        source = PygameKeySource()
        source.feed(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT, unicode=''))
        source.feed(pygame.event.Event(pygame.KEYUP, key=pygame.K_LEFT))

        typed = source.poll_events()[-1]
        assert typed.kind == KeyEventKind.TYPED
        assert typed.char is None
        assert typed.key == pygame.K_LEFT

    def test_keyup_without_keydown(self):
        """Test a release with no matching press is not typed."""
        source = PygameKeySource()
        source.feed(pygame.event.Event(pygame.KEYUP, key=pygame.K_a))

        events = source.poll_events()
        assert [e.kind for e in events] == [KeyEventKind.RELEASED]

    def test_non_keyboard_events_not_consumed(self):
        source = PygameKeySource()
        assert not source.feed(pygame.event.Event(pygame.QUIT))
        assert source.poll_events() == []

    def test_poll_clears_queue(self):
        source = PygameKeySource()
        source.feed(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a, unicode='a'))

        assert len(source.poll_events()) == 1
        assert source.poll_events() == []

    def test_clear_forgets_held_keys(self):
        source = PygameKeySource()
        source.feed(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a, unicode='a'))
        source.clear()
        source.feed(pygame.event.Event(pygame.KEYUP, key=pygame.K_a))

        assert [e.kind for e in source.poll_events()] == [KeyEventKind.RELEASED]

    def test_drives_controller(self, flags, on_start):
        """Test a typed key from pygame opens the start gate."""
        controller = InputController(flags, on_start=on_start, on_quit=MagicMock())
        source = PygameKeySource()
        source.feed(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT, unicode=''))
        source.feed(pygame.event.Event(pygame.KEYUP, key=pygame.K_LEFT))

        controller.handle_all(source.poll_events())

        assert flags.state == GameState.PLAYING
        assert not flags.left_pressed
        on_start.assert_called_once()
