"""
Keyboard source backed by the pygame event queue.

pygame reports KEYDOWN and KEYUP only. A TYPED event is synthesised when a
key comes up, carrying the character pygame reported when it went down, so
the controller sees press, release and then the completed key-type.
"""

import time
from typing import Dict, List, Optional

import pygame

from invaders.input.key_event import KeyEvent


class PygameKeySource:
    """Collects key events from pygame.

    Non-keyboard events are handed back from update() so the game loop can
    still act on them (QUIT in particular).

    Examples:
        >>> source = PygameKeySource()
        >>> source.update()             # Pump pygame events
        >>> for event in source.poll_events():
        ...     controller.handle(event)
    """

    def __init__(self):
        self._event_queue: List[KeyEvent] = []
        self._held_chars: Dict[int, Optional[str]] = {}

    def poll_events(self) -> List[KeyEvent]:
        """Return collected key events and clear the queue."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self) -> List[pygame.event.Event]:
        """Drain the pygame queue, converting keyboard events.

        Returns:
            The non-keyboard events that were drained, in order
        """
        others = []
        for event in pygame.event.get():
            if not self.feed(event):
                others.append(event)
        return others

    def feed(self, event: pygame.event.Event) -> bool:
        """Convert one pygame event.

        Returns:
            True if the event was a keyboard event and was consumed
        """
        now = time.monotonic()

        if event.type == pygame.KEYDOWN:
            char = getattr(event, 'unicode', '') or None
            self._held_chars[event.key] = char if char and len(char) == 1 else None
            self._event_queue.append(KeyEvent.pressed(event.key, timestamp=now))
            return True

        if event.type == pygame.KEYUP:
            self._event_queue.append(KeyEvent.released(event.key, timestamp=now))
            if event.key in self._held_chars:
                char = self._held_chars.pop(event.key)
                self._event_queue.append(KeyEvent.typed(char, key=event.key, timestamp=now))
            return True

        return False

    def clear(self) -> None:
        """Forget queued events and held keys."""
        self._event_queue.clear()
        self._held_chars.clear()
