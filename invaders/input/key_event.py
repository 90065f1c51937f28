"""
Key event model.

Raw keyboard input is reduced to three kinds of event before it reaches the
InputController: a key going down, a key coming up, and a completed
press-then-release ("typed") carrying the character produced.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class KeyEventKind(str, Enum):
    """Kinds of keyboard event.

    Attributes:
        PRESSED: Key pushed down
        RELEASED: Key let go
        TYPED: Key pressed and released, producing a character
    """
    PRESSED = "pressed"
    RELEASED = "released"
    TYPED = "typed"


class KeyEvent(BaseModel):
    """Immutable keyboard event.

    Attributes:
        kind: What happened to the key
        key: Platform key code (pygame.K_*), if known
        char: Character produced, for TYPED events
        timestamp: Time of the event (seconds, from monotonic clock)

    Examples:
        >>> import pygame
        >>> KeyEvent(kind=KeyEventKind.PRESSED, key=pygame.K_LEFT)
        >>> KeyEvent(kind=KeyEventKind.TYPED, char='p')
    """
    model_config = ConfigDict(frozen=True)

    kind: KeyEventKind
    key: Optional[int] = None
    char: Optional[str] = None
    timestamp: float = 0.0

    @field_validator('char')
    @classmethod
    def validate_char(cls, v: Optional[str]) -> Optional[str]:
        """Typed characters are single code points."""
        if v is not None and len(v) != 1:
            raise ValueError(f'char must be a single character, got {v!r}')
        return v

    @field_validator('timestamp')
    @classmethod
    def validate_timestamp(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f'Timestamp must be non-negative, got {v}')
        return v

    @classmethod
    def pressed(cls, key: int, timestamp: float = 0.0) -> 'KeyEvent':
        return cls(kind=KeyEventKind.PRESSED, key=key, timestamp=timestamp)

    @classmethod
    def released(cls, key: int, timestamp: float = 0.0) -> 'KeyEvent':
        return cls(kind=KeyEventKind.RELEASED, key=key, timestamp=timestamp)

    @classmethod
    def typed(cls, char: Optional[str], key: Optional[int] = None, timestamp: float = 0.0) -> 'KeyEvent':
        return cls(kind=KeyEventKind.TYPED, key=key, char=char, timestamp=timestamp)

    def __str__(self) -> str:
        if self.kind == KeyEventKind.TYPED:
            return f"KeyEvent(typed {self.char!r})"
        return f"KeyEvent({self.kind.value} key={self.key})"
