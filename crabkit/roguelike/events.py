"""Input events read from the terminal during one frame."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

# Non-character keys; character keys are given by the character itself.
UP = "Up"
DOWN = "Down"
LEFT = "Left"
RIGHT = "Right"


class KeyKind(Enum):
    """Phase of a key event."""

    PRESS = auto()
    REPEAT = auto()
    RELEASE = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key event; ``code`` is a character or one of the key names above."""

    code: str
    kind: KeyKind = KeyKind.PRESS

    @classmethod
    def press(cls, code: str) -> KeyEvent:
        return cls(code, KeyKind.PRESS)