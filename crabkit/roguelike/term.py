"""Terminal input and output, and the game's main loop."""

from __future__ import annotations

import os
import re
import select
import sys
from collections.abc import Iterable, Sequence
from types import TracebackType
from typing import IO, Any

from .events import DOWN, LEFT, RIGHT, UP, KeyEvent
from .game import Game
from .view import Glyph

ENTER_SCREEN = "\x1b[?1049h\x1b[?25l\x1b[H\x1b[2J"
LEAVE_SCREEN = "\x1b[0m\x1b[?25h\x1b[?1049l"
CLEAR = "\x1b[H\x1b[2J"
RESET_STYLE = "\x1b[0m"
FRAME_TIMEOUT = 0.016

_ARROWS = {"A": UP, "B": DOWN, "C": RIGHT, "D": LEFT}
_KEY = re.compile(r"\x1b(?:\[[0-9;]*[A-Za-z~]|O[A-Za-z])?|.", re.DOTALL)
_ARROW = re.compile(r"\x1b[\[O]([ABCD])")


def translate_key(key: str) -> KeyEvent | None:
    """A key press for one character or arrow sequence; None for anything else."""
    arrow = _ARROW.fullmatch(key)
    if arrow is not None:
        return KeyEvent.press(_ARROWS[arrow.group(1)])
    if len(key) == 1:
        return KeyEvent.press(key)
    return None


class Terminal:
    """Full-screen terminal: raw input and an alternate screen while entered."""

    def __init__(self, stdin: IO[Any] | None = None, stdout: IO[str] | None = None):
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._saved_mode: list[Any] | None = None

    def __enter__(self) -> Terminal:
        self._stdout.write(ENTER_SCREEN)
        self._stdout.flush()
        if self._stdin.isatty():
            import termios
            import tty

            fd = self._stdin.fileno()
            self._saved_mode = termios.tcgetattr(fd)
            tty.setraw(fd)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._saved_mode is not None:
            import termios

            termios.tcsetattr(self._stdin.fileno(), termios.TCSADRAIN, self._saved_mode)
            self._saved_mode = None
        self._stdout.write(LEAVE_SCREEN)
        self._stdout.flush()

    def poll(self, timeout: float) -> list[KeyEvent]:
        """Key presses available within ``timeout`` seconds, possibly none."""
        fd = self._stdin.fileno()
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return []
        text = os.read(fd, 1024).decode("utf-8", errors="replace")
        events = (translate_key(match.group()) for match in _KEY.finditer(text))
        return [event for event in events if event is not None]

    def draw(self, screen: Iterable[Sequence[Glyph]]) -> None:
        """Replace the screen contents with the given rows of glyphs."""
        lines = [
            "".join(f"\x1b[{g.fg.fg};{g.bg.bg}m{g.text}" for g in row) + RESET_STYLE
            for row in screen
        ]
        self._stdout.write(CLEAR + "\r\n".join(lines))
        self._stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    game = Game()
    with Terminal() as terminal:
        while not game.is_over():
            game.step(terminal.poll(FRAME_TIMEOUT))
            terminal.draw(game.screen())
    return 0