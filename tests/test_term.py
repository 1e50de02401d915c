import io
import os

import pytest

from crabkit.roguelike.events import DOWN, LEFT, RIGHT, UP, KeyEvent
from crabkit.roguelike.term import (
    CLEAR,
    ENTER_SCREEN,
    LEAVE_SCREEN,
    Terminal,
    translate_key,
)
from crabkit.roguelike.view import Color, Glyph


@pytest.mark.parametrize(
    "key, expected",
    [
        ("\x1b[A", KeyEvent.press(UP)),
        ("\x1b[B", KeyEvent.press(DOWN)),
        ("\x1b[C", KeyEvent.press(RIGHT)),
        ("\x1b[D", KeyEvent.press(LEFT)),
        ("\x1bOA", KeyEvent.press(UP)),
        ("q", KeyEvent.press("q")),
        ("\x1b[5~", None),
        ("", None),
    ],
)
def test_translate_key(key, expected):
    assert translate_key(key) == expected


@pytest.fixture
def pipe_reader():
    read_fd, write_fd = os.pipe()
    reader = os.fdopen(read_fd, "rb", buffering=0)
    yield reader, write_fd
    reader.close()
    try:
        os.close(write_fd)
    except OSError:
        pass


def test_poll_reads_keys(pipe_reader):
    reader, write_fd = pipe_reader
    os.write(write_fd, b"k\x1b[Bq")
    terminal = Terminal(stdin=reader, stdout=io.StringIO())
    assert terminal.poll(1.0) == [
        KeyEvent.press("k"),
        KeyEvent.press(DOWN),
        KeyEvent.press("q"),
    ]


def test_poll_without_input(pipe_reader):
    reader, _ = pipe_reader
    terminal = Terminal(stdin=reader, stdout=io.StringIO())
    assert terminal.poll(0.01) == []


def test_context_switches_screens(pipe_reader):
    reader, _ = pipe_reader
    out = io.StringIO()
    with Terminal(stdin=reader, stdout=out):
        assert out.getvalue() == ENTER_SCREEN
    assert out.getvalue().endswith(LEAVE_SCREEN)


def test_draw_writes_glyphs(pipe_reader):
    reader, _ = pipe_reader
    out = io.StringIO()
    terminal = Terminal(stdin=reader, stdout=out)
    terminal.draw([[Glyph("#", Color.WHITE, Color.BLACK)], [Glyph("hi")]])
    text = out.getvalue()
    assert text.startswith(CLEAR)
    assert f"{Color.WHITE.fg};{Color.BLACK.bg}m#" in text
    assert text.count("\r\n") == 1
    assert "hi" in text


def test_draw_empty_screen_only_clears(pipe_reader):
    reader, _ = pipe_reader
    out = io.StringIO()
    Terminal(stdin=reader, stdout=out).draw([])
    assert out.getvalue() == CLEAR