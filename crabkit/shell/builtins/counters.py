"""Character counters used by the wc command."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields

# str.isspace counts the information separators as blanks; wc does not.
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


def _is_whitespace(ch: str) -> bool:
    return ch.isspace() and ch not in _NOT_WHITESPACE


class Counter(ABC):
    """Accumulates a statistic over a stream of characters.

    Concrete counters are dataclasses whose field defaults are the
    initial state; the current result lives in ``value`` unless ``get``
    says otherwise.
    """

    value: int

    @abstractmethod
    def count(self, ch: str) -> None:
        """Feed one character."""

    def get(self) -> int:
        """Return the statistic for the characters fed since the last reset."""
        return self.value

    def reset(self) -> None:
        """Return to the initial state."""
        for field in fields(self):
            setattr(self, field.name, field.default)

    def aggregate(self, a: int, b: int) -> int:
        """Combine two results of this counter."""
        return a + b


@dataclass
class ByteCounter(Counter):
    """Counts UTF-8 encoded bytes."""

    value: int = 0

    def count(self, ch: str) -> None:
        self.value = self.aggregate(
            self.value, len(ch.encode("utf-8", "surrogatepass"))
        )


@dataclass
class CharacterCounter(Counter):
    """Counts characters."""

    value: int = 0

    def count(self, ch: str) -> None:
        self.value = self.aggregate(self.value, 1)


@dataclass
class WordCounter(Counter):
    """Counts runs of non-whitespace characters."""

    in_whitespace: bool = True
    word_count: int = 0

    def count(self, ch: str) -> None:
        blank = _is_whitespace(ch)
        if blank and not self.in_whitespace:
            self.in_whitespace = True
            self.word_count = self.aggregate(self.word_count, 1)
        elif not blank and self.in_whitespace:
            self.in_whitespace = False

    def get(self) -> int:
        return self.word_count + (0 if self.in_whitespace else 1)


@dataclass
class NewlineCounter(Counter):
    """Counts newline characters."""

    value: int = 0

    def count(self, ch: str) -> None:
        if ch == "\n":
            self.value = self.aggregate(self.value, 1)


@dataclass
class MaxLineLengthCounter(Counter):
    """Tracks the length of the longest newline-terminated line."""

    value: int = 0
    current: int = 0

    def count(self, ch: str) -> None:
        if ch == "\n":
            self.value = self.aggregate(self.value, self.current)
            self.current = 0
        else:
            self.current += 1

    def aggregate(self, a: int, b: int) -> int:
        return max(a, b)