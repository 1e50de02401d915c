"""Right-aligned table of per-file counts."""

from __future__ import annotations

from collections.abc import Iterable


class StatTable:
    """Rows of counts followed by a path, every count padded to one width."""

    def __init__(self) -> None:
        self._rows: list[tuple[list[str], str]] = []
        self._width = 0

    def add_row(self, path: str, counters: Iterable[int]) -> None:
        cells = [str(count) for count in counters]
        self._width = max([self._width, *map(len, cells)])
        self._rows.append((cells, path))

    def __str__(self) -> str:
        return "\n".join(
            "".join(f"{cell:>{self._width}} " for cell in cells) + path
            for cells, path in self._rows
        )