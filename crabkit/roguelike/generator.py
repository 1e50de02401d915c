"""Dungeon generation: rooms placed by space partitioning, joined by corridors."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from .board import BOARD_HEIGHT, BOARD_WIDTH

_ROOM_ATTEMPTS = 240


@dataclass(frozen=True)
class _Rect:
    x1: int
    y1: int
    x2: int
    y2: int

    @classmethod
    def sized(cls, x: int, y: int, width: int, height: int) -> _Rect:
        return cls(x, y, x + width, y + height)

    @property
    def width(self) -> int:
        return abs(self.x2 - self.x1)

    @property
    def height(self) -> int:
        return abs(self.y2 - self.y1)

    def intersects(self, other: _Rect) -> bool:
        return (
            self.x1 <= other.x2
            and self.x2 >= other.x1
            and self.y1 <= other.y2
            and self.y2 >= other.y1
        )

    def center(self) -> tuple[int, int]:
        return (self.x1 + self.x2) // 2, (self.y1 + self.y2) // 2


class MapBuffer:
    """A grid of walkable and blocked cells with the rooms carved into it."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.rooms: list[_Rect] = []
        self.starting_point: tuple[int, int] | None = None
        self._walkable = [[False] * width for _ in range(height)]

    def is_walkable(self, x: int, y: int) -> bool:
        """True for an open cell; cells outside the grid are blocked."""
        return 0 <= x < self.width and 0 <= y < self.height and self._walkable[y][x]

    def _open(self, x: int, y: int) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self._walkable[y][x] = True

    def _add_room(self, rect: _Rect) -> None:
        for y in range(rect.y1 + 1, rect.y2 + 1):
            for x in range(rect.x1 + 1, rect.x2 + 1):
                self._open(x, y)
        self.rooms.append(rect)

    def _dig_path(self, start: tuple[int, int], end: tuple[int, int]) -> None:
        (x1, y1), (x2, y2) = start, end
        for x in range(min(x1, x2), max(x1, x2) + 1):
            self._open(x, y1)
        for y in range(min(y1, y2), max(y1, y2) + 1):
            self._open(x2, y)


def _roll(rng: random.Random, sides: int) -> int:
    return rng.randint(1, max(sides, 1))


def _subrects(rect: _Rect) -> list[_Rect]:
    half_w = max(rect.width // 2, 1)
    half_h = max(rect.height // 2, 1)
    return [
        _Rect.sized(rect.x1, rect.y1, half_w, half_h),
        _Rect.sized(rect.x1, rect.y1 + half_h, half_w, half_h),
        _Rect.sized(rect.x1 + half_w, rect.y1, half_w, half_h),
        _Rect.sized(rect.x1 + half_w, rect.y1 + half_h, half_w, half_h),
    ]


def _random_sub_rect(rect: _Rect, rng: random.Random) -> _Rect:
    width = max(3, _roll(rng, min(rect.width, 10)) - 1) + 1
    height = max(3, _roll(rng, min(rect.height, 10)) - 1) + 1
    x1 = rect.x1 + _roll(rng, 6) - 1
    y1 = rect.y1 + _roll(rng, 6) - 1
    return _Rect.sized(x1, y1, width, height)


def _is_possible(rect: _Rect, buffer: MapBuffer) -> bool:
    if any(room.intersects(rect) for room in buffer.rooms):
        return False
    for y in range(rect.y1 - 2, rect.y2 + 3):
        for x in range(rect.x1 - 2, rect.x2 + 3):
            if x > buffer.width - 2 or y > buffer.height - 2 or x < 1 or y < 1:
                return False
            if buffer.is_walkable(x, y):
                return False
    return True


def _bsp_rooms(buffer: MapBuffer, rng: random.Random) -> None:
    first = _Rect.sized(2, 2, buffer.width - 5, buffer.height - 5)
    rects = [first, *_subrects(first)]
    for _ in range(_ROOM_ATTEMPTS):
        rect = rng.choice(rects)
        candidate = _random_sub_rect(rect, rng)
        if _is_possible(candidate, buffer):
            buffer._add_room(candidate)
            rects.extend(_subrects(rect))


def _nearest_corridors(buffer: MapBuffer) -> None:
    connected: set[int] = set()
    for index, room in enumerate(buffer.rooms):
        center = room.center()
        candidates = [
            (math.dist(center, other.center()), other_index)
            for other_index, other in enumerate(buffer.rooms)
            if other_index != index and other_index not in connected
        ]
        if candidates:
            _, nearest = min(candidates)
            buffer._dig_path(center, buffer.rooms[nearest].center())
            connected.add(index)


def _start_left_bottom(buffer: MapBuffer) -> None:
    seed = (1, buffer.height - 2)
    open_cells = [
        (x, y)
        for y in range(buffer.height)
        for x in range(buffer.width)
        if buffer.is_walkable(x, y)
    ]
    if open_cells:
        buffer.starting_point = min(open_cells, key=lambda cell: math.dist(cell, seed))


def generate_map(
    width: int = BOARD_WIDTH,
    height: int = BOARD_HEIGHT,
    rng: random.Random | None = None,
) -> MapBuffer:
    """Generate a dungeon with a starting point near the bottom-left corner."""
    rng = rng if rng is not None else random.Random()
    buffer = MapBuffer(width, height)
    _bsp_rooms(buffer, rng)
    _nearest_corridors(buffer)
    _start_left_bottom(buffer)
    return buffer