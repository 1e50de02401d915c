"""The tile map the game is played on."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

BOARD_HEIGHT = 50
BOARD_WIDTH = 140


class Tile(Enum):
    """What occupies one cell of the board."""

    GROUND = auto()
    WALL = auto()


class Biome(Enum):
    """The look of a level."""

    BEACH = auto()
    OCEAN = auto()
    CASTLE = auto()


@dataclass(frozen=True)
class Position:
    """A cell on the board; ``x`` grows to the right, ``y`` downwards."""

    x: int
    y: int


class _Walkability(Protocol):
    def is_walkable(self, x: int, y: int) -> bool: ...


def _walls(width: int, height: int) -> list[list[Tile]]:
    return [[Tile.WALL] * width for _ in range(height)]


@dataclass
class WorldTileMap:
    """Rows of tiles, indexed as ``board[y][x]``."""

    board: list[list[Tile]] = field(
        default_factory=lambda: _walls(BOARD_WIDTH, BOARD_HEIGHT)
    )
    biome: Biome = Biome.CASTLE

    @property
    def height(self) -> int:
        return len(self.board)

    @property
    def width(self) -> int:
        return len(self.board[0]) if self.board else 0

    @classmethod
    def empty(cls, width: int, height: int) -> WorldTileMap:
        """A castle map of the given size made only of walls."""
        return cls(_walls(width, height), Biome.CASTLE)

    def set_map(self, map_buffer: _Walkability) -> None:
        """Make every walkable cell of ``map_buffer`` ground and the rest walls."""
        self.board = [
            [
                Tile.GROUND if map_buffer.is_walkable(x, y) else Tile.WALL
                for x in range(self.width)
            ]
            for y in range(self.height)
        ]