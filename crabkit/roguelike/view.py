"""How the board, the player and the menus look on screen."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from .board import Biome, Position, Tile, WorldTileMap
from .flow import Level

START_HINT = "Press any character to start. Press 'q' to quit."
FINISH_HINT = "Press any character to restart. Press 'q' to quit."
PLAY_HINT = "move with `arrows` or (`h`,`j`,`k`,`l`); simulate death with `d`"


class Color(Enum):
    """Terminal colours; the value is the foreground SGR code."""

    RESET = 39
    BLACK = 30
    RED = 31
    YELLOW = 33
    BLUE = 34
    GRAY = 37
    LIGHT_YELLOW = 93
    LIGHT_BLUE = 94
    WHITE = 97

    @property
    def fg(self) -> int:
        return self.value

    @property
    def bg(self) -> int:
        return self.value + 10


@dataclass(frozen=True)
class Glyph:
    """Text drawn with one foreground and one background colour."""

    text: str
    fg: Color = Color.RESET
    bg: Color = Color.RESET


_TILE_GLYPHS: dict[tuple[Tile, Biome], Glyph] = {
    (Tile.WALL, Biome.OCEAN): Glyph("@", Color.RED, Color.LIGHT_BLUE),
    (Tile.WALL, Biome.BEACH): Glyph("$", Color.BLACK, Color.LIGHT_YELLOW),
    (Tile.WALL, Biome.CASTLE): Glyph("#", Color.WHITE, Color.BLACK),
    (Tile.GROUND, Biome.OCEAN): Glyph("%", Color.BLUE, Color.LIGHT_BLUE),
    (Tile.GROUND, Biome.BEACH): Glyph("#", Color.YELLOW, Color.LIGHT_YELLOW),
    (Tile.GROUND, Biome.CASTLE): Glyph(".", Color.GRAY, Color.BLACK),
}

_PLAYER_GLYPH = Glyph("@", Color.LIGHT_YELLOW, Color.BLACK)


def tile_glyph(tile: Tile, biome: Biome) -> Glyph:
    """The look of a tile in the given biome."""
    return _TILE_GLYPHS[tile, biome]


def player_glyph() -> Glyph:
    return _PLAYER_GLYPH


def board_rows(
    world_tile_map: WorldTileMap, player_pos: Position
) -> list[list[Glyph]]:
    """One glyph per cell, the player drawn over the tile it stands on."""
    return [
        [
            player_glyph()
            if (x, y) == (player_pos.x, player_pos.y)
            else tile_glyph(tile, world_tile_map.biome)
            for x, tile in enumerate(row)
        ]
        for y, row in enumerate(world_tile_map.board)
    ]


def start_menu_lines() -> list[Glyph]:
    """Title lines followed by the hint of the start menu."""
    return [Glyph("Crab", Color.RED), Glyph("Knight", Color.BLUE), Glyph(START_HINT)]


def finish_menu_lines() -> list[Glyph]:
    """Title lines followed by the hint of the finish menu."""
    return [Glyph("Game", Color.RED), Glyph("Finished", Color.RED), Glyph(FINISH_HINT)]


def play_footer(level: Level) -> str:
    """The caption under the board during play."""
    return f"level: {level.as_number()}"


def menu_rows(lines: Sequence[Glyph]) -> list[list[Glyph]]:
    """Menu lines as screen rows, the hint set apart from the title."""
    *title, hint = lines
    return [[line] for line in title] + [[], [hint]]