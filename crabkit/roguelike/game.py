"""One game: the map, the player and the state, advanced a frame at a time."""

from __future__ import annotations

import random
from collections.abc import Iterable

from .board import BOARD_HEIGHT, BOARD_WIDTH, Biome, WorldTileMap
from .flow import GameFlow, GameState
from .generator import generate_map
from .player import Player, find_player_spawn_position, move_players
from .view import (
    PLAY_HINT,
    Glyph,
    board_rows,
    finish_menu_lines,
    menu_rows,
    play_footer,
    start_menu_lines,
)


class Game:
    """A game on a generated castle map, unless a map is given."""

    def __init__(
        self,
        width: int = BOARD_WIDTH,
        height: int = BOARD_HEIGHT,
        rng: random.Random | None = None,
        tile_map: WorldTileMap | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        if tile_map is None:
            tile_map = WorldTileMap.empty(width, height)
            tile_map.biome = Biome.CASTLE
            tile_map.set_map(generate_map(width, height, self._rng))
        self.tile_map = tile_map
        self.flow = GameFlow()
        self.players = [Player(find_player_spawn_position(tile_map, self._rng))]

    def step(self, events: Iterable[object]) -> None:
        """Apply one frame's events: state changes first, then movement."""
        events = list(events)
        self.flow.handle_events(events, self.tile_map, self.players, self._rng)
        move_players(self.tile_map, self.players, events)

    def screen(self) -> list[list[Glyph]]:
        """Rows of glyphs showing the current state; empty once quitting."""
        state = self.flow.state
        if state is GameState.START:
            return menu_rows(start_menu_lines())
        if state is GameState.FINISHED:
            return menu_rows(finish_menu_lines())
        if state is GameState.RUNNING:
            rows = board_rows(self.tile_map, self.players[0].position)
            return [
                *rows,
                [],
                [Glyph(PLAY_HINT)],
                [Glyph(play_footer(self.flow.level))],
            ]
        return []

    def is_over(self) -> bool:
        return self.flow.state is GameState.EXIT