"""Game states and the transitions between them."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum, auto

from .board import WorldTileMap
from .events import KeyEvent, KeyKind
from .generator import generate_map
from .player import Player, find_player_spawn_position

_QUIT = "q"
_DIE = "d"


class GameState(Enum):
    START = auto()
    RUNNING = auto()
    FINISHED = auto()
    EXIT = auto()


@dataclass
class Level:
    """Zero-based level index."""

    index: int = 0

    def as_number(self) -> int:
        """The level as shown to the player, counting from one."""
        return self.index + 1


@dataclass
class GameFlow:
    """Where the game is: menu, play, finished or quitting."""

    state: GameState = GameState.START
    level: Level = field(default_factory=Level)

    def handle_events(
        self,
        events: Iterable[object],
        tile_map: WorldTileMap,
        players: Iterable[Player],
        rng: random.Random | None = None,
    ) -> None:
        """Advance the state on key events; ``q`` quits at once.

        Restarting after the game finished builds a new map and respawns
        the players on it.
        """
        players = list(players)
        for event in events:
            if not isinstance(event, KeyEvent) or event.kind is KeyKind.RELEASE:
                continue
            if event.code == _QUIT:
                self.state = GameState.EXIT
                return

            if self.state is GameState.START:
                self.state = GameState.RUNNING
            elif self.state is GameState.RUNNING:
                if event.code == _DIE:
                    self.state = GameState.FINISHED
            elif self.state is GameState.FINISHED:
                rng = rng if rng is not None else random.Random()
                tile_map.set_map(generate_map(tile_map.width, tile_map.height, rng))
                for player in players:
                    player.position = find_player_spawn_position(tile_map, rng)
                self.state = GameState.RUNNING