"""The player and how it moves."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass

from .board import Position, Tile, WorldTileMap
from .events import DOWN, LEFT, RIGHT, UP, KeyEvent, KeyKind

_MOVES: dict[str, tuple[int, int]] = {
    UP: (0, -1),
    "k": (0, -1),
    DOWN: (0, 1),
    "j": (0, 1),
    LEFT: (-1, 0),
    "h": (-1, 0),
    RIGHT: (1, 0),
    "l": (1, 0),
}


@dataclass
class Player:
    """The character controlled from the keyboard."""

    position: Position


def try_move_player(
    world_tile_map: WorldTileMap, players: Iterable[Player], dx: int, dy: int
) -> None:
    """Move every player by the delta when the target cell is ground on the map."""
    for player in players:
        new_x = player.position.x + dx
        new_y = player.position.y + dy
        if not (0 <= new_x < world_tile_map.width and 0 <= new_y < world_tile_map.height):
            continue
        if world_tile_map.board[new_y][new_x] is Tile.GROUND:
            player.position = Position(new_x, new_y)


def move_delta(event: object) -> tuple[int, int] | None:
    """The step a key press asks for: arrows or h, j, k, l; None otherwise."""
    if not isinstance(event, KeyEvent) or event.kind is not KeyKind.PRESS:
        return None
    return _MOVES.get(event.code)


def move_players(
    world_tile_map: WorldTileMap, players: Iterable[Player], events: Iterable[object]
) -> None:
    """Apply every movement key among ``events`` to all players, in order."""
    players = list(players)
    for event in events:
        delta = move_delta(event)
        if delta is not None:
            try_move_player(world_tile_map, players, *delta)


def find_player_spawn_position(
    world_tile_map: WorldTileMap, rng: random.Random | None = None
) -> Position:
    """Pick a random ground cell on the board's main diagonal.

    Raises LookupError when none of those cells is ground.
    """
    rng = rng if rng is not None else random.Random()
    size = min(world_tile_map.height, world_tile_map.width)
    candidates = [i for i in range(size) if world_tile_map.board[i][i] is Tile.GROUND]
    if not candidates:
        raise LookupError("Did not find any ground tile to spawn player")
    index = rng.choice(candidates)
    return Position(index, index)