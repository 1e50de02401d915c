import random

from crabkit.roguelike.board import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    Position,
    Tile,
    WorldTileMap,
)
from crabkit.roguelike.events import KeyEvent, KeyKind
from crabkit.roguelike.flow import GameFlow, GameState, Level
from crabkit.roguelike.generator import generate_map
from crabkit.roguelike.player import Player


def _setup(state):
    flow = GameFlow(state=state)
    tile_map = WorldTileMap.empty(3, 3)
    players = [Player(Position(1, 1))]
    return flow, tile_map, players


def _seed_with_diagonal_ground():
    for seed in range(200):
        buffer = generate_map(BOARD_WIDTH, BOARD_HEIGHT, random.Random(seed))
        if any(buffer.is_walkable(i, i) for i in range(BOARD_HEIGHT)):
            return seed
    raise AssertionError("no seed gives ground on the diagonal")


def test_new_flow_starts_at_level_one():
    flow = GameFlow()
    assert flow.state is GameState.START
    assert flow.level.as_number() == 1
    assert Level(4).as_number() == 5


def test_any_key_starts_the_game():
    flow, tile_map, players = _setup(GameState.START)
    flow.handle_events([KeyEvent.press("x")], tile_map, players)
    assert flow.state is GameState.RUNNING


def test_release_and_other_events_are_ignored():
    flow, tile_map, players = _setup(GameState.START)
    flow.handle_events([KeyEvent("x", KeyKind.RELEASE), "resize"], tile_map, players)
    assert flow.state is GameState.START


def test_d_finishes_running_game():
    flow, tile_map, players = _setup(GameState.RUNNING)
    flow.handle_events([KeyEvent.press("x")], tile_map, players)
    assert flow.state is GameState.RUNNING
    flow.handle_events([KeyEvent.press("d")], tile_map, players)
    assert flow.state is GameState.FINISHED


def test_q_exits_and_stops_handling():
    flow, tile_map, players = _setup(GameState.FINISHED)
    flow.handle_events([KeyEvent.press("q"), KeyEvent.press("x")], tile_map, players)
    assert flow.state is GameState.EXIT
    assert all(tile is Tile.WALL for row in tile_map.board for tile in row)
    assert players[0].position == Position(1, 1)


def test_exit_is_final():
    flow, tile_map, players = _setup(GameState.EXIT)
    flow.handle_events([KeyEvent.press("x")], tile_map, players)
    assert flow.state is GameState.EXIT


def test_restart_builds_new_map_and_respawns():
    seed = _seed_with_diagonal_ground()
    flow = GameFlow(state=GameState.FINISHED)
    tile_map = WorldTileMap()
    player = Player(Position(0, 0))
    flow.handle_events([KeyEvent.press("x")], tile_map, [player], random.Random(seed))

    assert flow.state is GameState.RUNNING
    expected = generate_map(BOARD_WIDTH, BOARD_HEIGHT, random.Random(seed))
    assert [[tile is Tile.GROUND for tile in row] for row in tile_map.board] == [
        [expected.is_walkable(x, y) for x in range(BOARD_WIDTH)]
        for y in range(BOARD_HEIGHT)
    ]
    assert player.position.x == player.position.y
    assert tile_map.board[player.position.y][player.position.x] is Tile.GROUND