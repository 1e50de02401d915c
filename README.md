# crabkit

A roguelike played in the terminal, **crab-knight**, together with a few
building blocks for a small shell: character counters for a `wc`-style
command, a right-aligned count table, shell variables and the data types
that describe a parsed command line.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The roguelike

Start it with:

```
crab-knight
```

It needs a POSIX terminal. A dungeon of rooms and corridors is generated on
a 140 × 50 board, and the knight `@` is placed on a random floor tile of the
board's main diagonal.

| Key | Action |
|-----|--------|
| any key | leave the start screen / restart after the run is over |
| arrows or `h` `j` `k` `l` | move onto a floor tile |
| `d` | simulate death and end the run |
| `q` | quit |

Restarting generates a fresh map and a new spawn point. The current level is
shown under the board.

### Driving a game from Python

`crabkit.roguelike.game.Game` holds the map, the player and the game state
and is advanced one frame at a time:

```python
import random

from crabkit.roguelike.events import KeyEvent, UP
from crabkit.roguelike.game import Game

game = Game(rng=random.Random(7))
game.step([KeyEvent.press("x")])      # leave the start screen
game.step([KeyEvent.press(UP)])       # try to move up
rows = game.screen()                  # rows of Glyph objects
game.step([KeyEvent.press("q")])
assert game.is_over()
```

Other useful pieces:

- `crabkit.roguelike.generator.generate_map(width, height, rng)` returns a
  `MapBuffer` whose `is_walkable(x, y)` tells open cells from walls.
- `crabkit.roguelike.board.WorldTileMap` is the tile grid (`board[y][x]`),
  filled from a map buffer with `set_map`.
- `crabkit.roguelike.player.try_move_player` and
  `find_player_spawn_position` move and place players; the latter raises
  `LookupError` when no diagonal cell is floor.
- `crabkit.roguelike.view` gives the glyph and colours of every tile, the
  player and the menus.
- `crabkit.roguelike.term.Terminal` is a context manager that switches to the
  alternate screen and raw input, with `poll(timeout)` and `draw(screen)`.

## Shell building blocks

### Counting characters

`crabkit.shell.builtins.counters` has `ByteCounter` (UTF-8 bytes),
`CharacterCounter`, `WordCounter`, `NewlineCounter` and
`MaxLineLengthCounter`. `CounterScope` feeds each character to several
counters, returns per-file results with `reset()` and overall results with
`total()`. `StatTable` lays the results out with every count padded to the
widest one:

```python
from crabkit.shell.builtins.counter_scope import CounterScope
from crabkit.shell.builtins.counters import ByteCounter, NewlineCounter, WordCounter
from crabkit.shell.builtins.stat_table import StatTable

scope = CounterScope()
for counter in (NewlineCounter, WordCounter, ByteCounter):
    scope.add_counter(counter)

table = StatTable()
for ch in "hello world\n":
    scope.count(ch)
table.add_row("greeting", scope.reset())
print(table)
#  1  2 12 greeting
```

### Variables and command lines

`crabkit.shell.frontend.env.Environment` maps variable names to values;
unset names read as the empty string.

`crabkit.shell.frontend.syntax` describes a parsed line: `Execute` and
`Assign` commands made of `CompoundArg` words, whose pieces are
`SimpleString`, `SingleQuoted`, `DoubleQuoted`, `Var` and `Number`.
`DoubleQuoted.inner(env)` expands the variables it holds, and `ParseError`
is the exception for lines that cannot be understood.

```python
from crabkit.shell.frontend.env import Environment
from crabkit.shell.frontend.syntax import DoubleQuoted, SimpleString, Var

env = Environment()
env.set("x", "1")
print(DoubleQuoted([SimpleString("name"), Var("x")]).inner(env))
# name1
```

## What the package does not do

There is no interactive shell to run. The package has no parser that turns
text into the command-line types above, no compiler from them to runnable
commands, no pipeline runner, and no built-in commands such as `cat`, `echo`,
`exit`, `grep`, `pwd` or `wc` — only the counting, table and data pieces
described here.