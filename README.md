# snakegame

Logic for a grid-based snake game that does not depend on any engine. It
provides a tile grid with walls and an apple, a snake that glides from tile to
tile with a trailing tail, an AI snake that steers towards the apple along an
A* path, and a session object that holds the game mode, the scores and the
current map.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `snakegame.grid`

- `Vec2(x, y)`: an immutable 2D vector that supports `+`, `-` and division by
  a number.
- `TileState`: `EMPTY`, `OCCUPIED` or `APPLE`.
- `heuristic(origin, target)`: the estimated path cost between two world
  positions. Each distance is truncated to whole units and the result is ten
  times the larger of the two distances.
- `level_files(levels_dir)`: the sorted names of the `.txt` files in a
  directory. The list is empty if the directory does not exist.
- `Grid(offset=1.0, origin=None, rng=None)`: the playing field. Tiles are
  `offset` world units apart and start at `origin`. `rng` is a
  `random.Random` that is used for random placement.
  - `create(width, height)` builds an empty field that has a wall border.
    `default()` does the same at 50 × 50.
  - `load_level(levels_dir, level)` builds the field from a level file. Each
    line is one column along x, and a `1` marks a wall. The length of the
    first line sets the height. If the level number is out of range, the first
    file is used. If no file can be read, or the file is empty, the call falls
    back to `default()`.
  - `tile_position(x, y)` returns the world position of a tile. For a tile
    outside the field it returns `Vec2()`.
  - `wall_positions()` returns the world positions of every tile that is not
    empty.
  - `random_empty_tile()` picks the world position of a random empty tile. It
    raises `LookupError` when no tile is empty.
  - `set_tile_state(location, state)` changes the tile at the given grid
    coordinates. It raises `IndexError` outside the field.
  - `spawn_apple()` picks a random empty tile and stores its grid coordinates
    in `apple_location`. It returns the tile's world position.
  - `neighbors(index)` returns the tile indices below, above, right and left
    of a tile.
  - `next_step(origin, target)` runs A* between two tiles given in grid
    coordinates, and returns the world position of the first tile on the
    path. It returns `Vec2()` when the two tiles are the same or when the
    target cannot be reached. It raises `IndexError` when either tile is
    outside the field.

### `snakegame.snake`

- `Direction`: `FORWARD` (+x), `BACK` (−x), `LEFT` (+y) and `RIGHT` (−y).
- `TailSegment`: one piece of the tail. It holds its old and new world
  locations, its grid location and its interpolated `position`.
- `Snake(grid, speed=0.1, size=0)`:
  - `spawn()` puts the head on a random empty tile and sets `current_tile`.
  - `tick(delta_time)` advances the step progress by `speed * delta_time`.
  - `lerp_value()` returns the current step progress.
  - `movement_logic()` interpolates the head (`location`) and each tail
    segment at the current progress.
  - `reset_lerp()` completes a step. It shifts the tail along, marks the tail
    tiles on the grid and moves `current_tile` one tile in the current
    `direction`.
  - `swap_direction(direction)` sets the heading.
  - `move_tile()` moves `current_tile` one tile in the current heading and
    returns that tile's world position.
  - `add_to_tail(num)` raises the wanted size and calls every callback
    registered with `on_score_changed(callback)`, passing the new size.
  - `tail_size_check()` adds one segment when the tail is shorter than the
    wanted size.
  - `length()` returns the wanted size.

### `snakegame.ai`

- `AISnake`: a `Snake` whose `tick` also calls `choose_direction()` once the
  step progress passes 1. `choose_direction()` turns towards the next tile
  on the path to `grid.apple_location` and returns the new heading. It never
  reverses straight back; in that case it turns sideways.

### `snakegame.session`

- `GameMode`: `NO_STATE`, `ONE_PLAYER`, `TWO_PLAYER` or `VS_AI`.
- `Session`: `mode` (read-only), `scores` and `map_id`.
  - `change_mode(new_mode)` calls each callback registered with
    `on_mode_changed(callback)`, passing `(old_mode, new_mode)`, and then
    switches mode. It does nothing if the mode is unchanged.
  - `next_map()` increments `map_id`.

## Example

```python
import random

from snakegame.ai import AISnake
from snakegame.grid import Grid, Vec2

grid = Grid(offset=100.0, origin=Vec2(0.0, 0.0), rng=random.Random(1))
grid.default()
grid.spawn_apple()

snake = AISnake(grid, speed=5.0, size=2)
snake.on_score_changed(lambda size: print("size", size))
snake.spawn()

for _ in range(40):
    snake.tick(0.25)
    if snake.lerp_value() > 1:
        snake.reset_lerp()
        snake.tail_size_check()
        if snake.current_tile == grid.apple_location:
            snake.add_to_tail(1)
            grid.spawn_apple()
    snake.movement_logic()
    print(snake.current_tile, snake.location)
```

## What the package does not do

The package holds game state and rules only. It does not:

- draw anything;
- read keyboard or controller input;
- provide a command or a game loop;
- detect collisions with walls or with the snake itself, or end the game.

The caller decides when a step ends (by calling `reset_lerp`), when the
apple has been eaten and what a collision means. If the caller lets the snake
leave the field, grid methods that need a valid tile raise `IndexError`.