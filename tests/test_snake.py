import random

import pytest

from snakegame.grid import Grid, TileState, Vec2
from snakegame.snake import DEFAULT_SPEED, Direction, Snake, TailSegment


def make_grid(width=7, height=7, offset=1.0, origin=None, seed=0):
    grid = Grid(offset=offset, origin=origin, rng=random.Random(seed))
    grid.create(width, height)
    return grid


def placed_snake(grid, tile, size=0, speed=DEFAULT_SPEED):
    snake = Snake(grid, speed=speed, size=size)
    snake.current_tile = tile
    return snake


def test_defaults():
    snake = Snake(make_grid())
    assert snake.speed == DEFAULT_SPEED
    assert snake.direction is Direction.FORWARD
    assert snake.lerp_value() == 0
    assert snake.length() == 0
    assert snake.tail == []


@pytest.mark.parametrize("seed", range(5))
def test_spawn_lands_on_empty_tile(seed):
    grid = make_grid(offset=10.0, origin=Vec2(100, 200), seed=seed)
    snake = Snake(grid)
    snake.spawn()
    x, y = int(snake.current_tile.x), int(snake.current_tile.y)
    assert grid.tile_position(x, y) == snake.location
    assert snake.location not in grid.wall_positions()


def test_spawn_on_single_empty_tile():
    grid = make_grid(3, 3)
    snake = Snake(grid)
    snake.spawn()
    assert snake.current_tile == Vec2(1, 1)


def test_spawn_without_room_raises():
    grid = make_grid(2, 2)
    with pytest.raises(LookupError):
        Snake(grid).spawn()


def test_tick_accumulates_lerp():
    snake = Snake(make_grid(), speed=0.5)
    snake.tick(1.0)
    assert snake.lerp_value() == 0.5
    snake.tick(1.0)
    assert snake.lerp_value() == 1.0


@pytest.mark.parametrize(
    "direction, step",
    [
        (Direction.FORWARD, Vec2(1, 0)),
        (Direction.BACK, Vec2(-1, 0)),
        (Direction.LEFT, Vec2(0, 1)),
        (Direction.RIGHT, Vec2(0, -1)),
    ],
)
def test_move_tile_follows_direction(direction, step):
    grid = make_grid()
    start = Vec2(3, 3)
    snake = placed_snake(grid, start)
    snake.swap_direction(direction)
    position = snake.move_tile()
    assert snake.current_tile == start + step
    assert position == grid.tile_position(
        int(snake.current_tile.x), int(snake.current_tile.y)
    )


@pytest.mark.parametrize(
    "there, back",
    [(Direction.FORWARD, Direction.BACK), (Direction.LEFT, Direction.RIGHT)],
)
def test_opposite_moves_return_to_start(there, back):
    start = Vec2(2, 4)
    snake = placed_snake(make_grid(), start)
    snake.swap_direction(there)
    snake.move_tile()
    snake.swap_direction(back)
    snake.move_tile()
    assert snake.current_tile == start


def test_move_outside_grid_gives_zero_vector():
    grid = make_grid(3, 3, origin=Vec2(5, 5))
    snake = placed_snake(grid, Vec2(2, 2))
    assert snake.move_tile() == Vec2()


def test_movement_logic_endpoints():
    snake = Snake(make_grid())
    snake.current_location = Vec2(1, 2)
    snake.target_location = Vec2(4, 6)
    snake.tail.append(TailSegment(Vec2(3, 3), Vec2(1, 1), Vec2(), Vec2()))
    snake.current_lerp = 0.0
    snake.movement_logic()
    assert snake.location == snake.current_location
    assert snake.tail[0].position == snake.tail[0].old_location
    snake.current_lerp = 1.0
    snake.movement_logic()
    assert snake.location == snake.target_location
    assert snake.tail[0].position == snake.tail[0].new_location


def test_reset_lerp_advances_target():
    grid = make_grid()
    snake = placed_snake(grid, Vec2(2, 2))
    snake.target_location = Vec2(7, 8)
    snake.current_lerp = 1.5
    snake.reset_lerp()
    assert snake.lerp_value() == 0
    assert snake.current_location == Vec2(7, 8)
    assert snake.target_location == grid.tile_position(
        int(snake.current_tile.x), int(snake.current_tile.y)
    )


def test_add_to_tail_notifies_listeners():
    snake = Snake(make_grid(), size=1)
    first, second = [], []
    snake.on_score_changed(first.append)
    snake.on_score_changed(second.append)
    snake.add_to_tail(2)
    assert snake.length() == 3
    assert first == [3]
    assert second == [3]


def test_tail_size_check_grows_to_size():
    snake = placed_snake(make_grid(), Vec2(2, 2), size=2)
    snake.current_location = Vec2(2, 2)
    for _ in range(4):
        snake.tail_size_check()
    assert len(snake.tail) == 2
    head = snake.tail[0]
    assert head.grid_location == snake.current_tile
    assert head.new_location == head.old_location == snake.current_location


def test_tail_size_check_no_growth_at_zero():
    snake = Snake(make_grid())
    snake.tail_size_check()
    assert snake.tail == []


def test_reset_lerp_shifts_tail():
    grid = make_grid()
    snake = placed_snake(grid, Vec2(2, 2), size=2)
    snake.tail_size_check()
    snake.tail_size_check()
    for _ in range(2):
        snake.reset_lerp()
    previous_head_tile = snake.tail[0].grid_location
    old_target = snake.target_location
    tile_before_move = snake.current_tile
    snake.reset_lerp()
    assert snake.tail[1].grid_location == previous_head_tile
    assert grid.tile_position(
        int(previous_head_tile.x), int(previous_head_tile.y)
    ) in grid.wall_positions()
    assert snake.tail[0].grid_location == tile_before_move
    assert snake.tail[0].new_location == old_target


def test_reset_lerp_with_tail_outside_grid_raises():
    grid = make_grid()
    snake = placed_snake(grid, Vec2(2, 2), size=1)
    snake.tail_size_check()
    snake.tail[0].grid_location = Vec2(50, 50)
    with pytest.raises(IndexError):
        snake.reset_lerp()


def test_reset_lerp_clears_tail_tiles():
    grid = make_grid()
    snake = placed_snake(grid, Vec2(3, 3), size=1)
    snake.tail_size_check()
    grid.set_tile_state(Vec2(3, 3), TileState.OCCUPIED)
    snake.reset_lerp()
    assert grid.tile_position(3, 3) not in grid.wall_positions()