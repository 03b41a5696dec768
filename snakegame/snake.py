"""The player's snake: head movement between tiles and a trailing tail."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from snakegame.grid import Grid, TileState, Vec2

DEFAULT_SPEED = 0.1


class Direction(Enum):
    """Heading of the snake on the grid."""

    FORWARD = 0
    BACK = 1
    LEFT = 2
    RIGHT = 3


_STEPS = {
    Direction.FORWARD: Vec2(1, 0),
    Direction.BACK: Vec2(-1, 0),
    Direction.LEFT: Vec2(0, 1),
    Direction.RIGHT: Vec2(0, -1),
}

ScoreCallback = Callable[[int], None]


@dataclass
class TailSegment:
    """One piece of the tail, moving from old_location to new_location."""

    new_location: Vec2
    old_location: Vec2
    grid_location: Vec2
    position: Vec2


def _lerp(start: Vec2, end: Vec2, alpha: float) -> Vec2:
    return Vec2(
        start.x + (end.x - start.x) * alpha,
        start.y + (end.y - start.y) * alpha,
    )


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class Snake:
    """A snake whose head glides from tile to tile on a grid."""

    def __init__(self, grid: Grid, speed: float = DEFAULT_SPEED, size: int = 0) -> None:
        self.grid = grid
        self.speed = speed
        self.size = size
        self.direction = Direction.FORWARD
        self.current_tile = Vec2()
        self.location = Vec2()
        self.current_location = Vec2()
        self.target_location = Vec2()
        self.current_lerp = 0.0
        self.tail: list[TailSegment] = []
        self._score_listeners: list[ScoreCallback] = []

    def spawn(self) -> None:
        """Place the head on a random empty tile and record its grid coordinates."""
        self.location = self.grid.random_empty_tile()
        local = self.location - self.grid.origin
        x = _round_half_up(local.x)
        y = _round_half_up(local.y)
        offset = self.grid.offset
        self.current_tile = Vec2(int(x / offset), int(y / offset))

    def tick(self, delta_time: float) -> None:
        """Advance the interpolation between the current and the target tile."""
        self.current_lerp += self.speed * delta_time

    def swap_direction(self, direction: Direction) -> None:
        """Set the heading used for the next tile move."""
        self.direction = direction

    def move_tile(self) -> Vec2:
        """Step the current tile one place along the heading; return its world position."""
        self.current_tile = self.current_tile + _STEPS[self.direction]
        return self.grid.tile_position(int(self.current_tile.x), int(self.current_tile.y))

    def movement_logic(self) -> None:
        """Interpolate the head and every tail segment at the current lerp value."""
        self.location = _lerp(self.current_location, self.target_location, self.current_lerp)
        for segment in self.tail:
            segment.position = _lerp(
                segment.old_location, segment.new_location, self.current_lerp
            )

    def reset_lerp(self) -> None:
        """Finish the current step: shift the tail along and pick the next target tile."""
        if self.tail:
            for segment in self.tail:
                self.grid.set_tile_state(segment.grid_location, TileState.EMPTY)
            for ahead, segment in reversed(list(zip(self.tail, self.tail[1:]))):
                step = ahead.grid_location - segment.grid_location
                if step.x != 0 or step.y != 0:
                    segment.grid_location = segment.grid_location + step
                    self.grid.set_tile_state(segment.grid_location, TileState.OCCUPIED)
                segment.old_location = segment.new_location
                segment.new_location = ahead.new_location
            head = self.tail[0]
            head.grid_location = self.current_tile
            head.old_location = head.new_location
            head.new_location = self.target_location
        self.current_lerp = 0.0
        self.current_location = self.target_location
        self.target_location = self.move_tile()

    def add_to_tail(self, num: int) -> None:
        """Grow the wanted length and notify score listeners of the new size."""
        self.size += num
        for callback in self._score_listeners:
            callback(self.size)

    def tail_size_check(self) -> None:
        """Add one tail segment if the tail is shorter than the wanted size."""
        if len(self.tail) >= self.size:
            return
        if self.tail:
            last = self.tail[-1]
            grid_location = last.grid_location
            location = last.old_location
        else:
            grid_location = self.current_tile
            location = self.current_location
        self.tail.append(
            TailSegment(
                new_location=location,
                old_location=location,
                grid_location=grid_location,
                position=location,
            )
        )

    def on_score_changed(self, callback: ScoreCallback) -> None:
        """Register a callback called with the new size whenever the snake grows."""
        self._score_listeners.append(callback)

    def lerp_value(self) -> float:
        """Progress of the current step, from 0 upwards."""
        return self.current_lerp

    def length(self) -> float:
        """The wanted length of the snake."""
        return float(self.size)