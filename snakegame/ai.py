"""A computer-controlled snake that heads for the apple."""

from __future__ import annotations

from snakegame.snake import Direction, Snake

_THRESHOLD = 0.3


class AISnake(Snake):
    """A snake that steers itself along the path to the apple."""

    def tick(self, delta_time: float) -> None:
        """Advance the step and, once it is complete, choose a new heading."""
        super().tick(delta_time)
        if self.current_lerp > 1:
            self.choose_direction()

    def choose_direction(self) -> Direction:
        """Turn towards the next tile on the path to the apple and return the heading.

        A turn straight back is never taken; a sideways heading is used instead.
        """
        tile = self.current_tile
        step = self.grid.next_step(tile, self.grid.apple_location)
        here = self.grid.tile_position(int(tile.x), int(tile.y))
        delta = (step - here) / self.grid.offset

        if delta.x > _THRESHOLD:
            self.direction = (
                Direction.FORWARD if self.direction is not Direction.BACK else Direction.LEFT
            )
        elif delta.x < -_THRESHOLD:
            self.direction = (
                Direction.BACK if self.direction is not Direction.FORWARD else Direction.LEFT
            )
        elif delta.y > _THRESHOLD:
            self.direction = (
                Direction.LEFT if self.direction is not Direction.RIGHT else Direction.FORWARD
            )
        elif delta.y < -_THRESHOLD:
            self.direction = (
                Direction.RIGHT if self.direction is not Direction.LEFT else Direction.FORWARD
            )
        return self.direction