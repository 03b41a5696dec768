"""Tile grid for the playing field: level loading, walls, apples and path finding."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

DEFAULT_SIZE = 50
WALL_CHAR = "1"
LEVEL_SUFFIX = ".txt"
START_COST = 20
STEP_COST = 10


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)


class TileState(Enum):
    """What occupies a tile."""

    EMPTY = 0
    OCCUPIED = 1
    APPLE = 2


def heuristic(origin: Vec2, target: Vec2) -> float:
    """Estimated cost between two world positions (distances truncated to whole units)."""
    dist_x = int(abs(origin.x - target.x))
    dist_y = int(abs(origin.y - target.y))
    if dist_x > dist_y:
        return float(10 * dist_y + 10 * (dist_x - dist_y))
    return float(10 * dist_x + 10 * (dist_y - dist_x))


def level_files(levels_dir: str | Path) -> list[str]:
    """Names of the level files in a directory, sorted; empty if it does not exist."""
    directory = Path(levels_dir)
    if not directory.is_dir():
        return []
    return sorted(
        entry.name
        for entry in directory.iterdir()
        if entry.is_file() and entry.suffix == LEVEL_SUFFIX
    )


def _starting_tile(index_path: list[tuple[int, int]]) -> int:
    """Follow parent links from the last path entry back to the first step."""
    selected = len(index_path) - 1
    while True:
        parent, tile = index_path[selected]
        if parent < 1:
            return tile
        selected = parent


class Grid:
    """A rectangular field of tiles stored column by column."""

    def __init__(
        self,
        offset: float = 1.0,
        origin: Vec2 | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.offset = offset
        self.origin = origin if origin is not None else Vec2()
        self.rng = rng if rng is not None else random.Random()
        self.positions: list[Vec2] = []
        self.tiles: list[TileState] = []
        self.height = 0
        self.apple_location = Vec2()

    def _fill(self, width: int, height: int, is_wall) -> None:
        self.height = height
        self.positions = []
        self.tiles = []
        for x in range(width):
            for y in range(height):
                self.positions.append(
                    Vec2(x * self.offset, y * self.offset) + self.origin
                )
                self.tiles.append(
                    TileState.OCCUPIED if is_wall(x, y) else TileState.EMPTY
                )

    def create(self, width: int, height: int) -> None:
        """Build an empty field of the given size surrounded by walls."""
        self._fill(
            width,
            height,
            lambda x, y: y == 0 or x == 0 or x == width - 1 or y == height - 1,
        )

    def default(self) -> None:
        """Build the standard walled field."""
        self.create(DEFAULT_SIZE, DEFAULT_SIZE)

    def load_level(self, levels_dir: str | Path, level: int) -> None:
        """Build the field from a level file; '1' marks a wall.

        An out-of-range level selects the first file. If no level can be read
        the standard field is built instead.
        """
        names = level_files(levels_dir)
        if not names:
            self.default()
            return
        if level > len(names) - 1 or level < 0:
            level = 0
        try:
            text = (Path(levels_dir) / names[level]).read_text()
        except (OSError, UnicodeDecodeError):
            self.default()
            return
        lines = text.splitlines()
        if not lines:
            self.default()
            return

        def is_wall(x: int, y: int) -> bool:
            row = lines[x]
            return y < len(row) and row[y] == WALL_CHAR

        self._fill(len(lines), len(lines[0]), is_wall)

    def wall_positions(self) -> list[Vec2]:
        """World positions of every tile that is not empty."""
        return [
            position
            for position, state in zip(self.positions, self.tiles)
            if state is not TileState.EMPTY
        ]

    def _index(self, location: Vec2) -> int:
        return int(location.y + self.height * location.x)

    def tile_position(self, x: int, y: int) -> Vec2:
        """World position of tile (x, y), or the zero vector if outside the field."""
        index = int(y) + self.height * int(x)
        if index >= len(self.positions) or index < 0:
            return Vec2()
        return self.positions[index]

    def random_empty_tile(self) -> Vec2:
        """World position of a randomly chosen empty tile."""
        empty = [
            position
            for position, state in zip(self.positions, self.tiles)
            if state is TileState.EMPTY
        ]
        if not empty:
            raise LookupError("the grid has no empty tile")
        return self.rng.choice(empty)

    def set_tile_state(self, location: Vec2, state: TileState) -> None:
        """Change the state of the tile at the given grid coordinates."""
        index = self._index(location)
        if index >= len(self.positions) or index < 0:
            raise IndexError(f"tile {location} is outside the grid")
        self.tiles[index] = state

    def spawn_apple(self) -> Vec2:
        """Place the apple on a random empty tile and return its world position."""
        location = self.random_empty_tile()
        self.apple_location = (location - self.origin) / self.offset
        return location

    def neighbors(self, index: int) -> list[int]:
        """Indices of the tiles below, above, right and left of a tile."""
        return [index - 1, index + 1, index + self.height, index - self.height]

    def next_step(self, origin: Vec2, target: Vec2) -> Vec2:
        """World position of the tile to move to from origin towards target.

        Both arguments are grid coordinates. The zero vector is returned when
        they are the same tile or when the target cannot be reached.
        """
        count = len(self.positions)
        start = self._index(origin)
        goal = self._index(target)
        if start == goal:
            return Vec2()
        if not (0 <= start < count and 0 <= goal < count):
            raise IndexError("origin or target is outside the grid")

        from_start = [math.inf] * count
        to_end = [math.inf] * count
        from_start[start] = START_COST
        to_end[start] = heuristic(self.positions[start], self.positions[goal])

        open_tiles = [start]
        checked: set[int] = set()
        index_path: list[tuple[int, int]] = [(-1, start)]

        while open_tiles:
            current = open_tiles[0]
            index_to = 0
            for candidate in open_tiles:
                current_cost = from_start[current] + to_end[current]
                candidate_cost = from_start[candidate] + to_end[candidate]
                if current_cost > candidate_cost or (
                    current_cost == candidate_cost
                    and to_end[candidate] < to_end[current]
                ):
                    index_to = next(
                        (i for i, (_, tile) in enumerate(index_path) if tile == candidate),
                        index_to,
                    )
                    current = candidate

            checked.add(current)
            open_tiles.remove(current)

            if current == goal:
                return self.positions[_starting_tile(index_path)]

            for neighbor in self.neighbors(current):
                if (
                    neighbor >= count
                    or neighbor < 0
                    or neighbor in checked
                    or self.tiles[neighbor] is not TileState.EMPTY
                ):
                    continue
                cost = from_start[current] + STEP_COST
                to_end[neighbor] = heuristic(
                    self.positions[neighbor], self.positions[goal]
                )
                if cost < from_start[neighbor] or neighbor not in open_tiles:
                    from_start[neighbor] = cost
                    if neighbor not in open_tiles:
                        open_tiles.append(neighbor)
                    index_path.append((index_to, neighbor))

        return Vec2()