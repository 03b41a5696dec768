"""Game-wide session state: mode, scores and current map."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum


class GameMode(Enum):
    """Which kind of game is being played."""

    NO_STATE = 0
    ONE_PLAYER = 1
    TWO_PLAYER = 2
    VS_AI = 3


ModeCallback = Callable[[GameMode, GameMode], None]


class Session:
    """State that lives for the whole run of the game."""

    def __init__(self) -> None:
        self._mode = GameMode.NO_STATE
        self._listeners: list[ModeCallback] = []
        self.scores: list[int] = []
        self.map_id = 0

    @property
    def mode(self) -> GameMode:
        return self._mode

    def on_mode_changed(self, callback: ModeCallback) -> None:
        """Register a callback called with (old_mode, new_mode) on each change."""
        self._listeners.append(callback)

    def change_mode(self, new_mode: GameMode) -> None:
        """Switch to a new mode, notifying listeners before the switch."""
        if self._mode == new_mode:
            return
        for callback in self._listeners:
            callback(self._mode, new_mode)
        self._mode = new_mode

    def next_map(self) -> None:
        """Advance to the next map."""
        self.map_id += 1