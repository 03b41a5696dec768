"""Snake game logic: tile grid with A* path finding, snakes, an AI snake and session state."""

__version__ = "0.1.0"
__all__ = ["grid", "session", "snake", "ai"]