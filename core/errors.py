# snake/core/errors.py
from __future__ import annotations


class SnakeError(Exception):
    """Base class for game engine errors."""


class OutOfBounds(SnakeError, IndexError):
    def __init__(self, x: int, y: int):
        super().__init__(f"Out of bound range: {x}, {y}")
        self.x = x
        self.y = y


class NoAvailableCell(SnakeError):
    """Raised when every cell is taken by the snake and food cannot be placed."""
