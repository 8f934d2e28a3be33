# snake/core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Callable, Dict, NamedTuple, Optional, Protocol, Tuple
import numpy as np

Segment = Tuple[int, int]   # (x, y)


class Vector(NamedTuple):
    dx: int
    dy: int


ZERO = Vector(0, 0)


class Occupant(IntEnum):
    NONE = 0
    SNAKE = 1
    FOOD = 2

    @property
    def label(self) -> str:
        return self.name.lower()


class GameStatus(str, Enum):
    PENDING = "pending"
    PLAYING = "playing"
    STOPPED = "stopped"
    FULL = "full"   # board full, nowhere left to put food

    @property
    def terminal(self) -> bool:
        return self in (GameStatus.STOPPED, GameStatus.FULL)


@dataclass(frozen=True)
class Cell:
    idx: int
    x: int
    y: int
    occupant: Occupant = Occupant.NONE


@dataclass(frozen=True, eq=False)
class Grid:
    """Rectangular board. `occupancy` is a flat int8 array of Occupant codes, row-major."""
    cols: int
    rows: int
    occupancy: np.ndarray

    @property
    def size(self) -> int:
        return self.cols * self.rows

    def cell(self, idx: int) -> Cell:
        return Cell(idx, idx % self.cols, idx // self.cols, Occupant(int(self.occupancy[idx])))

    @property
    def cells(self) -> Tuple[Cell, ...]:
        return tuple(self.cell(i) for i in range(self.size))

    def occupants(self) -> Dict[int, str]:
        """idx -> occupant label, the form renderers consume."""
        return {i: Occupant(int(code)).label for i, code in enumerate(self.occupancy)}

    def as_array(self) -> np.ndarray:
        """(rows, cols) view of the occupancy codes."""
        return self.occupancy.reshape(self.rows, self.cols)


@dataclass(frozen=True)
class Snapshot:
    grid: Grid
    snake: Tuple[Segment, ...]   # head first
    food: Optional[Cell]
    vector: Vector
    status: GameStatus
    reason: str | None
    tick: int
    eaten: int
    pending_growth: int

    @property
    def head(self) -> Segment:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)


class Timer(Protocol):
    def every(self, period_ms: int, callback: Callable[[], Any]) -> Any: ...
    def cancel(self, handle: Any) -> None: ...


class FrameSink(Protocol):
    def push(self, snap: Snapshot) -> None: ...
