# snake/core/food.py
from __future__ import annotations
import random
from typing import Iterable
import numpy as np
from .errors import NoAvailableCell
from .grid import index_of
from .interfaces import Cell, Grid, Segment


def free_cells(grid: Grid, snake: Iterable[Segment]) -> np.ndarray:
    """Indices of cells no snake segment sits on, ascending."""
    free = np.ones(grid.size, dtype=bool)
    for x, y in snake:
        free[index_of(grid, x, y)] = False
    return np.flatnonzero(free)


def place_food(grid: Grid, snake: Iterable[Segment], rng: random.Random) -> Cell:
    free = free_cells(grid, snake)
    if free.size == 0:
        raise NoAvailableCell(f"no free cell left on {grid.cols}x{grid.rows} board")
    idx = int(free[rng.randrange(free.size)])
    return grid.cell(idx)
