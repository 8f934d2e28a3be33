# snake/core/grid.py  (board addressing + per-tick projection)
from __future__ import annotations
from typing import Iterable, Optional, Tuple
import numpy as np
from .errors import OutOfBounds
from .interfaces import Cell, Grid, Occupant, Segment


def create_grid(cols: int, rows: int) -> Grid:
    if cols < 1 or rows < 1:
        raise ValueError(f"grid must be at least 1x1, got {cols}x{rows}")
    return Grid(cols, rows, np.zeros(cols * rows, dtype=np.int8))


def in_bounds(grid: Grid, x: int, y: int) -> bool:
    return 0 <= x < grid.cols and 0 <= y < grid.rows


def index_of(grid: Grid, x: int, y: int) -> int:
    if not in_bounds(grid, x, y):
        raise OutOfBounds(x, y)
    return y * grid.cols + x


def coords_of(grid: Grid, idx: int) -> Tuple[int, int]:
    if not 0 <= idx < grid.size:
        raise IndexError(f"cell index {idx} outside 0..{grid.size - 1}")
    return idx % grid.cols, idx // grid.cols


def cell_at(grid: Grid, x: int, y: int) -> Cell:
    return grid.cell(index_of(grid, x, y))


def draw_grid(cols: int, rows: int, snake: Iterable[Segment], food: Optional[Cell]) -> Grid:
    """Fresh board with the snake and food marked. The result is read-only."""
    grid = create_grid(cols, rows)
    occ = grid.occupancy
    for x, y in snake:
        occ[index_of(grid, x, y)] = Occupant.SNAKE
    if food is not None:
        occ[food.idx] = Occupant.FOOD
    occ.setflags(write=False)
    return grid
