# snake/core/snake_rules.py  (pure rules, no pygame)
from __future__ import annotations
import numbers
import random
from typing import Iterable, List, Optional, Tuple, Union
from config import AppConfig
from .direction import DirectionController
from .errors import NoAvailableCell, OutOfBounds
from .food import place_food
from .grid import cell_at, create_grid, draw_grid
from .interfaces import Cell, GameStatus, Segment, Snapshot, Vector

FoodSpec = Union[int, Tuple[int, int], Cell]


class Rules:
    """
    One game session: snake, food, direction and status.

    `steer` feeds key identifiers through the direction rule, `step` advances
    one tick. Growth is a pending counter: while it is positive the tail stays
    put for a tick and the counter drops by one.
    """
    def __init__(self, cfg: AppConfig, *, snake: Optional[Iterable[Segment]] = None,
                 food: Optional[FoodSpec] = None):
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self.rng = random.Random(cfg.seed)
        self.grid = create_grid(cfg.cols, cfg.rows)
        self._reset_state(snake, food)

    def seed(self, seed: Optional[int]):
        self.rng = random.Random(seed)

    def _reset_state(self, snake, food):
        if snake is None:
            start = self.rng.randrange(self.grid.size)
            self.snake: List[Segment] = [(start % self.cfg.cols, start // self.cfg.cols)]
        else:
            self.snake = [(int(x), int(y)) for x, y in snake]
            if not self.snake:
                raise ValueError("snake needs at least one segment")
            for x, y in self.snake:
                cell_at(self.grid, x, y)   # raises OutOfBounds
            if len(set(self.snake)) != len(self.snake):
                raise ValueError("snake segments must be distinct")

        self.controller = DirectionController()
        self.status = GameStatus.PENDING
        self.reason: Optional[str] = None
        if food is not None:
            self.food: Optional[Cell] = self._food_cell(food)
        else:
            try:
                self.food = place_food(self.grid, self.snake, self.rng)
            except NoAvailableCell:
                # snake already covers the board (1x1, or a full explicit body)
                self.food = None
                self.status, self.reason = GameStatus.FULL, "board_full"
        self.pending_growth = 0
        self.eaten = 0
        self.tick_count = 0

    def _food_cell(self, food: FoodSpec) -> Cell:
        if isinstance(food, Cell):
            cell = cell_at(self.grid, food.x, food.y)
        elif isinstance(food, numbers.Integral):
            food = int(food)
            if not 0 <= food < self.grid.size:
                raise ValueError(f"food index {food} outside the board")
            cell = self.grid.cell(food)
        else:
            cell = cell_at(self.grid, *food)
        if (cell.x, cell.y) in self.snake:
            raise ValueError(f"food at {(cell.x, cell.y)} sits on the snake")
        return cell

    def reset(self, *, snake: Optional[Iterable[Segment]] = None,
              food: Optional[FoodSpec] = None) -> Snapshot:
        self._reset_state(snake, food)
        return self.snapshot()

    @property
    def vector(self) -> Vector:
        return self.controller.vector

    def steer(self, key: str) -> bool:
        """Apply an input key. Returns True when the direction changed."""
        if self.status.terminal:
            return False
        if not self.controller.steer(key):
            return False
        if self.status is GameStatus.PENDING:
            self.status = GameStatus.PLAYING
        return True

    def _stop(self, status: GameStatus, reason: str) -> Snapshot:
        self.status, self.reason = status, reason
        return self.snapshot()

    def step(self) -> Snapshot:
        if self.status is not GameStatus.PLAYING:
            return self.snapshot()

        hx, hy = self.snake[0]
        dx, dy = self.vector

        # collisions leave the snake where it is
        try:
            head = cell_at(self.grid, hx + dx, hy + dy)
        except OutOfBounds:
            return self._stop(GameStatus.STOPPED, "wall")
        if (head.x, head.y) in self.snake:
            return self._stop(GameStatus.STOPPED, "self")

        self.tick_count += 1
        self.snake.insert(0, (head.x, head.y))
        if self.pending_growth > 0:
            self.pending_growth -= 1
        else:
            self.snake.pop()

        if self.food is not None and head.idx == self.food.idx:
            self.eaten += 1
            self.pending_growth += self.cfg.growth
            try:
                self.food = place_food(self.grid, self.snake, self.rng)
            except NoAvailableCell:
                self.food = None
                return self._stop(GameStatus.FULL, "board_full")
        return self.snapshot()

    def snapshot(self) -> Snapshot:
        return Snapshot(
            grid=draw_grid(self.cfg.cols, self.cfg.rows, self.snake, self.food),
            snake=tuple(self.snake),
            food=self.food,
            vector=self.vector,
            status=self.status,
            reason=self.reason,
            tick=self.tick_count,
            eaten=self.eaten,
            pending_growth=self.pending_growth,
        )
