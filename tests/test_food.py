import random

import pytest

from core.errors import NoAvailableCell
from core.food import free_cells, place_food
from core.grid import create_grid


def test_food_never_lands_on_the_snake():
    g = create_grid(4, 4)
    snake = [(x, y) for y in range(4) for x in range(4) if (x + y) % 3]
    occupied = {y * 4 + x for x, y in snake}
    rng = random.Random(0)
    for _ in range(200):
        assert place_food(g, snake, rng).idx not in occupied


def test_single_free_cell_is_always_chosen():
    g = create_grid(3, 2)
    snake = [(0, 0), (1, 0), (2, 0), (2, 1), (1, 1)]
    cell = place_food(g, snake, random.Random(3))
    assert (cell.x, cell.y, cell.idx) == (0, 1, 3)


def test_every_free_cell_is_reachable():
    g = create_grid(3, 3)
    snake = [(1, 1)]
    rng = random.Random(1)
    picked = {place_food(g, snake, rng).idx for _ in range(500)}
    assert picked == set(range(9)) - {4}


def test_full_board_raises():
    g = create_grid(2, 2)
    with pytest.raises(NoAvailableCell):
        place_food(g, [(0, 0), (1, 0), (1, 1), (0, 1)], random.Random(0))


def test_free_cells_sorted():
    g = create_grid(3, 1)
    assert free_cells(g, [(1, 0)]).tolist() == [0, 2]
