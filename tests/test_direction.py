import pytest

from core.direction import KEY_VECTORS, DirectionController, propose, shares_axis
from core.interfaces import Vector, ZERO

UP, DOWN, LEFT, RIGHT = (KEY_VECTORS[k] for k in ("ArrowUp", "ArrowDown", "ArrowLeft", "ArrowRight"))


@pytest.mark.parametrize("key", ["ArrowUp", "ArrowDown", "ArrowLeft", "ArrowRight"])
def test_any_arrow_accepted_from_rest(key):
    assert propose(ZERO, key) == KEY_VECTORS[key]


@pytest.mark.parametrize("current,key", [
    (RIGHT, "ArrowRight"), (RIGHT, "ArrowLeft"),
    (LEFT, "ArrowLeft"), (LEFT, "ArrowRight"),
    (UP, "ArrowUp"), (UP, "ArrowDown"),
    (DOWN, "ArrowDown"), (DOWN, "ArrowUp"),
])
def test_same_axis_rejected(current, key):
    assert propose(current, key) is None


@pytest.mark.parametrize("current,key", [
    (RIGHT, "ArrowUp"), (RIGHT, "ArrowDown"),
    (UP, "ArrowLeft"), (UP, "ArrowRight"),
])
def test_perpendicular_accepted(current, key):
    assert propose(current, key) == KEY_VECTORS[key]


@pytest.mark.parametrize("key", ["a", "Enter", " ", "arrowup", ""])
def test_non_arrow_keys_ignored(key):
    assert propose(RIGHT, key) is None


def test_shares_axis():
    assert shares_axis(Vector(1, 0), Vector(-1, 0))
    assert not shares_axis(Vector(1, 0), Vector(0, 1))
    assert not shares_axis(ZERO, Vector(0, 1))


def test_controller_keeps_only_latest_accepted():
    ctl = DirectionController()
    assert ctl.steer("ArrowRight")
    assert ctl.steer("ArrowUp")
    assert not ctl.steer("ArrowDown")
    assert not ctl.steer("x")
    assert ctl.vector == UP
