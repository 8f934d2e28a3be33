# snake/core/direction.py
from __future__ import annotations
from typing import Optional
from .interfaces import Vector, ZERO

KEY_VECTORS = {
    "ArrowUp": Vector(0, -1),
    "ArrowDown": Vector(0, 1),
    "ArrowLeft": Vector(-1, 0),
    "ArrowRight": Vector(1, 0),
}


def shares_axis(a: Vector, b: Vector) -> bool:
    return (a.dx != 0 and b.dx != 0) or (a.dy != 0 and b.dy != 0)


def propose(current: Vector, key: str) -> Optional[Vector]:
    """
    Candidate vector for `key`, or None when the key is not an arrow or the
    candidate moves along the current axis (same direction or a 180° turn).
    """
    cand = KEY_VECTORS.get(key)
    if cand is None or shares_axis(current, cand):
        return None
    return cand


class DirectionController:
    def __init__(self, vector: Vector = ZERO):
        self.vector = Vector(*vector)

    def steer(self, key: str) -> bool:
        cand = propose(self.vector, key)
        if cand is None:
            return False
        self.vector = cand
        return True
