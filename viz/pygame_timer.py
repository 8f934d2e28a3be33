# viz/pygame_timer.py
from __future__ import annotations
from typing import Any, Callable, Dict
import pygame as pg
from core.interfaces import Timer

class PygameTimer(Timer):
    """
    Periodic callbacks on top of pygame.time.set_timer. Each handle is its own
    custom event type; the event loop hands events to dispatch().
    """
    def __init__(self):
        self._callbacks: Dict[int, Callable[[], Any]] = {}

    def every(self, period_ms: int, callback: Callable[[], Any]) -> int:
        event_type = pg.event.custom_type()
        self._callbacks[event_type] = callback
        pg.time.set_timer(event_type, period_ms)
        return event_type

    def cancel(self, handle: int) -> None:
        if handle not in self._callbacks:
            raise ValueError(f"timer handle {handle} is not active")
        pg.time.set_timer(handle, 0)
        del self._callbacks[handle]

    def dispatch(self, event) -> bool:
        cb = self._callbacks.get(event.type)
        if cb is None:
            return False
        cb()
        return True
