# snake/core/timers.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict
from .interfaces import Timer


@dataclass
class _Schedule:
    period_ms: int
    callback: Callable[[], Any]
    due_ms: int


class ManualTimer(Timer):
    """Deterministic clock for headless runs and tests: time only moves on advance()."""
    def __init__(self):
        self.now_ms = 0
        self._next_handle = 1
        self._active: Dict[int, _Schedule] = {}
        self.cancelled = 0

    def every(self, period_ms: int, callback: Callable[[], Any]) -> int:
        if period_ms <= 0:
            raise ValueError(f"period_ms must be positive, got {period_ms}")
        handle = self._next_handle
        self._next_handle += 1
        self._active[handle] = _Schedule(period_ms, callback, self.now_ms + period_ms)
        return handle

    def cancel(self, handle: int) -> None:
        if handle not in self._active:
            raise ValueError(f"timer handle {handle} is not active")
        del self._active[handle]
        self.cancelled += 1

    @property
    def active(self) -> int:
        return len(self._active)

    def advance(self, ms: int) -> int:
        """Move the clock forward, firing due callbacks in time order. Returns fire count."""
        target = self.now_ms + ms
        fired = 0
        while True:
            due = [(s.due_ms, h) for h, s in self._active.items() if s.due_ms <= target]
            if not due:
                break
            due_ms, handle = min(due)
            sched = self._active[handle]
            self.now_ms = due_ms
            sched.due_ms += sched.period_ms
            sched.callback()
            fired += 1
        self.now_ms = target
        return fired
