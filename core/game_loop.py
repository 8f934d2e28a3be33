# snake/core/game_loop.py
from __future__ import annotations
from typing import Any, Iterable, List, Optional
from .interfaces import FrameSink, GameStatus, Snapshot, Timer
from .snake_rules import Rules


class GameLoop:
    """
    Drives a Rules session from a Timer.

    The timer handle is taken on the first accepted direction and released
    exactly once: on collision, on a full board, on stop() or on close().
    Use it as a context manager so leaving the block always releases it.
    """
    def __init__(self, rules: Rules, timer: Timer, sinks: Iterable[FrameSink] = ()):
        self.rules = rules
        self.timer = timer
        self.sinks: List[FrameSink] = list(sinks)
        self._handle: Optional[Any] = None
        self._closed = False

    @property
    def running(self) -> bool:
        return self._handle is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def add_sink(self, sink: FrameSink) -> None:
        self.sinks.append(sink)

    def _emit(self, snap: Snapshot) -> None:
        for sink in self.sinks:
            sink.push(snap)

    def show(self) -> Snapshot:
        snap = self.rules.snapshot()
        self._emit(snap)
        return snap

    def handle_key(self, key: str) -> bool:
        if self._closed:
            return False
        was_pending = self.rules.status is GameStatus.PENDING
        accepted = self.rules.steer(key)
        if accepted and was_pending:
            # first move: render it right away, then keep ticking
            self.tick()
            self.start()
        return accepted

    def start(self) -> None:
        if self._closed or self._handle is not None:
            return
        if self.rules.status is not GameStatus.PLAYING:
            return
        self._handle = self.timer.every(self.rules.cfg.tick_ms, self.tick)

    def tick(self) -> Optional[Snapshot]:
        if self._closed:
            return None
        snap = self.rules.step()
        self._emit(snap)
        if snap.status.terminal:
            self.stop()
        return snap

    def stop(self) -> None:
        handle, self._handle = self._handle, None
        if handle is not None:
            self.timer.cancel(handle)

    def close(self) -> None:
        self.stop()
        self._closed = True

    def __enter__(self) -> "GameLoop":
        self.show()
        return self

    def __exit__(self, *exc) -> None:
        self.close()
