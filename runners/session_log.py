from __future__ import annotations
import csv, os
from typing import Dict, Any, Protocol
from core.interfaces import Snapshot

TICK_KEYS = [
    "tick", "status", "reason", "length",
    "head_x", "head_y", "food_idx", "pending_growth", "eaten",
]

class Logger(Protocol):
    def log(self, step: int, scalars: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, step: int, scalars: Dict[str, Any]) -> None:
        scalars = {"tick": step, **scalars}
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(scalars.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",   # don't crash on unseen keys
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(scalars)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()


class TickLogSink:
    """Frame sink writing one row per snapshot; flushes when the session ends."""
    def __init__(self, logger: Logger):
        self.logger = logger
        self._last_tick: int | None = None

    def push(self, snap: Snapshot) -> None:
        # the same tick can be pushed twice (initial frame, no-op steps)
        if snap.tick == self._last_tick and not snap.status.terminal:
            return
        self._last_tick = snap.tick
        hx, hy = snap.head
        self.logger.log(snap.tick, {
            "status": snap.status.value,
            "reason": snap.reason or "",
            "length": snap.length,
            "head_x": hx,
            "head_y": hy,
            "food_idx": snap.food.idx if snap.food is not None else "",
            "pending_growth": snap.pending_growth,
            "eaten": snap.eaten,
        })
        if snap.status.terminal:
            self.logger.flush()


def make_tick_logger(logger: Logger) -> TickLogSink:
    return TickLogSink(logger)
