# snake/viz/renderer_headless.py
from __future__ import annotations
from typing import List, Optional
from config import AppConfig
from core.interfaces import Occupant, Snapshot
from viz.render_iface import Renderer

GLYPHS = {Occupant.NONE: ".", Occupant.SNAKE: "S", Occupant.FOOD: "F"}

def format_board(snap: Snapshot) -> str:
    """
    Text table of the board:
    . = empty, S = snake, F = food, with column numbers on top,
    row numbers on the left and the status on the first line.
    """
    g = snap.grid
    w = len(str(max(g.cols, g.rows) - 1))
    status = snap.status.value if not snap.reason else f"{snap.status.value} ({snap.reason})"
    lines = [status, " " * (w + 1) + " ".join(f"{x:>{w}}" for x in range(g.cols))]
    board = g.as_array()
    for y in range(g.rows):
        row = " ".join(f"{GLYPHS[Occupant(int(code))]:>{w}}" for code in board[y])
        lines.append(f"{y:>{w}} {row}")
    return "\n".join(lines)

class HeadlessRenderer(Renderer):
    """Keeps every drawn snapshot; optionally echoes the text board."""
    def __init__(self, echo: bool = False, keep: Optional[int] = None):
        self.echo = echo
        self.keep = keep
        self.frames: List[Snapshot] = []
        self.cfg: Optional[AppConfig] = None
    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg
    def draw(self, snap: Snapshot) -> None:
        self.frames.append(snap)
        if self.keep is not None and len(self.frames) > self.keep:
            del self.frames[0]
        if self.echo:
            print(format_board(snap), end="\n\n")
    def push(self, snap: Snapshot) -> None:
        self.draw(snap)
    def tick(self, fps: int) -> None:
        pass
    def close(self) -> None:
        pass
    def save_frame(self, snap: Snapshot) -> None:
        pass
    @property
    def last(self) -> Optional[Snapshot]:
        return self.frames[-1] if self.frames else None
