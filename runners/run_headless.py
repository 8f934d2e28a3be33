# runners/run_headless.py
from __future__ import annotations
from typing import List, Optional
from config import AppConfig
from core.game_loop import GameLoop
from core.interfaces import Snapshot
from core.snake_rules import Rules
from core.timers import ManualTimer
from runners.session_log import CSVLogger, TICK_KEYS, make_tick_logger
from viz.renderer_headless import HeadlessRenderer

SCRIPT_KEYS = {"U": "ArrowUp", "D": "ArrowDown", "L": "ArrowLeft", "R": "ArrowRight"}
WAIT = "."

def parse_script(script: str) -> List[str]:
    """
    "R..D." -> ["ArrowRight", ".", ".", "ArrowDown", "."]. Letters press a
    key, "." lets one tick pass. Spaces and commas are ignored.
    """
    out = []
    for ch in script.upper():
        if ch in " ,\t\n":
            continue
        if ch == WAIT:
            out.append(WAIT)
        elif ch in SCRIPT_KEYS:
            out.append(SCRIPT_KEYS[ch])
        else:
            raise ValueError(f"unknown script token {ch!r} (use U/D/L/R or '.')")
    return out

def main(cfg: Optional[AppConfig] = None, script: str = "", echo: bool = True) -> Snapshot:
    cfg = cfg or AppConfig()
    steps = parse_script(script)

    rules = Rules(cfg)
    timer = ManualTimer()
    rend = HeadlessRenderer(echo=echo)
    rend.open(cfg)
    logger = CSVLogger(cfg.log_path, fieldnames=TICK_KEYS) if cfg.log_path else None
    sinks = [rend] + ([make_tick_logger(logger)] if logger else [])
    print(f"[snake] headless board {cfg.cols}x{cfg.rows}  growth={cfg.growth}  seed={cfg.seed}  script={len(steps)} steps")

    try:
        with GameLoop(rules, timer, sinks) as loop:
            for tok in steps:
                if rules.status.terminal:
                    break
                if tok == WAIT:
                    timer.advance(cfg.tick_ms)
                else:
                    loop.handle_key(tok)
    finally:
        if logger:
            logger.close()
        rend.close()

    snap = rules.snapshot()
    print(f"[snake] {snap.status.value}  reason={snap.reason}  "
          f"length={snap.length}  eaten={snap.eaten}  ticks={snap.tick}")
    return snap
