# runners/run_snake.py
from __future__ import annotations
from typing import Optional
import pygame as pg
from config import AppConfig
from core.game_loop import GameLoop
from core.snake_rules import Rules
from runners.session_log import CSVLogger, TICK_KEYS, make_tick_logger
from viz.keyboard import Keyboard
from viz.pygame_timer import PygameTimer
from viz.renderer_pygame import PygameRenderer

def pump(loop: GameLoop, timer: PygameTimer, kbd: Keyboard, events) -> bool:
    """Feed one batch of pygame events to the loop in order. False means quit."""
    for e in events:
        if timer.dispatch(e):
            continue
        key = kbd.translate(e)
        if key == "quit":
            return False
        if key is not None:
            loop.handle_key(key)
    return True

def main(cfg: Optional[AppConfig] = None) -> None:
    cfg = cfg or AppConfig()

    rules = Rules(cfg)
    rend = PygameRenderer()
    rend.open(cfg)
    timer = PygameTimer()
    kbd = Keyboard()
    logger = CSVLogger(cfg.log_path, fieldnames=TICK_KEYS) if cfg.log_path else None

    sinks = [rend] + ([make_tick_logger(logger)] if logger else [])
    print(f"[snake] board {cfg.cols}x{cfg.rows}  tick={cfg.tick_ms}ms  growth={cfg.growth}  seed={cfg.seed}")

    try:
        with GameLoop(rules, timer, sinks) as loop:
            reported = False
            while pump(loop, timer, kbd, pg.event.get()):
                if rules.status.terminal and not reported:
                    print(f"[snake] {rules.status.value}  reason={rules.reason}  "
                          f"length={len(rules.snake)}  eaten={rules.eaten}  ticks={rules.tick_count}")
                    reported = True
                rend.tick(cfg.fps)
    finally:
        if logger:
            logger.close()
        rend.close()
