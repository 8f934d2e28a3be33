# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* / viz.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def screen():
    # Plain Surface is fine for draw/blit tests (no need for display mode)
    return pg.Surface((800, 600), pg.SRCALPHA)

@pytest.fixture
def cfg():
    from config import AppConfig
    return AppConfig(cols=5, rows=5, tick_ms=100, growth=4, seed=7)

@pytest.fixture
def rules_factory(cfg):
    from core.snake_rules import Rules
    def make(snake=None, food=None, **overrides):
        c = cfg.with_(**overrides) if overrides else cfg
        return Rules(c, snake=snake, food=food)
    return make
