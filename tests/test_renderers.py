import pygame as pg
import pytest

from config import AppConfig
import viz.renderer_colors as theme
from viz.renderer_headless import HeadlessRenderer, format_board
from viz.renderer_pygame import PygameRenderer


def _rgb(c):
    cc = pg.Color(c)
    return (cc.r, cc.g, cc.b)


@pytest.fixture
def played(rules_factory):
    r = rules_factory(snake=[(1, 1), (0, 1)], food=(3, 0))
    r.steer("ArrowDown")
    return r.step()   # snake (1,2),(1,1); food (3,0)


def test_pygame_renderer_colours_cells(cfg, screen, played):
    rend = PygameRenderer()
    rend.attach_surface(screen, cfg)
    rend.draw(played)
    assert _rgb(screen.get_at(rend.cell_rect(1, 2).center)) == theme.HEAD
    assert _rgb(screen.get_at(rend.cell_rect(1, 1).center)) == theme.BODY
    assert _rgb(screen.get_at(rend.cell_rect(3, 0).center)) == theme.FOOD
    assert _rgb(screen.get_at(rend.cell_rect(4, 4).center)) == theme.EMPTY


def test_pygame_renderer_layout(cfg):
    rend = PygameRenderer()
    rend.attach_surface(pg.Surface((10, 10)), cfg)
    c = cfg.render_cell
    assert rend.window_size() == (6 * c, 6 * c + rend.hud_px)
    rect = rend.cell_rect(0, 0)
    assert rect.topleft == (c, rend.hud_px + c)
    rend.attach_surface(pg.Surface((10, 10)), cfg.with_(render_show_hud=False))
    assert rend.hud_px == 0


def test_pygame_renderer_records_frames(cfg, screen, played, tmp_path):
    rend = PygameRenderer()
    rend.attach_surface(screen, cfg.with_(render_record_dir=str(tmp_path)))
    rend.push(played)
    rend.push(played)
    assert sorted(p.name for p in tmp_path.iterdir()) == ["frame_000000.png", "frame_000001.png"]


def test_pygame_renderer_rejects_config_class(screen):
    with pytest.raises(TypeError):
        PygameRenderer().attach_surface(screen, AppConfig)


def test_format_board(played):
    text = format_board(played).splitlines()
    assert text[0] == "playing"
    assert text[1] == "  0 1 2 3 4"
    assert text[2] == "0 . . . F ."
    assert text[3] == "1 . S . . ."
    assert text[4] == "2 . S . . ."
    assert len(text) == 2 + 5


def test_format_board_shows_reason(rules_factory):
    r = rules_factory(snake=[(0, 0)], food=(4, 4))
    r.steer("ArrowUp")
    assert format_board(r.step()).splitlines()[0] == "stopped (wall)"


def test_headless_keeps_frames(played, capsys):
    rend = HeadlessRenderer(echo=True, keep=2)
    for _ in range(3):
        rend.push(played)
    assert len(rend.frames) == 2
    assert rend.last is played
    assert "S" in capsys.readouterr().out
