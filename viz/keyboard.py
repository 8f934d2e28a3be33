# snake/viz/keyboard.py
import pygame as pg

ARROWS = {
    pg.K_UP: "ArrowUp",
    pg.K_DOWN: "ArrowDown",
    pg.K_LEFT: "ArrowLeft",
    pg.K_RIGHT: "ArrowRight",
}

class Keyboard:
    """Turns pygame key releases into arrow identifiers; everything else is ignored."""
    def translate(self, e):
        if e.type == pg.QUIT:
            return "quit"
        if e.type == pg.KEYDOWN and e.key == pg.K_ESCAPE:
            return "quit"
        if e.type == pg.KEYUP:
            return ARROWS.get(e.key)
        return None

