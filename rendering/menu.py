"""Main menu rendering."""

from OpenGL.GL import *

from config import particles as config
from scenes.menu import MainMenu
from .text import TextRenderer


def _quad(x: float, y: float, w: float, h: float):
    glVertex2f(x, y)
    glVertex2f(x + w, y)
    glVertex2f(x + w, y + h)
    glVertex2f(x, y + h)


class MenuRenderer:
    """Draws a MainMenu in window pixels (origin top-left)."""
    
    def __init__(self, text_renderer: TextRenderer):
        self.text_renderer = text_renderer
    
    def draw(self, menu: MainMenu, screen_size: tuple):
        w, h = screen_size
        cfg = config.MENU
        colors = config.COLORS
        
        glViewport(0, 0, int(w), int(h))
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, w, h, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()
        
        px, py, pw, ph = menu.panel_rect
        
        # Drop shadow
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glColor4f(*colors["panel_shadow"])
        glBegin(GL_QUADS)
        _quad(px + pw * 0.04, py + ph * 0.04, pw, ph)
        glEnd()
        glDisable(GL_BLEND)
        
        glBegin(GL_QUADS)
        glColor3f(*colors["panel"])
        _quad(px, py, pw, ph)
        for button in menu.buttons:
            glColor3f(*button.color)
            _quad(*button.rect)
        glEnd()
        
        title = cfg["title"]
        tw, _ = self.text_renderer.measure(title, cfg["title_font_size"])
        self.text_renderer.draw_text(
            title, int(px + (pw - tw) / 2), int(menu.title_pos[1]), screen_size,
            font_size=cfg["title_font_size"]
        )
        
        for button in menu.buttons:
            bx, by, bw, bh = button.rect
            lw, lh = self.text_renderer.measure(button.label, cfg["button_font_size"])
            self.text_renderer.draw_text(
                button.label, int(bx + (bw - lw) / 2), int(by + (bh - lh) / 2), screen_size,
                font_size=cfg["button_font_size"]
            )
