"""Text rendering for the HUD and menu labels."""

from typing import Dict, Tuple

import pygame
from OpenGL.GL import *

from config import particles as config


class TextRenderer:
    """Renders text overlays using pygame fonts and OpenGL."""
    
    def __init__(self, font_name: str = "monospace", font_size: int = 18):
        pygame.font.init()
        self.font_name = font_name
        self.default_size = font_size
        self._fonts: Dict[int, pygame.font.Font] = {}
    
    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.SysFont(self.font_name, size)
        return self._fonts[size]
    
    def measure(self, text: str, font_size: int = None) -> Tuple[int, int]:
        """Pixel size of ``text`` at the given font size."""
        return self._font(font_size or self.default_size).size(text)
    
    def draw_text(self, text: str, x: int, y: int, screen_size: tuple,
                  font_size: int = None, color: tuple = None):
        """
        Draw text at the given screen position.
        
        Args:
            text: The string to render
            x: X position from left edge
            y: Y position from top edge
            screen_size: (width, height) of the screen
            font_size: Pixel size (defaults to the renderer's size)
            color: RGB in 0-1 range (defaults to the configured text colour)
        """
        rgb = color or config.COLORS["text"]
        text_surface = self._font(font_size or self.default_size).render(
            text, True, tuple(int(c * 255) for c in rgb)
        )
        text_data = pygame.image.tostring(text_surface, "RGBA", True)
        w, h = text_surface.get_size()
        
        # Pixel-space projection, origin bottom-left
        glMatrixMode(GL_PROJECTION)
        glPushMatrix()
        glLoadIdentity()
        glOrtho(0, screen_size[0], 0, screen_size[1], -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glPushMatrix()
        glLoadIdentity()
        
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glRasterPos2f(x, screen_size[1] - y - h)
        glDrawPixels(w, h, GL_RGBA, GL_UNSIGNED_BYTE, text_data)
        glDisable(GL_BLEND)
        
        glPopMatrix()
        glMatrixMode(GL_PROJECTION)
        glPopMatrix()
        glMatrixMode(GL_MODELVIEW)
