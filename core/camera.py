"""2D camera for the particle scene."""

from typing import Optional, Tuple

from OpenGL.GL import *

from particles import ViewportTransform


class Camera2D:
    """Unit-scale orthographic camera centred on the viewport (world y up)."""
    
    def __init__(self, width: float, height: float):
        self.transform = ViewportTransform(float(width), float(height))
    
    @property
    def size(self) -> Tuple[float, float]:
        return self.transform.width, self.transform.height
    
    def resize(self, width: float, height: float):
        """Re-centre on a resized viewport."""
        self.transform = ViewportTransform(float(width), float(height))
    
    def screen_to_world(self, screen_pos: Optional[Tuple[float, float]]) -> Optional[Tuple[float, float]]:
        """Project a window pixel into world space (None if off-viewport)."""
        return self.transform.screen_to_world(screen_pos)
    
    def apply(self):
        """Load the orthographic projection for this camera."""
        w, h = self.size
        cx, cy = self.transform.center
        glViewport(0, 0, int(w), int(h))
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(cx - w / 2.0, cx + w / 2.0, cy - h / 2.0, cy + h / 2.0, -1.0, 1.0)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()
