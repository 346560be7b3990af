"""Particle rendering - triangles or points streamed through a VBO."""

import numpy as np
from numba import njit, prange
from OpenGL.GL import *
from OpenGL.arrays import vbo

from config import particles as config


@njit(parallel=True, fastmath=True, cache=True)
def build_triangles_numba(
    positions: np.ndarray,
    vertices: np.ndarray,
    size: float,
    num_particles: int
):
    """Expand each particle into the triangle (0, size), (0, 0), (size, 0)."""
    for i in prange(num_particles):
        px = positions[i, 0]
        py = positions[i, 1]
        base = i * 3
        vertices[base, 0] = px
        vertices[base, 1] = py + size
        vertices[base + 1, 0] = px
        vertices[base + 1, 1] = py
        vertices[base + 2, 0] = px + size
        vertices[base + 2, 1] = py


def particle_color() -> tuple:
    """Configured particle colour boosted by the brightness multiplier."""
    mult = config.RENDER["brightness_mult"]
    return tuple(min(1.0, c * mult) for c in config.COLORS["particle"])


class ParticleRenderer:
    """Draws the particle store; reads positions only."""
    
    def __init__(self, shape: str = None):
        self.shape = shape or config.RENDER["shape"]
        if self.shape not in ("triangle", "point"):
            raise ValueError(f"Unknown particle shape: {self.shape!r}")
        self.triangle_size = float(config.RENDER["triangle_size"])
        self.point_size = float(config.RENDER["point_size"])
        self.color = particle_color()
        
        self._vertices = np.zeros((0, 2), dtype=np.float32)
        self._vbo = None
        self._vbo_initialized = False
    
    def setup(self, num_particles: int):
        """Allocate vertex storage for an episode's population."""
        verts_per_particle = 3 if self.shape == "triangle" else 1
        self._vertices = np.zeros((num_particles * verts_per_particle, 2), dtype=np.float32)
    
    def _init_vbo(self):
        if self._vbo_initialized:
            return
        try:
            self._vbo = vbo.VBO(self._vertices, usage=GL_DYNAMIC_DRAW)
            self._vbo_initialized = True
        except Exception as e:
            # Fallback to client-side arrays
            print(f"[Render] VBO init failed, using client arrays: {e}")
            self._vbo = None
            self._vbo_initialized = False
    
    def release(self):
        """Free GPU buffers. Safe to call when nothing was allocated."""
        if self._vbo is not None:
            self._vbo.delete()
        self._vbo = None
        self._vbo_initialized = False
        self._vertices = np.zeros((0, 2), dtype=np.float32)
    
    def _build_vertices(self, positions: np.ndarray) -> int:
        n = positions.shape[0]
        if self.shape == "point":
            np.copyto(self._vertices[:n], positions)
            return n
        build_triangles_numba(positions, self._vertices, self.triangle_size, n)
        return n * 3
    
    def draw(self, positions: np.ndarray):
        """Render every particle at its current position."""
        if positions.shape[0] == 0:
            return
        if self._vertices.shape[0] < positions.shape[0] * (3 if self.shape == "triangle" else 1):
            self.release()
            self.setup(positions.shape[0])
        if not self._vbo_initialized:
            self._init_vbo()
        
        total_verts = self._build_vertices(positions)
        primitive = GL_TRIANGLES if self.shape == "triangle" else GL_POINTS
        
        glEnable(GL_BLEND)
        if config.RENDER["additive_blend"]:
            glBlendFunc(GL_SRC_ALPHA, GL_ONE)
        else:
            glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glPointSize(self.point_size)
        glColor3f(*self.color)
        
        if self._vbo_initialized and self._vbo is not None:
            self._vbo.set_array(self._vertices[:total_verts])
            self._vbo.bind()
            glEnableClientState(GL_VERTEX_ARRAY)
            glVertexPointer(2, GL_FLOAT, 0, None)
            glDrawArrays(primitive, 0, total_verts)
            self._vbo.unbind()
            glDisableClientState(GL_VERTEX_ARRAY)
        else:
            glEnableClientState(GL_VERTEX_ARRAY)
            glVertexPointer(2, GL_FLOAT, 0, self._vertices[:total_verts])
            glDrawArrays(primitive, 0, total_verts)
            glDisableClientState(GL_VERTEX_ARRAY)
        
        glDisable(GL_BLEND)
