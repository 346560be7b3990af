"""Particle storage - a flat arena of positions and velocities."""

import math
import numpy as np
from typing import Iterator, NamedTuple, Optional, Tuple

from config import particles as config
from .errors import ViewportUnavailableError


class Bounds(NamedTuple):
    """Viewport extent in world units (origin at the bottom-left corner)."""
    width: float
    height: float


class Particle(NamedTuple):
    """Snapshot of a single particle slot."""
    position: Tuple[float, float]
    velocity: Tuple[float, float]


def lattice_shape(bounds: Bounds, interval: float) -> Tuple[int, int]:
    """Number of lattice columns and rows that fit inside the bounds."""
    nx = max(0, int(math.floor(bounds.width / interval)))
    ny = max(0, int(math.floor(bounds.height / interval)))
    return nx, ny


class ParticleStore:
    """
    Owns every particle of the active simulation episode.

    Particles live in two contiguous float32 arrays of shape (N, 2) so the
    JIT kernels can update them in place. A particle has no identity beyond
    its slot index.
    """

    def __init__(self, spatial_interval: Optional[float] = None):
        self.spatial_interval = float(
            spatial_interval if spatial_interval is not None
            else config.PARTICLES["spatial_interval"]
        )
        self.positions = np.zeros((0, 2), dtype=np.float32)
        self.velocities = np.zeros((0, 2), dtype=np.float32)

    def populate(self, bounds: Optional[Bounds]) -> "ParticleStore":
        """
        Fill the store with one resting particle per lattice cell.

        Columns are the outer loop and rows the inner one, so slot
        ``x * rows + y`` holds the particle at ``(x, y) * interval``.
        Any previous population is replaced.

        Args:
            bounds: Viewport extent; zero or negative dimensions give no particles

        Returns:
            The store itself
        """
        if bounds is None:
            raise ViewportUnavailableError("cannot populate particles without viewport bounds")

        nx, ny = lattice_shape(Bounds(*bounds), self.spatial_interval)
        xs = np.arange(nx, dtype=np.float32) * np.float32(self.spatial_interval)
        ys = np.arange(ny, dtype=np.float32) * np.float32(self.spatial_interval)
        gx, gy = np.meshgrid(xs, ys, indexing="ij")

        self.positions = np.ascontiguousarray(
            np.stack((gx.ravel(), gy.ravel()), axis=1), dtype=np.float32
        )
        self.velocities = np.zeros((nx * ny, 2), dtype=np.float32)

        print(f"[Particles] Spawned {len(self):,} particles ({nx} x {ny})")
        return self

    def clear(self):
        """Dispose every particle. Safe to call on an empty store."""
        if self.is_empty:
            return
        self.positions = np.zeros((0, 2), dtype=np.float32)
        self.velocities = np.zeros((0, 2), dtype=np.float32)

    @property
    def is_empty(self) -> bool:
        return len(self) == 0

    def __len__(self) -> int:
        return self.positions.shape[0]

    def __getitem__(self, index: int) -> Particle:
        px, py = self.positions[index]
        vx, vy = self.velocities[index]
        return Particle((float(px), float(py)), (float(vx), float(vy)))

    def __iter__(self) -> Iterator[Particle]:
        for i in range(len(self)):
            yield self[i]
