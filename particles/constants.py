"""Immutable simulation constants, built once per simulation episode."""

import math
import numpy as np
from dataclasses import dataclass, field

from config import particles as config


# Indices into SimulationConstants.force_coefficients (read by the JIT kernels)
GRAV_FORCE = 0
ATTRACT_SOFTENING = 1
ATTRACT_CAP = 2
REPEL_SOFTENING = 3
REPEL_CAP = 4
REPEL_SCALE = 5
ORBIT_DIVISOR = 6
ORBIT_CAP = 7
NUM_COEFFICIENTS = 8


def rotation_matrix(angle: float) -> np.ndarray:
    """Counter-clockwise 2D rotation matrix as a read-only float32 array."""
    c = math.cos(angle)
    s = math.sin(angle)
    mat = np.array([[c, -s], [s, c]], dtype=np.float32)
    mat.flags.writeable = False
    return mat


@dataclass(frozen=True, eq=False)
class SimulationConstants:
    """
    Configuration shared by every particle update in an episode.

    Attributes:
        orbit_rotation: 2x2 rotation applied to the pull vector in orbit mode
        spatial_interval: Lattice spacing used when populating the store
        friction: Per-frame velocity multiplier
        grav_force: Scale constant shared by all cursor modes
    """
    orbit_rotation: np.ndarray = field(default_factory=lambda: rotation_matrix(config.FORCES["orbit_angle"]))
    spatial_interval: float = config.PARTICLES["spatial_interval"]
    friction: float = config.PARTICLES["friction"]
    grav_force: float = config.FORCES["grav_force"]
    attract_softening: float = config.FORCES["attract_softening"]
    attract_cap: float = config.FORCES["attract_cap"]
    repel_softening: float = config.FORCES["repel_softening"]
    repel_cap: float = config.FORCES["repel_cap"]
    repel_scale: float = config.FORCES["repel_scale"]
    orbit_divisor: float = config.FORCES["orbit_divisor"]
    orbit_cap: float = config.FORCES["orbit_cap"]

    def __post_init__(self):
        if self.spatial_interval <= 0:
            raise ValueError(f"spatial_interval must be positive, got {self.spatial_interval}")
        rot = np.array(self.orbit_rotation, dtype=np.float32).reshape(2, 2)
        rot.flags.writeable = False
        object.__setattr__(self, "orbit_rotation", rot)

        coeffs = np.zeros(NUM_COEFFICIENTS, dtype=np.float32)
        coeffs[GRAV_FORCE] = self.grav_force
        coeffs[ATTRACT_SOFTENING] = self.attract_softening
        coeffs[ATTRACT_CAP] = self.attract_cap
        coeffs[REPEL_SOFTENING] = self.repel_softening
        coeffs[REPEL_CAP] = self.repel_cap
        coeffs[REPEL_SCALE] = self.repel_scale
        coeffs[ORBIT_DIVISOR] = self.orbit_divisor
        coeffs[ORBIT_CAP] = self.orbit_cap
        coeffs.flags.writeable = False
        object.__setattr__(self, "_coefficients", coeffs)

    @property
    def force_coefficients(self) -> np.ndarray:
        """Packed float32 force scalars, indexed by the module-level constants."""
        return self._coefficients

    @classmethod
    def from_config(cls, **overrides) -> "SimulationConstants":
        """
        Build constants from config.particles.

        Args:
            **overrides: Field values replacing the configured ones
                (``orbit_angle`` is accepted in place of ``orbit_rotation``)
        """
        angle = overrides.pop("orbit_angle", config.FORCES["orbit_angle"])
        overrides.setdefault("orbit_rotation", rotation_matrix(angle))
        return cls(**overrides)
