"""Cursor force field - per-particle force for the active mode."""

import math
import numpy as np
from numba import njit

from .constants import (
    GRAV_FORCE, ATTRACT_SOFTENING, ATTRACT_CAP,
    REPEL_SOFTENING, REPEL_CAP, REPEL_SCALE,
    ORBIT_DIVISOR, ORBIT_CAP, SimulationConstants,
)
from .cursor import CursorCommand, ForceMode

MODE_NONE = int(ForceMode.NONE)
MODE_ATTRACT = int(ForceMode.ATTRACT)
MODE_REPEL = int(ForceMode.REPEL)
MODE_ORBIT = int(ForceMode.ORBIT)

# Squared lengths below the smallest normal float32 count as zero
MIN_LEN_SQ = float(np.finfo(np.float32).tiny)


@njit(fastmath=True, cache=True)
def cursor_force(
    mode: int,
    tx: float,
    ty: float,
    px: float,
    py: float,
    rotation: np.ndarray,
    coeffs: np.ndarray
) -> tuple:
    """
    Force on a particle at (px, py) from a cursor at (tx, ty).

    Pure and independent per particle. A zero-length difference vector
    yields zero force in every mode, and so does one too short to
    normalise in float32.
    """
    dx = tx - px
    dy = ty - py

    if mode == MODE_ATTRACT:
        len_sq = dx * dx + dy * dy
        if len_sq < MIN_LEN_SQ:
            return 0.0, 0.0
        d2 = len_sq / coeffs[ATTRACT_SOFTENING]
        mag = min(coeffs[GRAV_FORCE] / d2, coeffs[ATTRACT_CAP])
        inv_len = 1.0 / math.sqrt(len_sq)
        return float(dx * inv_len * mag), float(dy * inv_len * mag)

    if mode == MODE_REPEL:
        len_sq = dx * dx + dy * dy
        if len_sq < MIN_LEN_SQ:
            return 0.0, 0.0
        d2 = len_sq / coeffs[REPEL_SOFTENING]
        mag = min(coeffs[GRAV_FORCE] / d2, coeffs[REPEL_CAP]) * coeffs[REPEL_SCALE]
        inv_len = 1.0 / math.sqrt(len_sq)
        return float(-dx * inv_len * mag), float(-dy * inv_len * mag)

    if mode == MODE_ORBIT:
        # Bend the pull vector so particles circle the cursor
        rx = rotation[0, 0] * dx + rotation[0, 1] * dy
        ry = rotation[1, 0] * dx + rotation[1, 1] * dy
        d_sq = rx * rx + ry * ry
        if d_sq < MIN_LEN_SQ:
            return 0.0, 0.0
        d = math.sqrt(d_sq)
        mag = min(coeffs[GRAV_FORCE] / d / coeffs[ORBIT_DIVISOR], coeffs[ORBIT_CAP])
        return float(-rx / d * mag), float(-ry / d * mag)

    return 0.0, 0.0


def force_for(command: CursorCommand, position, constants: SimulationConstants) -> np.ndarray:
    """
    Force contribution of ``command`` on a particle at ``position``.

    Args:
        command: Resolved cursor command for the frame
        position: Particle position (x, y)
        constants: Simulation constants (rotation and force scalars)

    Returns:
        float32 array of shape (2,)
    """
    if not command.active:
        return np.zeros(2, dtype=np.float32)

    tx, ty = command.target
    fx, fy = cursor_force(
        int(command.mode),
        np.float32(tx), np.float32(ty),
        np.float32(position[0]), np.float32(position[1]),
        constants.orbit_rotation,
        constants.force_coefficients,
    )
    return np.array([fx, fy], dtype=np.float32)
