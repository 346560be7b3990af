"""Per-particle integration - friction, bounds, cursor force, position update."""

import numpy as np
from numba import njit, prange

from .forces import cursor_force


@njit(fastmath=True, cache=True)
def integrate_particle(
    px: float,
    py: float,
    vx: float,
    vy: float,
    mode: int,
    tx: float,
    ty: float,
    width: float,
    height: float,
    friction: float,
    rotation: np.ndarray,
    coeffs: np.ndarray
) -> tuple:
    """
    Advance one particle by one frame.

    Order is fixed: friction on last frame's velocity, boundary reflection
    (velocity sign only, position is not clamped), cursor force, then the
    position moves by the new velocity.

    Returns:
        (px, py, vx, vy) after the step
    """
    # Friction
    damped_vx = vx * friction
    damped_vy = vy * friction

    # Bounds
    if px < 0.0 or px > width:
        damped_vx = -damped_vx
    if py < 0.0 or py > height:
        damped_vy = -damped_vy

    # Cursor force
    fx, fy = cursor_force(mode, tx, ty, px, py, rotation, coeffs)
    new_vx = np.float32(damped_vx + fx)
    new_vy = np.float32(damped_vy + fy)

    # Apply vel
    new_px = np.float32(px + new_vx)
    new_py = np.float32(py + new_vy)
    return new_px, new_py, new_vx, new_vy


@njit(parallel=True, fastmath=True, cache=True)
def step_particles(
    positions: np.ndarray,
    velocities: np.ndarray,
    mode: int,
    tx: float,
    ty: float,
    width: float,
    height: float,
    friction: float,
    rotation: np.ndarray,
    coeffs: np.ndarray,
    num_particles: int
):
    """Numba JIT-compiled update of every particle, in place."""
    for i in prange(num_particles):
        px, py, vx, vy = integrate_particle(
            positions[i, 0], positions[i, 1],
            velocities[i, 0], velocities[i, 1],
            mode, tx, ty, width, height, friction,
            rotation, coeffs
        )
        positions[i, 0] = px
        positions[i, 1] = py
        velocities[i, 0] = vx
        velocities[i, 1] = vy
