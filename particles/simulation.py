"""Frame step - resolve the cursor once, then update every particle."""

import numpy as np
from typing import Optional

from .constants import SimulationConstants
from .cursor import CursorCommand, InputSnapshot, resolve_cursor_command
from .errors import ViewportUnavailableError
from .forces import cursor_force
from .integrator import integrate_particle, step_particles
from .store import Bounds, ParticleStore


def advance(
    store: ParticleStore,
    snapshot: InputSnapshot,
    bounds: Optional[Bounds],
    constants: SimulationConstants,
    dt: Optional[float] = None
) -> CursorCommand:
    """
    Advance the whole store by one frame, in place.

    The cursor command is resolved exactly once and shared read-only by
    every particle update. The physics model is per-frame, so ``dt`` is
    accepted for call-site symmetry and ignored.

    Returns:
        The cursor command applied this frame
    """
    if bounds is None:
        raise ViewportUnavailableError("cannot advance particles without viewport bounds")

    command = resolve_cursor_command(snapshot)
    num_particles = len(store)
    if num_particles == 0:
        return command

    if command.active:
        tx, ty = command.target
    else:
        tx, ty = 0.0, 0.0

    step_particles(
        store.positions,
        store.velocities,
        int(command.mode),
        np.float32(tx),
        np.float32(ty),
        np.float32(bounds[0]),
        np.float32(bounds[1]),
        np.float32(constants.friction),
        constants.orbit_rotation,
        constants.force_coefficients,
        num_particles
    )
    return command


def warmup_kernels(constants: Optional[SimulationConstants] = None):
    """Pre-compile the Numba kernels so the first frame doesn't stall."""
    constants = constants or SimulationConstants.from_config()
    n = 100
    pos = (np.random.rand(n, 2) * 10).astype(np.float32)
    vel = np.random.rand(n, 2).astype(np.float32)
    rot = constants.orbit_rotation
    coeffs = constants.force_coefficients
    f32 = np.float32

    cursor_force(1, f32(5.0), f32(5.0), f32(1.0), f32(1.0), rot, coeffs)
    integrate_particle(
        f32(1.0), f32(1.0), f32(0.0), f32(0.0),
        1, f32(5.0), f32(5.0), f32(10.0), f32(10.0), f32(0.99),
        rot, coeffs
    )
    step_particles(pos, vel, 3, f32(5.0), f32(5.0), f32(10.0), f32(10.0), f32(0.99), rot, coeffs, n)
