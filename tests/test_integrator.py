"""Tests for the single-particle integration step."""

import numpy as np
import pytest

from particles import ForceMode, SimulationConstants
from particles.forces import cursor_force
from particles.integrator import integrate_particle

f32 = np.float32
BOUNDS = (100.0, 100.0)


def step(px, py, vx, vy, mode=ForceMode.NONE, target=(0.0, 0.0), friction=0.99, bounds=BOUNDS, constants=None):
    constants = constants or SimulationConstants.from_config()
    return integrate_particle(
        f32(px), f32(py), f32(vx), f32(vy),
        int(mode), f32(target[0]), f32(target[1]),
        f32(bounds[0]), f32(bounds[1]), f32(friction),
        constants.orbit_rotation, constants.force_coefficients
    )


def test_reflection_uses_flipped_velocity_for_position():
    px, py, vx, vy = step(-1.0, 50.0, 3.0, 0.0, friction=1.0)
    assert vx == -3.0
    assert px == -4.0
    assert (py, vy) == (50.0, 0.0)


def test_friction_applies_before_reflection():
    px, _, vx, _ = step(-1.0, 50.0, 3.0, 0.0)
    assert vx == pytest.approx(-2.97, rel=1e-6)
    assert px == pytest.approx(-3.97, rel=1e-6)


def test_axes_reflect_independently():
    _, _, vx, vy = step(50.0, 101.0, 2.0, 2.0, friction=1.0)
    assert (vx, vy) == (2.0, -2.0)

    _, _, vx, vy = step(-0.5, 100.5, 2.0, 2.0, friction=1.0)
    assert (vx, vy) == (-2.0, -2.0)


def test_edges_are_inside_bounds():
    _, _, vx, vy = step(0.0, 100.0, 1.0, 1.0, friction=1.0)
    assert (vx, vy) == (1.0, 1.0)


def test_position_is_not_clamped():
    px, py, _, _ = step(150.0, 50.0, 5.0, 0.0, friction=1.0)
    assert px == 145.0
    assert py == 50.0


def test_force_added_after_friction_and_bounds():
    constants = SimulationConstants.from_config()
    fx, fy = cursor_force(
        int(ForceMode.ATTRACT), f32(80.0), f32(50.0), f32(50.0), f32(50.0),
        constants.orbit_rotation, constants.force_coefficients
    )
    px, py, vx, vy = step(50.0, 50.0, 1.0, 0.0, mode=ForceMode.ATTRACT, target=(80.0, 50.0))
    assert vx == pytest.approx(0.99 + fx, rel=1e-6)
    assert vy == pytest.approx(fy, abs=1e-7)
    assert px == pytest.approx(50.0 + vx, rel=1e-6)


def test_resting_particle_stays_put():
    assert step(20.0, 30.0, 0.0, 0.0) == (20.0, 30.0, 0.0, 0.0)
