"""Tests for the per-mode cursor force field."""

import math

import numpy as np
import pytest

from particles import CursorCommand, ForceMode, SimulationConstants, force_for

CONSTANTS = SimulationConstants.from_config()


def command(mode, target=(0.0, 0.0)):
    return CursorCommand(mode, target)


def test_none_mode_is_zero():
    np.testing.assert_array_equal(force_for(CursorCommand.none(), (3.0, 4.0), CONSTANTS), [0.0, 0.0])


@pytest.mark.parametrize("mode", [ForceMode.ATTRACT, ForceMode.REPEL, ForceMode.ORBIT])
def test_zero_difference_is_zero_force(mode):
    force = force_for(command(mode, (12.0, 7.0)), (12.0, 7.0), CONSTANTS)
    assert np.all(np.isfinite(force))
    np.testing.assert_array_equal(force, [0.0, 0.0])


def test_attract_clamped_near_cursor():
    force = force_for(command(ForceMode.ATTRACT, (10.0, 0.0)), (0.0, 0.0), CONSTANTS)
    np.testing.assert_allclose(force, [0.8, 0.0], rtol=1e-6)


def test_attract_falls_off_with_distance():
    force = force_for(command(ForceMode.ATTRACT, (0.0, 1000.0)), (0.0, 0.0), CONSTANTS)
    expected = 1400.0 / (1000.0 ** 2 / 4.5)
    np.testing.assert_allclose(force, [0.0, expected], rtol=1e-5)


def test_repel_pushes_away_and_scales():
    force = force_for(command(ForceMode.REPEL, (10.0, 0.0)), (0.0, 0.0), CONSTANTS)
    np.testing.assert_allclose(force, [-14.4, 0.0], rtol=1e-6)

    far = force_for(command(ForceMode.REPEL, (1000.0, 0.0)), (0.0, 0.0), CONSTANTS)
    expected = 1400.0 / (1000.0 ** 2 / 8.0) * 8.0
    np.testing.assert_allclose(far, [-expected, 0.0], rtol=1e-5)


def test_orbit_bends_pull_vector():
    force = force_for(command(ForceMode.ORBIT, (10.0, 0.0)), (0.0, 0.0), CONSTANTS)
    c, s = math.cos(2.98), math.sin(2.98)
    # diff = R (10, 0) = (10c, 10s), |diff| = 10, magnitude capped at 0.8
    np.testing.assert_allclose(force, [-c * 0.8, -s * 0.8], rtol=1e-5, atol=1e-6)


def test_orbit_falls_off_linearly():
    force = force_for(command(ForceMode.ORBIT, (500.0, 0.0)), (0.0, 0.0), CONSTANTS)
    assert np.linalg.norm(force) == pytest.approx(1400.0 / 500.0 / 8.0, rel=1e-5)


@pytest.mark.parametrize("mode, ceiling", [
    (ForceMode.ATTRACT, 0.8),
    (ForceMode.REPEL, 14.4),
    (ForceMode.ORBIT, 0.8),
])
def test_force_magnitude_ceiling(mode, ceiling):
    for dist in np.logspace(-4, 4, 40):
        for angle in np.linspace(0.0, 2 * math.pi, 7):
            position = (dist * math.cos(angle), dist * math.sin(angle))
            force = force_for(command(mode), position, CONSTANTS)
            assert np.all(np.isfinite(force))
            assert np.linalg.norm(force) <= ceiling * (1 + 1e-5)


def test_force_is_order_independent():
    rng = np.random.default_rng(7)
    positions = rng.uniform(0, 500, size=(20, 2))
    cmd = command(ForceMode.ORBIT, (250.0, 250.0))
    forward = [force_for(cmd, p, CONSTANTS) for p in positions]
    backward = [force_for(cmd, p, CONSTANTS) for p in positions[::-1]][::-1]
    np.testing.assert_array_equal(forward, backward)


@pytest.mark.parametrize("mode, ceiling", [
    (ForceMode.ATTRACT, 0.8),
    (ForceMode.REPEL, 14.4),
    (ForceMode.ORBIT, 0.8),
])
def test_ceiling_holds_for_vanishing_distances(mode, ceiling):
    for dist in [1e-15, 1e-18, 1e-19, 1e-20, 1e-22, 1e-30, 1e-40]:
        force = force_for(command(mode), (dist, 0.0), CONSTANTS)
        assert np.all(np.isfinite(force))
        assert np.linalg.norm(force) <= ceiling * (1 + 1e-5)


@pytest.mark.parametrize("mode", [ForceMode.ATTRACT, ForceMode.REPEL, ForceMode.ORBIT])
def test_subnormal_difference_is_zero_force(mode):
    # |diff|^2 = 1e-44 is below the smallest normal float32
    force = force_for(command(mode), (1e-22, 0.0), CONSTANTS)
    np.testing.assert_array_equal(force, [0.0, 0.0])
