"""Tests for the pairwise force law."""

import numpy as np
import pytest
from orbit_sandbox.physics.force_calculator import ForceCalculator


def test_inverse_square_two_bodies():
    """Accelerations follow G*m_j/d^2 along the separation."""
    calc = ForceCalculator()
    positions = np.array([[0.0, 0.0], [100.0, 0.0]])
    masses = np.array([1000.0, 1.0])
    radii = np.array([15.0, 5.0])

    acc = calc.compute_accelerations(positions, masses, radii, G=100.0)

    # 100 * 1 / 100^2 toward +x, 100 * 1000 / 100^2 toward -x
    assert np.allclose(acc[0], [0.01, 0.0])
    assert np.allclose(acc[1], [-10.0, 0.0])


@pytest.mark.parametrize("method", ["vectorized", "direct"])
def test_overlap_guard(method):
    """Bodies closer than the sum of radii exert no force; one unit beyond, they do."""
    calc = ForceCalculator(method=method)
    masses = np.array([5.0, 5.0])
    radii = np.array([5.0, 5.0])

    overlapping = np.array([[0.0, 0.0], [9.0, 0.0]])
    assert np.allclose(calc.compute_accelerations(overlapping, masses, radii, 100.0), 0.0)

    touching = np.array([[0.0, 0.0], [10.0, 0.0]])
    assert np.allclose(calc.compute_accelerations(touching, masses, radii, 100.0), 0.0)

    apart = np.array([[0.0, 0.0], [11.0, 0.0]])
    acc = calc.compute_accelerations(apart, masses, radii, 100.0)
    assert acc[0, 0] > 0.0
    assert acc[1, 0] < 0.0
    assert np.isclose(acc[0, 0], 100.0 * 5.0 / 11.0 ** 2)


def test_guard_is_per_pair():
    """An overlapping neighbour drops out while distant bodies still pull."""
    calc = ForceCalculator()
    positions = np.array([[0.0, 0.0], [3.0, 0.0], [0.0, 50.0]])
    masses = np.array([1.0, 1.0, 1.0])
    radii = np.array([2.0, 2.0, 2.0])

    acc = calc.compute_accelerations(positions, masses, radii, G=1.0)

    # Body 0 feels only body 2 (straight up in +y)
    assert np.isclose(acc[0, 0], 0.0)
    assert np.isclose(acc[0, 1], 1.0 / 50.0 ** 2)


def test_vectorized_matches_direct():
    """Both summation methods agree."""
    rng = np.random.default_rng(7)
    n = 12
    positions = rng.uniform(0.0, 800.0, size=(n, 2))
    masses = rng.uniform(1.0, 10.0, size=n)
    radii = rng.uniform(3.0, 40.0, size=n)

    vectorized = ForceCalculator("vectorized").compute_accelerations(positions, masses, radii, 100.0)
    direct = ForceCalculator("direct").compute_accelerations(positions, masses, radii, 100.0)

    assert np.allclose(vectorized, direct)


def test_coincident_bodies_are_finite():
    """Coincident centers never divide by zero."""
    calc = ForceCalculator()
    positions = np.array([[10.0, 10.0], [10.0, 10.0]])
    acc = calc.compute_accelerations(positions, np.array([1.0, 1.0]), np.array([1.0, 1.0]), 100.0)
    assert np.all(np.isfinite(acc))
    assert np.allclose(acc, 0.0)


def test_single_body_has_no_acceleration():
    calc = ForceCalculator()
    acc = calc.compute_accelerations(np.array([[1.0, 2.0]]), np.array([5.0]), np.array([1.0]), 100.0)
    assert acc.shape == (1, 2)
    assert np.allclose(acc, 0.0)


def test_unknown_method():
    with pytest.raises(ValueError):
        ForceCalculator(method="barnes_hut")
