import numpy as np
import pytest

from core.errors import InputShapeError
from core.transforms import (
    abc_to_dq,
    abc_to_phasor,
    dq_to_abc,
    inverse_park_matrix,
    park_matrix,
    phasor_to_abc,
    zero_sequence,
)

THETAS = [0.0, 0.3, -1.2, np.pi / 2, 2.5, 7.0, -13.4]


def balanced(amplitude, alpha):
    shifts = np.array([0.0, 2 * np.pi / 3, -2 * np.pi / 3])
    return amplitude * np.cos(alpha - shifts)


@pytest.mark.parametrize("theta", THETAS)
def test_balanced_set_maps_to_amplitude(theta):
    x = balanced(1.7, 0.4)
    d, q = abc_to_dq(x, theta)
    assert np.hypot(d, q) == pytest.approx(1.7)
    assert d == pytest.approx(1.7 * np.cos(0.4 - theta))
    assert q == pytest.approx(1.7 * np.sin(0.4 - theta))


@pytest.mark.parametrize("theta", THETAS)
def test_balanced_round_trip_is_exact(theta):
    x = balanced(0.9, -1.1)
    np.testing.assert_allclose(dq_to_abc(abc_to_dq(x, theta), theta), x, atol=1e-12)


@pytest.mark.parametrize("theta", THETAS)
def test_unbalanced_round_trip_drops_zero_sequence(theta):
    rng = np.random.default_rng(42)
    for _ in range(20):
        x = rng.normal(size=3)
        back = dq_to_abc(abc_to_dq(x, theta), theta)
        np.testing.assert_allclose(back, x - np.mean(x), atol=1e-12)
        assert zero_sequence(x) == pytest.approx(np.mean(x))


@pytest.mark.parametrize("theta", THETAS)
def test_dq_round_trip(theta):
    dq = np.array([0.35, -1.25])
    np.testing.assert_allclose(abc_to_dq(dq_to_abc(dq, theta), theta), dq, atol=1e-12)


def test_matrices_are_left_inverse():
    T = park_matrix(0.77)
    T_inv = inverse_park_matrix(0.77)
    np.testing.assert_allclose(T @ T_inv, np.eye(2), atol=1e-12)
    np.testing.assert_allclose(T_inv @ T, np.eye(3) - np.ones((3, 3)) / 3.0, atol=1e-12)


def test_phasor_snapshot_projection():
    V = 1.05 * np.exp(1j * 0.3)
    v_abc = phasor_to_abc(V)
    for delta in (0.0, 0.8, 1.3):
        d, q = abc_to_dq(v_abc, delta)
        assert d == pytest.approx(abs(V) * np.sin(delta - 0.3))
        assert q == pytest.approx(abs(V) * np.cos(delta - 0.3))
    assert abc_to_phasor(v_abc) == pytest.approx(V)


def test_wrong_arity_raises():
    with pytest.raises(InputShapeError):
        abc_to_dq([1.0, 2.0], 0.0)
    with pytest.raises(InputShapeError):
        dq_to_abc([1.0, 2.0, 3.0], 0.0)
    with pytest.raises(InputShapeError):
        abc_to_dq(np.ones((3, 1)), 0.0)
