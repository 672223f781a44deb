"""
Park transform between phase (abc) and rotor (dq) coordinates.

Amplitude-invariant scaling (2/3) is used throughout: a balanced set
    x_k = A * cos(alpha - k * 2pi/3),  k = 0, 1, 2  (phases A, B, C)
maps to a dq vector of magnitude A,
    d = A * cos(alpha - theta),  q = A * sin(alpha - theta).

dq -> abc -> dq is exact. abc -> dq -> abc drops the zero-sequence
component, i.e. returns x - mean(x), so balanced sets round-trip exactly.
"""
from __future__ import annotations

import numpy as np

from .errors import as_vector

_PHASE_SHIFTS = np.array([0.0, 2 * np.pi / 3, -2 * np.pi / 3])


def park_matrix(theta: float) -> np.ndarray:
    """Матрица прямого преобразования [2x3]"""
    angles = theta - _PHASE_SHIFTS
    return (2.0 / 3.0) * np.vstack([np.cos(angles), -np.sin(angles)])


def inverse_park_matrix(theta: float) -> np.ndarray:
    """Матрица обратного преобразования [3x2]"""
    angles = theta - _PHASE_SHIFTS
    return np.column_stack([np.cos(angles), -np.sin(angles)])


def abc_to_dq(abc, theta: float) -> np.ndarray:
    """Project a phase vector [a, b, c] onto the dq frame at rotor angle theta."""
    return park_matrix(theta) @ as_vector(abc, 3, "abc")


def dq_to_abc(dq, theta: float) -> np.ndarray:
    """Reconstruct the zero-sequence-free phase vector from [d, q]."""
    return inverse_park_matrix(theta) @ as_vector(dq, 2, "dq")


def zero_sequence(abc) -> float:
    """Zero-sequence component (phase mean) that the dq frame cannot carry."""
    return float(np.mean(as_vector(abc, 3, "abc")))


def phasor_to_abc(phasor: complex) -> np.ndarray:
    """
    Constant abc snapshot of a synchronous-frame phasor V = |V| e^(j*theta_v).

    The result projects at any rotor angle delta onto
        d = |V| sin(delta - theta_v),  q = |V| cos(delta - theta_v),
    which is the dq convention of the steady-state solver.
    """
    phasor = complex(phasor)
    alpha = np.angle(phasor) + np.pi / 2
    return abs(phasor) * np.cos(alpha - _PHASE_SHIFTS)


def abc_to_phasor(abc) -> complex:
    """Inverse of phasor_to_abc (zero sequence is ignored)."""
    d, q = abc_to_dq(abc, 0.0)
    return complex(q, -d)
