"""
Шина бесконечной мощности
"""
from __future__ import annotations

import numpy as np

from core.transforms import phasor_to_abc
from .base import TerminalVoltage


class InfiniteBus(TerminalVoltage):
    """
    Constant-voltage bus V = |V| e^(j*theta).

    The phasor is held fixed, so the abc snapshot returned for every t is the
    same vector and its dq projection only moves with the rotor angle.
    """

    def __init__(self, phasor: complex = 1.0 + 0.0j):
        self.phasor = complex(phasor)
        self._v_abc = phasor_to_abc(self.phasor)

    def __call__(self, t: float) -> np.ndarray:
        return self._v_abc.copy()

    def describe(self) -> str:
        return (
            f"Infinite bus: |V|={abs(self.phasor):.4f} pu, "
            f"theta={np.degrees(np.angle(self.phasor)):.2f} deg"
        )
