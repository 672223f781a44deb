"""
Balanced steady-state operating point of the generator.

Returned by value from SynchronousGenerator.calculate_steady_state and owned
by the caller; the machine object keeps no copy.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

import numpy as np


@dataclass(frozen=True)
class OperatingPoint:
    """Steady-state quantities in pu (angles in rad)"""

    P: float            # Активная мощность
    Q: float            # Реактивная мощность
    V: complex          # Напряжение на выводах (синхронная система координат)
    I: complex          # Ток статора

    Ef: float           # Напряжение возбуждения
    delta: float        # Угол ротора

    Vd: float
    Vq: float
    Id: float
    Iq: float

    Ed_p: float         # Переходная ЭДС по оси d
    Eq_p: float         # Переходная ЭДС по оси q

    Te: float           # Электромагнитный момент (мощность в зазоре при omega = 1)

    @property
    def S(self) -> complex:
        return complex(self.P, self.Q)

    @property
    def power_factor(self) -> float:
        s = abs(self.S)
        return self.P / s if s > 0.0 else 1.0

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def info(self) -> str:
        """Formatted listing for reports"""
        lines = [
            "",
            "  STEADY-STATE OPERATING POINT",
            "",
            f"  P = {self.P:.4f} pu, Q = {self.Q:.4f} pu, pf = {self.power_factor:.4f}",
            f"  |V| = {abs(self.V):.4f} pu at {np.degrees(np.angle(self.V)):.2f} deg",
            f"  |I| = {abs(self.I):.4f} pu at {np.degrees(np.angle(self.I)):.2f} deg",
            f"  delta = {self.delta:.4f} rad ({np.degrees(self.delta):.2f} deg)",
            f"  Ef = {self.Ef:.4f} pu",
            f"  Vd = {self.Vd:.4f}, Vq = {self.Vq:.4f}",
            f"  Id = {self.Id:.4f}, Iq = {self.Iq:.4f}",
            f"  Ed' = {self.Ed_p:.4f}, Eq' = {self.Eq_p:.4f}",
            f"  Te = {self.Te:.4f} pu",
            "",
        ]
        return "\n".join(lines)
