"""
Параметры синхронного генератора.

Все реактивности и сопротивления заданы в о.е. (база - номинальные данные машины),
постоянные времени и инерция - в секундах
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Optional

import numpy as np

from .errors import DomainError

# Xl = LEAKAGE_FACTOR * min(Xd'', Xq'') when no leakage reactance is given
LEAKAGE_FACTOR = 0.15

_DENOMINATOR_EPS = 1e-12


@dataclass(frozen=True)
class GeneratorParameters:
    """Parameters of a three-phase synchronous generator (sixth-order model)"""

    # Номинальные данные
    S_nom: float                # Номинальная полная мощность, ВА
    U_nom_line: float           # Номинальное линейное напряжение, В
    fn: float                   # Номинальная частота, Гц
    poles: int                  # Число полюсов (чётное)

    # Статор, о.е.
    Rs: float                   # Активное сопротивление статора
    Xd: float                   # Синхронное реактивное сопротивление по оси d
    Xq: float                   # Синхронное реактивное сопротивление по оси q
    Xd_p: float                 # Переходное Xd'
    Xq_p: float                 # Переходное Xq'
    Xd_pp: float                # Сверхпереходное Xd''
    Xq_pp: float                # Сверхпереходное Xq''

    # Постоянные времени холостого хода, с
    Tdo_p: float
    Tqo_p: float
    Tdo_pp: float
    Tqo_pp: float

    # Механика
    H: float                    # Постоянная инерции, с
    D: float                    # Коэффициент демпфирования, о.е.

    # Реактивность рассеяния, о.е. (None -> LEAKAGE_FACTOR * min(Xd'', Xq''))
    Xl_fixed: Optional[float] = None

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if not np.isfinite(value):
                raise DomainError(f"{f.name} must be finite, got {value}.")

        for name in ("S_nom", "U_nom_line", "fn"):
            if getattr(self, name) <= 0.0:
                raise DomainError(f"{name} must be > 0, got {getattr(self, name)}.")

        if int(self.poles) != self.poles or self.poles < 2 or int(self.poles) % 2:
            raise DomainError(
                f"poles must be an even integer >= 2, got {self.poles}."
            )

        if self.Rs < 0.0:
            raise DomainError(f"Rs must be >= 0, got {self.Rs}.")

        for axis, (x, x_p, x_pp) in (
            ("d", (self.Xd, self.Xd_p, self.Xd_pp)),
            ("q", (self.Xq, self.Xq_p, self.Xq_pp)),
        ):
            if not (x >= x_p >= x_pp > 0.0):
                raise DomainError(
                    f"{axis}-axis reactances must satisfy "
                    f"X{axis} >= X{axis}' >= X{axis}'' > 0, "
                    f"got {x}, {x_p}, {x_pp}."
                )

        for name in ("Tdo_p", "Tqo_p", "Tdo_pp", "Tqo_pp", "H"):
            if getattr(self, name) <= 0.0:
                raise DomainError(f"{name} must be > 0, got {getattr(self, name)}.")

        if self.D < 0.0:
            raise DomainError(f"D must be >= 0, got {self.D}.")

        Xl = self.Xl
        if Xl < 0.0 or Xl >= min(self.Xd_pp, self.Xq_pp):
            raise DomainError(
                f"Leakage reactance Xl={Xl} must satisfy "
                f"0 <= Xl < min(Xd'', Xq'') = {min(self.Xd_pp, self.Xq_pp)}."
            )

        if abs(self.d_axis_denominator) <= _DENOMINATOR_EPS:
            raise DomainError(
                "d-axis current denominator Xd'' - (Xd'' - Xd')^2 / (Xd'' - Xl) "
                "is zero for the given reactances."
            )

    @property
    def Xl(self) -> float:
        """Реактивность рассеяния статора, о.е."""
        if self.Xl_fixed is not None:
            return float(self.Xl_fixed)
        return LEAKAGE_FACTOR * min(self.Xd_pp, self.Xq_pp)

    @property
    def d_axis_denominator(self) -> float:
        """Xd'' - (Xd'' - Xd')^2 / (Xd'' - Xl)"""
        Xl = self.Xl
        return self.Xd_pp - (self.Xd_pp - self.Xd_p) ** 2 / (self.Xd_pp - Xl)

    @property
    def U_nom_phase(self) -> float:
        """Номинальное фазное напряжение, В"""
        return self.U_nom_line / np.sqrt(3)

    @property
    def omega_n(self) -> float:
        """Номинальная электрическая угловая частота, рад/с"""
        return 2 * np.pi * self.fn

    @property
    def n_sync(self) -> float:
        """Синхронная частота вращения, об/мин"""
        return 120.0 * self.fn / self.poles

    @property
    def omega_sync(self) -> float:
        """Синхронная механическая угловая скорость, рад/с"""
        return 2 * np.pi * self.fn / (self.poles / 2)

    @property
    def Z_base(self) -> float:
        """Базисное сопротивление, Ом"""
        return self.U_nom_line ** 2 / self.S_nom

    @property
    def I_base(self) -> float:
        """Базисный ток, А"""
        return self.S_nom / (np.sqrt(3) * self.U_nom_line)

    @property
    def T_base(self) -> float:
        """Базисный момент, Нм"""
        return self.S_nom / self.omega_sync

    def info(self) -> str:
        """Formatted listing of rated, per-unit and derived values"""
        lines = [
            "",
            "  SYNCHRONOUS GENERATOR PARAMETERS",
            "",
            f"  Rated power: {self.S_nom / 1e6:.1f} MVA",
            f"  Rated voltage: {self.U_nom_line / 1e3:.1f} kV (phase {self.U_nom_phase / 1e3:.2f} kV)",
            f"  Rated frequency: {self.fn:.1f} Hz",
            f"  Number of poles: {int(self.poles)}, n_sync = {self.n_sync:.0f} rpm",
            "",
            "  Reactances (pu)",
            f"  Xd = {self.Xd:.3f}, Xq = {self.Xq:.3f}",
            f"  Xd' = {self.Xd_p:.3f}, Xq' = {self.Xq_p:.3f}",
            f"  Xd'' = {self.Xd_pp:.3f}, Xq'' = {self.Xq_pp:.3f}",
            f"  Xl = {self.Xl:.4f}",
            f"  Rs = {self.Rs:.4f}",
            "",
            "  Time constants (s)",
            f"  Tdo' = {self.Tdo_p:.3f}, Tqo' = {self.Tqo_p:.3f}",
            f"  Tdo'' = {self.Tdo_pp:.3f}, Tqo'' = {self.Tqo_pp:.3f}",
            "",
            "  Mechanics",
            f"  Inertia constant H = {self.H:.2f} s",
            f"  Damping coefficient D = {self.D:.2f}",
            "",
            "  Base values",
            f"  Z_base = {self.Z_base:.4f} Ohm, I_base = {self.I_base:.1f} A, "
            f"T_base = {self.T_base / 1e3:.1f} kNm",
            "",
        ]
        return "\n".join(lines)


def default_parameters() -> GeneratorParameters:
    """Typical 100 MVA, 13.8 kV, 60 Hz, 4-pole machine"""
    return GeneratorParameters(
        S_nom=100e6,
        U_nom_line=13.8e3,
        fn=60.0,
        poles=4,
        Rs=0.003,
        Xd=1.8,
        Xq=1.7,
        Xd_p=0.3,
        Xq_p=0.55,
        Xd_pp=0.25,
        Xq_pp=0.25,
        Tdo_p=5.0,
        Tqo_p=0.8,
        Tdo_pp=0.03,
        Tqo_pp=0.04,
        H=3.0,
        D=2.0,
    )
