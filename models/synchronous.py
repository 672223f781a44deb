"""
Синхронный генератор: установившийся режим и модель 6-го порядка.

Состояние: y = [delta, omega, Ed', Eq', Ed'', Eq'']
  delta       - угол ротора, рад
  omega       - частота вращения, о.е. (1.0 = синхронная)
  Ed', Eq'    - переходные ЭДС по осям d и q, о.е.
  Ed'', Eq''  - сверхпереходные ЭДС по осям d и q, о.е.

Модель НЕ учитывает насыщение магнитопровода.
"""
from __future__ import annotations

import numpy as np
from scipy.optimize import brentq

from core.errors import DomainError, as_vector
from core.operating_point import OperatingPoint
from core.parameters import GeneratorParameters
from core.state import (
    DELTA, ED_P, ED_PP, EQ_PP, OMEGA, STATE_SIZE, make_initial_state,
)
from core.transforms import abc_to_dq, dq_to_abc, phasor_to_abc
from .base import MachineModel

_V_MIN = 1e-9
_ANGLE_GRID = 721  # шаг 0.5 град при поиске угла равновесия


class SynchronousGenerator(MachineModel):
    """
    Sixth-order synchronous generator model.

    Stator currents come from the subtransient voltage-behind-reactance
    circuit, the rotor obeys the swing equation, and the rotor windings are
    represented by first-order decay of the transient and subtransient EMFs.
    """

    def __init__(self, params: GeneratorParameters):
        super().__init__(params)

        self.Rs = params.Rs
        self.Xd = params.Xd
        self.Xq = params.Xq
        self.Xd_p = params.Xd_p
        self.Xq_p = params.Xq_p
        self.Xd_pp = params.Xd_pp
        self.Xq_pp = params.Xq_pp
        self.Tdo_p = params.Tdo_p
        self.Tqo_p = params.Tqo_p
        self.Tdo_pp = params.Tdo_pp
        self.Tqo_pp = params.Tqo_pp
        self.H = params.H
        self.D = params.D
        self.Xl = params.Xl

        # Знаменатели в уравнениях токов постоянны -> кэшируем обратные величины
        self._kq = 1.0 / (self.Xq_pp - self.Xl)
        self._kd = 1.0 / params.d_axis_denominator

    # ------------------------------------------------------------------
    # Установившийся режим
    # ------------------------------------------------------------------

    def calculate_steady_state(
        self,
        P: float,
        Q: float,
        V: complex,
    ) -> tuple[np.ndarray, np.ndarray, OperatingPoint]:
        """
        Closed-form balanced operating point.

        The rotor angle is placed on the internal voltage V + I*(Rs + jXq);
        V and I are then rotated into dq by e^(j(pi/2 - delta)), so that
        Vd = V sin(delta - theta_v), Vq = V cos(delta - theta_v).

        Returns:
            (v_abc, i_abc, operating_point)
        """
        V = complex(V)
        if not (np.isfinite(P) and np.isfinite(Q)):
            raise DomainError(f"P and Q must be finite, got P={P}, Q={Q}.")
        if not np.isfinite(V.real) or not np.isfinite(V.imag) or abs(V) <= _V_MIN:
            raise DomainError(
                f"Terminal voltage must be finite and nonzero, got {V}."
            )

        S = complex(P, Q)
        I = np.conj(S / V)

        E_q = V + I * complex(self.Rs, self.Xq)
        delta = float(np.angle(V) + np.angle(E_q / V))

        rotation = np.exp(1j * (np.pi / 2 - delta))
        v_dq = V * rotation
        i_dq = I * rotation
        Vd, Vq = v_dq.real, v_dq.imag
        Id, Iq = i_dq.real, i_dq.imag

        Ef = Vq + self.Rs * Iq + self.Xd * Id
        Ed_p = Vd + self.Rs * Id - self.Xq_p * Iq
        Eq_p = Vq + self.Rs * Iq + self.Xd_p * Id
        Te = P + self.Rs * abs(I) ** 2

        op = OperatingPoint(
            P=float(P), Q=float(Q), V=V, I=complex(I),
            Ef=float(Ef), delta=delta,
            Vd=float(Vd), Vq=float(Vq), Id=float(Id), Iq=float(Iq),
            Ed_p=float(Ed_p), Eq_p=float(Eq_p),
            Te=float(Te),
        )

        v_abc = dq_to_abc([Vd, Vq], delta)
        i_abc = dq_to_abc([Id, Iq], delta)
        return v_abc, i_abc, op

    def initial_state(self, op: OperatingPoint, v_abc=None) -> np.ndarray:
        """
        State vector in stable equilibrium with the operating point.

        The stator current signs of the dynamic model are opposite to the
        generator convention of calculate_steady_state, so keeping
        delta = op.delta lands on a motoring point with dTe/d(delta) < 0.
        Instead delta is searched over one full turn: at every trial angle
        the fluxes are put in equilibrium (flux_equilibrium) and the rotor
        angle is taken where Te = op.Te on the rising side of Te(delta).
        Of several such angles the one nearest to op.delta wins.

        The resulting delta differs from op.delta, and the terminal reactive
        power differs from op.Q; the active power stays close to op.P.
        With Tm = op.Te every derivative is zero.

        Raises:
            DomainError: op.Te is outside the torque range reachable at
                Ef = op.Ef.
        """
        if v_abc is None:
            v_abc = phasor_to_abc(op.V)
        v_abc = as_vector(v_abc, 3, "v_abc")

        def mismatch(delta: float) -> float:
            y = self.flux_equilibrium(delta, v_abc, op.Ef)
            return self.electrical_torque(y, v_abc) - op.Te

        grid = op.delta + np.linspace(-np.pi, np.pi, _ANGLE_GRID)
        g = np.array([mismatch(d) for d in grid])

        # Нули с возрастанием Te(delta) -> устойчивая ветвь
        rising = np.nonzero((g[:-1] < 0.0) & (g[1:] >= 0.0))[0]
        if rising.size == 0:
            raise DomainError(
                f"Torque {op.Te:.4f} pu is not reachable at Ef = {op.Ef:.4f} pu; "
                f"Te(delta) spans [{g.min() + op.Te:.4f}, {g.max() + op.Te:.4f}] pu."
            )

        roots = [brentq(mismatch, grid[k], grid[k + 1], xtol=1e-13) for k in rising]
        delta = min(roots, key=lambda d: abs(d - op.delta))
        return self.flux_equilibrium(delta, v_abc, op.Ef)

    def flux_equilibrium(self, delta: float, v_abc, Ef: float) -> np.ndarray:
        """
        State at rotor angle delta, omega = 1, with the fluxes at rest.

        The four flux equations are affine in (Ed', Eq', Ed'', Eq''), so their
        equilibrium is the solution of a 4x4 linear system assembled from
        dynamics() itself.
        """
        v_abc = as_vector(v_abc, 3, "v_abc")
        base = make_initial_state(delta=float(delta), omega=1.0)

        def flux_rhs(fluxes: np.ndarray) -> np.ndarray:
            y = base.copy()
            y[ED_P:] = fluxes
            dydt, _ = self.dynamics(y, v_abc, 0.0, Ef)
            return dydt[ED_P:]

        n = STATE_SIZE - ED_P
        r0 = flux_rhs(np.zeros(n))
        A = np.column_stack([flux_rhs(e) - r0 for e in np.eye(n)])
        try:
            fluxes = np.linalg.solve(A, -r0)
        except np.linalg.LinAlgError as exc:
            raise DomainError(
                "Flux equilibrium is singular for the given parameters."
            ) from exc

        y0 = base
        y0[ED_P:] = fluxes
        return y0

    # ------------------------------------------------------------------
    # Динамическая модель
    # ------------------------------------------------------------------

    def stator_currents(
        self,
        Vd: float, Vq: float,
        Ed_pp: float, Eq_pp: float,
    ) -> tuple[float, float]:
        """Id, Iq from the subtransient voltage-behind-reactance circuit"""
        dVq = Vq - Eq_pp
        Iq = dVq * self._kq
        Id = (Vd - Ed_pp + (self.Xq_pp - self.Xq_p) * dVq * self._kq) * self._kd
        return Id, Iq

    def dynamics(
        self,
        y: np.ndarray,
        v_abc: np.ndarray,
        t_mech: float,
        field_voltage: float,
    ) -> tuple[np.ndarray, float]:
        """
        Правая часть модели 6-го порядка.

            dDelta/dt = omega - 1
            dOmega/dt = (Tm - Te - D*(omega - 1)) / (2H)
            dEd'/dt   = (-Ed' - (Xq - Xq')*Iq) / Tqo'
            dEq'/dt   = (Ef - Eq' + (Xd - Xd')*Id) / Tdo'
            dEd''/dt  = (-Ed'' + Ed' - (Xq' - Xl)*Iq) / Tqo''
            dEq''/dt  = (-Eq'' + Eq' + (Xd' - Xl)*Id) / Tdo''

        Returns:
            (dydt, Te)
        """
        y = as_vector(y, STATE_SIZE, "state")
        v_abc = as_vector(v_abc, 3, "v_abc")

        delta, omega, Ed_p, Eq_p, Ed_pp, Eq_pp = y

        Vd, Vq = abc_to_dq(v_abc, delta)
        Id, Iq = self.stator_currents(Vd, Vq, Ed_pp, Eq_pp)

        Te = Vd * Id + Vq * Iq + (self.Xq - self.Xd) * Id * Iq

        # Уравнение движения ротора
        d_omega = omega - 1.0
        dydt = np.empty(STATE_SIZE)
        dydt[0] = d_omega
        dydt[1] = (t_mech - Te - self.D * d_omega) / (2.0 * self.H)

        # Переходные ЭДС
        dydt[2] = (-Ed_p - (self.Xq - self.Xq_p) * Iq) / self.Tqo_p
        dydt[3] = (field_voltage - Eq_p + (self.Xd - self.Xd_p) * Id) / self.Tdo_p

        # Сверхпереходные ЭДС
        dydt[4] = (-Ed_pp + Ed_p - (self.Xq_p - self.Xl) * Iq) / self.Tqo_pp
        dydt[5] = (-Eq_pp + Eq_p + (self.Xd_p - self.Xl) * Id) / self.Tdo_pp

        return dydt, float(Te)

    # ------------------------------------------------------------------
    # Величины для пост-обработки
    # ------------------------------------------------------------------

    def dq_quantities(self, y, v_abc) -> tuple[float, float, float, float]:
        """(Vd, Vq, Id, Iq) at the given state"""
        y = as_vector(y, STATE_SIZE, "state")
        Vd, Vq = abc_to_dq(v_abc, y[DELTA])
        Id, Iq = self.stator_currents(Vd, Vq, y[ED_PP], y[EQ_PP])
        return float(Vd), float(Vq), float(Id), float(Iq)

    def electrical_torque(self, y, v_abc) -> float:
        """Электромагнитный момент, о.е."""
        # Te does not depend on the field voltage input
        _, Te = self.dynamics(y, v_abc, 0.0, 0.0)
        return Te

    def terminal_power(self, y, v_abc) -> complex:
        """P + jQ delivered at the terminals, о.е."""
        Vd, Vq, Id, Iq = self.dq_quantities(y, v_abc)
        return complex(Vd * Id + Vq * Iq, Vq * Id - Vd * Iq)

    def jacobian_sparsity(self) -> np.ndarray:
        """
        Structure of d(dydt)/dy.

        delta enters every electrical equation through Vd, Vq; omega only
        the swing equation; Ed', Eq' only the flux equations.
        """
        pattern = np.zeros((STATE_SIZE, STATE_SIZE), dtype=bool)
        pattern[DELTA, OMEGA] = True
        pattern[OMEGA, [DELTA, OMEGA, ED_PP, EQ_PP]] = True
        pattern[ED_P:, DELTA] = True
        pattern[ED_P:, ED_P:] = True
        return pattern
