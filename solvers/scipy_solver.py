"""
Решатель на базе scipy.integrate.solve_ivp
"""
from __future__ import annotations

from typing import Any, Callable, Optional

import numpy as np
from scipy.integrate import solve_ivp

from .base import Solver, SolverConfig


class ScipySolver(Solver):
    """
    solve_ivp with a fixed method and the options of SolverConfig.

    Tdo'' is two orders of magnitude below Tdo', so the rotor flux equations
    are stiff. Radau and BDF take the Jacobian structure of the machine model
    (jac_sparsity) and build the Jacobian by grouped finite differences;
    explicit methods get only the tolerances and the step limits.
    """

    METHODS = ("RK45", "RK23", "DOP853", "Radau", "BDF", "LSODA")
    SPARSE_JACOBIAN = ("Radau", "BDF")

    def __init__(
        self,
        method: str = "RK45",
        config: Optional[SolverConfig] = None,
    ):
        super().__init__(config)
        if method not in self.METHODS:
            raise ValueError(
                f"Unknown method '{method}'. "
                f"Available: {', '.join(self.METHODS)}"
            )
        self.method = method

    @property
    def is_implicit(self) -> bool:
        return self.method in ("Radau", "BDF", "LSODA")

    def options(self, jac_sparsity: Optional[np.ndarray] = None) -> dict[str, Any]:
        """Keyword arguments passed to solve_ivp besides fun, t_span and y0"""
        cfg = self.config
        opts: dict[str, Any] = {
            "method": self.method,
            "rtol": cfg.rtol,
            "atol": cfg.atol,
            "max_step": cfg.max_step,
        }
        if cfg.first_step is not None:
            opts["first_step"] = cfg.first_step
        if jac_sparsity is not None and self.method in self.SPARSE_JACOBIAN:
            opts["jac_sparsity"] = np.asarray(jac_sparsity, dtype=bool)
        return opts

    def solve(
        self,
        rhs: Callable[[float, np.ndarray], np.ndarray],
        y0: np.ndarray,
        t_span: tuple[float, float],
        t_eval: Optional[np.ndarray] = None,
        jac_sparsity: Optional[np.ndarray] = None,
    ) -> tuple[np.ndarray, np.ndarray, bool, str]:
        if t_eval is None:
            t_eval = self.output_grid(t_span)

        sol = solve_ivp(
            rhs,
            t_span,
            np.asarray(y0, dtype=float),
            t_eval=t_eval,
            **self.options(jac_sparsity),
        )
        message = f"{sol.message} (nfev={sol.nfev}, njev={sol.njev})"
        return sol.t, sol.y, sol.success, message

    def describe(self) -> str:
        kind = "implicit" if self.is_implicit else "explicit"
        return (
            f"SciPy solve_ivp ({self.method}, {kind}), "
            f"rtol={self.config.rtol}, atol={self.config.atol}, "
            f"max_step={self.config.max_step}"
        )
