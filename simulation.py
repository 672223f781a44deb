"""
SimulationBuilder - single-generator simulation orchestrator.

Fluent API for configuration and run:

    results = (
        SimulationBuilder(default_parameters())
        .solver(ScipySolver(method="Radau"))
        .scenario(TorqueStepScenario(dTm=0.1))
        .run()
    )

The generator model itself is stateless; this builder owns the state
vector and hands the model's f(t, y) to the solver.
"""
from __future__ import annotations

from typing import Optional, Type

import numpy as np

from core.parameters import GeneratorParameters, default_parameters
from core.results import SimulationResults
from core.state import DELTA
from models.synchronous import SynchronousGenerator
from solvers.base import Solver, SolverConfig
from solvers.scipy_solver import ScipySolver
from scenarios.base import Scenario


class SimulationBuilder:
    """
    Single-generator simulation builder.

    Collects configuration and runs calculation with .run().
    """

    def __init__(self, params: Optional[GeneratorParameters] = None):
        self._params = params if params is not None else default_parameters()
        self._model_cls: Type[SynchronousGenerator] = SynchronousGenerator
        self._solver: Optional[Solver] = None
        self._scenario: Optional[Scenario] = None
        self._solver_config: Optional[SolverConfig] = None

    # Fluent API
    def model(self, model_cls: Type[SynchronousGenerator]) -> SimulationBuilder:
        """Choose machine model"""
        self._model_cls = model_cls
        return self

    def solver(self, solver: Solver) -> SimulationBuilder:
        """Choose numerical solver"""
        self._solver = solver
        return self

    def solver_config(self, config: SolverConfig) -> SimulationBuilder:
        """Set solver configuration"""
        self._solver_config = config
        return self

    def scenario(self, scenario: Scenario) -> SimulationBuilder:
        """Choose simulation scenario"""
        self._scenario = scenario
        return self

    # Execution
    def run(self) -> SimulationResults:
        """Run simulation and return results"""
        if self._scenario is None:
            raise ValueError("Scenario is not set. Call .scenario(...)")

        if self._solver is None:
            cfg = self._solver_config or SolverConfig()
            self._solver = ScipySolver(method="RK45", config=cfg)
        elif self._solver_config is not None:
            self._solver.config = self._solver_config

        params = self._params
        scenario = self._scenario

        # 1. Create machine model
        machine = self._model_cls(params)

        # 2. Steady state and equilibrium initial condition
        P, Q, V = scenario.loading()
        _, _, op = machine.calculate_steady_state(P, Q, V)

        source = scenario.terminal_voltage(op)
        field = scenario.field_voltage(op)
        t_span = scenario.t_span()

        y0 = machine.initial_state(op, source(t_span[0]))
        Tm0 = machine.electrical_torque(y0, source(t_span[0]))
        torque = scenario.mechanical_torque(Tm0)

        # 3. ODE right-hand side
        def rhs(t: float, y: np.ndarray) -> np.ndarray:
            return machine.ode_rhs(t, y, torque, source, field)

        # 4. Logging
        print("\n")
        print(f"  {scenario.name()}")
        print(f"  Model: {machine.__class__.__name__}")
        print(f"  Solver: {self._solver.describe()}")
        print(f"  Terminal: {source.describe()}")
        print(f"  Field: {field.describe()}")
        print(f"  Torque: {torque.describe()}")
        print(f"  delta_ss = {np.degrees(op.delta):.2f} deg, delta0 = {np.degrees(y0[DELTA]):.2f} deg")
        print(f"  Ef0 = {op.Ef:.4f} pu, Tm0 = {Tm0:.4f} pu")
        print(f"  t = [{t_span[0]:.2f}, {t_span[1]:.2f}] s")
        print("\n")

        # 5. Solve
        t, y, success, message = self._solver.solve(
            rhs, y0, t_span, jac_sparsity=machine.jacobian_sparsity()
        )

        if not success:
            raise RuntimeError(f"Solver failed: {message}")

        print(f"  Solution obtained. Points: {len(t)}")

        # 6. Build result container
        results = SimulationResults.from_solver_output(
            t=t,
            y=y,
            params=params,
            operating_point=op,
            scenario_name=scenario.name(),
            solver_name=self._solver.describe(),
        )
        results.extra["machine"] = machine
        results.extra["source"] = source
        results.extra["field"] = field
        results.extra["torque"] = torque

        # 7. Post-process derived values
        self._post_process(results, machine, source, field, torque)

        print(f"\n{results.summary()}")
        print("\n")

        return results

    # Post-processing
    @staticmethod
    def _post_process(
        res: SimulationResults,
        machine: SynchronousGenerator,
        source,
        field,
        torque,
    ) -> None:
        """Compute derived values (torques, dq quantities, powers)"""
        N = res.N

        res.Te = np.zeros(N)
        res.Tm = np.zeros(N)
        res.Ef = np.zeros(N)
        res.Vd = np.zeros(N)
        res.Vq = np.zeros(N)
        res.Id = np.zeros(N)
        res.Iq = np.zeros(N)
        res.P_elec = np.zeros(N)
        res.Q_elec = np.zeros(N)

        for k in range(N):
            tk = res.t[k]
            yk = res.state_at(k)
            v_abc = source(tk)

            Vd, Vq, Id, Iq = machine.dq_quantities(yk, v_abc)
            res.Vd[k], res.Vq[k] = Vd, Vq
            res.Id[k], res.Iq[k] = Id, Iq

            res.Te[k] = machine.electrical_torque(yk, v_abc)
            res.Tm[k] = torque(tk, res.omega[k])
            res.Ef[k] = field(tk)

            S = machine.terminal_power(yk, v_abc)
            res.P_elec[k], res.Q_elec[k] = S.real, S.imag
