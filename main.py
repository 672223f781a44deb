"""
Run a synchronous generator scenario from the command line.

Outputs:
1) Parameter and steady-state listings
2) Time-domain plot of the selected scenario and the steady-state phasor diagram

Example:
    python main.py --scenario torque-step --P 0.8 --Q 0.2 --t-end 5 --method Radau
"""
from __future__ import annotations

import argparse
from enum import Enum
from pathlib import Path

from core.parameters import default_parameters
from models.synchronous import SynchronousGenerator
from plotting import plot_dynamics, plot_phasor_diagram
from scenarios import (
    FieldStepScenario,
    Scenario,
    SteadyOperationScenario,
    TorqueStepScenario,
)
from simulation import SimulationBuilder
from solvers import ScipySolver, SolverConfig


class ScenarioKind(Enum):
    STEADY = "steady"
    TORQUE_STEP = "torque-step"
    FIELD_STEP = "field-step"

    def build(self, args: argparse.Namespace) -> Scenario:
        V = complex(args.V, 0.0)
        if self is ScenarioKind.STEADY:
            return SteadyOperationScenario(P=args.P, Q=args.Q, V=V, t_end=args.t_end)
        if self is ScenarioKind.TORQUE_STEP:
            return TorqueStepScenario(
                dTm=args.step, t_step=args.t_step,
                P=args.P, Q=args.Q, V=V, t_end=args.t_end,
            )
        return FieldStepScenario(
            step=args.step, t_step=args.t_step,
            P=args.P, Q=args.Q, V=V, t_end=args.t_end,
        )


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Synchronous generator steady state and sixth-order dynamics."
    )
    parser.add_argument(
        "--scenario",
        choices=[kind.value for kind in ScenarioKind],
        default=ScenarioKind.TORQUE_STEP.value,
        help="Scenario to simulate.",
    )
    parser.add_argument("--P", type=float, default=0.8, help="Active power, pu.")
    parser.add_argument("--Q", type=float, default=0.2, help="Reactive power, pu.")
    parser.add_argument("--V", type=float, default=1.0, help="Terminal voltage magnitude, pu.")
    parser.add_argument("--step", type=float, default=0.1,
                        help="Torque step (pu) or relative field voltage step.")
    parser.add_argument("--t-step", type=float, default=1.0, help="Disturbance time, s.")
    parser.add_argument("--t-end", type=float, default=5.0, help="Simulation end time, s.")
    parser.add_argument("--method", choices=ScipySolver.METHODS, default="Radau",
                        help="solve_ivp method.")
    parser.add_argument("--rtol", type=float, default=1e-6, help="Relative tolerance.")
    parser.add_argument("--atol", type=float, default=1e-8, help="Absolute tolerance.")
    parser.add_argument("--dt-out", type=float, default=1e-3, help="Output time step, s.")
    parser.add_argument("--max-step", type=float, default=1e-2, help="Max solver internal step, s.")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("output"),
        help="Output directory.",
    )
    parser.add_argument("--no-plots", action="store_true", help="Skip plot generation.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    params = default_parameters()
    print(params.info())

    scenario = ScenarioKind(args.scenario).build(args)
    print(f"  {scenario.describe()}")

    machine = SynchronousGenerator(params)
    _, _, op = machine.calculate_steady_state(*scenario.loading())
    print(op.info())

    config = SolverConfig(
        dt_out=args.dt_out,
        rtol=args.rtol,
        atol=args.atol,
        max_step=args.max_step,
    )
    results = (
        SimulationBuilder(params)
        .solver(ScipySolver(method=args.method, config=config))
        .scenario(scenario)
        .run()
    )

    if args.no_plots:
        return

    args.output_dir.mkdir(parents=True, exist_ok=True)
    plot_dynamics(results, save_path=str(args.output_dir / f"{args.scenario}.png"))
    plot_phasor_diagram(op, params, save_path=str(args.output_dir / "phasor_diagram.png"))


if __name__ == "__main__":
    main()
