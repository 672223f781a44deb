import matplotlib

matplotlib.use("Agg")

from plotting import plot_dynamics, plot_phasor_diagram  # noqa: E402
from scenarios import SteadyOperationScenario  # noqa: E402
from simulation import SimulationBuilder  # noqa: E402
from solvers import ScipySolver, SolverConfig  # noqa: E402


def test_plots_are_written(tmp_path, params, loaded_point):
    res = (
        SimulationBuilder(params)
        .solver(ScipySolver(config=SolverConfig(dt_out=1e-2, max_step=1e-2)))
        .scenario(SteadyOperationScenario(t_end=0.1))
        .run()
    )
    dyn_path = tmp_path / "dynamics.png"
    plot_dynamics(res, save_path=str(dyn_path))
    assert dyn_path.exists()

    _, _, op = loaded_point
    phasor_path = tmp_path / "phasor.png"
    plot_phasor_diagram(op, params, save_path=str(phasor_path))
    assert phasor_path.exists()
