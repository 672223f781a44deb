import dataclasses

import numpy as np
import pytest

from core.transforms import abc_to_dq
from prime_movers import ConstantTorque, RampTorque, StepTorque
from solvers import ScipySolver, SolverConfig
from sources import ConstantField, InfiniteBus, StepField


def test_infinite_bus_is_constant():
    bus = InfiniteBus(1.05 * np.exp(1j * 0.2))
    v0 = bus(0.0)
    v0[0] = 99.0
    np.testing.assert_array_equal(bus(0.0), bus(3.7))
    assert bus(0.0)[0] != 99.0
    d, q = abc_to_dq(bus(1.0), 0.9)
    assert d == pytest.approx(1.05 * np.sin(0.9 - 0.2))
    assert q == pytest.approx(1.05 * np.cos(0.9 - 0.2))
    assert "1.0500" in bus.describe()


def test_field_inputs():
    assert ConstantField(1.9)(10.0) == 1.9
    step = StepField(Ef_initial=1.9, Ef_final=2.1, t_step=1.0)
    assert step(0.999) == 1.9
    assert step(1.0) == 2.1


def test_torque_inputs():
    assert ConstantTorque(0.8)(5.0, 1.01) == 0.8

    step = StepTorque(Tm_initial=0.8, Tm_final=0.9, t_step=2.0)
    assert step(1.9, 1.0) == 0.8
    assert step(2.0, 1.0) == 0.9

    ramp = RampTorque(Tm_target=1.0, t_ramp=2.0, Tm_initial=0.5, t_start=1.0)
    assert ramp(0.5, 1.0) == 0.5
    assert ramp(2.0, 1.0) == pytest.approx(0.75)
    assert ramp(10.0, 1.0) == 1.0
    with pytest.raises(ValueError):
        RampTorque(Tm_target=1.0, t_ramp=0.0)


def test_solver_rejects_unknown_method():
    with pytest.raises(ValueError):
        ScipySolver(method="Euler")


def test_output_grid():
    solver = ScipySolver(config=SolverConfig(dt_out=0.3))
    grid = solver.output_grid((0.0, 1.0))
    np.testing.assert_allclose(grid, [0.0, 0.3, 0.6, 0.9, 1.0])
    assert solver.output_grid((2.0, 2.0)).tolist() == [2.0]
    with pytest.raises(ValueError):
        solver.output_grid((1.0, 0.0))
    with pytest.raises(ValueError):
        ScipySolver(config=SolverConfig(dt_out=0.0)).output_grid((0.0, 1.0))


def test_solver_integrates_decay():
    solver = ScipySolver(method="RK45", config=SolverConfig(dt_out=0.1, max_step=0.01))
    t, y, success, _ = solver.solve(lambda t, y: -y, np.array([1.0]), (0.0, 1.0))
    assert success
    assert y[0, -1] == pytest.approx(np.exp(-1.0), rel=1e-4)
    assert t[-1] == 1.0


def test_run_length_belongs_to_scenario():
    assert "t_end" not in {f.name for f in dataclasses.fields(SolverConfig)}


def test_solver_options_follow_method():
    pattern = np.eye(2, dtype=bool)
    config = SolverConfig(rtol=1e-7, first_step=1e-5)

    radau = ScipySolver(method="Radau", config=config)
    opts = radau.options(pattern)
    assert opts["method"] == "Radau"
    assert opts["rtol"] == 1e-7
    assert opts["first_step"] == 1e-5
    np.testing.assert_array_equal(opts["jac_sparsity"], pattern)
    assert radau.is_implicit
    assert "implicit" in radau.describe()

    rk = ScipySolver(method="RK45")
    assert "jac_sparsity" not in rk.options(pattern)
    assert "first_step" not in rk.options()
    assert not rk.is_implicit


def test_implicit_solver_with_sparsity():
    solver = ScipySolver(method="BDF", config=SolverConfig(dt_out=0.5, max_step=0.1))
    stiff = np.array([[-1000.0, 0.0], [1.0, -1.0]])
    t, y, success, message = solver.solve(
        lambda t, y: stiff @ y, np.array([1.0, 0.0]), (0.0, 2.0),
        jac_sparsity=stiff != 0.0,
    )
    assert success
    assert "nfev=" in message
    assert y[0, -1] == pytest.approx(0.0, abs=1e-6)
    assert t[-1] == 2.0
