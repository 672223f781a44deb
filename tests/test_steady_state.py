import numpy as np
import pytest

from core.errors import DomainError
from core.transforms import abc_to_dq, phasor_to_abc


def test_power_balance(machine, params, loaded_point):
    _, _, op = loaded_point
    P = op.Vd * op.Id + op.Vq * op.Iq
    Q = op.Vq * op.Id - op.Vd * op.Iq
    assert abs(complex(P, Q) - complex(0.8, 0.2)) < 1e-6


def test_d_axis_network_equation(params, loaded_point):
    _, _, op = loaded_point
    assert op.Vd == pytest.approx(params.Xq * op.Iq - params.Rs * op.Id, abs=1e-12)


def test_field_voltage_and_transient_emfs(params, loaded_point):
    _, _, op = loaded_point
    assert op.Ef == pytest.approx(op.Vq + params.Rs * op.Iq + params.Xd * op.Id)
    assert op.Eq_p == pytest.approx(op.Vq + params.Rs * op.Iq + params.Xd_p * op.Id)
    assert op.Ed_p == pytest.approx(op.Vd + params.Rs * op.Id - params.Xq_p * op.Iq)
    assert op.Ef == pytest.approx(op.Eq_p + (params.Xd - params.Xd_p) * op.Id)


def test_rotor_angle_on_internal_voltage(params, loaded_point):
    _, _, op = loaded_point
    E = op.V + op.I * complex(params.Rs, params.Xq)
    assert op.delta == pytest.approx(np.angle(E))
    assert op.Te == pytest.approx(0.8 + params.Rs * abs(op.I) ** 2)


def test_abc_outputs_match_phasors(loaded_point):
    v_abc, i_abc, op = loaded_point
    np.testing.assert_allclose(v_abc, phasor_to_abc(op.V), atol=1e-12)
    np.testing.assert_allclose(i_abc, phasor_to_abc(op.I), atol=1e-12)
    np.testing.assert_allclose(abc_to_dq(v_abc, op.delta), [op.Vd, op.Vq], atol=1e-12)
    np.testing.assert_allclose(abc_to_dq(i_abc, op.delta), [op.Id, op.Iq], atol=1e-12)


def test_rated_scenario(machine):
    _, _, op = machine.calculate_steady_state(1.0, 0.0, 1.0 + 0.0j)
    assert 1.0 <= op.Ef <= 2.5
    assert 0.0 < op.delta < np.pi / 2
    assert op.delta == pytest.approx(np.arctan2(1.7, 1.003))


def test_rotated_terminal_voltage(machine):
    theta = 0.4
    _, _, op0 = machine.calculate_steady_state(0.8, 0.2, 1.0)
    _, _, op = machine.calculate_steady_state(0.8, 0.2, np.exp(1j * theta))
    assert op.delta == pytest.approx(op0.delta + theta)
    assert op.Ef == pytest.approx(op0.Ef)
    assert op.Vd == pytest.approx(op0.Vd)
    assert op.Iq == pytest.approx(op0.Iq)


def test_no_side_effects(machine, loaded_point):
    _, _, op1 = loaded_point
    machine.calculate_steady_state(0.1, -0.3, 0.95)
    _, _, op2 = machine.calculate_steady_state(0.8, 0.2, 1.0)
    assert op1 == op2


@pytest.mark.parametrize("V", [0.0, 0.0j, 1e-12])
def test_zero_voltage_rejected(machine, V):
    with pytest.raises(DomainError):
        machine.calculate_steady_state(0.8, 0.2, V)


def test_non_finite_power_rejected(machine):
    with pytest.raises(DomainError):
        machine.calculate_steady_state(float("nan"), 0.2, 1.0)


def test_operating_point_report(loaded_point):
    _, _, op = loaded_point
    text = op.info()
    assert "Ef =" in text
    assert "delta =" in text
    data = op.as_dict()
    assert data["P"] == 0.8
    assert op.power_factor == pytest.approx(0.8 / np.hypot(0.8, 0.2))
