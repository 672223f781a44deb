import dataclasses

import pytest

from core.errors import DomainError
from core.parameters import GeneratorParameters, LEAKAGE_FACTOR, default_parameters


def test_default_set(params):
    assert params.S_nom == 100e6
    assert params.U_nom_line == 13.8e3
    assert params.fn == 60.0
    assert params.poles == 4
    assert params.Xl == pytest.approx(LEAKAGE_FACTOR * 0.25)
    assert params.n_sync == pytest.approx(1800.0)
    assert params.omega_n == pytest.approx(2 * 3.141592653589793 * 60.0)


def test_machine_constants_have_no_silent_defaults():
    with pytest.raises(TypeError):
        GeneratorParameters()


def test_parameters_are_immutable(params):
    with pytest.raises(dataclasses.FrozenInstanceError):
        params.Xd = 2.0


@pytest.mark.parametrize("changes", [
    {"Xd_p": 1.9},                 # Xd < Xd'
    {"Xd_pp": 0.35},               # Xd' < Xd''
    {"Xq_p": 1.8},                 # Xq < Xq'
    {"Xq_pp": 0.6},                # Xq' < Xq''
    {"Xd_pp": 0.0},
    {"Xq_pp": -0.1, "Xq_p": 0.55},
])
def test_reactance_ordering(params, changes):
    with pytest.raises(DomainError):
        dataclasses.replace(params, **changes)


@pytest.mark.parametrize("name", ["Tdo_p", "Tqo_p", "Tdo_pp", "Tqo_pp", "H"])
@pytest.mark.parametrize("value", [0.0, -1.0])
def test_time_constants_positive(params, name, value):
    with pytest.raises(DomainError):
        dataclasses.replace(params, **{name: value})


@pytest.mark.parametrize("changes", [
    {"D": -0.1},
    {"Rs": -0.001},
    {"poles": 3},
    {"poles": 0},
    {"fn": 0.0},
    {"S_nom": -1.0},
    {"Xd": float("nan")},
    {"H": float("inf")},
])
def test_other_invalid_values(params, changes):
    with pytest.raises(DomainError):
        dataclasses.replace(params, **changes)


def test_leakage_equal_to_subtransient_rejected(params):
    with pytest.raises(DomainError):
        dataclasses.replace(params, Xl_fixed=params.Xd_pp)


def test_leakage_above_subtransient_rejected(params):
    with pytest.raises(DomainError):
        dataclasses.replace(params, Xl_fixed=0.3)


def test_fixed_leakage_is_used(params):
    p = dataclasses.replace(params, Xl_fixed=0.1)
    assert p.Xl == 0.1
    expected = 0.25 - (0.25 - 0.3) ** 2 / (0.25 - 0.1)
    assert p.d_axis_denominator == pytest.approx(expected)


def test_zero_damping_allowed(params):
    assert dataclasses.replace(params, D=0.0).D == 0.0


def test_info_lists_values():
    text = default_parameters().info()
    assert "100.0 MVA" in text
    assert "13.8 kV" in text
    assert "Xd = 1.800" in text
    assert "Tdo'' = 0.030" in text
    assert "H = 3.00" in text


def test_vanishing_d_axis_denominator_rejected(params):
    # 0.25 - (0.25 - 0.3)**2 / (0.25 - 0.24) == 0
    with pytest.raises(DomainError, match="denominator"):
        dataclasses.replace(params, Xl_fixed=0.24)


def test_integral_float_poles_accepted(params):
    p = dataclasses.replace(params, poles=4.0)
    assert p.n_sync == pytest.approx(1800.0)
    assert "Number of poles: 4, n_sync = 1800 rpm" in p.info()


@pytest.mark.parametrize("poles", [3, 4.5, 0])
def test_invalid_poles(params, poles):
    with pytest.raises(DomainError):
        dataclasses.replace(params, poles=poles)
