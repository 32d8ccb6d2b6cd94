from dataclasses import replace

import numpy as np
import pytest

from wave_parameters import DerivedParameters, ParameterError, WaveParameters
from wave_utils import apply_boundary_conditions, calculate_dt, derive_parameters


def test_reference_derivation(reference_params):
    derived = derive_parameters(reference_params)
    assert isinstance(derived, DerivedParameters)
    assert derived.ngrid == 100
    assert derived.dt == pytest.approx(0.005)
    assert derived.nsteps == 0
    assert derived.nper == 200


def test_user_fields_are_carried_over(reference_params):
    derived = derive_parameters(reference_params)
    assert derived.c == reference_params.c
    assert derived.tau == reference_params.tau
    assert derived.outfilename == reference_params.outfilename


def test_counts_are_truncated():
    params = derive_parameters_for(dx=0.3, runtime=1.0, outtime=0.4)
    assert params.ngrid == 3
    assert params.dt == pytest.approx(0.15)
    assert params.nsteps == 6
    assert params.nper == 2


def test_dt_uses_fixed_half_cfl():
    assert calculate_dt(0.2, 4.0) == pytest.approx(0.025)


def test_derivation_is_deterministic(reference_params):
    assert derive_parameters(reference_params) == derive_parameters(reference_params)


def test_zero_nper_is_rejected(reference_params):
    with pytest.raises(ParameterError) as excinfo:
        derive_parameters(replace(reference_params, outtime=0.001))
    assert any("outtime" in message for message in excinfo.value.errors)


def test_single_grid_point_is_rejected(reference_params):
    with pytest.raises(ParameterError) as excinfo:
        derive_parameters(replace(reference_params, dx=0.8))
    assert any("ngrid=1" in message for message in excinfo.value.errors)


def test_degeneracies_are_reported_together(reference_params):
    with pytest.raises(ParameterError) as excinfo:
        derive_parameters(replace(reference_params, dx=0.8, outtime=0.0))
    assert len(excinfo.value.errors) == 2


def test_apply_boundary_conditions_in_place():
    rho = np.array([1.0, 2.0, 3.0, 4.0])
    result = apply_boundary_conditions(rho)
    assert result is rho
    assert rho.tolist() == [0.0, 2.0, 3.0, 0.0]


def derive_parameters_for(dx, runtime, outtime):
    return derive_parameters(WaveParameters(c=1.0, tau=1.0, x1=0.0, x2=1.0, runtime=runtime,
                                            dx=dx, outtime=outtime, outfilename="out.dat"))
