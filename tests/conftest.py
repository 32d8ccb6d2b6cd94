import pytest

from wave_parameters import DerivedParameters, WaveParameters


@pytest.fixture
def reference_params():
    return WaveParameters(c=1.0, tau=1e6, x1=0.0, x2=1.0, runtime=0.0,
                          dx=0.01, outtime=1.0, outfilename="dataFilename.txt")


@pytest.fixture
def aligned_params():
    # ngrid = 9 with x[4] exactly at the domain midpoint
    return DerivedParameters(c=1.0, tau=1000.0, x1=0.0, x2=4.5, runtime=0.0,
                             dx=0.5, outtime=1.0, outfilename="out.dat",
                             ngrid=9, dt=0.25, nsteps=0, nper=4)
