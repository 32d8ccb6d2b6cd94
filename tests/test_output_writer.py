import io
from dataclasses import replace

import numpy as np
import pytest

from main_simulation import run_simulation
from output_writer import SnapshotWriter, format_value, write_parameters, write_snapshot

EXPECTED_HEADER = """#c        1
#tau      1000
#x1       0
#x2       4.5
#runtime  0
#dx       0.5
#outtime  1
#filename out.dat
#ngrid (derived) 9
#dt    (derived) 0.25
#nsteps(derived) 0
#nper  (derived) 4
"""

EXPECTED_INITIAL = """
#t = 0
0 0
0.5625 0
1.125 0
1.6875 0.125
2.25 0.25
2.8125 0.125
3.375 0
3.9375 0
4.5 0
"""


def test_format_value_matches_printf_g():
    assert format_value(0.005) == "0.005"
    assert format_value(1e6) == "1e+06"
    assert format_value(1.0 / 3.0) == "0.333333"
    assert format_value(np.float64(2.5)) == "2.5"


def test_parameter_header(aligned_params):
    fout = io.StringIO()
    write_parameters(fout, aligned_params)
    assert fout.getvalue() == EXPECTED_HEADER


def test_later_snapshots_are_separated_by_two_blank_lines():
    fout = io.StringIO()
    write_snapshot(fout, 0.5, np.array([0.0, 1.0]), np.array([0.0, 0.0]))
    assert fout.getvalue() == "\n\n# t = 0.5\n0 0\n1 0\n"


def test_initial_condition_file(tmp_path, aligned_params):
    filename = str(tmp_path / "out.dat")
    with SnapshotWriter(aligned_params, filename) as writer:
        run_simulation(aligned_params, writer)
    assert writer.snapshots_written == 1
    with open(filename) as fin:
        assert fin.read() == EXPECTED_HEADER + EXPECTED_INITIAL


def test_snapshot_blocks_load_with_numpy(tmp_path, aligned_params):
    params = replace(aligned_params, runtime=1.0, nsteps=4, nper=2)
    filename = str(tmp_path / "out.dat")
    with SnapshotWriter(params, filename) as writer:
        run_simulation(params, writer)
    assert writer.snapshots_written == 3
    data = np.loadtxt(filename)
    assert data.shape == (3 * params.ngrid, 2)
    with open(filename) as fin:
        labels = [line.strip() for line in fin if "t =" in line]
    assert labels == ["#t = 0", "# t = 0.5", "# t = 1"]


def test_writing_requires_open_file(aligned_params):
    writer = SnapshotWriter(aligned_params)
    with pytest.raises(RuntimeError):
        writer(0.0, np.zeros(2), np.zeros(2))


def test_unwritable_destination(tmp_path, aligned_params):
    writer = SnapshotWriter(aligned_params, str(tmp_path / "missing_dir" / "out.dat"))
    with pytest.raises(OSError):
        writer.open()
