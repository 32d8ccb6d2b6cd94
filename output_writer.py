"""
Module for writing simulation output to a plain-text file.

Provides functions to:
- Write the parameter header (lines prefixed with '#').
- Write field snapshots as blocks of "x rho" lines.

Lines starting with '#' are skipped by gnuplot and numpy.loadtxt, and the
blank lines between snapshots separate the data blocks for gnuplot.
"""

import logging
from typing import Optional, TextIO

import numpy as np

from wave_parameters import DerivedParameters

logger = logging.getLogger(__name__)


def format_value(value: float) -> str:
    """Format a number with 6 significant digits, as in '%g'."""
    return f"{value:g}"

def write_parameters(fout: TextIO, params: DerivedParameters) -> None:
    """
    Write all user and derived parameters as a '#'-prefixed header.

    Parameters
    ----------
    fout : TextIO
        Open text stream to write to.
    params : DerivedParameters
        The parameters of the run.
    """
    fout.write(f"#c        {format_value(params.c)}\n")
    fout.write(f"#tau      {format_value(params.tau)}\n")
    fout.write(f"#x1       {format_value(params.x1)}\n")
    fout.write(f"#x2       {format_value(params.x2)}\n")
    fout.write(f"#runtime  {format_value(params.runtime)}\n")
    fout.write(f"#dx       {format_value(params.dx)}\n")
    fout.write(f"#outtime  {format_value(params.outtime)}\n")
    fout.write(f"#filename {params.outfilename}\n")
    fout.write(f"#ngrid (derived) {params.ngrid}\n")
    fout.write(f"#dt    (derived) {format_value(params.dt)}\n")
    fout.write(f"#nsteps(derived) {params.nsteps}\n")
    fout.write(f"#nper  (derived) {params.nper}\n")

def write_snapshot(fout: TextIO, time: float, x: np.ndarray, rho: np.ndarray, first: bool = False) -> None:
    """
    Write one snapshot: a time label followed by one "x rho" line per grid point.

    The first snapshot is preceded by one blank line, later ones by two.
    """
    if first:
        fout.write(f"\n#t = {format_value(time)}\n")
    else:
        fout.write(f"\n\n# t = {format_value(time)}\n")
    for x_val, rho_val in zip(x, rho):
        fout.write(f"{format_value(x_val)} {format_value(rho_val)}\n")


class SnapshotWriter:
    """
    Write the header and the snapshots of one run to the output file.

    Instances are callable with (time, x, rho) and can therefore be passed
    directly as the snapshot sink of main_simulation.run_simulation.
    Opening the file fails with OSError if it cannot be written.
    """

    def __init__(self, params: DerivedParameters, filename: Optional[str] = None):
        self.params = params
        self.filename = filename if filename is not None else params.outfilename
        self.snapshots_written = 0
        self._fout: Optional[TextIO] = None

    def open(self) -> "SnapshotWriter":
        self._fout = open(self.filename, 'w')
        write_parameters(self._fout, self.params)
        logger.debug("Opened output file '%s'.", self.filename)
        return self

    def __call__(self, time: float, x: np.ndarray, rho: np.ndarray) -> None:
        if self._fout is None:
            raise RuntimeError(f"Output file '{self.filename}' is not open.")
        write_snapshot(self._fout, time, x, rho, first=(self.snapshots_written == 0))
        self.snapshots_written += 1

    def close(self) -> None:
        if self._fout is not None:
            self._fout.close()
            self._fout = None
            logger.info("Wrote %d snapshot(s) to '%s'.", self.snapshots_written, self.filename)

    def __enter__(self) -> "SnapshotWriter":
        return self.open()

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
