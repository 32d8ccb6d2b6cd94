"""
Main script for the 1D damped wave simulation.

This script orchestrates the simulation by:
- Parsing command-line arguments and the parameter file.
- Deriving the grid and stepping constants.
- Setting up the grid and the initial field.
- Running the leap-frog time stepping loop.
- Handing periodic snapshots of the field to the output writer.
"""

import logging
import sys
from typing import Callable, Optional, Sequence, Tuple, Union

import numpy as np

import cli_parser
import config_loader
import numerical_schemes
import output_writer
import problem_setup
import simulation_constants as constants
import wave_utils
from wave_parameters import DerivedParameters, ParameterError, WaveParameters

logger = logging.getLogger(__name__)

SnapshotSink = Callable[[float, np.ndarray, np.ndarray], None]


def run_simulation(
    params: Union[WaveParameters, DerivedParameters],
    on_snapshot: SnapshotSink
) -> Tuple[DerivedParameters, np.ndarray, int]:
    """
    Run the simulation from the initial pulse to the final time.

    The field at t = 0 is always emitted. After step s (counting from 0) a
    snapshot at time (s+1)*dt is emitted whenever (s+1) is a multiple of nper.
    Snapshots are emitted in order of increasing time and receive copies of
    the field, so the sink may keep them.

    Parameters
    ----------
    params : Union[WaveParameters, DerivedParameters]
        Validated parameters. Derived values are computed if not yet present.
    on_snapshot : Callable[[float, np.ndarray, np.ndarray], None]
        Called with (time, x, rho) for every snapshot.

    Returns
    -------
    Tuple[DerivedParameters, np.ndarray, int]
        - params (DerivedParameters): The derived parameters used for the run.
        - rho (np.ndarray): The field after the last step.
        - n_snapshots (int): Number of snapshots emitted.

    Raises
    ------
    ParameterError
        If the derived parameters are degenerate (see wave_utils.derive_parameters).
    """
    if not isinstance(params, DerivedParameters):
        params = wave_utils.derive_parameters(params)

    x, rho_initial = problem_setup.setup_grid_and_initial_state(params)

    # Three distinct buffers; the names rotate, the storage does not move.
    rho = rho_initial                     # time step t
    rho_prev = rho_initial.copy()         # time step t-1
    rho_next = np.zeros_like(rho)         # time step t+1

    on_snapshot(0.0, x.copy(), rho.copy())
    n_snapshots = 1

    logger.info("Taking %d steps of dt=%g on %d grid points.", params.nsteps, params.dt, params.ngrid)
    for s in range(params.nsteps):
        numerical_schemes.leap_frog_step(rho, rho_prev, params, out=rho_next)

        # Update arrays such that t+1 becomes the new t etc.
        rho_prev, rho, rho_next = rho, rho_next, rho_prev

        if (s + 1) % params.nper == 0:
            on_snapshot((s + 1) * params.dt, x.copy(), rho.copy())
            n_snapshots += 1

    return params, rho, n_snapshots

def print_parameters(params: DerivedParameters) -> None:
    """Print a summary of the user and derived parameters to the console."""
    print("\nSimulation parameters:")
    print(f"    Wave speed c:     {params.c:g}")
    print(f"    Damping time tau: {params.tau:g}")
    print(f"    Domain:           [{params.x1:g}, {params.x2:g}]")
    print(f"    dx:               {params.dx:g}")
    print(f"    Runtime:          {params.runtime:g}")
    print(f"    Output interval:  {params.outtime:g}")
    print(f"    Output file:      '{params.outfilename}'")
    print(f"    ngrid: {params.ngrid}, dt: {params.dt:g}, nsteps: {params.nsteps}, nper: {params.nper}\n")

def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Command-line entry point.

    Returns
    -------
    int
        Process exit code: 0 on success, 1 for command-line usage errors,
        2 if the parameter file does not exist, 3 if it cannot be read,
        4 for invalid parameter values and 5 if the output file cannot be
        written.
    """
    try:
        args = cli_parser.parse_arguments(argv)
    except SystemExit as e:
        # argparse exits with 0 after --help and with 2 on usage errors
        return constants.EXIT_OK if not e.code else constants.EXIT_USAGE_ERROR
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s"
    )

    try:
        params = problem_setup.get_simulation_parameters(args)
        params = wave_utils.derive_parameters(params)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return constants.EXIT_FILE_NOT_FOUND
    except config_loader.ParameterFileError as e:
        print(f"Error while reading file '{args.param_file}': {'; '.join(e.errors)}", file=sys.stderr)
        return constants.EXIT_READ_ERROR
    except ParameterError as e:
        for message in e.errors:
            print(f"Error: {message}", file=sys.stderr)
        print(f"Parameter value error in file '{args.param_file}'", file=sys.stderr)
        return constants.EXIT_VALUE_ERROR

    print_parameters(params)

    try:
        with output_writer.SnapshotWriter(params) as writer:
            run_simulation(params, writer)
    except OSError as e:
        print(f"Error: cannot write output file '{params.outfilename}': {e}", file=sys.stderr)
        return constants.EXIT_OUTPUT_ERROR

    print(f"Results written to '{params.outfilename}'.")
    return constants.EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
