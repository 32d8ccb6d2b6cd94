"""
Module for parsing command-line arguments for the 1D damped wave simulation.

Defines the positional parameter file argument and optional flags that
override individual values from that file.
"""

import argparse

import simulation_constants as constants

def get_parser() -> argparse.ArgumentParser:
    """
    Defines and returns the ArgumentParser object for the simulation.

    Every parameter in the parameter file can be overridden from the command
    line; overrides default to None, meaning "use the file value".
    """
    parser = argparse.ArgumentParser(
        prog='wave1d',
        description="Simulate the one-dimensional damped wave equation with fixed ends."
    )

    #--- Parameter File ---#
    parser.add_argument(
        'param_file',
        type=str,
        help=("Parameter file, either plain (values 'c tau x1 x2 runtime dx outtime outfilename' "
              f"separated by whitespace) or INI with a [{constants.INI_SECTION}] section.")
    )

    #--- Overrides of Parameter File Values ---#
    parser.add_argument('--c',       type=float, default=None, help="Override: Wave speed.")
    parser.add_argument('--tau',     type=float, default=None, help="Override: Damping time.")
    parser.add_argument('--x1',      type=float, default=None, help="Override: Left end of the domain.")
    parser.add_argument('--x2',      type=float, default=None, help="Override: Right end of the domain.")
    parser.add_argument('--runtime', type=float, default=None, help="Override: Total simulated time.")
    parser.add_argument('--dx',      type=float, default=None, help="Override: Spatial grid size.")
    parser.add_argument('--outtime', type=float, default=None, help="Override: Simulated time between snapshots.")
    parser.add_argument(
        '-o', '--outfilename',
        type=str,
        default=None,
        help="Override: Name of the output file."
    )

    #--- Console Output ---#
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help="Print debug messages."
    )

    return parser

def parse_arguments(argv=None) -> argparse.Namespace:
    """Define and parse command-line arguments for the simulation."""
    parser = get_parser()
    args = parser.parse_args(argv)
    return args
