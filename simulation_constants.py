"""
Defines core numerical constants for the 1D damped wave simulation.

These values are fixed for the leap-frog scheme and the triangular initial
pulse, but are centralized here for clarity.
"""

#--- Numerical Parameters (Fixed) ---#
# Ratio dt / (dx / c). The explicit leap-frog scheme is stable for ratios up to 1;
# 0.5 leaves a margin and is not user-configurable.
CFL_FACTOR: float = 0.5

# Smallest number of grid points for which x[0] = x1 and x[-1] = x2 can both hold.
MIN_GRID_POINTS: int = 2

#--- Initial Condition (Triangular Pulse) ---#
# The pulse spans [x1 + PULSE_START*(x2-x1), x1 + PULSE_END*(x2-x1)].
PULSE_START_FRACTION: float = 0.25
PULSE_END_FRACTION: float = 0.75
PULSE_PEAK: float = 0.25

#--- Boundary Conditions ---#
BOUNDARY_VALUE: float = 0.0

#--- Parameter File ---#
# Order of the values in the plain whitespace-separated parameter file format.
PARAMETER_ORDER = ('c', 'tau', 'x1', 'x2', 'runtime', 'dx', 'outtime', 'outfilename')
INI_SECTION: str = 'WaveParameters'

#--- Exit Codes of the Command-Line Program ---#
EXIT_OK: int = 0
EXIT_USAGE_ERROR: int = 1
EXIT_FILE_NOT_FOUND: int = 2
EXIT_READ_ERROR: int = 3
EXIT_VALUE_ERROR: int = 4
EXIT_OUTPUT_ERROR: int = 5
