"""
Parameter records for the 1D damped wave simulation.

``WaveParameters`` holds the validated user input. ``DerivedParameters`` adds
the grid and stepping constants computed by ``wave_utils.derive_parameters``;
only that record is accepted by the grid setup, the integrator and the
stepping loop, so derivation cannot be skipped.
"""

import math
from dataclasses import dataclass
from typing import List, Optional


class ParameterError(ValueError):
    """
    Configuration error collecting every problem found in a parameter set.

    Parameters
    ----------
    errors : List[str]
        One message per problem found.
    source : Optional[str]
        Name of the parameter file the values came from, if any.
    """

    def __init__(self, errors: List[str], source: Optional[str] = None):
        self.errors = list(errors)
        self.source = source
        where = f" in '{source}'" if source else ""
        details = "; ".join(self.errors)
        super().__init__(f"Parameter value error{where}: {details}")


@dataclass(frozen=True)
class WaveParameters:
    """User-supplied simulation parameters."""

    c: float            # wave speed
    tau: float          # damping time
    x1: float           # left end of the domain
    x2: float           # right end of the domain
    runtime: float      # total simulated time
    dx: float           # spatial grid size
    outtime: float      # simulated time between snapshots
    outfilename: str    # name of the output file

    def validation_errors(self) -> List[str]:
        """Return a message for every constraint this parameter set violates."""
        errors = []
        # nan and inf pass the comparisons below, so report them first
        for name in ('c', 'tau', 'x1', 'x2', 'runtime', 'dx', 'outtime'):
            value = getattr(self, name)
            if not math.isfinite(value):
                errors.append(f"'{name}' must be a finite number, got {value}")
        if self.c <= 0.0:
            errors.append("wave speed c must be positive")
        if self.tau <= 0.0:
            errors.append("damping time tau must be positive")
        if self.x1 >= self.x2:
            errors.append("x1 must be less than x2")
        if self.dx <= 0.0:
            errors.append("dx must be positive")
        elif self.x1 < self.x2 and self.dx > self.x2 - self.x1:
            errors.append("dx too large for domain")
        if self.runtime < 0.0:
            errors.append("runtime must not be negative")
        if self.outtime < 0.0:
            errors.append("outtime must not be negative")
        if not self.outfilename:
            errors.append("no output filename given")
        return errors

    def validate(self, source: Optional[str] = None) -> "WaveParameters":
        """Raise a single ParameterError listing all violations, else return self."""
        errors = self.validation_errors()
        if errors:
            raise ParameterError(errors, source)
        return self


@dataclass(frozen=True)
class DerivedParameters(WaveParameters):
    """User parameters together with the derived grid and stepping constants."""

    ngrid: int          # number of x points
    dt: float           # time step size
    nsteps: int         # number of steps to reach runtime
    nper: int           # steps between snapshots
