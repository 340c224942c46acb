"""Keplerian orbit functions.

This sub-module provides functions for:

- **Orbit geometry**: angular momentum, argument of periapsis and mean
  anomaly from mean elements.
- **Anomaly conversions**: a JAX-traceable Kepler equation solver that
  reports its convergence status, and conversions between mean, eccentric
  and true anomalies.
- **Perifocal state**: position and velocity in the orbital plane.
"""

from .geometry import (
    angular_momentum,
    argument_of_periapsis,
    mean_anomaly,
)
from .kepler import (
    KEPLER_MAX_ITERATIONS,
    KeplerConvergenceError,
    KeplerSolution,
    anomaly_eccentric_to_mean,
    anomaly_eccentric_to_true,
    anomaly_mean_to_eccentric,
    anomaly_mean_to_true,
    check_convergence,
    solve_kepler,
)
from .perifocal import (
    position_perifocal,
    state_perifocal,
    velocity_perifocal,
)

__all__ = [
    "angular_momentum",
    "argument_of_periapsis",
    "mean_anomaly",
    "KEPLER_MAX_ITERATIONS",
    "KeplerConvergenceError",
    "KeplerSolution",
    "solve_kepler",
    "check_convergence",
    "anomaly_mean_to_eccentric",
    "anomaly_eccentric_to_mean",
    "anomaly_eccentric_to_true",
    "anomaly_mean_to_true",
    "position_perifocal",
    "velocity_perifocal",
    "state_perifocal",
]
