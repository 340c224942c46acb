"""
solarplanets computes heliocentric planetary state vectors from mean orbital elements, implemented in JAX.
"""

from .config import set_dtype, get_dtype

from .constants import (
    TWO_PI,
    DEG2RAD,
    RAD2DEG,
    AS2RAD,
    RAD2AS,
    JD_J2000,
    DAYS_PER_JULIAN_CENTURY,
    AU_KM,
    GM_SUN,
    OBLIQUITY_J2000,
)

from ._types import StateVector
from .epoch import Epoch

from .time import (
    julian_day_number,
    fractional_hours,
    julian_date,
    julian_centuries,
    caldate_to_jd,
)

from .utils import posmod

from .linalg import dot, mat_vec, mat_mul, transpose

from .rotations import Rx, Rz, rotate_x, rotate_z

from .elements import (
    ElementRecordError,
    OrbitalElementSet,
    InterpolatedElements,
    interpolate_element,
    interpolate_elements,
    validate_elements,
)

from .orbits import (
    angular_momentum,
    argument_of_periapsis,
    mean_anomaly,
    KeplerConvergenceError,
    KeplerSolution,
    solve_kepler,
    check_convergence,
    anomaly_mean_to_eccentric,
    anomaly_eccentric_to_mean,
    anomaly_eccentric_to_true,
    anomaly_mean_to_true,
    position_perifocal,
    velocity_perifocal,
    state_perifocal,
)

from .frames import (
    rotation_inertial_to_perifocal,
    rotation_perifocal_to_inertial,
    state_perifocal_to_inertial,
    rotation_ecliptic_to_equatorial,
    rotation_equatorial_to_ecliptic,
    state_ecliptic_to_equatorial,
    state_equatorial_to_ecliptic,
)

from .ephemeris import OrbitEvaluation, evaluate_elements, compute_state_vector

from .catalog import load_element_table, load_planets, stack_elements

__all__ = [
    # Config
    "set_dtype",
    "get_dtype",
    # Constants
    "TWO_PI",
    "DEG2RAD",
    "RAD2DEG",
    "AS2RAD",
    "RAD2AS",
    "JD_J2000",
    "DAYS_PER_JULIAN_CENTURY",
    "AU_KM",
    "GM_SUN",
    "OBLIQUITY_J2000",
    # Types
    "StateVector",
    "Epoch",
    # Time
    "julian_day_number",
    "fractional_hours",
    "julian_date",
    "julian_centuries",
    "caldate_to_jd",
    # Utilities and linear algebra
    "posmod",
    "dot",
    "mat_vec",
    "mat_mul",
    "transpose",
    "Rx",
    "Rz",
    "rotate_x",
    "rotate_z",
    # Elements
    "ElementRecordError",
    "OrbitalElementSet",
    "InterpolatedElements",
    "interpolate_element",
    "interpolate_elements",
    "validate_elements",
    # Orbits
    "angular_momentum",
    "argument_of_periapsis",
    "mean_anomaly",
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
    # Frames
    "rotation_inertial_to_perifocal",
    "rotation_perifocal_to_inertial",
    "state_perifocal_to_inertial",
    "rotation_ecliptic_to_equatorial",
    "rotation_equatorial_to_ecliptic",
    "state_ecliptic_to_equatorial",
    "state_equatorial_to_ecliptic",
    # Ephemeris
    "OrbitEvaluation",
    "evaluate_elements",
    "compute_state_vector",
    # Catalog
    "load_element_table",
    "load_planets",
    "stack_elements",
]
