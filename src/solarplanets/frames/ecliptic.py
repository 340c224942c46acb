"""Ecliptic-equatorial frame transformations.

Heliocentric states produced from planetary mean elements are expressed in
the J2000 ecliptic frame.  These helpers rotate them to the J2000 mean
equator (EME2000/ICRF-aligned axes) and back.

Since both frames are inertial, the transformation is a fixed rotation
about the x-axis by the mean obliquity of the ecliptic, the IAU 2006 value
at J2000: 84381.406 arcseconds (approximately 23.439 deg).
"""

from __future__ import annotations

from jax import Array

from solarplanets._types import StateVector
from solarplanets.constants import AS2RAD, OBLIQUITY_J2000
from solarplanets.linalg import mat_vec
from solarplanets.rotations import Rx

# Mean obliquity of the ecliptic at J2000 in radians
_OBLIQUITY_RAD = OBLIQUITY_J2000 * AS2RAD


def rotation_ecliptic_to_equatorial() -> Array:
    """Compute the 3x3 rotation matrix from ecliptic to equatorial axes.

    Returns the matrix ``Rx(-eps)`` where eps is the J2000 mean obliquity.

    Returns:
        3x3 rotation matrix (ecliptic -> equatorial).
    """
    return Rx(-_OBLIQUITY_RAD)


def rotation_equatorial_to_ecliptic() -> Array:
    """Compute the 3x3 rotation matrix from equatorial to ecliptic axes.

    This is the transpose of :func:`rotation_ecliptic_to_equatorial`.

    Returns:
        3x3 rotation matrix (equatorial -> ecliptic).
    """
    return Rx(_OBLIQUITY_RAD)


def state_ecliptic_to_equatorial(state: StateVector) -> StateVector:
    """Rotate an ecliptic position/velocity pair to equatorial axes.

    Args:
        state: Ecliptic state. Units: *km*, *km/s*

    Returns:
        StateVector: Equatorial state in the same units.

    Examples:
        ```python
        from solarplanets import compute_state_vector, load_planets
        from solarplanets.frames import state_ecliptic_to_equatorial
        ecl = compute_state_vector(load_planets()["mars"], "2003-08-27T12:00:00Z")
        eq = state_ecliptic_to_equatorial(ecl)
        ```
    """
    R = rotation_ecliptic_to_equatorial()
    return StateVector(mat_vec(R, state.position), mat_vec(R, state.velocity))


def state_equatorial_to_ecliptic(state: StateVector) -> StateVector:
    """Rotate an equatorial position/velocity pair to ecliptic axes.

    Args:
        state: Equatorial state. Units: *km*, *km/s*

    Returns:
        StateVector: Ecliptic state in the same units.
    """
    R = rotation_equatorial_to_ecliptic()
    return StateVector(mat_vec(R, state.position), mat_vec(R, state.velocity))
