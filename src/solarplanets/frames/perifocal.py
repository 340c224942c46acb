"""Perifocal-inertial frame transformations.

The inertial-to-perifocal transformation is the 3-1-3 sequence of frame
rotations ``Rz(aop) @ Rx(inc) @ Rz(raan)``: the node rotation is applied
first, then the inclination, then the argument of periapsis.  Its inverse,
perifocal-to-inertial, is the transpose, since each factor is orthonormal.

Here "inertial" is the heliocentric ecliptic frame of J2000 for planetary
element sets, but the algebra is the same for any central body.
"""

from __future__ import annotations

from jax import Array
from jax.typing import ArrayLike

from solarplanets._types import StateVector
from solarplanets.linalg import mat_mul, mat_vec, transpose
from solarplanets.rotations import Rx, Rz


def rotation_inertial_to_perifocal(raan: ArrayLike, inc: ArrayLike, aop: ArrayLike, use_degrees: bool = False) -> Array:
    """Compute the 3x3 frame transformation from inertial to perifocal axes.

    Args:
        raan: Right ascension of the ascending node. Units: *rad* or *deg*
        inc: Inclination. Units: *rad* or *deg*
        aop: Argument of periapsis. Units: *rad* or *deg*
        use_degrees: If ``True``, angles are in degrees.

    Returns:
        3x3 matrix ``Rz(aop) @ Rx(inc) @ Rz(raan)``.

    References:
        H. Curtis, *Orbital Mechanics for Engineering Students*, Eq. 4.49.

    Examples:
        ```python
        from solarplanets.frames import rotation_inertial_to_perifocal
        Q = rotation_inertial_to_perifocal(40.0, 30.0, 60.0, use_degrees=True)
        ```
    """
    return mat_mul(
        mat_mul(Rz(aop, use_degrees), Rx(inc, use_degrees)),
        Rz(raan, use_degrees),
    )


def rotation_perifocal_to_inertial(raan: ArrayLike, inc: ArrayLike, aop: ArrayLike, use_degrees: bool = False) -> Array:
    """Compute the 3x3 frame transformation from perifocal to inertial axes.

    This is the transpose of :func:`rotation_inertial_to_perifocal`.

    Args:
        raan: Right ascension of the ascending node. Units: *rad* or *deg*
        inc: Inclination. Units: *rad* or *deg*
        aop: Argument of periapsis. Units: *rad* or *deg*
        use_degrees: If ``True``, angles are in degrees.

    Returns:
        3x3 rotation matrix (perifocal -> inertial).
    """
    return transpose(rotation_inertial_to_perifocal(raan, inc, aop, use_degrees))


def state_perifocal_to_inertial(
    position_pqw: ArrayLike,
    velocity_pqw: ArrayLike,
    raan: ArrayLike,
    inc: ArrayLike,
    aop: ArrayLike,
) -> StateVector:
    """Rotate a perifocal position/velocity pair into the inertial frame.

    Both vectors are rotated identically; no frame-rate term is needed since
    the perifocal frame of a mean-element evaluation is treated as fixed at
    the evaluation instant.

    Args:
        position_pqw: Perifocal position. Units: *km*
        velocity_pqw: Perifocal velocity. Units: *km/s*
        raan: Right ascension of the ascending node. Units: *rad*
        inc: Inclination. Units: *rad*
        aop: Argument of periapsis. Units: *rad*

    Returns:
        StateVector: Inertial position (km) and velocity (km/s).
    """
    Q = rotation_perifocal_to_inertial(raan, inc, aop)
    return StateVector(mat_vec(Q, position_pqw), mat_vec(Q, velocity_pqw))
