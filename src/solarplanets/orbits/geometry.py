"""Orbit shape and orientation quantities derived from mean elements.

All functions are closed-form, total, and compatible with ``jax.jit``,
``jax.vmap`` and ``jax.grad``.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from solarplanets.config import get_dtype
from solarplanets.constants import GM_SUN, TWO_PI
from solarplanets.utils import from_radians, posmod, to_radians


def angular_momentum(a: ArrayLike, e: ArrayLike, gm: float = GM_SUN) -> Array:
    """Compute the specific angular momentum of an elliptical orbit.

    Args:
        a: Semi-major axis. Units: *km*
        e: Eccentricity. Dimensionless.
        gm: Gravitational parameter of the central body. Default: the Sun's.
            Units: *km^3/s^2*

    Returns:
        Angular momentum magnitude ``sqrt(gm * a * (1 - e^2))``. Units: *km^2/s*

    Examples:
        ```python
        from solarplanets.orbits import angular_momentum
        h = angular_momentum(8578.0, 0.2098, gm=398600.0)  # ~57172 km^2/s
        ```
    """
    a = jnp.asarray(a, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())
    return jnp.sqrt(gm * a * (1.0 - e * e))


def argument_of_periapsis(lop: ArrayLike, raan: ArrayLike, use_degrees: bool = False) -> Array:
    """Compute the argument of periapsis from the longitude of periapsis.

    Args:
        lop: Longitude of periapsis. Units: *rad* or *deg*
        raan: Right ascension of the ascending node. Units: *rad* or *deg*
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        Argument of periapsis within one full turn. Units: *rad* or *deg*
    """
    lop = to_radians(jnp.asarray(lop, dtype=get_dtype()), use_degrees)
    raan = to_radians(jnp.asarray(raan, dtype=get_dtype()), use_degrees)
    return from_radians(posmod(lop - raan, TWO_PI), use_degrees)


def mean_anomaly(ml: ArrayLike, lop: ArrayLike, use_degrees: bool = False) -> Array:
    """Compute the mean anomaly from the mean longitude.

    Args:
        ml: Mean longitude. Units: *rad* or *deg*
        lop: Longitude of periapsis. Units: *rad* or *deg*
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        Mean anomaly within one full turn. Units: *rad* or *deg*
    """
    ml = to_radians(jnp.asarray(ml, dtype=get_dtype()), use_degrees)
    lop = to_radians(jnp.asarray(lop, dtype=get_dtype()), use_degrees)
    return from_radians(posmod(ml - lop, TWO_PI), use_degrees)
