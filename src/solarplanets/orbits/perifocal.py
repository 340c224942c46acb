"""Position and velocity in the perifocal (PQW) frame.

The perifocal frame is fixed to the orbital plane: P points toward
periapsis, W is along the angular momentum vector and Q completes the
right-handed set.  Both vectors therefore have a zero W component.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from solarplanets._types import StateVector
from solarplanets.config import get_dtype
from solarplanets.constants import GM_SUN


def position_perifocal(h: ArrayLike, e: ArrayLike, nu: ArrayLike, gm: float = GM_SUN) -> Array:
    """Compute the position vector in the perifocal frame.

    Args:
        h: Angular momentum magnitude. Units: *km^2/s*
        e: Eccentricity. Dimensionless.
        nu: True anomaly. Units: *rad*
        gm: Gravitational parameter of the central body. Default: the Sun's.
            Units: *km^3/s^2*

    Returns:
        Position ``(h^2/gm) / (1 + e cos(nu)) * [cos(nu), sin(nu), 0]``.
            Units: *km*

    References:
        H. Curtis, *Orbital Mechanics for Engineering Students*, Eq. 4.45.
    """
    h = jnp.asarray(h, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())
    nu = jnp.asarray(nu, dtype=get_dtype())

    r = h * h / gm / (1.0 + e * jnp.cos(nu))
    return jnp.stack([r * jnp.cos(nu), r * jnp.sin(nu), jnp.zeros_like(r)], axis=-1)


def velocity_perifocal(h: ArrayLike, e: ArrayLike, nu: ArrayLike, gm: float = GM_SUN) -> Array:
    """Compute the velocity vector in the perifocal frame.

    Args:
        h: Angular momentum magnitude. Units: *km^2/s*
        e: Eccentricity. Dimensionless.
        nu: True anomaly. Units: *rad*
        gm: Gravitational parameter of the central body. Default: the Sun's.
            Units: *km^3/s^2*

    Returns:
        Velocity ``(gm/h) * [-sin(nu), e + cos(nu), 0]``. Units: *km/s*

    References:
        H. Curtis, *Orbital Mechanics for Engineering Students*, Eq. 4.46.
    """
    h = jnp.asarray(h, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())
    nu = jnp.asarray(nu, dtype=get_dtype())

    c = gm / h
    return jnp.stack([-c * jnp.sin(nu), c * (e + jnp.cos(nu)), jnp.zeros_like(c)], axis=-1)


def state_perifocal(h: ArrayLike, e: ArrayLike, nu: ArrayLike, gm: float = GM_SUN) -> StateVector:
    """Compute position and velocity in the perifocal frame.

    Args:
        h: Angular momentum magnitude. Units: *km^2/s*
        e: Eccentricity. Dimensionless.
        nu: True anomaly. Units: *rad*
        gm: Gravitational parameter of the central body. Default: the Sun's.

    Returns:
        StateVector: Perifocal position (km) and velocity (km/s).

    Examples:
        ```python
        import jax.numpy as jnp
        from solarplanets.orbits import state_perifocal
        r, v = state_perifocal(80000.0, 1.4, jnp.deg2rad(30.0), gm=398600.0)
        ```
    """
    return StateVector(
        position_perifocal(h, e, nu, gm),
        velocity_perifocal(h, e, nu, gm),
    )
