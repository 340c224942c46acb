"""Shared utility functions for angle wrapping and unit conversions.

These helpers wrap the ``use_degrees`` convention used throughout
solarplanets, providing JAX-traceable degree/radian conversion via
``jnp.where``.
"""

from jax import Array
import jax.numpy as jnp
from jax.typing import ArrayLike


def to_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle to radians if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle value.
        use_degrees (bool): If ``True``, treat ``angle`` as degrees and convert.

    Returns:
        Angle in radians.
    """
    return jnp.where(use_degrees, jnp.deg2rad(angle), angle)


def from_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle from radians to degrees if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle in radians.
        use_degrees (bool): If ``True``, convert to degrees.

    Returns:
        Angle in radians or degrees.
    """
    return jnp.where(use_degrees, jnp.rad2deg(angle), angle)


def posmod(a: ArrayLike, b: ArrayLike) -> Array:
    """Floating-point modulus evaluated into the range ``[0, b)``.

    Unlike a truncating remainder, the result is never negative for
    ``b > 0``.  A negative remainder so small that adding ``b`` rounds to
    ``b`` itself is folded back to zero.

    Args:
        a (ArrayLike): Dividend, any real value.
        b (ArrayLike): Modulus, strictly positive.

    Returns:
        ``a mod b`` within ``[0, b)``.

    Examples:
        ```python
        import jax.numpy as jnp
        from solarplanets.utils import posmod
        posmod(-0.5 * jnp.pi, 2.0 * jnp.pi)  # 1.5 pi
        ```
    """
    c = jnp.fmod(a, b)
    c = jnp.where(c < 0, c + b, c)
    return jnp.where(c >= b, c - b, c)
