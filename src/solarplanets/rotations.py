"""Elementary rotation matrices about the principal axes.

Two conventions are provided and must not be interchanged:

- ``Rx`` and ``Rz`` are **frame transformations** (passive rotations).
  They re-express a fixed vector in a coordinate frame that has been
  rotated by ``angle`` about the axis.
- ``rotate_x`` and ``rotate_z`` are **vector rotations** (active
  rotations). They rotate a vector by ``angle`` inside a fixed frame.

Each active matrix is built as the transpose of its passive counterpart so
the two can never drift apart.
"""

import jax.numpy as jnp

from solarplanets.config import get_dtype
from solarplanets.utils import to_radians


def Rx(angle: float, use_degrees: bool = False) -> jnp.ndarray:
    """Frame transformation matrix, for a rotation about the x-axis.

    Args:
        angle (float): Counter-clockwise angle of rotation of the frame as
            viewed looking back along the positive direction of the axis.
        use_degrees (bool): Handle input in degrees. Default: ``False``

    Returns:
        jnp.ndarray: 3x3 frame transformation matrix.

    References:

        1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and Applications*, 2012, p.27.
    """
    angle = to_radians(jnp.asarray(angle, dtype=get_dtype()), use_degrees)

    c = jnp.cos(angle)
    s = jnp.sin(angle)
    one = jnp.ones_like(c)
    zero = jnp.zeros_like(c)

    return jnp.array([[ one, zero, zero],
                      [zero,   +c,   +s],
                      [zero,   -s,   +c]])


def Rz(angle: float, use_degrees: bool = False) -> jnp.ndarray:
    """Frame transformation matrix, for a rotation about the z-axis.

    Args:
        angle (float): Counter-clockwise angle of rotation of the frame as
            viewed looking back along the positive direction of the axis.
        use_degrees (bool): Handle input in degrees. Default: ``False``

    Returns:
        jnp.ndarray: 3x3 frame transformation matrix.

    References:

        1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and Applications*, 2012, p.27.
    """
    angle = to_radians(jnp.asarray(angle, dtype=get_dtype()), use_degrees)

    c = jnp.cos(angle)
    s = jnp.sin(angle)
    one = jnp.ones_like(c)
    zero = jnp.zeros_like(c)

    return jnp.array([[  +c,   +s, zero],
                      [  -s,   +c, zero],
                      [zero, zero,  one]])


def rotate_x(angle: float, use_degrees: bool = False) -> jnp.ndarray:
    """Vector rotation matrix about the x-axis.

    Rotates a vector counter-clockwise by ``angle`` within a fixed frame.
    Equal to ``Rx(angle).T``.

    Args:
        angle (float): Rotation angle.
        use_degrees (bool): Handle input in degrees. Default: ``False``

    Returns:
        jnp.ndarray: 3x3 rotation matrix.

    Examples:
        ```python
        from solarplanets.rotations import rotate_x
        rotate_x(90.0, use_degrees=True) @ jnp.array([0.0, 1.0, 0.0])  # ~[0, 0, 1]
        ```
    """
    return Rx(angle, use_degrees).T


def rotate_z(angle: float, use_degrees: bool = False) -> jnp.ndarray:
    """Vector rotation matrix about the z-axis.

    Rotates a vector counter-clockwise by ``angle`` within a fixed frame.
    Equal to ``Rz(angle).T``.

    Args:
        angle (float): Rotation angle.
        use_degrees (bool): Handle input in degrees. Default: ``False``

    Returns:
        jnp.ndarray: 3x3 rotation matrix.
    """
    return Rz(angle, use_degrees).T
