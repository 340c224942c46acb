"""Small fixed-size linear algebra primitives.

Vectors are length-3 arrays and matrices are 3x3 arrays.  Every function
returns a new array and never modifies its inputs, so the helpers compose
freely under ``jax.jit`` and ``jax.vmap``.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from solarplanets.config import get_dtype


def dot(lhs: ArrayLike, rhs: ArrayLike) -> Array:
    """Dot product of two vectors of the same length.

    Args:
        lhs: Vector of fixed length.
        rhs: Vector of the same length.

    Returns:
        Scalar dot product.
    """
    lhs = jnp.asarray(lhs, dtype=get_dtype())
    rhs = jnp.asarray(rhs, dtype=get_dtype())
    return jnp.sum(lhs * rhs, axis=-1)


def mat_vec(matrix: ArrayLike, vector: ArrayLike) -> Array:
    """Matrix-vector product ``matrix @ vector``.

    Args:
        matrix: 3x3 matrix.
        vector: Length-3 vector.

    Returns:
        Length-3 vector.
    """
    matrix = jnp.asarray(matrix, dtype=get_dtype())
    vector = jnp.asarray(vector, dtype=get_dtype())
    return matrix @ vector


def mat_mul(lhs: ArrayLike, rhs: ArrayLike) -> Array:
    """Matrix-matrix product ``lhs @ rhs``.

    Args:
        lhs: 3x3 matrix.
        rhs: 3x3 matrix.

    Returns:
        3x3 matrix.
    """
    lhs = jnp.asarray(lhs, dtype=get_dtype())
    rhs = jnp.asarray(rhs, dtype=get_dtype())
    return lhs @ rhs


def transpose(matrix: ArrayLike) -> Array:
    """Transpose of a 2-D matrix.

    The matrix does not have to be square: an ``(M, N)`` input gives an
    ``(N, M)`` output.

    Args:
        matrix: Matrix of shape ``(M, N)``.

    Returns:
        Matrix of shape ``(N, M)``.
    """
    matrix = jnp.asarray(matrix, dtype=get_dtype())
    return jnp.swapaxes(matrix, -1, -2)
