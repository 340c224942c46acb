"""Module-wide floating-point precision configuration.

Provides ``set_dtype`` and ``get_dtype`` to control the float dtype used
throughout solarplanets.  The default is ``jnp.float64``: Julian Dates sit
near 2.45e6 and heliocentric positions near 1e8 km, so single precision
loses most of the information the element model carries.  Selecting
``jnp.float64`` automatically enables JAX's 64-bit mode
(``jax_enable_x64``).

Because float64 is the default, **importing solarplanets enables
``jax_enable_x64`` for the whole process**.  Selecting a narrower dtype with
``set_dtype`` does not switch it back off; applications that need 32-bit
JAX defaults elsewhere should call
``jax.config.update("jax_enable_x64", False)`` themselves after choosing
``set_dtype(jnp.float32)``.

Call ``set_dtype`` **before** any JIT compilation.  Under JIT,
``get_dtype()`` runs during tracing and its result is baked into the
compiled program.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

_VALID_DTYPES = (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64)

_dtype = jnp.float64
jax.config.update("jax_enable_x64", True)


def set_dtype(dtype) -> None:
    """Set the module-wide float dtype for solarplanets.

    If *dtype* is ``jnp.float64``, JAX's 64-bit mode is automatically
    enabled via ``jax.config.update("jax_enable_x64", True)``.

    Args:
        dtype: One of ``jnp.float16``, ``jnp.bfloat16``, ``jnp.float32``,
            or ``jnp.float64``.

    Raises:
        ValueError: If *dtype* is not a supported float type.
    """
    global _dtype
    if dtype not in _VALID_DTYPES:
        raise ValueError(
            f"Unsupported dtype {dtype}. Must be one of: "
            f"jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64"
        )
    if dtype == jnp.float64:
        jax.config.update("jax_enable_x64", True)
    _dtype = dtype


def get_dtype():
    """Return the current module-wide float dtype.

    Returns:
        The active float dtype (default ``jnp.float64``).
    """
    return _dtype


def get_kepler_tolerance() -> float:
    """Return the dtype-adaptive convergence tolerance for Kepler's equation.

    The Newton-Raphson solver stops once the magnitude of its last
    correction falls below this value:

    - ``float64``:  1e-8
    - ``float32``:  1e-6
    - ``float16``:  1e-3
    - ``bfloat16``: 1e-3

    Returns:
        float: Tolerance in radians.
    """
    if _dtype == jnp.float64:
        return 1e-8
    if _dtype == jnp.float32:
        return 1e-6
    # float16 and bfloat16
    return 1e-3
