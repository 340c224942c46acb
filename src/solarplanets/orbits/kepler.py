"""Kepler's equation and anomaly conversions for elliptical orbits.

The mean-to-eccentric conversion is a Newton-Raphson solver written with
``jax.lax.while_loop`` so that it stays traceable under ``jax.jit`` and
``jax.vmap``.  The loop stops on a correction smaller than the tolerance or
on an iteration cap, and the solver reports which of the two happened in a
:class:`KeplerSolution` instead of hiding it.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

import jax
import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from solarplanets.config import get_dtype, get_kepler_tolerance
from solarplanets.constants import TWO_PI
from solarplanets.utils import from_radians, posmod, to_radians

logger = logging.getLogger(__name__)

KEPLER_MAX_ITERATIONS: int = 1000
"""Iteration cap of the Newton-Raphson solver."""


class KeplerConvergenceError(RuntimeError):
    """Raised when Kepler's equation was not solved within the iteration budget.

    Attributes:
        iterations: Iterations performed.
        eccentric_anomaly: Last iterate. Units: *rad*
        residual: ``E - e sin(E) - M`` at the last iterate. Units: *rad*
    """

    def __init__(self, iterations, eccentric_anomaly, residual):
        self.iterations = iterations
        self.eccentric_anomaly = eccentric_anomaly
        self.residual = residual
        super().__init__(
            f"Kepler's equation did not converge after {iterations} iterations "
            f"(last iterate {eccentric_anomaly}, residual {residual})"
        )


class KeplerSolution(NamedTuple):
    """Outcome of solving Kepler's equation.

    Attributes:
        eccentric_anomaly: Final iterate ``E``. Units: *rad*
        iterations: Number of Newton-Raphson updates applied.
        correction: Magnitude of the last update. Units: *rad*
        residual: ``E - e sin(E) - M`` at the final iterate. Units: *rad*
        converged: ``True`` if the last correction fell below the tolerance,
            ``False`` if the iteration cap was reached first.
    """

    eccentric_anomaly: Array
    iterations: Array
    correction: Array
    residual: Array
    converged: Array


def solve_kepler(
    anm_mean: ArrayLike,
    e: ArrayLike,
    tol: float | None = None,
    max_iter: int = KEPLER_MAX_ITERATIONS,
) -> KeplerSolution:
    """Solve Kepler's equation ``E - e sin(E) = M`` for the eccentric anomaly.

    Starts from ``M + e/2`` when ``M < pi`` and from ``M - e/2`` otherwise,
    and applies ``E <- E - (E - e sin E - M) / (1 - e cos E)`` until the
    update is smaller than ``tol`` or ``max_iter`` updates have been made.

    Args:
        anm_mean: Mean anomaly, any real value. Units: *rad*
        e: Eccentricity, within ``[0, 1)``.
        tol: Convergence tolerance on the update. Default: the dtype-adaptive
            value of :func:`solarplanets.config.get_kepler_tolerance`.
        max_iter: Iteration cap. Default: ``1000``

    Returns:
        KeplerSolution: Final iterate together with its convergence status.

    References:
        H. Curtis, *Orbital Mechanics for Engineering Students*, Algorithm 3.1.

    Examples:
        ```python
        from solarplanets.orbits import solve_kepler
        sol = solve_kepler(3.6029, 0.37255)
        sol.eccentric_anomaly  # ~3.4794
        ```
    """
    if tol is None:
        tol = get_kepler_tolerance()

    M = jnp.asarray(anm_mean, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())

    E0 = jnp.where(M < jnp.pi, M + 0.5 * e, M - 0.5 * e)

    def keep_going(carry):
        n, _, step = carry
        return (jnp.abs(step) >= tol) & (n < max_iter)

    def newton_step(carry):
        n, E, _ = carry
        step = (E - e * jnp.sin(E) - M) / (1.0 - e * jnp.cos(E))
        return n + 1, E - step, step

    init = (jnp.int32(0), E0, jnp.full_like(E0, jnp.inf))
    n, E, step = jax.lax.while_loop(keep_going, newton_step, init)

    correction = jnp.abs(step)
    return KeplerSolution(
        eccentric_anomaly=E,
        iterations=n,
        correction=correction,
        residual=E - e * jnp.sin(E) - M,
        converged=correction < tol,
    )


def check_convergence(solution: KeplerSolution) -> KeplerSolution:
    """Raise if any entry of a Kepler solution hit the iteration cap.

    Must be called outside of ``jax.jit``, since it inspects concrete
    values.  Batched solutions are accepted; the first failing entry is
    reported.

    Args:
        solution: Result of :func:`solve_kepler`.

    Returns:
        KeplerSolution: ``solution`` unchanged.

    Raises:
        KeplerConvergenceError: If ``solution.converged`` is not all true.
    """
    converged = jnp.asarray(solution.converged)
    if bool(jnp.all(converged)):
        return solution

    idx = int(jnp.argmin(converged.ravel().astype(jnp.int32)))
    iterations = int(jnp.ravel(solution.iterations)[idx])
    anomaly = float(jnp.ravel(solution.eccentric_anomaly)[idx])
    residual = float(jnp.ravel(solution.residual)[idx])
    logger.error(
        "Kepler solver stopped after %d iterations with residual %.3e",
        iterations,
        residual,
    )
    raise KeplerConvergenceError(iterations, anomaly, residual)


def anomaly_mean_to_eccentric(anm_mean: ArrayLike, e: ArrayLike, use_degrees: bool = False) -> Array:
    """Convert mean anomaly to eccentric anomaly.

    Thin wrapper over :func:`solve_kepler` returning only the anomaly.  Use
    :func:`solve_kepler` directly when the convergence status matters.

    Args:
        anm_mean: Mean anomaly. Units: *rad* or *deg*
        e: Eccentricity. Dimensionless.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        Eccentric anomaly. Units: *rad* or *deg*
    """
    M = to_radians(jnp.asarray(anm_mean, dtype=get_dtype()), use_degrees)
    E = solve_kepler(M, e).eccentric_anomaly
    return from_radians(E, use_degrees)


def anomaly_eccentric_to_mean(anm_ecc: ArrayLike, e: ArrayLike, use_degrees: bool = False) -> Array:
    """Convert eccentric anomaly to mean anomaly.

    Applies Kepler's equation: ``M = E - e * sin(E)``.

    Args:
        anm_ecc: Eccentric anomaly. Units: *rad* or *deg*
        e: Eccentricity. Dimensionless.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        Mean anomaly. Units: *rad* or *deg*
    """
    E = to_radians(jnp.asarray(anm_ecc, dtype=get_dtype()), use_degrees)
    e = jnp.asarray(e, dtype=get_dtype())
    return from_radians(E - e * jnp.sin(E), use_degrees)


def anomaly_eccentric_to_true(anm_ecc: ArrayLike, e: ArrayLike, use_degrees: bool = False) -> Array:
    """Convert eccentric anomaly to true anomaly.

    Uses the half-angle relation ``tan(nu/2) = sqrt((1+e)/(1-e)) tan(E/2)``
    through a two-argument arctangent, then wraps the result into one full
    turn.

    Args:
        anm_ecc: Eccentric anomaly. Units: *rad* or *deg*
        e: Eccentricity. Dimensionless.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        True anomaly within ``[0, 2pi)``. Units: *rad* or *deg*

    References:
        H. Curtis, *Orbital Mechanics for Engineering Students*, Eq. 3.13.
    """
    E = to_radians(jnp.asarray(anm_ecc, dtype=get_dtype()), use_degrees)
    e = jnp.asarray(e, dtype=get_dtype())

    nu = 2.0 * jnp.arctan2(jnp.sqrt(1.0 + e) * jnp.tan(0.5 * E), jnp.sqrt(1.0 - e))
    return from_radians(posmod(nu, TWO_PI), use_degrees)


def anomaly_mean_to_true(anm_mean: ArrayLike, e: ArrayLike, use_degrees: bool = False) -> Array:
    """Convert mean anomaly to true anomaly.

    Composite conversion: mean -> eccentric -> true.

    Args:
        anm_mean: Mean anomaly. Units: *rad* or *deg*
        e: Eccentricity. Dimensionless.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        True anomaly. Units: *rad* or *deg*
    """
    return anomaly_eccentric_to_true(
        anomaly_mean_to_eccentric(anm_mean, e, use_degrees),
        e,
        use_degrees,
    )
