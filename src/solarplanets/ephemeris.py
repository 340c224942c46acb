"""Heliocentric state vectors from mean orbital elements.

Evaluates a body's linearly-drifting mean elements at a UTC instant and
returns its position and velocity in the heliocentric J2000 ecliptic frame:

1. calendar instant -> Julian Date -> Julian centuries from J2000
2. element extrapolation and unit normalization
3. angular momentum, argument of periapsis and mean anomaly
4. Kepler's equation for the eccentric, then true, anomaly
5. perifocal position and velocity
6. rotation from perifocal to inertial axes

Every step is a pure JAX function, so :func:`compute_state_vector` can be
compiled with ``jax.jit`` and batched with ``jax.vmap`` over stacked
element sets or epochs.

References:
    H. Curtis, *Orbital Mechanics for Engineering Students*, Algorithm 8.1.
"""

from __future__ import annotations

import datetime
from collections.abc import Mapping
from typing import NamedTuple

from jax import Array

from solarplanets._types import StateVector
from solarplanets.constants import GM_SUN
from solarplanets.elements import InterpolatedElements, OrbitalElementSet, interpolate_elements
from solarplanets.epoch import Epoch
from solarplanets.frames.perifocal import state_perifocal_to_inertial
from solarplanets.orbits.geometry import angular_momentum, argument_of_periapsis, mean_anomaly
from solarplanets.orbits.kepler import (
    KeplerSolution,
    anomaly_eccentric_to_true,
    check_convergence,
    solve_kepler,
)
from solarplanets.orbits.perifocal import state_perifocal


class OrbitEvaluation(NamedTuple):
    """Every intermediate quantity of one element-set evaluation.

    Attributes:
        julian_centuries: Time since J2000. Units: *Julian centuries*
        elements: Elements at the evaluation time, in km and radians.
        angular_momentum: Angular momentum magnitude. Units: *km^2/s*
        argument_of_periapsis: Argument of periapsis. Units: *rad*
        mean_anomaly: Mean anomaly. Units: *rad*
        kepler: Kepler solve, including its convergence status.
        true_anomaly: True anomaly. Units: *rad*
        perifocal: State in the perifocal frame.
        inertial: State in the heliocentric ecliptic frame.
    """

    julian_centuries: Array
    elements: InterpolatedElements
    angular_momentum: Array
    argument_of_periapsis: Array
    mean_anomaly: Array
    kepler: KeplerSolution
    true_anomaly: Array
    perifocal: StateVector
    inertial: StateVector


def _as_elements(elements: OrbitalElementSet | Mapping[str, object]) -> OrbitalElementSet:
    if isinstance(elements, OrbitalElementSet):
        return elements
    return OrbitalElementSet.from_mapping(elements)


def evaluate_elements(
    elements: OrbitalElementSet | Mapping[str, object],
    epoch: Epoch | datetime.datetime | str,
    gm: float = GM_SUN,
) -> OrbitEvaluation:
    """Evaluate an element set at an instant, keeping every intermediate.

    Args:
        elements: Element set, or a mapping in the element-table layout.
        epoch: UTC instant as an :class:`~solarplanets.epoch.Epoch`, a
            ``datetime`` or an ISO 8601 string.
        gm: Gravitational parameter of the central body. Default: the Sun's.
            Units: *km^3/s^2*

    Returns:
        OrbitEvaluation: Intermediate quantities and the final state.
    """
    elements = _as_elements(elements)
    epoch = Epoch.coerce(epoch)

    T = epoch.julian_centuries()
    current = interpolate_elements(elements, T)

    h = angular_momentum(current.a, current.e, gm)
    aop = argument_of_periapsis(current.lop, current.raan)
    M = mean_anomaly(current.ml, current.lop)

    kepler = solve_kepler(M, current.e)
    nu = anomaly_eccentric_to_true(kepler.eccentric_anomaly, current.e)

    perifocal = state_perifocal(h, current.e, nu, gm)
    inertial = state_perifocal_to_inertial(
        perifocal.position, perifocal.velocity, current.raan, current.inc, aop
    )

    return OrbitEvaluation(
        julian_centuries=T,
        elements=current,
        angular_momentum=h,
        argument_of_periapsis=aop,
        mean_anomaly=M,
        kepler=kepler,
        true_anomaly=nu,
        perifocal=perifocal,
        inertial=inertial,
    )


def compute_state_vector(
    elements: OrbitalElementSet | Mapping[str, object],
    epoch: Epoch | datetime.datetime | str,
    gm: float = GM_SUN,
    *,
    strict: bool = False,
) -> StateVector:
    """Compute the heliocentric state of a body from its mean elements.

    Args:
        elements: Element set, or a mapping in the element-table layout.
        epoch: UTC instant as an :class:`~solarplanets.epoch.Epoch`, a
            ``datetime`` or an ISO 8601 string.
        gm: Gravitational parameter of the central body. Default: the Sun's.
            Units: *km^3/s^2*
        strict: If ``True``, raise when Kepler's equation hit the iteration
            cap instead of returning the last iterate's state. Requires
            concrete values, so leave it ``False`` under ``jax.jit``.

    Returns:
        StateVector: Position (km) and velocity (km/s) in the heliocentric
            J2000 ecliptic frame.

    Raises:
        KeplerConvergenceError: If ``strict`` and the solver did not converge.
        ElementRecordError: If ``elements`` is a mapping with missing or
            non-numeric fields.

    Examples:
        ```python
        from solarplanets import compute_state_vector
        mars = {
            "a_au": 1.52366231, "da_au": -0.00007221,
            "e": 0.09341233, "de": 0.00011902,
            "inc_deg": 1.85061, "dinc_sec": -25.47,
            "raan_deg": 49.57854, "draan_sec": -1020.19,
            "lop_deg": 336.04084, "dlop_sec": 1560.78,
            "ml_deg": 355.45332, "dml_sec": 68905103.78,
        }
        r, v = compute_state_vector(mars, "2003-08-27T12:00:00Z")
        ```
    """
    evaluation = evaluate_elements(elements, epoch, gm)
    if strict:
        check_convergence(evaluation.kepler)
    return evaluation.inertial
