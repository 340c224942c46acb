"""Mean orbital element records and their linear extrapolation in time.

A body's orbit is described by six elements referenced to J2000 and six
secular drift rates per Julian century:

    element(T) = element_0 + element_rate * T

where *T* is Julian centuries from J2000.  The record types are
:class:`~typing.NamedTuple` instances, which JAX treats as pytrees, so a
stack of records can be mapped over with ``jax.vmap``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from solarplanets.config import get_dtype
from solarplanets.constants import AS2RAD, AU_KM, DEG2RAD, TWO_PI
from solarplanets.utils import posmod

logger = logging.getLogger(__name__)


class ElementRecordError(ValueError):
    """Raised when an element record is incomplete or outside the model's domain."""


class OrbitalElementSet(NamedTuple):
    """Mean orbital elements of a body at J2000 with their drift rates.

    Angular rates are in arcseconds per Julian century; all other rates are
    in the element's own unit per Julian century.

    Attributes:
        a_au: Semi-major axis. Units: *AU*
        a_rate_au: Semi-major axis rate. Units: *AU/century*
        e: Eccentricity. Dimensionless, within ``[0, 1)``.
        e_rate: Eccentricity rate. Units: *1/century*
        inc_deg: Inclination. Units: *deg*
        inc_rate_as: Inclination rate. Units: *arcsec/century*
        raan_deg: Right ascension (longitude) of the ascending node. Units: *deg*
        raan_rate_as: Ascending node rate. Units: *arcsec/century*
        lop_deg: Longitude of periapsis. Units: *deg*
        lop_rate_as: Longitude of periapsis rate. Units: *arcsec/century*
        ml_deg: Mean longitude. Units: *deg*
        ml_rate_as: Mean longitude rate. Units: *arcsec/century*
    """

    a_au: ArrayLike
    a_rate_au: ArrayLike
    e: ArrayLike
    e_rate: ArrayLike
    inc_deg: ArrayLike
    inc_rate_as: ArrayLike
    raan_deg: ArrayLike
    raan_rate_as: ArrayLike
    lop_deg: ArrayLike
    lop_rate_as: ArrayLike
    ml_deg: ArrayLike
    ml_rate_as: ArrayLike

    @classmethod
    def from_mapping(cls, record: Mapping[str, object]) -> OrbitalElementSet:
        """Build a record from the external element-table layout.

        The table layout uses the keys ``a_au, da_au, e, de, inc_deg,
        dinc_sec, raan_deg, draan_sec, lop_deg, dlop_sec, ml_deg,
        dml_sec``.  Extra keys are ignored.

        Args:
            record: Mapping of table keys to numeric values.

        Returns:
            OrbitalElementSet: Record with float fields.

        Raises:
            ElementRecordError: If a key is missing or a value is not numeric.

        Examples:
            ```python
            from solarplanets.elements import OrbitalElementSet
            mars = OrbitalElementSet.from_mapping({
                "a_au": 1.52366231, "da_au": -0.00007221,
                "e": 0.09341233, "de": 0.00011902,
                "inc_deg": 1.85061, "dinc_sec": -25.47,
                "raan_deg": 49.57854, "draan_sec": -1020.19,
                "lop_deg": 336.04084, "dlop_sec": 1560.78,
                "ml_deg": 355.45332, "dml_sec": 68905103.78,
            })
            ```
        """
        missing = [key for key in _TABLE_KEYS if key not in record]
        if missing:
            raise ElementRecordError(f"Element record is missing keys: {', '.join(missing)}")

        values = []
        for key in _TABLE_KEYS:
            try:
                values.append(float(record[key]))
            except (TypeError, ValueError) as exc:
                raise ElementRecordError(
                    f"Element record field {key!r} is not numeric: {record[key]!r}"
                ) from exc
        return cls(*values)

    def to_mapping(self) -> dict[str, float]:
        """Return a scalar record in the external element-table layout."""
        return {key: float(value) for key, value in zip(_TABLE_KEYS, self)}


# External table keys, in OrbitalElementSet field order
_TABLE_KEYS: tuple[str, ...] = (
    "a_au",
    "da_au",
    "e",
    "de",
    "inc_deg",
    "dinc_sec",
    "raan_deg",
    "draan_sec",
    "lop_deg",
    "dlop_sec",
    "ml_deg",
    "dml_sec",
)


class InterpolatedElements(NamedTuple):
    """Orbital elements evaluated at a given time, in working units.

    Attributes:
        a: Semi-major axis. Units: *km*
        e: Eccentricity. Dimensionless.
        inc: Inclination, within ``[0, 2pi)``. Units: *rad*
        raan: Right ascension of the ascending node, within ``[0, 2pi)``. Units: *rad*
        lop: Longitude of periapsis, within ``[0, 2pi)``. Units: *rad*
        ml: Mean longitude, within ``[0, 2pi)``. Units: *rad*
    """

    a: Array
    e: Array
    inc: Array
    raan: Array
    lop: Array
    ml: Array


def interpolate_element(value0: ArrayLike, rate: ArrayLike, T: ArrayLike) -> Array:
    """Linearly extrapolate an element from its epoch value.

    Args:
        value0: Element value at J2000.
        rate: Element rate per Julian century, in the unit of ``value0``.
        T: Julian centuries since J2000.

    Returns:
        ``value0 + rate * T``.
    """
    value0 = jnp.asarray(value0, dtype=get_dtype())
    rate = jnp.asarray(rate, dtype=get_dtype())
    T = jnp.asarray(T, dtype=get_dtype())
    return value0 + rate * T


def _interpolate_angle(value_deg, rate_as, T):
    return posmod(interpolate_element(value_deg * DEG2RAD, rate_as * AS2RAD, T), TWO_PI)


def interpolate_elements(elements: OrbitalElementSet, T: ArrayLike) -> InterpolatedElements:
    """Evaluate an element set at ``T`` Julian centuries from J2000.

    The semi-major axis is converted to kilometres and the angles to
    radians before extrapolation; the four angles are then wrapped into
    ``[0, 2pi)``.

    Args:
        elements: Element set referenced to J2000.
        T: Julian centuries since J2000.

    Returns:
        InterpolatedElements: Elements at ``T`` in km and radians.
    """
    return InterpolatedElements(
        a=interpolate_element(
            jnp.asarray(elements.a_au, dtype=get_dtype()) * AU_KM,
            jnp.asarray(elements.a_rate_au, dtype=get_dtype()) * AU_KM,
            T,
        ),
        e=interpolate_element(elements.e, elements.e_rate, T),
        inc=_interpolate_angle(elements.inc_deg, elements.inc_rate_as, T),
        raan=_interpolate_angle(elements.raan_deg, elements.raan_rate_as, T),
        lop=_interpolate_angle(elements.lop_deg, elements.lop_rate_as, T),
        ml=_interpolate_angle(elements.ml_deg, elements.ml_rate_as, T),
    )


def validate_elements(elements: OrbitalElementSet, name: str | None = None) -> OrbitalElementSet:
    """Check that a scalar element record lies in the elliptical-orbit domain.

    A negative J2000 inclination is accepted but logged: some published
    tables only reproduce reference results with inverted inclination signs,
    so the sign convention of such a record should be confirmed at the
    source.

    Args:
        elements: Record to check.
        name: Body name used in messages. Default: ``None``

    Returns:
        OrbitalElementSet: ``elements`` unchanged.

    Raises:
        ElementRecordError: If a field is not finite, the semi-major axis is
            not positive, or the eccentricity is outside ``[0, 1)``.
    """
    label = name or "element record"

    for field, value in zip(OrbitalElementSet._fields, elements):
        if not math.isfinite(float(value)):
            raise ElementRecordError(f"{label}: field {field!r} is not finite ({value!r})")

    if float(elements.a_au) <= 0.0:
        raise ElementRecordError(f"{label}: semi-major axis must be positive, got {elements.a_au}")

    if not 0.0 <= float(elements.e) < 1.0:
        raise ElementRecordError(
            f"{label}: eccentricity {elements.e} is outside the elliptical range [0, 1)"
        )

    if float(elements.inc_deg) < 0.0:
        logger.warning(
            "%s: negative inclination %.8f deg at J2000; the source table may use an "
            "inverted inclination sign convention",
            label,
            float(elements.inc_deg),
        )

    return elements
