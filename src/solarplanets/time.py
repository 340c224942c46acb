from __future__ import annotations

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

from .config import get_dtype
from .constants import DAYS_PER_JULIAN_CENTURY, JD_CALENDAR_OFFSET, JD_J2000


def julian_day_number(year: ArrayLike, month: ArrayLike, day: ArrayLike) -> jax.Array:
    """Compute the Julian Day Number at 0h UT of a Gregorian calendar date.

    Evaluates ``367 Y - INT(7 (Y + INT((M + 9) / 12)) / 4) + INT(275 M / 9)
    + D + 1721013.5`` where ``INT`` truncates toward zero.  Valid for dates
    between 1901 and 2099.

    Args:
        year (ArrayLike): Year of the calendar date.
        month (ArrayLike): Month of the calendar date.
        day (ArrayLike): Day of the calendar date.

    Returns:
        Julian Day Number at 0h UT. Units: *days*

    References:

        1. H. Curtis, *Orbital Mechanics for Engineering Students*, Eq. 5.48.
    """
    y = jnp.asarray(year, dtype=get_dtype())
    m = jnp.asarray(month, dtype=get_dtype())
    d = jnp.asarray(day, dtype=get_dtype())

    return (
        367.0 * y
        - jnp.trunc(7.0 * (y + jnp.trunc((m + 9.0) / 12.0)) / 4.0)
        + jnp.trunc(275.0 * m / 9.0)
        + d
        + JD_CALENDAR_OFFSET
    )


def fractional_hours(hour: ArrayLike, minute: ArrayLike, second: ArrayLike) -> jax.Array:
    """Combine clock fields into decimal universal time hours.

    Args:
        hour (ArrayLike): Hour, within ``[0, 24)``.
        minute (ArrayLike): Minute, within ``[0, 60)``.
        second (ArrayLike): Second including any fraction, within ``[0, 60)``.

    Returns:
        Universal time within ``[0, 24)``. Units: *hours*
    """
    hour = jnp.asarray(hour, dtype=get_dtype())
    minute = jnp.asarray(minute, dtype=get_dtype())
    second = jnp.asarray(second, dtype=get_dtype())
    return hour + minute / 60.0 + second / 3600.0


def julian_date(j0: ArrayLike, ut_hours: ArrayLike) -> jax.Array:
    """Compute the Julian Date from a Julian Day Number and universal time.

    Args:
        j0 (ArrayLike): Julian Day Number at 0h UT, e.g. from :func:`julian_day_number`.
        ut_hours (ArrayLike): Universal time. Units: *hours*

    Returns:
        Julian Date. Units: *days*

    References:

        1. H. Curtis, *Orbital Mechanics for Engineering Students*, Eq. 5.47.
    """
    j0 = jnp.asarray(j0, dtype=get_dtype())
    ut_hours = jnp.asarray(ut_hours, dtype=get_dtype())
    return j0 + ut_hours / 24.0


def julian_centuries(jd: ArrayLike) -> jax.Array:
    """Number of Julian centuries elapsed since J2000.

    Args:
        jd (ArrayLike): Julian Date.

    Returns:
        Julian centuries past 2000-01-01 12:00:00. Negative before J2000.
    """
    jd = jnp.asarray(jd, dtype=get_dtype())
    return (jd - JD_J2000) / DAYS_PER_JULIAN_CENTURY


def caldate_to_jd(
    year: ArrayLike,
    month: ArrayLike,
    day: ArrayLike,
    hour: ArrayLike = 0,
    minute: ArrayLike = 0,
    second: ArrayLike = 0.0,
) -> jax.Array:
    """Convert a calendar date to Julian Date.

    Args:
        year (ArrayLike): Year of the calendar date.
        month (ArrayLike): Month of the calendar date.
        day (ArrayLike): Day of the calendar date.
        hour (ArrayLike): Hour of the calendar date. Default: ``0``
        minute (ArrayLike): Minute of the calendar date. Default: ``0``
        second (ArrayLike): Second of the calendar date. Default: ``0.0``

    Returns:
        Julian Date.
    """
    j0 = julian_day_number(year, month, day)
    return julian_date(j0, fractional_hours(hour, minute, second))
