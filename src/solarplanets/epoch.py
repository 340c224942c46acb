"""The epoch module provides the ``Epoch`` record for representing UTC instants.

An ``Epoch`` stores the broken-down UTC calendar fields of an instant.  It
is a :class:`~typing.NamedTuple`, which JAX treats as a pytree, so a stack
of epochs (one array per field) can be passed through ``jax.vmap`` and an
epoch can be an argument of a ``jax.jit`` compiled function.

Conversion to Julian Date goes through the Julian Day Number formula in
:mod:`solarplanets.time`.
"""

from __future__ import annotations

import datetime as _dt
import re
from typing import NamedTuple

import jax
from jax.typing import ArrayLike

from .time import fractional_hours, julian_centuries, julian_date, julian_day_number

# Valid ISO 8601 epoch string patterns
_EPOCH_PATTERNS = [
    # YYYY-MM-DD
    re.compile(r'^(\d{4})-(\d{2})-(\d{2})$'),
    # YYYY-MM-DDTHH:MM:SSZ
    re.compile(r'^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})Z$'),
    # YYYY-MM-DDTHH:MM:SS.fffZ
    re.compile(r'^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})\.(\d+)Z$'),
]


class Epoch(NamedTuple):
    """A single UTC instant as calendar fields.

    Constructors:
        Epoch(2003, 8, 27, 12, 0, 0.0)
        Epoch.from_string("2003-08-27T12:00:00Z")
        Epoch.from_datetime(datetime(2003, 8, 27, 12, tzinfo=timezone.utc))

    Attributes:
        year: Gregorian year.
        month: Month, 1-12.
        day: Day of month.
        hour: Hour, within ``[0, 24)``. Default: ``0``
        minute: Minute, within ``[0, 60)``. Default: ``0``
        second: Second including any fraction, within ``[0, 60)``. Default: ``0.0``
    """

    year: ArrayLike
    month: ArrayLike
    day: ArrayLike
    hour: ArrayLike = 0
    minute: ArrayLike = 0
    second: ArrayLike = 0.0

    @classmethod
    def from_datetime(cls, value: _dt.datetime) -> Epoch:
        """Build an Epoch from a ``datetime``.

        Timezone-aware values are converted to UTC first; naive values are
        taken to already be UTC.  Microseconds are carried in the seconds
        field.

        Args:
            value (datetime.datetime): Instant to convert.

        Returns:
            Epoch: The UTC calendar fields of ``value``.
        """
        if value.tzinfo is not None:
            value = value.astimezone(_dt.timezone.utc)
        return cls(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second + value.microsecond * 1e-6,
        )

    @classmethod
    def from_string(cls, string: str) -> Epoch:
        """Build an Epoch from an ISO 8601 string.

        Supported formats:
            - ``YYYY-MM-DD``
            - ``YYYY-MM-DDTHH:MM:SSZ``
            - ``YYYY-MM-DDTHH:MM:SS.fffZ``

        Args:
            string (str): ISO 8601 date/time string.

        Returns:
            Epoch: The parsed instant.

        Raises:
            ValueError: If the string does not match a supported format or
                names an impossible date.
        """
        for pattern in _EPOCH_PATTERNS:
            m = pattern.match(string)
            if m:
                groups = m.groups()
                year = int(groups[0])
                month = int(groups[1])
                day = int(groups[2])

                hour = 0
                minute = 0
                second = 0.0

                if len(groups) >= 6:
                    hour = int(groups[3])
                    minute = int(groups[4])
                    second = float(groups[5])

                if len(groups) == 7:
                    frac_str = groups[6]
                    second += float(f"0.{frac_str}")

                # Reject impossible fields such as month 13
                _dt.datetime(year, month, day, hour, minute, int(second))
                return cls(year, month, day, hour, minute, second)

        raise ValueError(
            f'Invalid Epoch string: "{string}" is not ISO 8601 compliant'
        )

    @classmethod
    def coerce(cls, value: Epoch | _dt.datetime | str) -> Epoch:
        """Return ``value`` as an Epoch.

        Args:
            value: An Epoch, a ``datetime`` or an ISO 8601 string.

        Returns:
            Epoch: ``value`` itself when it already is an Epoch.

        Raises:
            ValueError: If ``value`` has an unsupported type or format.
        """
        if isinstance(value, Epoch):
            return value
        if isinstance(value, _dt.datetime):
            return cls.from_datetime(value)
        if isinstance(value, str):
            return cls.from_string(value)
        raise ValueError(f"Cannot construct Epoch from {type(value)}")

    def jd(self) -> jax.Array:
        """Julian Date of this instant.

        Returns:
            Julian Date. Units: *days*
        """
        j0 = julian_day_number(self.year, self.month, self.day)
        return julian_date(j0, fractional_hours(self.hour, self.minute, self.second))

    def julian_centuries(self) -> jax.Array:
        """Julian centuries elapsed between J2000 and this instant."""
        return julian_centuries(self.jd())

    def isoformat(self) -> str:
        """Format a scalar Epoch as ``YYYY-MM-DDTHH:MM:SS.fffZ``.

        Seconds are rounded to the millisecond; a value that rounds up to a
        full minute carries into the minute, hour and date fields.
        """
        ms = round(float(self.second) * 1000.0)
        value = _dt.datetime(
            int(self.year), int(self.month), int(self.day), int(self.hour), int(self.minute)
        ) + _dt.timedelta(milliseconds=ms)
        return f"{value:%Y-%m-%dT%H:%M:%S}.{value.microsecond // 1000:03d}Z"
