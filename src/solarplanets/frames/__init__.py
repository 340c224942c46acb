"""Frame transformations.

This sub-module provides functions for converting between the coordinate
frames used when evaluating mean orbital elements:

- **Perifocal-inertial transformations**: the 3-1-3 rotation sequence
  built from the node, inclination and argument of periapsis.
- **Ecliptic-equatorial transformations**: the fixed J2000 obliquity
  rotation between the ecliptic and the mean equator.
"""

from .ecliptic import (
    rotation_ecliptic_to_equatorial,
    rotation_equatorial_to_ecliptic,
    state_ecliptic_to_equatorial,
    state_equatorial_to_ecliptic,
)
from .perifocal import (
    rotation_inertial_to_perifocal,
    rotation_perifocal_to_inertial,
    state_perifocal_to_inertial,
)

__all__ = [
    # Perifocal/inertial
    "rotation_inertial_to_perifocal",
    "rotation_perifocal_to_inertial",
    "state_perifocal_to_inertial",
    # Ecliptic/equatorial
    "rotation_ecliptic_to_equatorial",
    "rotation_equatorial_to_ecliptic",
    "state_ecliptic_to_equatorial",
    "state_equatorial_to_ecliptic",
]
