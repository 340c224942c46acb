"""
The `constants` module defines the mathematical and physical constants used by the
heliocentric element model.
"""

from jax.numpy import pi as PI

# Mathematical Constants
"""
Full turn in radians. Units: *rad*
"""
TWO_PI = 2.0 * PI

"""
Constant to convert degrees to radians. Equal to 2pi/360. Units: *rad/deg*
"""
DEG2RAD = 2.0 * PI / 360.0

"""
Constant to convert radians to degrees. Equal to 360/2pi. Units: *deg/rad*
"""
RAD2DEG = 360.0 / (PI * 2.0)

"""
Constant to convert arcseconds to radians. Equal to 2pi/(360*3600). Units: *rad/as*
"""
AS2RAD = 2.0 * PI / 360.0 / 3600.0

"""
Constant to convert radians to arcseconds. Equal to (360*3600)/(2pi). Units: *as/rad*
"""
RAD2AS = 360.0 * 3600.0 / PI / 2.0

# Time Constants

"""
Julian Date of the J2000.0 epoch (2000-01-01 12:00:00). Units: *days*
"""
JD_J2000 = 2451545.0

"""
Length of a Julian century. Units: *days*
"""
DAYS_PER_JULIAN_CENTURY = 36525.0

"""
Offset added to the calendar terms of the Julian Day Number formula. Units: *days*

References:

1. H. Curtis, *Orbital Mechanics for Engineering Students*, Eq. 5.48.
"""
JD_CALENDAR_OFFSET = 1721013.5

# Physical Constants

"""
Astronomical Unit. Units: *km*
"""
AU_KM = 1.49597871e8

"""
Sun's standard gravitational parameter. Units: *km^3/s^2*

References:

1. H. Curtis, *Orbital Mechanics for Engineering Students*, Table A.2.
"""
GM_SUN = 1.327e11

"""
Mean obliquity of the ecliptic at J2000, IAU 2006 value. Units: *arcseconds*

References:

1. P. Gérard and B. Luzum, *IERS Technical Note 36*, 2010
"""
OBLIQUITY_J2000 = 84381.406
