"""
The `constants` module defines the unit conversions, reference epoch and physical
constants used by the orbital mechanics engine.
"""

from jax.numpy import pi as PI

# Mathematical Constants
"""
Multiply an angle in degrees by this to get radians, pi/180. Units: *rad/deg*
"""
DEG2RAD = PI / 180.0

"""
Multiply an angle in radians by this to get degrees, 180/pi. Units: *deg/rad*
"""
RAD2DEG = 180.0 / PI

# Time Constants

"""
Julian Date of MJD 0.0 (1858-11-17 00:00:00). Units: *days*
"""
JD_MJD_OFFSET = 2400000.5

"""
Julian Date of the J2000.0 reference epoch (2000-01-01 12:00:00). Units: *days*
"""
JD2000 = 2451545.0

"""
Number of seconds in a day. Units: *s*
"""
SECONDS_PER_DAY = 86400.0

"""
Length of a Julian century, the time unit of the element rates. Units: *days*
"""
JULIAN_CENTURY_DAYS = 36525.0

# Physical Constants

"""
Astronomical Unit, fixed by IAU 2012 Resolution B2. Units: *m*
"""
AU = 1.49597870700e11

"""
Gravitational constant of the Sun. Units: *m^3/s^2*

References:

1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and Applications*, 2012.
"""
GM_SUN = 132712440041.939400 * 1e9

"""
Obliquity of the J2000 ecliptic used by the JPL approximate planetary
positions. Units: *deg*

References:

1. E.M. Standish, *Keplerian Elements for Approximate Positions of the Major Planets*
"""
OBLIQUITY_J2000_DEG = 23.43928
