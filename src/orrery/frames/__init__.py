"""Reference frame rotations.

- **Orbital plane -> ecliptic**: the three-angle rotation (argument of
  perihelion, inclination, ascending node) used by the position solver and
  the path sampler.
- **Ecliptic <-> equatorial**: fixed J2000 obliquity rotation.
"""

from .ecliptic import (
    position_ecliptic_to_equatorial,
    position_equatorial_to_ecliptic,
    rotation_ecliptic_to_equatorial,
    rotation_equatorial_to_ecliptic,
)
from .rotations import (
    Rx,
    Rz,
    orbital_plane_to_ecliptic,
    rotation_ecliptic_to_orbital,
    rotation_orbital_to_ecliptic,
)

__all__ = [
    "Rx",
    "Rz",
    "rotation_orbital_to_ecliptic",
    "rotation_ecliptic_to_orbital",
    "orbital_plane_to_ecliptic",
    "rotation_ecliptic_to_equatorial",
    "rotation_equatorial_to_ecliptic",
    "position_ecliptic_to_equatorial",
    "position_equatorial_to_ecliptic",
]
