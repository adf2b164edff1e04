"""
orrery is a Keplerian orbital mechanics engine for the solar system, implemented in JAX.
"""

from .constants import (
    DEG2RAD,
    RAD2DEG,
    JD_MJD_OFFSET,
    JD2000,
    SECONDS_PER_DAY,
    JULIAN_CENTURY_DAYS,
    AU,
    GM_SUN,
    OBLIQUITY_J2000_DEG,
)

from .config import set_dtype, get_dtype, EngineConfig
from .epoch import Epoch, julian_centuries
from .utils import normalize_degrees

from .frames import (
    rotation_orbital_to_ecliptic,
    rotation_ecliptic_to_orbital,
    position_ecliptic_to_equatorial,
    position_equatorial_to_ecliptic,
)

from .orbits import (
    ElementRates,
    OrbitalElements,
    propagate_elements,
    solve_kepler,
    anomaly_mean_to_eccentric,
    anomaly_eccentric_to_mean,
    anomaly_eccentric_to_true,
    anomaly_mean_to_true,
    periapsis_distance,
    apoapsis_distance,
    orbital_period,
    position_at_centuries,
    position_from_elements,
    orbital_path,
)

from .bodies import SUN_ID, BODY_IDS, BODY_ELEMENTS, get_orbital_elements
from .solar_system import SolarSystem

__all__ = [
    # Constants
    "DEG2RAD",
    "RAD2DEG",
    "JD_MJD_OFFSET",
    "JD2000",
    "SECONDS_PER_DAY",
    "JULIAN_CENTURY_DAYS",
    "AU",
    "GM_SUN",
    "OBLIQUITY_J2000_DEG",
    # Config
    "set_dtype",
    "get_dtype",
    "EngineConfig",
    # Epoch
    "Epoch",
    "julian_centuries",
    # Utils
    "normalize_degrees",
    # Frames
    "rotation_orbital_to_ecliptic",
    "rotation_ecliptic_to_orbital",
    "position_ecliptic_to_equatorial",
    "position_equatorial_to_ecliptic",
    # Orbits
    "ElementRates",
    "OrbitalElements",
    "propagate_elements",
    "solve_kepler",
    "anomaly_mean_to_eccentric",
    "anomaly_eccentric_to_mean",
    "anomaly_eccentric_to_true",
    "anomaly_mean_to_true",
    "periapsis_distance",
    "apoapsis_distance",
    "orbital_period",
    "position_at_centuries",
    "position_from_elements",
    "orbital_path",
    # Bodies
    "SUN_ID",
    "BODY_IDS",
    "BODY_ELEMENTS",
    "get_orbital_elements",
    "SolarSystem",
]
