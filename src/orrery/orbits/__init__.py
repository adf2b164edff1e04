"""Keplerian orbital mechanics.

This sub-module provides:

- **Kepler's equation**: a fixed-iteration Newton-Raphson solver and
  conversions between mean, eccentric and true anomaly.
- **Element sets**: immutable element/rate tuples and their linear
  propagation in Julian centuries.
- **Position solver**: heliocentric ecliptic position of a body at an
  instant.
- **Path sampler**: the closed orbital ellipse as a polyline.
- **Orbit geometry**: perihelion/aphelion distances and orbital period.
"""

from .elements import (
    ElementRates,
    OrbitalElements,
    mean_anomaly,
    propagate_elements,
)
from .keplerian import (
    KEPLER_ITERATIONS,
    anomaly_eccentric_to_mean,
    anomaly_eccentric_to_true,
    anomaly_mean_to_eccentric,
    anomaly_mean_to_true,
    apoapsis_distance,
    orbital_period,
    periapsis_distance,
    solve_kepler,
)
from .path import DEFAULT_SEGMENTS, orbital_path
from .position import position_at_centuries, position_from_elements

__all__ = [
    "ElementRates",
    "OrbitalElements",
    "propagate_elements",
    "mean_anomaly",
    "KEPLER_ITERATIONS",
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
    "DEFAULT_SEGMENTS",
    "orbital_path",
]
