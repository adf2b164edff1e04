"""Heliocentric position of a body from its Keplerian elements.

The element set is propagated to the requested instant, Kepler's equation
is solved for the eccentric anomaly, and the resulting in-plane position is
rotated into the ecliptic frame (argument of perihelion, then inclination,
then ascending node).  Positions are in astronomical units, centred on the
Sun.

Every call is independent and side-effect free.  Callers that query many
times per second can memoise at coarser granularity; see
:meth:`orrery.solar_system.SolarSystem.cached_position`.

References:
    E.M. Standish & J.G. Williams, "Keplerian Elements for
    Approximate Positions of the Major Planets",
    https://ssd.jpl.nasa.gov/planets/approx_pos.html
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orrery.config import EngineConfig
from orrery.epoch import Epoch, julian_centuries
from orrery.frames import orbital_plane_to_ecliptic, rotation_orbital_to_ecliptic
from orrery.orbits.elements import OrbitalElements, mean_anomaly, propagate_elements
from orrery.orbits.keplerian import anomaly_eccentric_to_true, solve_kepler


def position_at_centuries(elements: OrbitalElements, T: ArrayLike) -> Array:
    """Heliocentric ecliptic position *T* centuries after the element epoch.

    Args:
        elements: Elements at the reference epoch.
        T: Centuries since the reference epoch.

    Returns:
        Position ``[x, y, z]``. Units: *AU*. Shape ``(3,)``.
    """
    current = propagate_elements(elements, T)
    a = current.semi_major_axis
    e = current.eccentricity

    E = solve_kepler(mean_anomaly(current), e)
    nu = anomaly_eccentric_to_true(E, e)
    r = a * (1.0 - e * jnp.cos(E))

    R = rotation_orbital_to_ecliptic(
        current.argument_of_perihelion,
        current.inclination,
        current.longitude_of_ascending_node,
        use_degrees=True,
    )
    return orbital_plane_to_ecliptic(r * jnp.cos(nu), r * jnp.sin(nu), R)


def position_from_elements(
    elements: OrbitalElements,
    epc: Epoch,
    config: EngineConfig | None = None,
) -> Array:
    """Heliocentric ecliptic position of a body at an instant.

    Args:
        elements: Elements at the reference epoch of *config*.
        epc: Instant at which to evaluate the position.
        config: Reference epoch and century length. Default: J2000.0 with
            36525-day centuries.

    Returns:
        Position ``[x, y, z]``. Units: *AU*. Shape ``(3,)``.

    Examples:
        ```python
        from orrery import Epoch
        from orrery.bodies import BODY_ELEMENTS
        from orrery.orbits import position_from_elements
        r = position_from_elements(BODY_ELEMENTS["earth"], Epoch(2024, 6, 15))
        ```
    """
    return position_at_centuries(elements, julian_centuries(epc, config))
