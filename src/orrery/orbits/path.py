"""Orbital path sampling.

Traces the full ellipse of an element set as a closed polyline.  The path
is parametrised directly by true anomaly in uniform steps, so the polar
form of the conic ``r = a (1 - e^2) / (1 + e cos v)`` gives the radius
without solving Kepler's equation.  Element rates are ignored: the path is
the static shape of the orbit at the reference epoch.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array

from orrery.config import get_dtype
from orrery.frames import orbital_plane_to_ecliptic, rotation_orbital_to_ecliptic
from orrery.orbits.elements import OrbitalElements

DEFAULT_SEGMENTS = 128


def orbital_path(elements: OrbitalElements, segments: int = DEFAULT_SEGMENTS) -> Array:
    """Sample the orbit of an element set as a closed polyline.

    Point ``i`` lies at true anomaly ``2 pi i / segments`` for
    ``i = 0 .. segments``, so the first and last points coincide.

    ``segments`` fixes the output shape and must be static under ``jax.jit``.

    Args:
        elements: Elements at the reference epoch; rates are not applied.
        segments: Number of line segments. Default: 128.

    Returns:
        Points ``[x, y, z]`` in the ecliptic frame. Units: *AU*.
        Shape ``(segments + 1, 3)``.

    Raises:
        ValueError: If ``segments`` is less than 1.

    Examples:
        ```python
        from orrery.bodies import BODY_ELEMENTS
        from orrery.orbits import orbital_path
        points = orbital_path(BODY_ELEMENTS["mars"], segments=256)
        ```
    """
    if segments < 1:
        raise ValueError(f"segments must be at least 1, got {segments}")

    _float = get_dtype()
    a = jnp.asarray(elements.semi_major_axis, dtype=_float)
    e = jnp.asarray(elements.eccentricity, dtype=_float)

    nu = 2.0 * jnp.pi * jnp.arange(segments + 1, dtype=_float) / segments
    r = a * (1.0 - e**2) / (1.0 + e * jnp.cos(nu))

    R = rotation_orbital_to_ecliptic(
        elements.argument_of_perihelion,
        elements.inclination,
        elements.longitude_of_ascending_node,
        use_degrees=True,
    )
    return orbital_plane_to_ecliptic(r * jnp.cos(nu), r * jnp.sin(nu), R)
