"""Ecliptic-equatorial frame transformations.

Heliocentric positions produced by the engine are expressed in the J2000
ecliptic frame.  Callers that need J2000 equatorial (EME2000) coordinates
can rotate them about the x-axis by the obliquity used with the JPL
approximate planetary elements (23.43928 degrees).  Both frames are
inertial, so the rotation is fixed.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orrery.config import get_dtype
from orrery.constants import OBLIQUITY_J2000_DEG
from orrery.frames.rotations import Rx


def rotation_ecliptic_to_equatorial() -> Array:
    """Compute the 3x3 rotation matrix from ecliptic to J2000 equatorial.

    Returns:
        Array: The matrix ``Rx(-ε)`` where ε is the J2000 obliquity.
    """
    return Rx(-OBLIQUITY_J2000_DEG, use_degrees=True)


def rotation_equatorial_to_ecliptic() -> Array:
    """Compute the 3x3 rotation matrix from J2000 equatorial to ecliptic.

    Returns:
        Array: The matrix ``Rx(ε)``, the transpose of
        :func:`rotation_ecliptic_to_equatorial`.
    """
    return Rx(OBLIQUITY_J2000_DEG, use_degrees=True)


def position_ecliptic_to_equatorial(r_ecl: ArrayLike) -> Array:
    """Rotate ecliptic positions into the J2000 equatorial frame.

    Args:
        r_ecl (ArrayLike): Position ``[x, y, z]`` or a stack of positions
            with shape ``(N, 3)``. Units are preserved.

    Returns:
        Array: Equatorial position(s), same shape as the input.

    Examples:
        ```python
        from orrery.frames import position_ecliptic_to_equatorial
        r_eq = position_ecliptic_to_equatorial([0.0, 1.0, 0.0])
        ```
    """
    r_ecl = jnp.asarray(r_ecl, dtype=get_dtype())
    return r_ecl @ rotation_ecliptic_to_equatorial().T


def position_equatorial_to_ecliptic(r_eq: ArrayLike) -> Array:
    """Rotate J2000 equatorial positions into the ecliptic frame.

    Args:
        r_eq (ArrayLike): Position ``[x, y, z]`` or a stack of positions
            with shape ``(N, 3)``. Units are preserved.

    Returns:
        Array: Ecliptic position(s), same shape as the input.
    """
    r_eq = jnp.asarray(r_eq, dtype=get_dtype())
    return r_eq @ rotation_equatorial_to_ecliptic().T
