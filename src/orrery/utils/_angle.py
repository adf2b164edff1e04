"""Angle helpers.

These helpers implement the ``use_degrees`` convention used throughout
orrery and the wrapping of degree-valued angles into a single turn.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orrery.config import get_dtype


def to_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Return *angle* in radians, converting from degrees when asked.

    Args:
        angle (ArrayLike): Angle in degrees or radians.
        use_degrees (bool): Whether *angle* is in degrees.

    Returns:
        Angle in radians.
    """
    return jnp.where(use_degrees, jnp.deg2rad(angle), angle)


def from_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Return a radian *angle* in degrees when asked, otherwise unchanged.

    Args:
        angle (ArrayLike): Angle in radians.
        use_degrees (bool): Whether to convert to degrees.

    Returns:
        Angle in radians or degrees.
    """
    return jnp.where(use_degrees, jnp.rad2deg(angle), angle)


def normalize_degrees(angle: ArrayLike) -> Array:
    """Wrap an angle into the half-open range ``[0, 360)`` degrees.

    Negative angles wrap around rather than clamp, so ``-10`` becomes
    ``350``.

    Args:
        angle (ArrayLike): Angle. Units: *deg*

    Returns:
        Equivalent angle in ``[0, 360)``. Units: *deg*

    Examples:
        ```python
        from orrery.utils import normalize_degrees
        normalize_degrees(-2.5)  # 357.5
        ```
    """
    angle = jnp.asarray(angle, dtype=get_dtype())
    wrapped = jnp.mod(angle, 360.0)
    # Tiny negative inputs can round up to exactly 360
    return jnp.where(wrapped >= 360.0, wrapped - 360.0, wrapped)
