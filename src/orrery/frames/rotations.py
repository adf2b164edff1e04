"""Elementary rotation matrices and the orbital-plane to ecliptic rotation.

The elementary matrices follow the passive (frame rotation) convention of
Montenbruck & Gill.  The orbital-plane rotation composes them as

    R = Rz(-raan) @ Rx(-inc) @ Rz(-arg_peri)

which carries a vector expressed in perifocal coordinates (x towards
perihelion, z along the orbit normal) into the heliocentric ecliptic frame.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orrery.config import get_dtype
from orrery.utils import to_radians


def Rx(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Rotation matrix, for a rotation about the x-axis.

    Args:
        angle (ArrayLike): Counter-clockwise angle of rotation as viewed
            looking back along the positive direction of the rotation axis.
        use_degrees (bool): Interpret ``angle`` in degrees. Default: ``False``

    Returns:
        Array: 3x3 rotation matrix.

    References:

        1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and Applications*, 2012, p.27.
    """
    angle = to_radians(jnp.asarray(angle, dtype=get_dtype()), use_degrees)

    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[1.0,  0.0,  0.0],
                      [0.0,   +c,   +s],
                      [0.0,   -s,   +c]])


def Rz(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Rotation matrix, for a rotation about the z-axis.

    Args:
        angle (ArrayLike): Counter-clockwise angle of rotation as viewed
            looking back along the positive direction of the rotation axis.
        use_degrees (bool): Interpret ``angle`` in degrees. Default: ``False``

    Returns:
        Array: 3x3 rotation matrix.

    References:

        1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and Applications*, 2012, p.27.
    """
    angle = to_radians(jnp.asarray(angle, dtype=get_dtype()), use_degrees)

    c = jnp.cos(angle)
    s = jnp.sin(angle)

    return jnp.array([[ +c,   +s,  0.0],
                      [ -s,   +c,  0.0],
                      [0.0,  0.0,  1.0]])


def rotation_orbital_to_ecliptic(
    arg_peri: ArrayLike,
    inc: ArrayLike,
    raan: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Rotation from the orbital (perifocal) plane to the ecliptic frame.

    Equivalent to ``Rz(-raan) @ Rx(-inc) @ Rz(-arg_peri)`` but written out
    element by element, which is cheaper and keeps the third column exact.

    Args:
        arg_peri (ArrayLike): Argument of perihelion, ω.
        inc (ArrayLike): Inclination, I.
        raan (ArrayLike): Longitude of the ascending node, Ω.
        use_degrees (bool): Interpret the angles in degrees. Default: ``False``

    Returns:
        Array: 3x3 rotation matrix (orbital plane -> ecliptic).

    Examples:
        ```python
        from orrery.frames import rotation_orbital_to_ecliptic
        R = rotation_orbital_to_ecliptic(102.9, 0.0, 0.0, use_degrees=True)
        ```
    """
    _float = get_dtype()
    w = to_radians(jnp.asarray(arg_peri, dtype=_float), use_degrees)
    i = to_radians(jnp.asarray(inc, dtype=_float), use_degrees)
    node = to_radians(jnp.asarray(raan, dtype=_float), use_degrees)

    cw, sw = jnp.cos(w), jnp.sin(w)
    ci, si = jnp.cos(i), jnp.sin(i)
    cn, sn = jnp.cos(node), jnp.sin(node)

    return jnp.array([
        [cw * cn - sw * sn * ci, -sw * cn - cw * sn * ci,  sn * si],
        [cw * sn + sw * cn * ci, -sw * sn + cw * cn * ci, -cn * si],
        [sw * si,                 cw * si,                 ci],
    ])


def rotation_ecliptic_to_orbital(
    arg_peri: ArrayLike,
    inc: ArrayLike,
    raan: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Rotation from the ecliptic frame back into the orbital plane.

    The transpose of :func:`rotation_orbital_to_ecliptic`.

    Args:
        arg_peri (ArrayLike): Argument of perihelion, ω.
        inc (ArrayLike): Inclination, I.
        raan (ArrayLike): Longitude of the ascending node, Ω.
        use_degrees (bool): Interpret the angles in degrees. Default: ``False``

    Returns:
        Array: 3x3 rotation matrix (ecliptic -> orbital plane).
    """
    return rotation_orbital_to_ecliptic(arg_peri, inc, raan, use_degrees).T


def orbital_plane_to_ecliptic(
    x_orb: ArrayLike,
    y_orb: ArrayLike,
    rotation: Array,
) -> Array:
    """Rotate in-plane coordinates into the ecliptic frame.

    Points in the orbital plane have no out-of-plane component, so only the
    first two columns of *rotation* contribute.

    Args:
        x_orb (ArrayLike): Coordinate towards perihelion, scalar or shape ``(N,)``.
        y_orb (ArrayLike): In-plane coordinate 90 degrees ahead of perihelion,
            same shape as ``x_orb``.
        rotation (Array): Orbital-plane to ecliptic matrix.

    Returns:
        Array: Ecliptic coordinates, shape ``(3,)`` or ``(N, 3)``.
    """
    planar = jnp.stack([x_orb, y_orb], axis=-1)
    return planar @ rotation[:, :2].T
