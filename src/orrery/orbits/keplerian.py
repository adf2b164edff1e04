"""Kepler's equation and anomaly conversions for heliocentric orbits.

The solver uses a third-order starting approximation followed by a fixed
number of Newton-Raphson corrections.  A fixed iteration count keeps the
cost of every call identical and makes the solver a plain
``jax.lax.fori_loop``; for the eccentricities of the modelled bodies
(at most ~0.25) six corrections converge far below single precision.

All functions use JAX operations and are compatible with ``jax.jit``,
``jax.vmap``, and ``jax.grad``.  Inputs are coerced to the configured float
dtype (see :func:`orrery.config.set_dtype`).
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orrery.config import get_dtype
from orrery.constants import AU, GM_SUN, SECONDS_PER_DAY
from orrery.utils import from_radians, to_radians

KEPLER_ITERATIONS = 6

# ──────────────────────────────────────────────
# Kepler's equation
# ──────────────────────────────────────────────


def solve_kepler(anm_mean: ArrayLike, e: ArrayLike) -> Array:
    """Solve Kepler's equation ``M = E - e sin(E)`` for the eccentric anomaly.

    Starts from ``E0 = M + e sin(M) (1 + e cos(M))`` and applies exactly
    :data:`KEPLER_ITERATIONS` Newton-Raphson steps.  There is no
    convergence test and no failure mode; the result is only meaningful for
    ``0 <= e < 1``.

    Args:
        anm_mean: Mean anomaly, scalar or array. Units: *rad*
        e: Eccentricity, broadcastable against ``anm_mean``. Dimensionless.

    Returns:
        Eccentric anomaly. Units: *rad*

    Examples:
        ```python
        from orrery.orbits import solve_kepler
        E = solve_kepler(1.0, 0.1)
        ```
    """
    M = jnp.asarray(anm_mean, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())

    E0 = M + e * jnp.sin(M) * (1.0 + e * jnp.cos(M))

    def newton_step(_, E):
        return E - (E - e * jnp.sin(E) - M) / (1.0 - e * jnp.cos(E))

    return jax.lax.fori_loop(0, KEPLER_ITERATIONS, newton_step, E0)


# ──────────────────────────────────────────────
# Anomaly conversions
# ──────────────────────────────────────────────


def anomaly_mean_to_eccentric(anm_mean: ArrayLike, e: ArrayLike, use_degrees: bool = False) -> Array:
    """Eccentric anomaly for a given mean anomaly, via :func:`solve_kepler`.

    Args:
        anm_mean: Mean anomaly, M. Units: *rad*, or *deg* with ``use_degrees``.
        e: Eccentricity, ``0 <= e < 1``.
        use_degrees: Take and return angles in degrees. Default: ``False``

    Returns:
        Eccentric anomaly, E, in the units of ``anm_mean``.
    """
    M = to_radians(jnp.asarray(anm_mean, dtype=get_dtype()), use_degrees)
    return from_radians(solve_kepler(M, e), use_degrees)


def anomaly_eccentric_to_mean(anm_ecc: ArrayLike, e: ArrayLike, use_degrees: bool = False) -> Array:
    """Mean anomaly for a given eccentric anomaly, ``M = E - e sin(E)``.

    Args:
        anm_ecc: Eccentric anomaly, E. Units: *rad*, or *deg* with ``use_degrees``.
        e: Eccentricity, ``0 <= e < 1``.
        use_degrees: Take and return angles in degrees. Default: ``False``

    Returns:
        Mean anomaly, M, in the units of ``anm_ecc``.
    """
    _float = get_dtype()
    E = to_radians(jnp.asarray(anm_ecc, dtype=_float), use_degrees)
    return from_radians(E - jnp.asarray(e, dtype=_float) * jnp.sin(E), use_degrees)


def anomaly_eccentric_to_true(anm_ecc: ArrayLike, e: ArrayLike, use_degrees: bool = False) -> Array:
    """True anomaly for a given eccentric anomaly.

    Evaluated as ``atan2(sqrt(1 - e^2) sin E, cos E - e)`` rather than the
    half-angle tangent form, so no quadrant correction is needed.

    Args:
        anm_ecc: Eccentric anomaly, E. Units: *rad*, or *deg* with ``use_degrees``.
        e: Eccentricity, ``0 <= e < 1``.
        use_degrees: Take and return angles in degrees. Default: ``False``

    Returns:
        True anomaly, v, in ``(-pi, pi]`` (or ``(-180, 180]``).
    """
    _float = get_dtype()
    E = to_radians(jnp.asarray(anm_ecc, dtype=_float), use_degrees)
    e = jnp.asarray(e, dtype=_float)
    nu = jnp.arctan2(jnp.sqrt(1.0 - e * e) * jnp.sin(E), jnp.cos(E) - e)
    return from_radians(nu, use_degrees)


def anomaly_mean_to_true(anm_mean: ArrayLike, e: ArrayLike, use_degrees: bool = False) -> Array:
    """True anomaly for a given mean anomaly, through the eccentric anomaly."""
    E = anomaly_mean_to_eccentric(anm_mean, e, use_degrees)
    return anomaly_eccentric_to_true(E, e, use_degrees)


# ──────────────────────────────────────────────
# Orbit geometry
# ──────────────────────────────────────────────


def periapsis_distance(a: ArrayLike, e: ArrayLike) -> Array:
    """Distance from the Sun at perihelion, ``a (1 - e)``.

    Args:
        a: Semi-major axis. Units: *AU*
        e: Eccentricity. Dimensionless.

    Returns:
        Perihelion distance. Units: *AU*
    """
    a = jnp.asarray(a, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())
    return a * (1.0 - e)


def apoapsis_distance(a: ArrayLike, e: ArrayLike) -> Array:
    """Distance from the Sun at aphelion, ``a (1 + e)``.

    Args:
        a: Semi-major axis. Units: *AU*
        e: Eccentricity. Dimensionless.

    Returns:
        Aphelion distance. Units: *AU*
    """
    a = jnp.asarray(a, dtype=get_dtype())
    e = jnp.asarray(e, dtype=get_dtype())
    return a * (1.0 + e)


def orbital_period(a: ArrayLike) -> Array:
    """Sidereal period of a heliocentric orbit from Kepler's third law.

    The mass of the orbiting body is neglected.

    Args:
        a: Semi-major axis. Units: *AU*

    Returns:
        Orbital period. Units: *days*

    Examples:
        ```python
        from orrery.orbits import orbital_period
        orbital_period(1.0)  # ~365.26
        ```
    """
    a = jnp.asarray(a, dtype=get_dtype())
    # (a * AU)^3 overflows float32 beyond ~47 AU, so scale by AU^3 / GM instead
    return 2.0 * jnp.pi * jnp.sqrt(a**3 * (AU**3 / GM_SUN)) / SECONDS_PER_DAY
