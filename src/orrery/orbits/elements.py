"""Keplerian element sets and their linear propagation in time.

Elements are tabulated at a reference epoch together with a rate of change
per Julian century for each of the six values.  Away from the epoch each
element is extrapolated linearly:

    element(T) = element_0 + element_dot * T

where *T* is the number of centuries since the reference epoch (see
:func:`orrery.epoch.julian_centuries`).

Both :class:`ElementRates` and :class:`OrbitalElements` are
:class:`~typing.NamedTuple` subclasses, so they are immutable and JAX
treats them as pytrees: element sets can be passed through ``jax.jit`` and
stacked for ``jax.vmap``.
"""

from __future__ import annotations

from typing import NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from orrery.config import get_dtype
from orrery.utils import normalize_degrees


class ElementRates(NamedTuple):
    """Rates of change of the orbital elements, per Julian century.

    Every field is required; a zero rate is a valid, explicit value.

    Attributes:
        semi_major_axis: Units: *AU/century*
        eccentricity: Units: *1/century*
        inclination: Units: *deg/century*
        longitude_of_ascending_node: Units: *deg/century*
        argument_of_perihelion: Units: *deg/century*
        mean_longitude: Units: *deg/century*
    """

    semi_major_axis: ArrayLike
    eccentricity: ArrayLike
    inclination: ArrayLike
    longitude_of_ascending_node: ArrayLike
    argument_of_perihelion: ArrayLike
    mean_longitude: ArrayLike


class OrbitalElements(NamedTuple):
    """Heliocentric Keplerian elements at the reference epoch.

    ``argument_of_perihelion`` is the *argument* of perihelion, ω, not the
    longitude of perihelion ϖ = ω + Ω.  The mean anomaly is recovered as
    ``M = L - (ω + Ω)``, so tables that publish ϖ must store ``ϖ - Ω`` here.

    Attributes:
        semi_major_axis: Units: *AU*
        eccentricity: Dimensionless, ``0 <= e < 1``.
        inclination: Inclination to the ecliptic. Units: *deg*
        longitude_of_ascending_node: Ω. Units: *deg*
        argument_of_perihelion: ω. Units: *deg*
        mean_longitude: L at the reference epoch. Units: *deg*
        rates: Per-century rates for each of the above.
    """

    semi_major_axis: ArrayLike
    eccentricity: ArrayLike
    inclination: ArrayLike
    longitude_of_ascending_node: ArrayLike
    argument_of_perihelion: ArrayLike
    mean_longitude: ArrayLike
    rates: ElementRates


def propagate_elements(elements: OrbitalElements, T: ArrayLike) -> OrbitalElements:
    """Extrapolate an element set to *T* centuries from its epoch.

    A new element set is returned; *elements* is left untouched.  Angles
    stay in degrees and the mean longitude is wrapped into ``[0, 360)``.
    The rates are carried over unchanged.

    Args:
        elements: Elements at the reference epoch.
        T: Centuries since the reference epoch. May be negative.

    Returns:
        OrbitalElements: Elements valid at *T*.

    Examples:
        ```python
        from orrery.bodies import BODY_ELEMENTS
        from orrery.orbits import propagate_elements
        mars_2100 = propagate_elements(BODY_ELEMENTS["mars"], 1.0)
        ```
    """
    _float = get_dtype()
    T = jnp.asarray(T, dtype=_float)
    rates = elements.rates

    def _linear(base, rate):
        return jnp.asarray(base, dtype=_float) + jnp.asarray(rate, dtype=_float) * T

    return OrbitalElements(
        semi_major_axis=_linear(elements.semi_major_axis, rates.semi_major_axis),
        eccentricity=_linear(elements.eccentricity, rates.eccentricity),
        inclination=_linear(elements.inclination, rates.inclination),
        longitude_of_ascending_node=_linear(
            elements.longitude_of_ascending_node, rates.longitude_of_ascending_node
        ),
        argument_of_perihelion=_linear(
            elements.argument_of_perihelion, rates.argument_of_perihelion
        ),
        mean_longitude=normalize_degrees(
            _linear(elements.mean_longitude, rates.mean_longitude)
        ),
        rates=rates,
    )


def mean_anomaly(elements: OrbitalElements) -> Array:
    """Mean anomaly implied by an element set.

    ``M = normalize(L - (ω + Ω))``, converted to radians.  Pass elements
    that have already been propagated to the instant of interest.

    Args:
        elements: Element set, typically the output of :func:`propagate_elements`.

    Returns:
        Mean anomaly in ``[0, 2 pi)``. Units: *rad*
    """
    lon_peri = elements.argument_of_perihelion + elements.longitude_of_ascending_node
    return jnp.deg2rad(normalize_degrees(elements.mean_longitude - lon_peri))
