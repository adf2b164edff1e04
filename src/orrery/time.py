"""Calendar and Julian Date conversions.

The functions operate on plain numbers or JAX arrays and are used by
:class:`~orrery.epoch.Epoch` to move between civil calendar dates and the
continuous Julian Date scale the element rates are expressed in.  No time
scale corrections are applied: calendar dates are interpreted as UTC and
the J2000.0 reference epoch is taken as 2000-01-01T12:00:00Z.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

from .config import get_dtype
from .constants import JD_MJD_OFFSET, SECONDS_PER_DAY


def caldate_to_mjd_day(year: ArrayLike, month: ArrayLike, day: ArrayLike) -> jax.Array:
    """Integer Modified Julian Day number of a Gregorian calendar date.

    Kept in int32 so the day count stays exact whatever the configured float
    dtype is.

    Args:
        year (ArrayLike): Year.
        month (ArrayLike): Month, 1-12.
        day (ArrayLike): Day of month.

    Returns:
        jax.Array: MJD of 00:00 on the given date, as ``int32``.

    References:

        1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and
           Applications*, 2012, p. 321.
    """
    # January and February count as months 13 and 14 of the previous year
    early = month <= 2
    year = jnp.where(early, year - 1, year)
    month = jnp.where(early, month + 12, month)

    leap_days = year // 400 - year // 100 + year // 4
    mjd = 365 * year - 679004 + leap_days + (306001 * (month + 1)) // 10000 + day

    return jnp.asarray(mjd, dtype=jnp.int32)


def caldate_to_mjd(
    year: ArrayLike,
    month: ArrayLike,
    day: ArrayLike,
    hour: ArrayLike = 0,
    minute: ArrayLike = 0,
    second: ArrayLike = 0.0,
) -> jax.Array:
    """Convert a Gregorian calendar date to Modified Julian Date.

    Valid from year 1583 onward.

    Args:
        year (ArrayLike): Year.
        month (ArrayLike): Month, 1-12.
        day (ArrayLike): Day of month.
        hour (ArrayLike): Hour. Default: ``0``
        minute (ArrayLike): Minute. Default: ``0``
        second (ArrayLike): Second, may be fractional. Default: ``0.0``

    Returns:
        Modified Julian Date.

    References:

        1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and
           Applications*, 2012, p. 321.
    """
    day_number = caldate_to_mjd_day(year, month, day)
    seconds = hour * 3600.0 + minute * 60.0 + second

    return get_dtype()(day_number) + seconds / SECONDS_PER_DAY


def caldate_to_jd(
    year: ArrayLike,
    month: ArrayLike,
    day: ArrayLike,
    hour: ArrayLike = 0,
    minute: ArrayLike = 0,
    second: ArrayLike = 0.0,
) -> jax.Array:
    """Convert a Gregorian calendar date to Julian Date.

    Args:
        year (ArrayLike): Year.
        month (ArrayLike): Month, 1-12.
        day (ArrayLike): Day of month.
        hour (ArrayLike): Hour. Default: ``0``
        minute (ArrayLike): Minute. Default: ``0``
        second (ArrayLike): Second, may be fractional. Default: ``0.0``

    Returns:
        Julian Date.
    """
    return caldate_to_mjd(year, month, day, hour, minute, second) + JD_MJD_OFFSET


def jd_to_caldate(
    jd: ArrayLike,
) -> tuple[jax.Array, jax.Array, jax.Array, jax.Array, jax.Array, jax.Array]:
    """Convert a Julian Date to Gregorian calendar date components.

    The civil day number is split off first and the date is recovered with
    integer arithmetic only, so it stays exact when *jd* is single precision.

    Args:
        jd (ArrayLike): Julian Date.

    Returns:
        tuple[jax.Array, ...]: (year, month, day, hour, minute, second).

    References:

        1. E.G. Richards, "Calendars", in *Explanatory Supplement to the
           Astronomical Almanac*, 3rd ed., 2013, sec. 15.11.3.
    """
    shifted = jnp.asarray(jd) + 0.5
    day_number = jnp.floor(shifted).astype(jnp.int32)

    f = day_number + 1401 + (((4 * day_number + 274277) // 146097) * 3) // 4 - 38
    e = 4 * f + 3
    h = 5 * ((e % 1461) // 4) + 2
    day = (h % 153) // 5 + 1
    month = (h // 153 + 2) % 12 + 1
    year = e // 1461 - 4716 + (14 - month) // 12

    ms = jnp.round((shifted - day_number) * 86400000.0).astype(jnp.int32)
    hour, ms = jnp.divmod(ms, 3600000)
    minute, ms = jnp.divmod(ms, 60000)
    second = get_dtype()(ms) / 1000.0

    return year, month, day, hour, minute, second
