"""The epoch module provides the ``Epoch`` class for representing instants in time.

An Epoch stores an integer Julian Day number together with the seconds
elapsed within that day.  Keeping the day count as an integer preserves
sub-second resolution that a single float Julian Date (~2.45 million)
would lose, which matters when converting wall-clock instants into the
centuries-since-epoch argument of the element rates.

The Epoch class is registered as a JAX pytree, so it can be passed through
``jax.jit`` and ``jax.vmap`` like any other array container.

The seconds are held in float32, or float64 when that is the configured
dtype; the 16-bit types cannot represent a full day of seconds.  Only
:func:`julian_centuries` casts to the configured dtype.

Calendar input is interpreted as UTC.
"""

from __future__ import annotations

import math
import re
from datetime import UTC, datetime, timedelta

import jax
import jax.numpy as jnp

from .config import EngineConfig, get_dtype, get_epoch_eq_tolerance
from .constants import JD_MJD_OFFSET, SECONDS_PER_DAY
from .time import caldate_to_mjd_day, jd_to_caldate

# Julian Days begin at noon, civil days at midnight
_HALF_DAY = 43200.0

# Whole-day offset between the MJD and JD day numbers
_MJD_DAY_OFFSET = 2400000

_EPOCH_PATTERNS = [
    # YYYY-MM-DD
    re.compile(r'^(\d{4})-(\d{2})-(\d{2})$'),
    # YYYY-MM-DDTHH:MM:SSZ
    re.compile(r'^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})Z$'),
    # YYYY-MM-DDTHH:MM:SS.fffZ
    re.compile(r'^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})\.(\d+)Z$'),
]


def _seconds_dtype():
    """Float type of the seconds-within-day component."""
    return jnp.float64 if get_dtype() == jnp.float64 else jnp.float32


class Epoch:
    """A single instant in time.

    Internally ``_jd`` holds the integer Julian Day number and ``_seconds``
    the seconds since the start of that Julian Day (noon), normalized to
    ``[0, 86400)``.  Use ``jd()`` / ``mjd()`` for a single-number view and
    epoch subtraction for precise differences.

    Constructors:
        Epoch(2000, 1, 1)
        Epoch(2000, 1, 1, 12, 0, 0.0)
        Epoch("2000-01-01T12:00:00Z")
        Epoch(datetime(2000, 1, 1, 12, tzinfo=UTC))
        Epoch(other_epoch)
        Epoch.from_jd(2451545.0)
        Epoch.now()
    """

    __slots__ = ('_jd', '_seconds')

    def __init__(self, *args: int | float | str | datetime | Epoch) -> None:
        """Initialize Epoch. Supports multiple constructor forms.

        Args:
            *args: Either (year, month, day[, hour, minute, second]),
                an ISO 8601 string, a ``datetime``, or another Epoch.

        Raises:
            ValueError: If the arguments match none of the supported forms.
        """
        self._jd = jnp.int32(0)
        self._seconds = _seconds_dtype()(0.0)

        if len(args) == 1:
            arg = args[0]
            if isinstance(arg, str):
                self._init_string(arg)
            elif isinstance(arg, datetime):
                self._init_datetime(arg)
            elif isinstance(arg, Epoch):
                self._jd = arg._jd
                self._seconds = arg._seconds
            else:
                raise ValueError(f"Cannot construct Epoch from {type(arg)}")
        elif 3 <= len(args) <= 6:
            self._init_date(*args)
        else:
            raise ValueError(
                "Epoch requires date components (3-6 args), a string, a datetime, or an Epoch"
            )

    @classmethod
    def _from_internal(cls, jd, seconds):
        """Create an Epoch from already-normalized internal values."""
        obj = object.__new__(cls)
        obj._jd = jd
        obj._seconds = seconds
        return obj

    @classmethod
    def from_jd(cls, jd: float) -> Epoch:
        """Create an Epoch from a Julian Date.

        Args:
            jd (float): Julian Date. Units: *days*

        Returns:
            Epoch: The corresponding instant.
        """
        day = math.floor(jd)
        obj = cls._from_internal(
            jnp.int32(day), _seconds_dtype()((jd - day) * SECONDS_PER_DAY)
        )
        obj._normalize()
        return obj

    @classmethod
    def now(cls) -> Epoch:
        """Return the current wall-clock instant."""
        return cls(datetime.now(UTC))

    def _init_date(self, year, month, day, hour=0, minute=0, second=0.0):
        mjd = int(caldate_to_mjd_day(year, month, day))
        self._jd = jnp.int32(mjd + _MJD_DAY_OFFSET)
        # MJD day starts at midnight, half a day after the matching JD day
        self._seconds = _seconds_dtype()(_HALF_DAY + hour * 3600.0 + minute * 60.0 + second)
        self._normalize()

    def _init_string(self, string):
        for pattern in _EPOCH_PATTERNS:
            m = pattern.match(string)
            if m is None:
                continue
            groups = m.groups()
            year, month, day = (int(g) for g in groups[:3])
            hour, minute, second = 0, 0, 0.0
            if len(groups) >= 6:
                hour = int(groups[3])
                minute = int(groups[4])
                second = float(groups[5])
            if len(groups) == 7:
                second += float(f"0.{groups[6]}")
            self._init_date(year, month, day, hour, minute, second)
            return

        raise ValueError(
            f'Invalid Epoch string: "{string}" is not ISO 8601 compliant'
        )

    def _init_datetime(self, dt: datetime):
        # Naive datetimes are taken to be UTC already
        if dt.tzinfo is not None:
            dt = dt.astimezone(UTC)
        self._init_date(
            dt.year, dt.month, dt.day, dt.hour, dt.minute,
            dt.second + dt.microsecond / 1e6,
        )

    def _normalize(self):
        """Fold ``_seconds`` into [0, 86400), carrying whole days into ``_jd``."""
        day_offset = jnp.int32(jnp.floor(self._seconds / SECONDS_PER_DAY))
        self._seconds = self._seconds - (day_offset * SECONDS_PER_DAY).astype(self._seconds.dtype)
        self._jd = self._jd + day_offset

    # Arithmetic

    def __add__(self, delta: float) -> Epoch:
        """Return a new Epoch advanced by *delta* seconds."""
        obj = Epoch._from_internal(self._jd, self._seconds + _seconds_dtype()(delta))
        obj._normalize()
        return obj

    def __sub__(self, other: Epoch | float) -> Epoch | jax.Array:
        """Difference in seconds between Epochs, or a new Epoch moved back by *other* seconds."""
        if isinstance(other, Epoch):
            return ((self._jd - other._jd) * SECONDS_PER_DAY
                    + (self._seconds - other._seconds))
        return self.__add__(-other)

    def days_since(self, other: Epoch) -> jax.Array:
        """Days elapsed from *other* to this epoch (negative if *other* is later)."""
        _float = _seconds_dtype()
        return (_float(self._jd - other._jd)
                + (self._seconds - other._seconds) / _float(SECONDS_PER_DAY))

    # Comparison

    def __eq__(self, other):
        if not isinstance(other, Epoch):
            return NotImplemented
        return jnp.abs(self - other) < get_epoch_eq_tolerance()

    def __ne__(self, other):
        if not isinstance(other, Epoch):
            return NotImplemented
        return ~self.__eq__(other)

    def __lt__(self, other):
        if not isinstance(other, Epoch):
            return NotImplemented
        return (self - other) < 0.0

    def __le__(self, other):
        if not isinstance(other, Epoch):
            return NotImplemented
        return self.__lt__(other) | self.__eq__(other)

    def __gt__(self, other):
        if not isinstance(other, Epoch):
            return NotImplemented
        return (self - other) > 0.0

    def __ge__(self, other):
        if not isinstance(other, Epoch):
            return NotImplemented
        return self.__gt__(other) | self.__eq__(other)

    def __hash__(self):
        return hash((int(self._jd), round(float(self._seconds), 3)))

    # Views

    def jd(self) -> jax.Array:
        """Return the Julian Date as a single float (lossy in float32)."""
        _float = _seconds_dtype()
        return _float(self._jd) + self._seconds / _float(SECONDS_PER_DAY)

    def mjd(self) -> jax.Array:
        """Return the Modified Julian Date as a single float."""
        return self.jd() - _seconds_dtype()(JD_MJD_OFFSET)

    def floor(self, granularity: float = 60.0) -> Epoch:
        """Truncate this epoch down to a whole multiple of *granularity* seconds.

        Multiples are counted from the start of the Julian Day, so any
        granularity that divides a day evenly lines up with civil minutes
        and hours.

        Args:
            granularity (float): Bucket size. Units: *s*. Default: one minute.

        Returns:
            Epoch: The start of the bucket containing this instant.
        """
        if granularity <= 0.0:
            raise ValueError(f"granularity must be positive, got {granularity}")
        seconds = jnp.floor(self._seconds / granularity) * granularity
        return Epoch._from_internal(self._jd, seconds.astype(self._seconds.dtype))

    def caldate(self) -> tuple[int, int, int, int, int, float]:
        """Return the UTC calendar date components.

        Not traceable under ``jax.jit``.

        Returns:
            tuple: (year, month, day, hour, minute, second).
        """
        civil = float(self._seconds) + _HALF_DAY
        day_number = int(self._jd)
        if civil >= SECONDS_PER_DAY:
            civil -= SECONDS_PER_DAY
            day_number += 1

        year, month, day, _, _, _ = jd_to_caldate(float(day_number))
        hour = int(civil // 3600)
        minute = int((civil - hour * 3600) // 60)
        second = civil - hour * 3600 - minute * 60
        return int(year), int(month), int(day), hour, minute, second

    def to_datetime(self) -> datetime:
        """Return this epoch as a timezone-aware UTC ``datetime``."""
        year, month, day, hour, minute, second = self.caldate()
        return datetime(year, month, day, tzinfo=UTC) + timedelta(
            hours=hour, minutes=minute, seconds=second
        )

    def __str__(self):
        year, month, day, hour, minute, second = self.caldate()
        return (f'{year:04d}-{month:02d}-{day:02d}T'
                f'{hour:02d}:{minute:02d}:{second:06.3f}Z')

    def __repr__(self):
        return f'Epoch(_jd={int(self._jd)}, _seconds={float(self._seconds)})'


def julian_centuries(epc: Epoch, config: EngineConfig | None = None) -> jax.Array:
    """Centuries elapsed between the reference epoch and *epc*.

    Computed from the split day/seconds representation so the result keeps
    sub-second resolution.  Negative for instants before the reference epoch.

    Args:
        epc (Epoch): Instant of interest.
        config (EngineConfig | None): Reference epoch and century length.
            Default: J2000.0 and 36525-day Julian centuries.

    Returns:
        Signed number of centuries, ``T``.

    Examples:
        ```python
        from orrery.epoch import Epoch, julian_centuries
        T = julian_centuries(Epoch(2100, 1, 1, 12))  # 1.0
        ```
    """
    if config is None:
        config = EngineConfig()
    _float = _seconds_dtype()
    days = (_float(epc._jd - jnp.int32(config.reference_day))
            + (epc._seconds - _float(config.reference_seconds)) / _float(SECONDS_PER_DAY))
    return (days / _float(config.century_days)).astype(get_dtype())


# Register Epoch as a JAX pytree so it can be used with jit and vmap
jax.tree_util.register_pytree_node(
    Epoch,
    lambda e: ((e._jd, e._seconds), None),
    lambda _, children: Epoch._from_internal(*children),
)
