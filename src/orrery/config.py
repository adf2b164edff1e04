"""Precision and engine configuration.

Two kinds of configuration live here:

- The module-wide float dtype (``set_dtype`` / ``get_dtype``).  The default
  is ``jnp.float32``; switching to ``jnp.float64`` enables JAX's 64-bit mode.
  Call ``set_dtype`` **before** any JIT compilation, since ``get_dtype()``
  is evaluated during tracing and baked into the compiled program.
- :class:`EngineConfig`, the time model the element rates are defined
  against: the reference epoch and the length of a Julian century.  It is
  passed explicitly to the position solver rather than read from globals,
  so alternate epochs can be used side by side.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import jax
import jax.numpy as jnp

from orrery.constants import JD2000, JULIAN_CENTURY_DAYS, SECONDS_PER_DAY

_VALID_DTYPES = (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64)

_dtype = jnp.float32


def set_dtype(dtype) -> None:
    """Set the module-wide float dtype for orrery.

    If *dtype* is ``jnp.float64``, JAX's 64-bit mode is automatically
    enabled via ``jax.config.update("jax_enable_x64", True)``.

    Args:
        dtype: One of ``jnp.float16``, ``jnp.bfloat16``, ``jnp.float32``,
            or ``jnp.float64``.

    Raises:
        ValueError: If *dtype* is not a supported float type.
    """
    global _dtype
    if dtype not in _VALID_DTYPES:
        raise ValueError(
            f"Unsupported dtype {dtype}. Must be one of: "
            f"jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64"
        )
    if dtype == jnp.float64:
        jax.config.update("jax_enable_x64", True)
    _dtype = dtype


def get_dtype():
    """Return the current module-wide float dtype."""
    return _dtype


def get_epoch_eq_tolerance() -> float:
    """Return the tolerance, in seconds, used when comparing two Epochs.

    Scales with the precision of the configured dtype: 1e-9 s for
    ``float64``, 1e-3 s for ``float32`` and 0.1 s for the 16-bit types.
    """
    if _dtype == jnp.float64:
        return 1e-9
    if _dtype == jnp.float32:
        return 1e-3
    return 0.1


@dataclass(frozen=True)
class EngineConfig:
    """Time model for element propagation.

    Orbital elements are tabulated at a reference epoch together with
    linear rates per Julian century.  The solver converts an instant into
    centuries elapsed since ``reference_jd`` using ``century_days``.

    Args:
        reference_jd: Julian Date of the reference epoch. Default: J2000.0
            (2000-01-01 12:00:00, JD 2451545.0).
        century_days: Length of one rate period. Units: *days*.
            Default: 36525 (one Julian century).

    Examples:
        ```python
        from orrery.config import EngineConfig
        config = EngineConfig()
        config.reference_day, config.reference_seconds
        ```
    """

    reference_jd: float = JD2000
    century_days: float = JULIAN_CENTURY_DAYS

    def __post_init__(self) -> None:
        if not math.isfinite(self.reference_jd):
            raise ValueError(f"reference_jd must be finite, got {self.reference_jd}")
        if not self.century_days > 0.0:
            raise ValueError(f"century_days must be positive, got {self.century_days}")

    @property
    def reference_day(self) -> int:
        """Integer Julian Day number of the reference epoch."""
        return math.floor(self.reference_jd)

    @property
    def reference_seconds(self) -> float:
        """Seconds elapsed within ``reference_day`` at the reference epoch."""
        return (self.reference_jd - self.reference_day) * SECONDS_PER_DAY

    @staticmethod
    def at_epoch(epc, century_days: float = JULIAN_CENTURY_DAYS) -> EngineConfig:
        """Build a configuration whose reference epoch is *epc*.

        Args:
            epc: An :class:`~orrery.epoch.Epoch`.
            century_days: Length of one rate period. Units: *days*.

        Returns:
            EngineConfig: Configuration referenced to *epc*.
        """
        return EngineConfig(
            reference_jd=int(epc._jd) + float(epc._seconds) / SECONDS_PER_DAY,
            century_days=century_days,
        )
