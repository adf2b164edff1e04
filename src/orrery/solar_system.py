"""Body-keyed access to positions and orbital paths.

:class:`SolarSystem` binds an element table to an :class:`EngineConfig` and
answers the questions a scene layer asks each frame: where is each body
now, and what does its orbit look like.  Positions of all bodies are
evaluated together with ``jax.vmap`` over the stacked element table.

Orbital motion is imperceptible at sub-minute resolution, so
:meth:`SolarSystem.cached_position` keeps the last position per body and
only recomputes when the requested instant enters a new minute.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

import jax
import jax.numpy as jnp
from jax import Array

from orrery.bodies import BODY_ELEMENTS, SUN_ID
from orrery.config import EngineConfig, get_dtype
from orrery.epoch import Epoch, julian_centuries
from orrery.orbits import (
    DEFAULT_SEGMENTS,
    OrbitalElements,
    orbital_path,
    position_at_centuries,
    position_from_elements,
)

logger = logging.getLogger(__name__)


class SolarSystem:
    """A Sun fixed at the origin and a table of bodies orbiting it.

    Args:
        elements: Mapping of body id to J2000 elements. Default: the nine
            bodies of :data:`orrery.bodies.BODY_ELEMENTS`.
        config: Reference epoch and century length the elements are
            defined against. Default: J2000.0, 36525-day centuries.
        cache_granularity: Bucket size of :meth:`cached_position`.
            Units: *s*. Default: 60.

    Raises:
        ValueError: If *elements* contains the Sun or the granularity is
            not positive.

    Examples:
        ```python
        from orrery import Epoch, SolarSystem
        system = SolarSystem()
        r = system.position("mars", Epoch(2024, 6, 15))
        ```
    """

    def __init__(
        self,
        elements: Mapping[str, OrbitalElements] | None = None,
        config: EngineConfig | None = None,
        cache_granularity: float = 60.0,
    ) -> None:
        elements = BODY_ELEMENTS if elements is None else elements
        if SUN_ID in elements:
            raise ValueError(f"'{SUN_ID}' is fixed at the origin and cannot have elements")
        if cache_granularity <= 0.0:
            raise ValueError(f"cache_granularity must be positive, got {cache_granularity}")

        self._elements = dict(elements)
        self.config = config if config is not None else EngineConfig()
        self.cache_granularity = cache_granularity
        self._cache: dict[str, tuple[tuple[int, float], Array]] = {}
        # Element table stacked along a leading body axis, one per dtype
        self._stacked: dict[object, OrbitalElements] = {}
        if self._elements:
            self._stacked_elements()

    @property
    def body_ids(self) -> tuple[str, ...]:
        """All body ids, the Sun first."""
        return (SUN_ID, *self._elements)

    def elements(self, body_id: str) -> OrbitalElements | None:
        """Return the elements of *body_id*, or ``None`` for the Sun.

        Raises:
            KeyError: If *body_id* is unknown.
        """
        if body_id == SUN_ID:
            return None
        try:
            return self._elements[body_id]
        except KeyError:
            raise KeyError(f"Unknown body id '{body_id}'") from None

    def position(self, body_id: str, epc: Epoch) -> Array:
        """Heliocentric ecliptic position of *body_id* at *epc*.

        Args:
            body_id: Body identifier.
            epc: Instant of interest.

        Returns:
            Position ``[x, y, z]``. Units: *AU*. Shape ``(3,)``.

        Raises:
            KeyError: If *body_id* is unknown.
        """
        elements = self.elements(body_id)
        if elements is None:
            return jnp.zeros(3, dtype=get_dtype())
        return position_from_elements(elements, epc, self.config)

    def positions(self, epc: Epoch) -> dict[str, Array]:
        """Positions of every body at *epc*, keyed by body id.

        Args:
            epc: Instant of interest.

        Returns:
            dict: Body id to position ``[x, y, z]`` in AU, the Sun first.
        """
        result = {SUN_ID: jnp.zeros(3, dtype=get_dtype())}
        if not self._elements:
            return result

        T = julian_centuries(epc, self.config)
        r = jax.vmap(position_at_centuries, in_axes=(0, None))(self._stacked_elements(), T)
        result.update(zip(self._elements, r))
        return result

    def _stacked_elements(self) -> OrbitalElements:
        """The element table as one batched element set, built once per dtype."""
        dtype = get_dtype()
        stacked = self._stacked.get(dtype)
        if stacked is None:
            stacked = jax.tree_util.tree_map(
                lambda *leaves: jnp.asarray(leaves, dtype=dtype),
                *self._elements.values(),
            )
            self._stacked[dtype] = stacked
        return stacked

    def orbital_path(self, body_id: str, segments: int = DEFAULT_SEGMENTS) -> Array:
        """Closed polyline of the orbit of *body_id*.

        Args:
            body_id: Body identifier.
            segments: Number of line segments. Default: 128.

        Returns:
            Points ``[x, y, z]`` in AU. Shape ``(segments + 1, 3)``.

        Raises:
            KeyError: If *body_id* is unknown.
            ValueError: For the Sun, which does not orbit.
        """
        elements = self.elements(body_id)
        if elements is None:
            raise ValueError(f"'{body_id}' is fixed at the origin and has no orbit")
        return orbital_path(elements, segments)

    def cached_position(self, body_id: str, epc: Epoch) -> Array:
        """Position of *body_id*, recomputed at most once per cache bucket.

        The position is evaluated at the start of the bucket containing
        *epc*, so every instant within the same minute (by default) returns
        the identical array.  One entry is kept per body.

        Args:
            body_id: Body identifier.
            epc: Instant of interest.

        Returns:
            Position ``[x, y, z]``. Units: *AU*. Shape ``(3,)``.
        """
        bucket = epc.floor(self.cache_granularity)
        key = (int(bucket._jd), float(bucket._seconds))

        cached = self._cache.get(body_id)
        if cached is not None and cached[0] == key:
            return cached[1]

        logger.debug("Refreshing cached position of %s at %s", body_id, bucket)
        r = self.position(body_id, bucket)
        self._cache[body_id] = (key, r)
        return r

    def clear_cache(self) -> None:
        """Drop every cached position."""
        self._cache.clear()
