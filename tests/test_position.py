"""Tests for the heliocentric position solver."""

import jax
import jax.numpy as jnp
import pytest

from orrery.bodies import BODY_ELEMENTS
from orrery.config import EngineConfig
from orrery.epoch import Epoch, julian_centuries
from orrery.frames import rotation_ecliptic_to_orbital, rotation_orbital_to_ecliptic
from orrery.orbits import (
    ElementRates,
    OrbitalElements,
    apoapsis_distance,
    periapsis_distance,
    position_at_centuries,
    position_from_elements,
    propagate_elements,
)

EARTH = BODY_ELEMENTS["earth"]
ZERO_RATES = ElementRates(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)


def _static(a, e, inc, node, w, L):
    return OrbitalElements(a, e, inc, node, w, L, ZERO_RATES)


class TestEarthAtJ2000:
    def test_golden_position(self):
        r = position_from_elements(EARTH, Epoch(2000, 1, 1, 12, 0, 0.0))
        assert r.shape == (3,)
        assert float(r[0]) == pytest.approx(-0.177171249109, abs=1e-6)
        assert float(r[1]) == pytest.approx(0.967214484974, abs=1e-6)
        assert float(r[2]) == pytest.approx(-2.584492e-7, abs=1e-10)

    def test_distance(self):
        r = position_at_centuries(EARTH, 0.0)
        assert float(jnp.linalg.norm(r)) == pytest.approx(0.983307434854, abs=1e-9)

    def test_epoch_matches_centuries(self):
        r_epc = position_from_elements(EARTH, Epoch(2000, 1, 1, 12))
        assert jnp.allclose(r_epc, position_at_centuries(EARTH, 0.0), atol=1e-15)


class TestDistanceBounds:
    @pytest.mark.parametrize("body_id", list(BODY_ELEMENTS))
    @pytest.mark.parametrize("epc", [Epoch(1850, 1, 1), Epoch(2000, 1, 1, 12), Epoch(2024, 6, 15), Epoch(2049, 12, 31)])
    def test_within_perihelion_aphelion(self, body_id, epc):
        elements = BODY_ELEMENTS[body_id]
        T = julian_centuries(epc)
        current = propagate_elements(elements, T)
        distance = float(jnp.linalg.norm(position_at_centuries(elements, T)))
        assert distance >= float(periapsis_distance(current.semi_major_axis, current.eccentricity)) - 1e-9
        assert distance <= float(apoapsis_distance(current.semi_major_axis, current.eccentricity)) + 1e-9

    @pytest.mark.parametrize("epc", [Epoch(2000, 1, 1, 12), Epoch(2024, 6, 15), Epoch(2030, 3, 20, 8)])
    def test_earth_near_ecliptic(self, epc):
        r = position_from_elements(EARTH, epc)
        assert 0.9833 <= float(jnp.linalg.norm(r)) <= 1.0167
        assert abs(float(r[2])) < 1e-4


class TestGeometry:
    def test_perihelion(self):
        elements = _static(2.0, 0.2, 10.0, 30.0, 40.0, 70.0)
        r = position_at_centuries(elements, 0.0)
        R = rotation_orbital_to_ecliptic(40.0, 10.0, 30.0, use_degrees=True)
        assert jnp.allclose(r, 1.6 * R[:, 0], atol=1e-12)

    def test_aphelion(self):
        elements = _static(2.0, 0.2, 10.0, 30.0, 40.0, 250.0)
        r = position_at_centuries(elements, 0.0)
        R = rotation_orbital_to_ecliptic(40.0, 10.0, 30.0, use_degrees=True)
        assert jnp.allclose(r, -2.4 * R[:, 0], atol=1e-12)

    def test_circular_orbit_advances_uniformly(self):
        elements = OrbitalElements(1.0, 0.0, 0.0, 0.0, 0.0, 0.0, ElementRates(0.0, 0.0, 0.0, 0.0, 0.0, 36000.0))
        r = position_at_centuries(elements, 0.0025)
        # 90 degrees of mean longitude
        assert jnp.allclose(r, jnp.array([0.0, 1.0, 0.0]), atol=1e-12)

    def test_static_elements_are_static(self):
        elements = _static(1.5, 0.1, 3.0, 20.0, 60.0, 123.0)
        assert jnp.allclose(position_at_centuries(elements, 0.0), position_at_centuries(elements, 7.3), atol=1e-12)

    @pytest.mark.parametrize("T", [0.0, 0.013, 0.4, 0.77])
    def test_lies_on_conic(self, T):
        elements = _static(5.2, 0.048, 1.3, 100.5, -85.7, 34.4)
        elements = elements._replace(rates=ZERO_RATES._replace(mean_longitude=3034.7))
        r = position_at_centuries(elements, T)
        r_orb = rotation_ecliptic_to_orbital(-85.7, 1.3, 100.5, use_degrees=True) @ r
        assert float(r_orb[2]) == pytest.approx(0.0, abs=1e-12)
        nu = jnp.arctan2(r_orb[1], r_orb[0])
        expected = 5.2 * (1.0 - 0.048**2) / (1.0 + 0.048 * jnp.cos(nu))
        assert float(jnp.linalg.norm(r)) == pytest.approx(float(expected), abs=1e-12)

    def test_moves_over_time(self):
        r0 = position_from_elements(BODY_ELEMENTS["mars"], Epoch(2024, 6, 15))
        r1 = position_from_elements(BODY_ELEMENTS["mars"], Epoch(2024, 6, 16))
        assert not jnp.allclose(r0, r1)


class TestConfigEpoch:
    def test_alternate_reference_epoch(self):
        config = EngineConfig.at_epoch(Epoch(2024, 1, 1))
        r = position_from_elements(EARTH, Epoch(2024, 1, 1), config)
        assert jnp.allclose(r, position_at_centuries(EARTH, 0.0), atol=1e-15)

    def test_century_length(self):
        config = EngineConfig(century_days=365.25)
        epc = Epoch.from_jd(2451545.0 + 365.25)
        assert jnp.allclose(position_from_elements(EARTH, epc, config), position_at_centuries(EARTH, 1.0), atol=1e-12)


class TestTransforms:
    def test_jit(self):
        epc = Epoch(2024, 6, 15)
        r = jax.jit(position_from_elements)(EARTH, epc)
        assert jnp.allclose(r, position_from_elements(EARTH, epc), atol=1e-12)

    def test_vmap_over_time(self):
        T = jnp.linspace(-1.0, 0.5, 8)
        r = jax.vmap(position_at_centuries, in_axes=(None, 0))(BODY_ELEMENTS["mars"], T)
        assert r.shape == (8, 3)
        assert jnp.allclose(r[3], position_at_centuries(BODY_ELEMENTS["mars"], T[3]), atol=1e-12)
