"""Tests for the Epoch class and julian_centuries."""

from datetime import UTC, datetime, timedelta, timezone

import jax
import jax.numpy as jnp
import pytest

from orrery.bodies import BODY_ELEMENTS
from orrery.config import EngineConfig, set_dtype
from orrery.epoch import Epoch, julian_centuries
from orrery.orbits import position_from_elements


class TestConstruction:
    def test_date_components(self):
        epc = Epoch(2024, 3, 15, 6, 30, 45.5)
        assert epc.caldate()[:5] == (2024, 3, 15, 6, 30)
        assert epc.caldate()[5] == pytest.approx(45.5)

    def test_date_only_is_midnight(self):
        assert Epoch(2024, 3, 15).caldate() == (2024, 3, 15, 0, 0, 0.0)

    def test_internal_split(self):
        epc = Epoch(2000, 1, 1, 12, 0, 0.0)
        assert int(epc._jd) == 2451545
        assert float(epc._seconds) == 0.0

    @pytest.mark.parametrize(
        "string, expected",
        [
            ("2024-03-15", (2024, 3, 15, 0, 0)),
            ("2024-03-15T06:30:45Z", (2024, 3, 15, 6, 30)),
            ("2024-03-15T06:30:45.250Z", (2024, 3, 15, 6, 30)),
        ],
    )
    def test_string(self, string, expected):
        assert Epoch(string).caldate()[:5] == expected

    def test_string_fractional_seconds(self):
        assert Epoch("2024-03-15T06:30:45.250Z").caldate()[5] == pytest.approx(45.25)

    def test_invalid_string_raises(self):
        with pytest.raises(ValueError, match="Invalid Epoch string"):
            Epoch("15/03/2024")

    def test_aware_datetime_converted_to_utc(self):
        dt = datetime(2000, 1, 1, 13, 0, tzinfo=timezone(timedelta(hours=1)))
        assert Epoch(dt) == Epoch(2000, 1, 1, 12)

    def test_naive_datetime_is_utc(self):
        assert Epoch(datetime(2000, 1, 1, 12)) == Epoch(2000, 1, 1, 12)

    def test_copy(self):
        epc = Epoch(2024, 6, 15)
        assert Epoch(epc) == epc

    def test_from_jd(self):
        assert Epoch.from_jd(2451545.0) == Epoch(2000, 1, 1, 12)
        assert Epoch.from_jd(2451544.5) == Epoch(2000, 1, 1)

    def test_now(self):
        before = datetime.now(UTC)
        epc = Epoch.now()
        assert abs((epc.to_datetime() - before).total_seconds()) < 60.0

    def test_unsupported_type_raises(self):
        with pytest.raises(ValueError, match="Cannot construct Epoch"):
            Epoch(2451545.0)

    @pytest.mark.parametrize("args", [(), (2000, 1), (2000, 1, 1, 0, 0, 0.0, 0)])
    def test_wrong_arg_count_raises(self, args):
        with pytest.raises(ValueError):
            Epoch(*args)


class TestArithmetic:
    def test_add_carries_day(self):
        epc = Epoch(2000, 1, 1, 23, 59, 0.0) + 120.0
        assert epc.caldate() == (2000, 1, 2, 0, 1, 0.0)

    def test_subtract_epochs(self):
        assert float(Epoch(2000, 1, 2) - Epoch(2000, 1, 1)) == pytest.approx(86400.0)

    def test_subtract_seconds(self):
        assert Epoch(2000, 1, 2) - 86400.0 == Epoch(2000, 1, 1)

    def test_days_since(self):
        assert float(Epoch(2001, 1, 1).days_since(Epoch(2000, 1, 1))) == pytest.approx(366.0)

    def test_comparisons(self):
        early, late = Epoch(2000, 1, 1), Epoch(2000, 1, 1, 0, 0, 1.0)
        assert early < late
        assert late > early
        assert early <= early
        assert late >= early
        assert early != late


class TestViews:
    def test_jd(self):
        assert float(Epoch(2000, 1, 1, 12).jd()) == pytest.approx(2451545.0, abs=1e-9)

    def test_mjd(self):
        assert float(Epoch(2000, 1, 1, 12).mjd()) == pytest.approx(51544.5, abs=1e-9)

    def test_floor_minute(self):
        floored = Epoch(2024, 3, 15, 6, 30, 45.5).floor()
        assert floored.caldate() == (2024, 3, 15, 6, 30, 0.0)

    def test_floor_hour(self):
        floored = Epoch(2024, 3, 15, 6, 30, 45.5).floor(3600.0)
        assert floored.caldate() == (2024, 3, 15, 6, 0, 0.0)

    def test_floor_on_boundary_is_identity(self):
        epc = Epoch(2024, 3, 15, 6, 30, 0.0)
        assert epc.floor() == epc

    @pytest.mark.parametrize("granularity", [0.0, -60.0])
    def test_floor_non_positive_raises(self, granularity):
        with pytest.raises(ValueError, match="granularity"):
            Epoch(2024, 3, 15).floor(granularity)

    def test_to_datetime(self):
        dt = Epoch(2024, 3, 15, 6, 30, 45.5).to_datetime()
        assert dt == datetime(2024, 3, 15, 6, 30, 45, 500000, tzinfo=UTC)

    def test_str(self):
        assert str(Epoch(2000, 1, 1, 12)) == "2000-01-01T12:00:00.000Z"

    def test_repr(self):
        assert repr(Epoch(2000, 1, 1, 12)) == "Epoch(_jd=2451545, _seconds=0.0)"


class TestJulianCenturies:
    def test_zero_at_j2000(self):
        assert float(julian_centuries(Epoch(2000, 1, 1, 12))) == 0.0

    def test_one_century(self):
        assert float(julian_centuries(Epoch(2100, 1, 1, 12))) == pytest.approx(1.0, abs=1e-15)

    def test_negative_before_reference(self):
        epc = Epoch.from_jd(2451545.0 - 36525.0 / 2)
        assert float(julian_centuries(epc)) == pytest.approx(-0.5, abs=1e-15)

    def test_one_second_resolution(self):
        T = julian_centuries(Epoch(2024, 6, 15, 0, 0, 1.0)) - julian_centuries(Epoch(2024, 6, 15))
        assert float(T) == pytest.approx(1.0 / (86400.0 * 36525.0), rel=1e-6)

    def test_custom_century_length(self):
        config = EngineConfig(century_days=365.25)
        T = julian_centuries(Epoch(2001, 1, 1, 12), config)
        assert float(T) == pytest.approx(366.0 / 365.25, abs=1e-12)

    def test_custom_reference(self):
        config = EngineConfig.at_epoch(Epoch(2024, 1, 1))
        assert float(julian_centuries(Epoch(2024, 1, 1), config)) == pytest.approx(0.0, abs=1e-15)
        assert float(julian_centuries(Epoch(2000, 1, 1, 12), config)) < 0.0

    def test_jit(self):
        epc = Epoch(2050, 1, 1)
        jitted = jax.jit(julian_centuries)(epc)
        assert float(jitted) == pytest.approx(float(julian_centuries(epc)), abs=1e-15)


class TestPytree:
    def test_flatten_unflatten(self):
        epc = Epoch(2024, 6, 15, 12, 0, 30.0)
        leaves, treedef = jax.tree_util.tree_flatten(epc)
        assert len(leaves) == 2
        assert jax.tree_util.tree_unflatten(treedef, leaves) == epc


class TestHalfPrecision:
    @pytest.mark.parametrize("dtype", [jnp.float16, jnp.bfloat16])
    def test_afternoon_seconds_finite(self, dtype):
        set_dtype(dtype)
        epc = Epoch(2024, 6, 15, 10, 0, 0.0)
        assert epc._seconds.dtype == jnp.float32
        assert float(epc._seconds) == pytest.approx(79200.0)
        assert epc.caldate()[:5] == (2024, 6, 15, 10, 0)

    @pytest.mark.parametrize("dtype", [jnp.float16, jnp.bfloat16])
    def test_centuries_cast_to_dtype(self, dtype):
        set_dtype(dtype)
        T = julian_centuries(Epoch(2024, 6, 15, 10, 0, 0.0))
        assert T.dtype == dtype
        assert float(T) == pytest.approx(0.244543, abs=2e-3)

    def test_position_finite(self):
        set_dtype(jnp.float16)
        r = position_from_elements(BODY_ELEMENTS["earth"], Epoch(2024, 6, 15, 10, 0, 0.0))
        assert bool(jnp.all(jnp.isfinite(r)))

    def test_seconds_follow_float64(self):
        assert Epoch(2024, 6, 15, 10)._seconds.dtype == jnp.float64

    @pytest.mark.parametrize("dtype", [jnp.float16, jnp.bfloat16])
    @pytest.mark.parametrize("date", [(2024, 6, 15), (2040, 1, 1), (2031, 12, 31)])
    def test_day_number_exact(self, dtype, date):
        set_dtype(dtype)
        assert Epoch(*date, 6).caldate()[:4] == (*date, 6)
