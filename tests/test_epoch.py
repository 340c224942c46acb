"""Tests for the Epoch record."""

import datetime

import jax
import jax.numpy as jnp
import pytest

from solarplanets.epoch import Epoch


class TestConstruction:
    def test_defaults(self):
        epc = Epoch(2003, 8, 27)
        assert epc.hour == 0
        assert epc.minute == 0
        assert epc.second == 0.0

    def test_fields(self):
        epc = Epoch(2003, 8, 27, 12, 30, 15.5)
        assert tuple(epc) == (2003, 8, 27, 12, 30, 15.5)


class TestFromString:
    def test_date_only(self):
        assert Epoch.from_string("2003-08-27") == Epoch(2003, 8, 27, 0, 0, 0.0)

    def test_datetime(self):
        assert Epoch.from_string("2003-08-27T12:00:00Z") == Epoch(2003, 8, 27, 12, 0, 0.0)

    def test_fractional_seconds(self):
        epc = Epoch.from_string("2004-03-03T04:30:15.250Z")
        assert epc.hour == 4
        assert epc.minute == 30
        assert epc.second == pytest.approx(15.25)

    @pytest.mark.parametrize(
        "string",
        [
            "2003/08/27",
            "2003-08-27T12:00:00",
            "2003-08-27 12:00:00Z",
            "27-08-2003",
            "",
        ],
    )
    def test_invalid_format(self, string):
        with pytest.raises(ValueError, match="not ISO 8601 compliant"):
            Epoch.from_string(string)

    def test_impossible_date(self):
        with pytest.raises(ValueError):
            Epoch.from_string("2003-13-27T12:00:00Z")


class TestFromDatetime:
    def test_utc(self):
        dt = datetime.datetime(2003, 8, 27, 12, 0, 0, tzinfo=datetime.timezone.utc)
        assert Epoch.from_datetime(dt) == Epoch(2003, 8, 27, 12, 0, 0.0)

    def test_naive_is_utc(self):
        dt = datetime.datetime(2003, 8, 27, 12, 0, 0)
        assert Epoch.from_datetime(dt) == Epoch(2003, 8, 27, 12, 0, 0.0)

    def test_offset_converted_to_utc(self):
        tz = datetime.timezone(datetime.timedelta(hours=-5))
        dt = datetime.datetime(2003, 8, 27, 22, 0, 0, tzinfo=tz)
        assert Epoch.from_datetime(dt) == Epoch(2003, 8, 28, 3, 0, 0.0)

    def test_microseconds(self):
        dt = datetime.datetime(2003, 8, 27, 12, 0, 1, 500000)
        assert Epoch.from_datetime(dt).second == pytest.approx(1.5)


class TestCoerce:
    def test_epoch_passthrough(self):
        epc = Epoch(2003, 8, 27, 12)
        assert Epoch.coerce(epc) is epc

    def test_string(self):
        assert Epoch.coerce("2003-08-27T12:00:00Z") == Epoch(2003, 8, 27, 12, 0, 0.0)

    def test_datetime(self):
        dt = datetime.datetime(2003, 8, 27, 12, tzinfo=datetime.timezone.utc)
        assert Epoch.coerce(dt) == Epoch(2003, 8, 27, 12, 0, 0.0)

    def test_unsupported_type(self):
        with pytest.raises(ValueError, match="Cannot construct Epoch"):
            Epoch.coerce(2452879.0)


class TestJulianDate:
    def test_jd(self):
        assert Epoch(2003, 8, 27, 12).jd() == pytest.approx(2452879.0, abs=1e-9)

    def test_j2000(self):
        assert Epoch(2000, 1, 1, 12).julian_centuries() == pytest.approx(0.0, abs=1e-15)

    def test_julian_centuries(self):
        assert Epoch(2003, 8, 27, 12).julian_centuries() == pytest.approx(0.036522929, abs=1e-8)

    def test_jit(self):
        T = jax.jit(lambda e: e.julian_centuries())(Epoch(2003, 8, 27, 12, 0, 0.0))
        assert T == pytest.approx(0.036522929, abs=1e-8)

    def test_vmap_over_stacked_epochs(self):
        epochs = Epoch(
            jnp.array([2000, 2003]),
            jnp.array([1, 8]),
            jnp.array([1, 27]),
            jnp.array([12, 12]),
            jnp.array([0, 0]),
            jnp.array([0.0, 0.0]),
        )
        jd = jax.vmap(lambda e: e.jd())(epochs)
        assert jnp.allclose(jd, jnp.array([2451545.0, 2452879.0]))


class TestIsoformat:
    def test_whole_seconds(self):
        assert Epoch(2003, 8, 27, 12).isoformat() == "2003-08-27T12:00:00.000Z"

    def test_fractional_seconds(self):
        assert Epoch(2004, 3, 3, 4, 30, 15.25).isoformat() == "2004-03-03T04:30:15.250Z"

    def test_parse_roundtrip(self):
        string = "2004-03-03T04:30:15.250Z"
        assert Epoch.from_string(string).isoformat() == string

    def test_rounds_to_millisecond(self):
        assert Epoch(2003, 8, 27, 12, 0, 15.2504).isoformat() == "2003-08-27T12:00:15.250Z"

    def test_seconds_carry_into_minute(self):
        assert Epoch(2003, 8, 27, 12, 0, 59.9999).isoformat() == "2003-08-27T12:01:00.000Z"

    def test_seconds_carry_into_new_year(self):
        assert Epoch(2003, 12, 31, 23, 59, 59.9996).isoformat() == "2004-01-01T00:00:00.000Z"

    @pytest.mark.parametrize("second", [0.0, 30.0004, 59.9994, 59.9995, 59.9999])
    def test_output_parses(self, second):
        string = Epoch.from_string(f"2003-08-27T12:00:{second:07.4f}Z").isoformat()
        assert Epoch.from_string(string).isoformat() == string
