"""Tests for element records, validation and interpolation."""

import logging
import math

import jax
import pytest

from solarplanets.constants import AU_KM, DEG2RAD, TWO_PI
from solarplanets.elements import (
    ElementRecordError,
    InterpolatedElements,
    OrbitalElementSet,
    interpolate_element,
    interpolate_elements,
    validate_elements,
)

# Julian centuries at 2003-08-27T12:00:00Z
_T = 0.036522929


class TestFromMapping:
    def test_field_order(self, mars_record):
        elements = OrbitalElementSet.from_mapping(mars_record)
        assert elements.a_au == 1.52366231
        assert elements.a_rate_au == -0.00007221
        assert elements.inc_rate_as == -25.47
        assert elements.ml_rate_as == 68905103.78

    def test_to_mapping_restores_layout(self, mars_record):
        elements = OrbitalElementSet.from_mapping(mars_record)
        assert elements.to_mapping() == mars_record

    def test_extra_keys_ignored(self, mars_record):
        mars_record["name"] = "Mars"
        elements = OrbitalElementSet.from_mapping(mars_record)
        assert elements.e == 0.09341233

    def test_numeric_strings_accepted(self, mars_record):
        mars_record["e"] = "0.09341233"
        assert OrbitalElementSet.from_mapping(mars_record).e == 0.09341233

    def test_missing_keys(self, mars_record):
        del mars_record["dml_sec"]
        del mars_record["a_au"]
        with pytest.raises(ElementRecordError, match="missing keys: a_au, dml_sec"):
            OrbitalElementSet.from_mapping(mars_record)

    def test_non_numeric(self, mars_record):
        mars_record["de"] = "fast"
        with pytest.raises(ElementRecordError, match="'de' is not numeric"):
            OrbitalElementSet.from_mapping(mars_record)

    def test_none_value(self, mars_record):
        mars_record["inc_deg"] = None
        with pytest.raises(ElementRecordError, match="'inc_deg'"):
            OrbitalElementSet.from_mapping(mars_record)

    def test_error_is_value_error(self, mars_record):
        del mars_record["e"]
        with pytest.raises(ValueError):
            OrbitalElementSet.from_mapping(mars_record)


class TestValidateElements:
    def test_valid_returns_record(self, mars_record):
        elements = OrbitalElementSet.from_mapping(mars_record)
        assert validate_elements(elements, "mars") is elements

    def test_non_positive_semi_major_axis(self, mars_record):
        mars_record["a_au"] = 0.0
        elements = OrbitalElementSet.from_mapping(mars_record)
        with pytest.raises(ElementRecordError, match="semi-major axis"):
            validate_elements(elements, "mars")

    @pytest.mark.parametrize("e", [-0.1, 1.0, 1.4])
    def test_eccentricity_out_of_range(self, mars_record, e):
        mars_record["e"] = e
        elements = OrbitalElementSet.from_mapping(mars_record)
        with pytest.raises(ElementRecordError, match="eccentricity"):
            validate_elements(elements, "mars")

    def test_non_finite(self, mars_record):
        mars_record["lop_deg"] = float("nan")
        elements = OrbitalElementSet.from_mapping(mars_record)
        with pytest.raises(ElementRecordError, match="'lop_deg' is not finite"):
            validate_elements(elements, "mars")

    def test_negative_inclination_warns(self, earth_record, caplog):
        elements = OrbitalElementSet.from_mapping(earth_record)
        with caplog.at_level(logging.WARNING, logger="solarplanets.elements"):
            validate_elements(elements, "earth")
        assert "earth: negative inclination" in caplog.text

    def test_positive_inclination_silent(self, mars_record, caplog):
        elements = OrbitalElementSet.from_mapping(mars_record)
        with caplog.at_level(logging.WARNING, logger="solarplanets.elements"):
            validate_elements(elements, "mars")
        assert caplog.records == []

    def test_default_label(self, mars_record):
        mars_record["e"] = 2.0
        elements = OrbitalElementSet.from_mapping(mars_record)
        with pytest.raises(ElementRecordError, match="^element record:"):
            validate_elements(elements)


class TestInterpolateElement:
    def test_at_j2000(self):
        assert interpolate_element(1.5, 0.2, 0.0) == pytest.approx(1.5)

    def test_linear(self):
        assert interpolate_element(1.5, 0.2, 2.0) == pytest.approx(1.9)

    def test_backwards(self):
        assert interpolate_element(1.5, 0.2, -1.0) == pytest.approx(1.3)


class TestInterpolateElements:
    def test_earth_eccentricity(self, earth_record):
        current = interpolate_elements(OrbitalElementSet.from_mapping(earth_record), _T)
        assert current.e == pytest.approx(0.016709, abs=1e-6)

    def test_mars_eccentricity(self, mars_record):
        current = interpolate_elements(OrbitalElementSet.from_mapping(mars_record), _T)
        assert current.e == pytest.approx(0.093417, abs=1e-6)

    def test_semi_major_axis_in_km(self, mars_record):
        current = interpolate_elements(OrbitalElementSet.from_mapping(mars_record), 0.0)
        assert current.a == pytest.approx(1.52366231 * AU_KM, rel=1e-12)

    def test_angles_in_radians_at_j2000(self, mars_record):
        current = interpolate_elements(OrbitalElementSet.from_mapping(mars_record), 0.0)
        assert current.inc == pytest.approx(1.85061 * DEG2RAD, rel=1e-12)
        assert current.raan == pytest.approx(49.57854 * DEG2RAD, rel=1e-12)
        assert current.lop == pytest.approx(336.04084 * DEG2RAD, rel=1e-12)

    def test_angles_wrapped(self, earth_record, mars_record):
        for record in (earth_record, mars_record):
            current = interpolate_elements(OrbitalElementSet.from_mapping(record), _T)
            for angle in (current.inc, current.raan, current.lop, current.ml):
                assert 0.0 <= float(angle) < TWO_PI

    def test_negative_raan_wrapped(self, earth_record):
        current = interpolate_elements(OrbitalElementSet.from_mapping(earth_record), 0.0)
        assert current.raan == pytest.approx(TWO_PI - 11.26064 * DEG2RAD, rel=1e-12)

    def test_mars_mean_longitude(self, mars_record):
        current = interpolate_elements(OrbitalElementSet.from_mapping(mars_record), _T)
        # 355.45332 deg + 68905103.78 arcsec * T, wrapped
        expected = math.fmod(355.45332 + 68905103.78 / 3600.0 * _T, 360.0)
        assert math.degrees(float(current.ml)) == pytest.approx(expected, abs=1e-6)

    def test_returns_named_tuple(self, mars_record):
        current = interpolate_elements(OrbitalElementSet.from_mapping(mars_record), _T)
        assert isinstance(current, InterpolatedElements)

    def test_jit(self, mars_record):
        elements = OrbitalElementSet.from_mapping(mars_record)
        current = jax.jit(interpolate_elements)(elements, _T)
        assert current.e == pytest.approx(0.093417, abs=1e-6)
