"""
Tests for Reading component.

Tests cover:
- Equivalence classes: valid data, invalid data
- Boundary value analysis: validation thresholds
- Error scenarios: missing fields, malformed payloads
- Payload parsing: WeatherAPI-style documents
"""

import dataclasses

import pytest
from airguard.errors import AirGuardError, MissingFieldError
from airguard.reading import PollutantPanel, Reading


def weather_payload():
    """A WeatherAPI-style document as returned by the weather collaborator."""
    return {
        "location": {
            "name": "Delhi",
            "region": "Delhi",
            "country": "India",
            "lat": 28.67,
            "lon": 77.22,
            "localtime": "2025-11-24 14:05",
        },
        "current": {
            "temp_c": 24.0,
            "wind_kph": 6.1,
            "wind_degree": 290,
            "wind_dir": "WNW",
            "humidity": 53,
            "air_quality": {
                "co": 1250.5,
                "no2": 45.2,
                "o3": 88.0,
                "so2": 12.4,
                "pm2_5": 142.3,
                "pm10": 210.7,
                "us-epa-index": 4,
                "gb-defra-index": 10,
            },
        },
    }


class TestReadingValidation:
    """Test suite for Reading validation."""

    # ==================== Equivalence Classes ====================

    def test_valid_reading(self, clean_reading):
        """Equivalence class: All valid values → validation passes."""
        valid, reason = clean_reading.validate()
        assert valid is True
        assert reason is None

    def test_invalid_humidity_above_range(self, make_reading):
        """Error scenario: Humidity above 100% → validation fails."""
        valid, reason = make_reading(humidity=101).validate()
        assert valid is False
        assert "humidity" in reason.lower()

    def test_invalid_negative_wind(self, make_reading):
        """Error scenario: Negative wind speed → validation fails."""
        valid, reason = make_reading(wind_kph=-1).validate()
        assert valid is False
        assert "wind" in reason.lower()

    def test_invalid_latitude(self, make_reading):
        """Error scenario: Latitude outside [-90, 90] → validation fails."""
        valid, reason = make_reading(latitude=91).validate()
        assert valid is False
        assert "latitude" in reason.lower()

    def test_invalid_longitude(self, make_reading):
        """Error scenario: Longitude outside [-180, 180] → validation fails."""
        valid, reason = make_reading(longitude=-181).validate()
        assert valid is False
        assert "longitude" in reason.lower()

    def test_invalid_temperature(self, make_reading):
        """Error scenario: Temperature above 60 °C → validation fails."""
        valid, reason = make_reading(temperature=61).validate()
        assert valid is False
        assert "temperature" in reason.lower()

    def test_invalid_severity_index(self, make_reading):
        """Error scenario: Severity index outside 1-6 → validation fails."""
        valid, reason = make_reading(us_epa_index=7).validate()
        assert valid is False
        assert "us_epa_index" in reason

    def test_negative_pollutant_is_not_a_validation_error(self, make_reading):
        """Sensor noise: small negative concentrations pass validation."""
        valid, reason = make_reading(pm2_5=-0.3).validate()
        assert valid is True
        assert reason is None

    # ==================== Boundary Value Analysis ====================

    @pytest.mark.parametrize("humidity", [0, 100])
    def test_humidity_boundaries(self, make_reading, humidity):
        """Boundary: Humidity at 0 and 100 are valid."""
        valid, _ = make_reading(humidity=humidity).validate()
        assert valid is True

    def test_zero_wind_valid(self, make_reading):
        """Boundary: Calm air (0 km/h) is valid."""
        valid, _ = make_reading(wind_kph=0).validate()
        assert valid is True

    @pytest.mark.parametrize("index", [1, 6])
    def test_severity_index_boundaries(self, make_reading, index):
        """Boundary: Severity index 1 and 6 are valid."""
        valid, _ = make_reading(us_epa_index=index).validate()
        assert valid is True

    def test_missing_severity_index_still_validates(self, make_reading):
        """Missing severity index is not a range error."""
        valid, _ = make_reading(us_epa_index=None).validate()
        assert valid is True


class TestReadingFields:
    """Test suite for required-field access."""

    def test_reading_is_immutable(self, clean_reading):
        """Readings cannot be mutated by engine components."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            clean_reading.humidity = 10

    def test_properties_delegate_to_panel(self, make_reading):
        reading = make_reading(pm2_5=40.0, us_epa_index=3)
        assert reading.pm2_5 == 40.0
        assert reading.severity_index == 3

    def test_missing_pollutant_raises(self, make_reading):
        """Error scenario: Absent PM2.5 → MissingFieldError naming the field."""
        reading = make_reading(pm2_5=None)
        with pytest.raises(MissingFieldError) as exc_info:
            reading.pm2_5
        assert exc_info.value.field == "pm2_5"
        assert "pm2_5" in str(exc_info.value)

    def test_missing_field_error_hierarchy(self):
        """MissingFieldError is catchable as AirGuardError and KeyError."""
        error = MissingFieldError("no2")
        assert isinstance(error, AirGuardError)
        assert isinstance(error, KeyError)

    def test_unknown_panel_field_raises(self):
        with pytest.raises(MissingFieldError):
            PollutantPanel(pm2_5=10).require("nh3")

    def test_panel_as_dict_uses_short_codes(self):
        panel = PollutantPanel(co=1, no2=2, o3=3, so2=4, pm2_5=5, pm10=6)
        assert panel.as_dict() == {"pm25": 5, "pm10": 6, "no2": 2, "so2": 4, "o3": 3, "co": 1}


class TestReadingFromPayload:
    """Test suite for parsing WeatherAPI-style payloads."""

    def test_parses_full_payload(self):
        reading = Reading.from_weather_payload(weather_payload())

        assert reading.location.name == "Delhi"
        assert reading.location.latitude == 28.67
        assert reading.location.longitude == 77.22
        assert reading.wind_kph == 6.1
        assert reading.humidity == 53
        assert reading.pm2_5 == 142.3
        assert reading.severity_index == 4

    def test_absent_pollutant_becomes_none(self):
        payload = weather_payload()
        del payload["current"]["air_quality"]["so2"]

        reading = Reading.from_weather_payload(payload)

        assert reading.air_quality.so2 is None
        with pytest.raises(MissingFieldError):
            reading.so2

    def test_missing_air_quality_block(self):
        payload = weather_payload()
        del payload["current"]["air_quality"]

        reading = Reading.from_weather_payload(payload)

        assert reading.air_quality.us_epa_index is None

    @pytest.mark.parametrize("section,key", [
        ("location", "lat"),
        ("location", "name"),
        ("current", "wind_kph"),
        ("current", "humidity"),
    ])
    def test_missing_required_key_raises(self, section, key):
        """Error scenario: Required meteorology/location key absent."""
        payload = weather_payload()
        del payload[section][key]

        with pytest.raises(MissingFieldError) as exc_info:
            Reading.from_weather_payload(payload)
        assert exc_info.value.field == key

    def test_missing_section_raises(self):
        payload = weather_payload()
        del payload["current"]

        with pytest.raises(MissingFieldError):
            Reading.from_weather_payload(payload)
