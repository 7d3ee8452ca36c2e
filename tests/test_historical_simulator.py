"""
Tests for HistoricalSimulator component.

Tests cover:
- Point counts and labels for every time range
- Diurnal model: rush-hour, night and ozone behaviour
- Floors on simulated values
- Predictions: spacing, rush-hour factor, falling confidence
- Summary statistics consistent with the generated history
- Reproducibility under a fixed seed
"""

from datetime import datetime

import numpy as np
import pytest
from airguard.errors import MissingFieldError
from airguard.historical_simulator import HistoricalSimulator, is_night, is_rush_hour
from airguard.insights import TimeRange


class TestHistoricalSimulator:
    """Test suite for HistoricalSimulator."""

    @pytest.fixture
    def simulator(self, rng):
        """Fixture providing a seeded simulator."""
        return HistoricalSimulator(rng=rng)

    @pytest.fixture
    def reading(self, make_reading):
        """Severity 3 (current AQI 105) with PM2.5 of 40."""
        return make_reading(us_epa_index=3, pm2_5=40.0)

    # ==================== Point Counts ====================

    @pytest.mark.parametrize("time_range,count", [
        (TimeRange.H12, 12),
        (TimeRange.H24, 24),
        (TimeRange.D7, 7),
        (TimeRange.D30, 30),
    ])
    def test_history_length(self, simulator, reading, noon, time_range, count):
        insights = simulator.generate(reading, time_range, now=noon)
        assert len(insights.history) == count
        assert len(insights.predictions) == 6

    def test_accepts_range_string(self, simulator, reading, noon):
        insights = simulator.generate(reading, "30D", now=noon)
        assert len(insights.history) == 30

    def test_invalid_range_rejected(self, simulator, reading, noon):
        with pytest.raises(ValueError):
            simulator.generate(reading, "48H", now=noon)

    def test_24h_aqi_floor(self, simulator, reading, noon):
        insights = simulator.generate(reading, TimeRange.H24, now=noon)
        assert all(point.aqi >= 10 for point in insights.history)

    # ==================== Labels ====================

    def test_hourly_labels_end_one_hour_before_now(self, simulator, reading, noon):
        history = simulator.generate(reading, TimeRange.H24, now=noon).history
        assert history[0].timestamp == "12:00"
        assert history[-1].timestamp == "11:00"
        assert [p.timestamp for p in history[:3]] == ["12:00", "13:00", "14:00"]

    def test_12h_labels(self, simulator, reading, noon):
        history = simulator.generate(reading, TimeRange.H12, now=noon).history
        assert [p.timestamp for p in history] == [f"{h}:00" for h in range(0, 12)]

    def test_daily_labels(self, simulator, reading, noon):
        history = simulator.generate(reading, TimeRange.D7, now=noon).history
        assert [p.timestamp for p in history] == [f"{d}/1" for d in range(8, 15)]

    def test_daily_labels_cross_month(self, simulator, reading):
        history = simulator.generate(reading, TimeRange.D30, now=datetime(2025, 3, 5, 9, 0)).history
        assert history[0].timestamp == "3/2"
        assert history[-1].timestamp == "4/3"

    # ==================== Diurnal Model ====================

    @pytest.mark.parametrize("hour,expected", [
        (7, False), (8, True), (10, True), (11, False),
        (17, False), (18, True), (21, True), (22, False),
    ])
    def test_rush_hour_windows(self, hour, expected):
        assert is_rush_hour(hour) is expected

    @pytest.mark.parametrize("hour,expected", [(0, False), (1, True), (5, True), (6, False)])
    def test_night_window(self, hour, expected):
        assert is_night(hour) is expected

    def test_hourly_aqi_follows_diurnal_factor(self, simulator, reading, noon):
        """Rush hours ~126, nights ~73.5, otherwise ~105, each within ±5."""
        history = simulator.generate(reading, TimeRange.H24, now=noon).history
        for point in history:
            hour = int(point.timestamp.split(":")[0])
            if is_rush_hour(hour):
                assert 121 <= point.aqi <= 131
            elif is_night(hour):
                assert 69 <= point.aqi <= 79
            else:
                assert 100 <= point.aqi <= 110

    def test_hourly_no2_and_pm10_scale_without_noise(self, simulator, reading, noon):
        history = simulator.generate(reading, TimeRange.H24, now=noon).history
        for point in history:
            hour = int(point.timestamp.split(":")[0])
            if is_rush_hour(hour):
                assert (point.no2, point.pm10) == (24, 72)
            elif is_night(hour):
                assert (point.no2, point.pm10) == (14, 42)
            else:
                assert (point.no2, point.pm10) == (20, 60)

    def test_ozone_halves_at_night(self, simulator, reading, noon):
        history = simulator.generate(reading, TimeRange.H24, now=noon).history
        night_o3 = {p.o3 for p in history if is_night(int(p.timestamp.split(":")[0]))}
        day_o3 = {p.o3 for p in history if not is_night(int(p.timestamp.split(":")[0]))}
        assert night_o3 == {15}
        assert day_o3 == {36}

    def test_daily_values_within_random_band(self, simulator, reading, noon):
        """Daily multiplier in [0.8, 1.2] plus ±5 noise around AQI 105."""
        history = simulator.generate(reading, TimeRange.D30, now=noon).history
        for point in history:
            assert 79 <= point.aqi <= 131
            assert 16 <= point.no2 <= 24
            assert point.o3 == 36

    def test_daily_values_vary(self, simulator, reading, noon):
        history = simulator.generate(reading, TimeRange.D30, now=noon).history
        assert len({p.aqi for p in history}) > 1

    # ==================== Floors ====================

    def test_floors_hold_for_clean_air(self, simulator, make_reading, noon):
        reading = make_reading(us_epa_index=1, pm2_5=0.0)
        for time_range in TimeRange:
            for point in simulator.generate(reading, time_range, now=noon).history:
                assert point.aqi >= 10
                assert point.pm25 >= 5
                assert point.pm10 >= 10
                assert point.no2 >= 5
                assert point.o3 >= 10

    def test_negative_pm25_floors(self, simulator, make_reading, noon):
        reading = make_reading(us_epa_index=1, pm2_5=-4.0)
        history = simulator.generate(reading, TimeRange.H12, now=noon).history
        assert all(p.pm25 == 5 and p.pm10 == 10 for p in history)

    # ==================== Predictions ====================

    def test_predictions_every_four_hours(self, simulator, reading, noon):
        predictions = simulator.generate(reading, TimeRange.H24, now=noon).predictions
        assert [p.time_label for p in predictions] == ["16:00", "20:00", "0:00", "4:00", "8:00", "12:00"]

    def test_prediction_rush_factor(self, simulator, reading, noon):
        """105 * 1.15 = 120.75 in rush windows, 105 * 0.85 = 89.25 otherwise."""
        predictions = simulator.generate(reading, TimeRange.H24, now=noon).predictions
        assert [p.aqi for p in predictions] == [89, 121, 89, 89, 121, 89]

    def test_prediction_confidence_decreases(self, simulator, reading, noon):
        predictions = simulator.generate(reading, TimeRange.H24, now=noon).predictions
        confidences = [p.confidence for p in predictions]
        assert confidences == [85, 80, 75, 70, 65, 60]
        assert confidences == sorted(confidences, reverse=True)

    # ==================== Summary Statistics ====================

    @pytest.mark.parametrize("time_range", list(TimeRange))
    def test_stats_match_history(self, simulator, reading, noon, time_range):
        insights = simulator.generate(reading, time_range, now=noon)
        aqi_values = [p.aqi for p in insights.history]

        assert insights.min_aqi == min(aqi_values)
        assert insights.max_aqi == max(aqi_values)
        first_min = next(p for p in insights.history if p.aqi == insights.min_aqi)
        assert insights.best_hour == first_min.timestamp

    def test_worst_pollutant_above_100(self, simulator, reading, noon):
        """Known approximation: label comes from current AQI (105) only."""
        assert simulator.generate(reading, TimeRange.H24, now=noon).worst_pollutant == "PM2.5"

    def test_worst_pollutant_at_or_below_100(self, simulator, make_reading, noon):
        """Known approximation: severity 2 (AQI 70) reports Ozone even with high PM2.5."""
        reading = make_reading(us_epa_index=2, pm2_5=300.0)
        assert simulator.generate(reading, TimeRange.H24, now=noon).worst_pollutant == "Ozone"

    def test_to_frame(self, simulator, reading, noon):
        frame = simulator.generate(reading, TimeRange.D7, now=noon).to_frame()
        assert list(frame.columns) == ["timestamp", "aqi", "pm25", "pm10", "no2", "o3"]
        assert len(frame) == 7

    # ==================== Reproducibility / Errors ====================

    def test_same_seed_same_insights(self, reading, noon):
        first = HistoricalSimulator(rng=np.random.default_rng(11)).generate(reading, TimeRange.D30, now=noon)
        second = HistoricalSimulator(rng=np.random.default_rng(11)).generate(reading, TimeRange.D30, now=noon)
        assert first == second

    def test_default_now(self, simulator, reading):
        insights = simulator.generate(reading, TimeRange.H12)
        assert len(insights.history) == 12

    def test_missing_severity_index(self, simulator, make_reading, noon):
        with pytest.raises(MissingFieldError):
            simulator.generate(make_reading(us_epa_index=None), TimeRange.H24, now=noon)
