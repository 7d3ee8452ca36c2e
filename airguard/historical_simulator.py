"""
Historical simulator module for the AirGuard engine.

Historical air-quality APIs usually need paid keys, so this module
synthesizes a plausible past series and a short forecast around the current
reading instead. Hourly ranges follow a diurnal model (rush-hour peaks,
night-time dips, ozone halving at night); daily ranges fluctuate randomly
within +/-20%.

Randomness comes from an injectable numpy Generator so runs are
reproducible under a fixed seed.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

import numpy as np

from .index_converter import round_half_up
from .insights import AirInsights, HistoricalPoint, PredictionPoint, TimeRange
from .reading import Reading

logger = logging.getLogger(__name__)


def is_rush_hour(hour: int) -> bool:
    """Morning (08-10) and evening (18-21) traffic peaks, inclusive."""
    return 8 <= hour <= 10 or 18 <= hour <= 21


def is_night(hour: int) -> bool:
    return 1 <= hour <= 5


class HistoricalSimulator:
    """
    Generates synthetic history and a forecast for a reading.

    The current AQI is approximated from the coarse severity index
    (index * 35), the same scale the estimator uses by default.
    """

    SEVERITY_TO_AQI = 35

    RUSH_HOUR_FACTOR = 1.2
    NIGHT_FACTOR = 0.7
    DAILY_FACTOR_RANGE = (0.8, 1.2)
    NOISE_AMPLITUDE = 5.0

    # Physical floors for simulated values
    MIN_AQI = 10
    MIN_PM25 = 5
    MIN_PM10 = 10
    MIN_NO2 = 5
    MIN_O3 = 10

    BASE_NO2 = 20
    BASE_O3 = 30
    PM10_TO_PM25_RATIO = 1.5

    PREDICTION_STEPS = 6
    PREDICTION_INTERVAL_HOURS = 4
    PREDICTION_RUSH_FACTOR = 1.15
    PREDICTION_CALM_FACTOR = 0.85
    PREDICTION_BASE_CONFIDENCE = 85
    PREDICTION_CONFIDENCE_DECAY = 5

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self._rng = rng if rng is not None else np.random.default_rng()

    def generate(
        self,
        reading: Reading,
        time_range: TimeRange = TimeRange.H24,
        now: Optional[datetime] = None,
    ) -> AirInsights:
        """
        Simulates history and forecast for a reading.

        Args:
            reading: Current reading (needs severity index and PM2.5)
            time_range: History window; one of 12H, 24H, 7D, 30D
            now: Reference time; defaults to the current local time

        Returns:
            AirInsights with time_range.points history samples ending at now
            and six predictions spaced four hours apart

        Raises:
            MissingFieldError: If the severity index or PM2.5 is missing
        """
        time_range = TimeRange(time_range)
        if now is None:
            now = datetime.now()

        current_aqi = reading.severity_index * self.SEVERITY_TO_AQI
        pm25 = reading.pm2_5

        history = [
            self._history_point(now, i, time_range, current_aqi, pm25)
            for i in range(time_range.points, 0, -1)
        ]
        predictions = [self._prediction_point(now, i, current_aqi) for i in range(1, self.PREDICTION_STEPS + 1)]

        aqi_values = np.array([point.aqi for point in history])
        # argmin returns the first occurrence, so ties resolve to the oldest sample
        best_point = history[int(aqi_values.argmin())]

        # Approximation: chosen from the current AQI only, not from the
        # relative magnitudes of the simulated pollutants
        worst_pollutant = "PM2.5" if current_aqi > 100 else "Ozone"

        logger.debug(
            "Simulated %s history for %s: %d points, aqi %d-%d",
            time_range.value, reading.location.name, len(history), aqi_values.min(), aqi_values.max(),
        )

        return AirInsights(
            history=history,
            predictions=predictions,
            min_aqi=int(aqi_values.min()),
            max_aqi=int(aqi_values.max()),
            worst_pollutant=worst_pollutant,
            best_hour=best_point.timestamp,
        )

    def _history_point(
        self,
        now: datetime,
        steps_back: int,
        time_range: TimeRange,
        current_aqi: float,
        pm25: float,
    ) -> HistoricalPoint:
        night = False
        if time_range.is_hourly:
            moment = now - timedelta(hours=steps_back)
            label = f"{moment.hour}:00"
            night = is_night(moment.hour)
            if is_rush_hour(moment.hour):
                factor = self.RUSH_HOUR_FACTOR
            elif night:
                factor = self.NIGHT_FACTOR
            else:
                factor = 1.0
        else:
            moment = now - timedelta(days=steps_back)
            label = f"{moment.day}/{moment.month}"
            factor = float(self._rng.uniform(*self.DAILY_FACTOR_RANGE))

        noise = float(self._rng.uniform(-self.NOISE_AMPLITUDE, self.NOISE_AMPLITUDE))
        # Ozone is photochemical: it roughly halves at night instead of
        # following the particulate factor
        o3_factor = 0.5 if night else 1.2

        return HistoricalPoint(
            timestamp=label,
            aqi=max(self.MIN_AQI, round_half_up(current_aqi * factor + noise)),
            pm25=max(self.MIN_PM25, round_half_up(pm25 * factor + noise / 2)),
            pm10=max(self.MIN_PM10, round_half_up(pm25 * self.PM10_TO_PM25_RATIO * factor)),
            no2=max(self.MIN_NO2, round_half_up(self.BASE_NO2 * factor)),
            o3=max(self.MIN_O3, round_half_up(self.BASE_O3 * o3_factor)),
        )

    def _prediction_point(self, now: datetime, step: int, current_aqi: float) -> PredictionPoint:
        moment = now + timedelta(hours=step * self.PREDICTION_INTERVAL_HOURS)
        factor = self.PREDICTION_RUSH_FACTOR if is_rush_hour(moment.hour) else self.PREDICTION_CALM_FACTOR
        return PredictionPoint(
            time_label=f"{moment.hour}:00",
            aqi=round_half_up(current_aqi * factor),
            confidence=self.PREDICTION_BASE_CONFIDENCE - (step - 1) * self.PREDICTION_CONFIDENCE_DECAY,
        )
