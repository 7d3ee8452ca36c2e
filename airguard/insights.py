"""
Insights module for the AirGuard engine.

This module defines the time-series value objects produced by the
HistoricalSimulator: the selectable TimeRange, simulated HistoricalPoint and
PredictionPoint samples, and the AirInsights bundle with its summary
statistics.
"""

from dataclasses import asdict, dataclass
from enum import Enum

import pandas as pd


class TimeRange(str, Enum):
    """History window selectable by the caller."""

    H12 = "12H"
    H24 = "24H"
    D7 = "7D"
    D30 = "30D"

    @property
    def points(self) -> int:
        """Number of history points generated for this range."""
        return {"12H": 12, "24H": 24, "7D": 7, "30D": 30}[self.value]

    @property
    def is_hourly(self) -> bool:
        return self in (TimeRange.H12, TimeRange.H24)


@dataclass(frozen=True)
class HistoricalPoint:
    """
    One simulated past sample.

    Attributes:
        timestamp: Time label ("14:00" for hourly ranges, "3/11" for daily)
        aqi: AQI value
        pm25: PM2.5 concentration (µg/m³)
        pm10: PM10 concentration (µg/m³)
        no2: NO2 concentration (µg/m³)
        o3: O3 concentration (µg/m³)
    """

    timestamp: str
    aqi: int
    pm25: int
    pm10: int
    no2: int
    o3: int


@dataclass(frozen=True)
class PredictionPoint:
    """One simulated future sample; confidence falls with the horizon."""

    time_label: str
    aqi: int
    confidence: int


@dataclass(frozen=True)
class AirInsights:
    """
    Simulated history, forecast and summary statistics.

    The statistics are computed from the history itself, so they always
    agree with it.

    Attributes:
        history: Past samples, oldest first
        predictions: Future samples, nearest first
        min_aqi: Lowest AQI in history
        max_aqi: Highest AQI in history
        worst_pollutant: "PM2.5" or "Ozone"
        best_hour: Time label of the first lowest-AQI sample
    """

    history: tuple[HistoricalPoint, ...]
    predictions: tuple[PredictionPoint, ...]
    min_aqi: int
    max_aqi: int
    worst_pollutant: str
    best_hour: str

    def __post_init__(self):
        object.__setattr__(self, "history", tuple(self.history))
        object.__setattr__(self, "predictions", tuple(self.predictions))

    def to_frame(self) -> pd.DataFrame:
        """Returns the history as a DataFrame, one row per sample."""
        return pd.DataFrame([asdict(point) for point in self.history])
