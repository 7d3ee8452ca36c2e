"""
Exposure module for the AirGuard engine.

This module summarizes a live tracking session: the AQI samples a user
collected while walking or commuting. The summary gives the time spent,
the distance covered along the track and the average and peak AQI the user
was exposed to.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

import numpy as np

EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class TrackingPoint:
    """One AQI sample taken along a track."""

    latitude: float
    longitude: float
    aqi: float
    timestamp: Optional[datetime] = None


@dataclass(frozen=True)
class ExposureSummary:
    """
    Aggregate exposure for a tracking session.

    Attributes:
        samples: Number of tracking points
        duration_minutes: Time covered by the samples
        distance_km: Great-circle distance along the track
        avg_aqi: Mean AQI across samples
        max_aqi: Peak AQI across samples
    """

    samples: int
    duration_minutes: float
    distance_km: float
    avg_aqi: float
    max_aqi: float


class ExposureTracker:
    """Summarizes tracking sessions sampled at a fixed interval."""

    DEFAULT_SAMPLE_INTERVAL_SECONDS = 5

    def summarize(
        self,
        points: Sequence[TrackingPoint],
        sample_interval_seconds: float = DEFAULT_SAMPLE_INTERVAL_SECONDS,
    ) -> ExposureSummary:
        """
        Summarizes a tracking session.

        Duration is samples * interval / 60, matching a tracker that records
        one point per interval.

        Raises:
            ValueError: If points is empty
        """
        if not points:
            raise ValueError("cannot summarize an empty tracking session")

        aqi = np.array([p.aqi for p in points], dtype=float)
        lat = np.radians([p.latitude for p in points])
        lon = np.radians([p.longitude for p in points])

        # Haversine over consecutive pairs
        dlat = np.diff(lat)
        dlon = np.diff(lon)
        a = np.sin(dlat / 2) ** 2 + np.cos(lat[:-1]) * np.cos(lat[1:]) * np.sin(dlon / 2) ** 2
        legs = 2 * EARTH_RADIUS_KM * np.arcsin(np.sqrt(a))

        return ExposureSummary(
            samples=len(points),
            duration_minutes=len(points) * sample_interval_seconds / 60,
            distance_km=float(legs.sum()),
            avg_aqi=float(aqi.mean()),
            max_aqi=float(aqi.max()),
        )
