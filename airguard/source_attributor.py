"""
Source attributor module for the AirGuard engine.

This module contains the SourceAttributor class with two independent jobs:

- detect_sources(): derives 2-4 plausible nearby polluters from the
  location's coordinates. There is no geospatial polluter database, so the
  sources come from a fixed template list picked with plain arithmetic on
  the coordinate sum. The same coordinates always give the same list.
- trace_pollutants(): maps each pollutant above its trigger threshold to
  the source category it most likely comes from.
"""

import logging
import math

from .pollution_source import DetectedSource, PollutantTrace, SourceCategory
from .reading import Reading

logger = logging.getLogger(__name__)


SOURCE_TEMPLATES = [
    ("Global Steel Works", SourceCategory.FACTORY, ("PM10", "SO2", "NO2")),
    ("City West Bypass", SourceCategory.TRAFFIC, ("NO2", "CO", "PM2.5")),
    ("Metro Construction Site B", SourceCategory.CONSTRUCTION, ("PM10", "Dust")),
    ("Thermal Power Station", SourceCategory.POWER_PLANT, ("SO2", "CO2", "Mercury")),
    ("Crop Burning Zone", SourceCategory.AGRICULTURAL, ("PM2.5", "VOCs")),
    ("Municipal Waste Dump", SourceCategory.WASTE_BURNING, ("Methane", "PM2.5", "Dioxins")),
]

COMPASS_POINTS = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]

# (pollutant code, reading attribute, trigger threshold, likely source, confidence, color)
TRACE_RULES = [
    ("NO2", "no2", 20, "Traffic Congestion", 85, "text-red-400"),
    ("SO2", "so2", 10, "Industrial/Power", 70, "text-yellow-400"),
    ("PM10", "pm10", 50, "Construction/Dust", 90, "text-orange-400"),
    ("PM2.5", "pm2_5", 35, "Combustion/Smoke", 80, "text-purple-400"),
    ("O3", "o3", 60, "Sunlight + Traffic", 60, "text-blue-400"),
]

CLEAN_TRACE = PollutantTrace(pollutant="Clean", likely_source="None detected", confidence=100, color="text-green-400")


class SourceAttributor:
    """Derives nearby pollution sources and traces pollutants to them."""

    MIN_SOURCES = 2
    MAX_EXTRA_SOURCES = 2
    MIN_DISTANCE_KM = 1.2
    DISTANCE_SPREAD_TENTHS = 130

    def detect_sources(self, latitude: float, longitude: float, city_name: str) -> list[DetectedSource]:
        """
        Generates the plausible polluters around a location.

        The seed is |latitude + longitude|. With seed s and source index i
        (0-based):
        - count     = 2 + floor(s * 100) mod 3
        - template  = TEMPLATES[floor(s * (i+1) * 10) mod 6]
        - distance  = 1.2 + ((s * (i+1) * 100) mod 130) / 10, in km
        - direction = COMPASS[floor(s * (i+1) * 1000) mod 8]

        Args:
            latitude: Location latitude
            longitude: Location longitude
            city_name: Prefix for the generated source names

        Returns:
            Between 2 and 4 DetectedSource entries sorted by ascending distance
        """
        seed = abs(latitude + longitude)
        count = self.MIN_SOURCES + math.floor(seed * 100) % (self.MAX_EXTRA_SOURCES + 1)

        sources = []
        for i in range(count):
            step = seed * (i + 1)
            name, category, emits = SOURCE_TEMPLATES[math.floor(step * 10) % len(SOURCE_TEMPLATES)]
            distance = self.MIN_DISTANCE_KM + ((step * 100) % self.DISTANCE_SPREAD_TENTHS) / 10
            sources.append(
                DetectedSource(
                    id=f"source-{i}",
                    name=f"{city_name} {name}",
                    category=category,
                    distance=round(distance, 1),
                    pollutants=emits,
                    direction=COMPASS_POINTS[math.floor(step * 1000) % len(COMPASS_POINTS)],
                )
            )

        logger.debug("Detected %d sources near %s (%.4f, %.4f)", count, city_name, latitude, longitude)
        return sorted(sources, key=lambda s: s.distance)

    def trace_pollutants(self, reading: Reading) -> list[PollutantTrace]:
        """
        Traces each elevated pollutant to its likely source.

        Returns a trace per pollutant above its trigger, or a single "Clean"
        trace at 100% confidence when none is elevated. Never empty.

        Raises:
            MissingFieldError: If one of NO2, SO2, PM10, PM2.5, O3 is missing
        """
        traces = [
            PollutantTrace(pollutant=code, likely_source=source, confidence=confidence, color=color)
            for code, attr, threshold, source, confidence, color in TRACE_RULES
            if getattr(reading, attr) > threshold
        ]
        return traces or [CLEAN_TRACE]
