"""
Pollution source module for the AirGuard engine.

This module defines the value objects produced by the SourceAttributor:
nearby DetectedSource entries and per-pollutant PollutantTrace entries.
"""

from dataclasses import dataclass, field
from enum import Enum


class SourceCategory(str, Enum):
    """Fixed set of polluter categories."""

    FACTORY = "Factory"
    CONSTRUCTION = "Construction"
    TRAFFIC = "Traffic"
    POWER_PLANT = "Power Plant"
    AGRICULTURAL = "Agricultural"
    WASTE_BURNING = "Waste Burning"


@dataclass(frozen=True)
class DetectedSource:
    """
    A plausible polluter near a location.

    Attributes:
        id: Identifier, unique within one result list
        name: Display name (city prefix + archetype)
        category: Source category
        distance: Distance from the location in km (one decimal)
        pollutants: Tags of the pollutants this source emits
        direction: 8-point compass direction from the location
    """

    id: str
    name: str
    category: SourceCategory
    distance: float
    pollutants: tuple[str, ...] = field(default_factory=tuple)
    direction: str = "N"


@dataclass(frozen=True)
class PollutantTrace:
    """
    A pollutant traced back to its likely source.

    Attributes:
        pollutant: Pollutant code ("NO2", "PM2.5", ... or "Clean")
        likely_source: Inferred source description
        confidence: How diagnostic the pollutant is of the source (0-100)
        color: Display hint for the presentation layer
    """

    pollutant: str
    likely_source: str
    confidence: int
    color: str
