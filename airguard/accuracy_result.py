"""
Accuracy result module for the AirGuard engine.

This module defines the AccuracyResult dataclass, the engine's single
authoritative AQI answer for a location. It records the reconciled AQI, how
much the winning source is trusted, which source won, and the raw pollutant
panel the estimate was built from. The health metrics shown next to the AQI
(band label, lung stress, cigarette equivalence) are derived from it.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from .index_converter import IndexConverter


@dataclass(frozen=True)
class AccuracyResult:
    """
    Reconciled AQI estimate for one reading.

    Attributes:
        aqi: Final AQI (integer, >= 0)
        confidence: Reliability score of the winning source (0-100)
        primary_source: Name of the top-ranked source
        sources_used: Number of sources considered
        pollutants: Raw concentrations keyed pm25, pm10, no2, so2, o3, co
            (read-only)
    """

    aqi: int
    confidence: int
    primary_source: str
    sources_used: int
    pollutants: Mapping[str, Optional[float]] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "pollutants", MappingProxyType(dict(self.pollutants)))

    @property
    def category(self) -> str:
        """AQI band label, e.g. "Moderate"."""
        return IndexConverter().category(self.aqi)

    @property
    def lung_stress(self) -> str:
        """Lung-stress level: LOW, MODERATE, HIGH or CRITICAL."""
        return IndexConverter().lung_stress(self.aqi)

    @property
    def cigarette_equivalent(self) -> float:
        return IndexConverter().cigarette_equivalent(self.aqi)
