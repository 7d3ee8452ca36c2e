"""
AQI estimator module for the AirGuard engine.

This module contains the AQIEstimator class, which produces the engine's
authoritative AccuracyResult for a reading. It derives a base AQI from the
reading, asks the SourceReliabilityScorer to reconcile the provider
observations around that base, and packages the result with the raw
pollutant panel.
"""

import logging
from typing import Optional

from .accuracy_result import AccuracyResult
from .index_converter import IndexConverter, round_half_up
from .reading import Reading
from .settings import AQI_BASE_PM25, Settings
from .source_reliability import SourceReliabilityScorer

logger = logging.getLogger(__name__)


class AQIEstimator:
    """
    Orchestrates IndexConverter and SourceReliabilityScorer for one reading.

    Holds only its collaborators; estimate() has no hidden state and can be
    called repeatedly and concurrently for different readings.
    """

    # Approximate AQI points per step of the coarse 1-6 severity index
    SEVERITY_TO_AQI = 35

    def __init__(
        self,
        scorer: Optional[SourceReliabilityScorer] = None,
        converter: Optional[IndexConverter] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings if settings is not None else Settings.from_env()
        self.converter = converter if converter is not None else IndexConverter()
        self.scorer = scorer if scorer is not None else SourceReliabilityScorer(rng=self.settings.make_rng())

    def base_aqi(self, reading: Reading) -> float:
        """
        Derives the base AQI the providers are observed around.

        By default the coarse severity index is scaled to the AQI range
        (index * 35). With aqi_base "pm25" the strict PM2.5 breakpoint
        conversion is used instead.
        """
        if self.settings.aqi_base == AQI_BASE_PM25:
            return float(self.converter.pm25_to_aqi(reading.pm2_5))
        return float(reading.severity_index * self.SEVERITY_TO_AQI)

    def estimate(self, reading: Reading) -> AccuracyResult:
        """
        Produces the reconciled AccuracyResult for a reading.

        Raises:
            MissingFieldError: If the reading lacks the field the base AQI
                               is derived from
        """
        base = self.base_aqi(reading)
        observations = self.scorer.collect(base)
        final_aqi, best = self.scorer.reconcile(observations)

        result = AccuracyResult(
            aqi=max(0, round_half_up(final_aqi)),
            confidence=round_half_up(best.score),
            primary_source=best.observation.name,
            sources_used=len(observations),
            pollutants=reading.air_quality.as_dict(),
        )
        logger.debug(
            "AQI estimate for %s: base=%.1f final=%d source=%s confidence=%d",
            reading.location.name, base, result.aqi, result.primary_source, result.confidence,
        )
        return result
