"""
Source reliability module for the AirGuard engine.

This module contains the SourceReliabilityScorer, which reconciles several
independent readings of the same AQI into one trusted value. Each source is
scored on distance, data freshness and completeness; the best-scored source
wins unless it disagrees sharply with the runner-up, in which case the
median of all sources is used (the outlier guard).

Only one real feed is available upstream, so the default provider set
simulates two secondary providers with bounded random deviation. Providers
implement the ObservationProvider protocol and can be swapped for real
feeds without touching the scoring or outlier logic.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceObservation:
    """
    One provider's reading of the location's AQI.

    Attributes:
        name: Provider name
        aqi: AQI reported by the provider
        distance_km: Distance from the point of interest
        freshness_min: Minutes since the data was captured
        completeness: Share of the pollutant panel the provider covers (0-1)
    """

    name: str
    aqi: float
    distance_km: float
    freshness_min: float
    completeness: float


@dataclass(frozen=True)
class ScoredObservation:
    """A SourceObservation with its reliability score (0-100)."""

    observation: SourceObservation
    score: float


class ObservationProvider(Protocol):
    """Anything that can report an AQI observation for a location."""

    name: str

    def observe(self, base_aqi: float) -> SourceObservation:
        ...


class SimulatedProvider:
    """
    Synthetic provider deviating from the base AQI within fixed bounds.

    The AQI is base_aqi scaled by a factor drawn from aqi_factor; distance
    and freshness are drawn from their (low, high) ranges. A range with
    equal bounds yields a fixed value.
    """

    def __init__(
        self,
        name: str,
        rng: np.random.Generator,
        aqi_factor: tuple[float, float] = (1.0, 1.0),
        distance_km: tuple[float, float] = (0.0, 0.0),
        freshness_min: tuple[float, float] = (0.0, 0.0),
        completeness: float = 1.0,
    ):
        self.name = name
        self._rng = rng
        self._aqi_factor = aqi_factor
        self._distance_km = distance_km
        self._freshness_min = freshness_min
        self._completeness = completeness

    def _draw(self, bounds: tuple[float, float]) -> float:
        low, high = bounds
        if low == high:
            return low
        return float(self._rng.uniform(low, high))

    def observe(self, base_aqi: float) -> SourceObservation:
        return SourceObservation(
            name=self.name,
            aqi=base_aqi * self._draw(self._aqi_factor),
            distance_km=self._draw(self._distance_km),
            freshness_min=self._draw(self._freshness_min),
            completeness=self._completeness,
        )


def default_providers(rng: np.random.Generator) -> list[SimulatedProvider]:
    """
    Builds the three default providers.

    WeatherAPI is the ground truth: zero distance, 5 minutes old, complete.
    WAQI deviates up to 10% and sits 5-15 km away. OpenAQ deviates up to
    15%, sits 2-17 km away and is an hour old with a partial panel.
    """
    return [
        SimulatedProvider("WeatherAPI", rng, freshness_min=(5.0, 5.0), completeness=1.0),
        SimulatedProvider(
            "WAQI API",
            rng,
            aqi_factor=(0.9, 1.1),
            distance_km=(5.0, 15.0),
            freshness_min=(15.0, 45.0),
            completeness=0.9,
        ),
        SimulatedProvider(
            "OpenAQ",
            rng,
            aqi_factor=(0.85, 1.15),
            distance_km=(2.0, 17.0),
            freshness_min=(60.0, 60.0),
            completeness=0.7,
        ),
    ]


class SourceReliabilityScorer:
    """
    Scores and reconciles provider observations into one AQI value.

    Score weights: 60% distance, 25% freshness, 15% completeness.
    """

    DISTANCE_WEIGHT = 0.6
    FRESHNESS_WEIGHT = 0.25
    COMPLETENESS_WEIGHT = 0.15

    DISTANCE_PENALTY_PER_KM = 5

    # Top two sources may differ by at most 30% of the top value
    OUTLIER_TOLERANCE = 0.3

    def __init__(
        self,
        providers: Optional[Sequence[ObservationProvider]] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        """
        Args:
            providers: Observation providers to query. Defaults to the three
                       simulated providers from default_providers().
            rng: Random generator for the default providers. Ignored when
                 providers are given.
        """
        if providers is None:
            providers = default_providers(rng if rng is not None else np.random.default_rng())
        self.providers = list(providers)

    def collect(self, base_aqi: float) -> list[SourceObservation]:
        """Asks every provider for an observation of base_aqi."""
        return [provider.observe(base_aqi) for provider in self.providers]

    @classmethod
    def score(cls, observation: SourceObservation) -> float:
        """Computes the 0-100 reliability score of one observation."""
        distance_score = max(0.0, 100 - observation.distance_km * cls.DISTANCE_PENALTY_PER_KM) * cls.DISTANCE_WEIGHT
        freshness_score = max(0.0, 100 - observation.freshness_min) * cls.FRESHNESS_WEIGHT
        completeness_score = observation.completeness * 100 * cls.COMPLETENESS_WEIGHT
        return distance_score + freshness_score + completeness_score

    def rank(self, observations: Sequence[SourceObservation]) -> list[ScoredObservation]:
        """Scores observations and sorts them by score, most trusted first."""
        scored = [ScoredObservation(obs, self.score(obs)) for obs in observations]
        return sorted(scored, key=lambda s: s.score, reverse=True)

    def reconcile(self, observations: Sequence[SourceObservation]) -> tuple[float, ScoredObservation]:
        """
        Picks the final AQI from a set of observations.

        The top-ranked observation's AQI is used unless the top two differ
        by more than 30% of the top value; then the median of all
        observations is used so one divergent source cannot dominate.

        Returns:
            A tuple of (final AQI, top-ranked ScoredObservation)

        Raises:
            ValueError: If observations is empty
        """
        if not observations:
            raise ValueError("at least one observation is required")

        ranked = self.rank(observations)
        best = ranked[0]
        final_aqi = best.observation.aqi

        if len(ranked) > 1:
            runner_up = ranked[1].observation.aqi
            if abs(final_aqi - runner_up) > self.OUTLIER_TOLERANCE * final_aqi:
                final_aqi = float(np.median([s.observation.aqi for s in ranked]))
                logger.debug(
                    "Outlier guard: %s=%.1f vs %s=%.1f, using median %.1f",
                    best.observation.name, best.observation.aqi,
                    ranked[1].observation.name, runner_up, final_aqi,
                )

        return final_aqi, best
