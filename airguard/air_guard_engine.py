"""
AirGuard engine module.

This module contains the AirGuardEngine class, the orchestrator of one
evaluation cycle. It validates the incoming reading, runs the AQI
estimator, historical simulator, source attributor, alert evaluator and
safety scorer for it, and packages their outputs into an EngineReport.

The components do not depend on each other, only on the reading, so the
engine simply calls them in turn. It keeps no state between calls.
"""

import logging
from datetime import datetime
from typing import Optional

import numpy as np

from .alert_evaluator import AlertEvaluator, sort_by_severity
from .aqi_estimator import AQIEstimator
from .engine_report import EngineReport
from .errors import InvalidReadingError
from .historical_simulator import HistoricalSimulator
from .insights import TimeRange
from .reading import Reading
from .safety_scorer import SafetyScorer
from .settings import Settings
from .source_attributor import SourceAttributor
from .source_reliability import SourceReliabilityScorer

logger = logging.getLogger(__name__)


class AirGuardEngine:
    """
    Core orchestrator of the environmental analytics engine.

    Every component can be injected; missing ones are built from the
    settings. Estimator and simulator share one random generator so a
    seeded engine is reproducible end to end.
    """

    def __init__(
        self,
        estimator: Optional[AQIEstimator] = None,
        simulator: Optional[HistoricalSimulator] = None,
        attributor: Optional[SourceAttributor] = None,
        alert_evaluator: Optional[AlertEvaluator] = None,
        safety_scorer: Optional[SafetyScorer] = None,
        settings: Optional[Settings] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.settings = settings if settings is not None else Settings.from_env()
        rng = rng if rng is not None else self.settings.make_rng()

        if estimator is None:
            estimator = AQIEstimator(scorer=SourceReliabilityScorer(rng=rng), settings=self.settings)

        self.estimator = estimator
        self.simulator = simulator if simulator is not None else HistoricalSimulator(rng=rng)
        self.attributor = attributor if attributor is not None else SourceAttributor()
        self.alert_evaluator = alert_evaluator if alert_evaluator is not None else AlertEvaluator()
        self.safety_scorer = safety_scorer if safety_scorer is not None else SafetyScorer()

    def evaluate(
        self,
        reading: Reading,
        time_range: TimeRange = TimeRange.H24,
        now: Optional[datetime] = None,
    ) -> EngineReport:
        """
        Runs every engine component for one reading.

        Args:
            reading: Current reading for the location
            time_range: History window for the simulator
            now: Reference time for history and alert timestamps

        Returns:
            EngineReport with all component outputs; alerts most severe first

        Raises:
            InvalidReadingError: If the reading fails validation
            MissingFieldError: If a component needs a field the reading lacks
        """
        if now is None:
            now = datetime.now()

        # Step 1: Validate the reading
        valid, reason = reading.validate()
        if not valid:
            logger.warning("Rejected reading for %s: %s", reading.location.name, reason)
            raise InvalidReadingError(reason)

        # Step 2: Run the components
        accuracy = self.estimator.estimate(reading)
        insights = self.simulator.generate(reading, time_range, now=now)
        sources = self.attributor.detect_sources(
            reading.location.latitude, reading.location.longitude, reading.location.name
        )
        traces = self.attributor.trace_pollutants(reading)
        alerts = sort_by_severity(self.alert_evaluator.evaluate(reading, now=now))
        guardian = self.safety_scorer.analyze(reading)

        # Step 3: Summarize
        top_alert = alerts[0].level.name if alerts else "None"
        logger.info(
            "%s | AQI %3d (%s) | confidence %d | alerts %d (top: %s) | safety %d%s",
            reading.location.name,
            accuracy.aqi,
            accuracy.category,
            accuracy.confidence,
            len(alerts),
            top_alert,
            guardian.safety_score,
            " | mask" if guardian.mask_required else "",
        )

        return EngineReport(
            timestamp=now,
            reading=reading,
            accuracy=accuracy,
            insights=insights,
            sources=sources,
            traces=traces,
            alerts=alerts,
            guardian=guardian,
        )
