"""
AirGuard environmental analytics engine.

Turns a single weather/air-quality reading into a reconciled AQI, a
simulated history and forecast, attributed pollution sources, hazard
alerts and a safety score.
"""

from .air_guard_engine import AirGuardEngine
from .aqi_estimator import AQIEstimator
from .alert_evaluator import AlertEvaluator
from .errors import AirGuardError, InvalidReadingError, MissingFieldError
from .exposure import ExposureTracker, TrackingPoint
from .historical_simulator import HistoricalSimulator
from .index_converter import IndexConverter
from .insights import TimeRange
from .logging_config import configure_logging
from .reading import Location, PollutantPanel, Reading
from .safety_scorer import SafetyScorer
from .source_attributor import SourceAttributor
from .source_reliability import SourceReliabilityScorer

__all__ = [
    'AirGuardEngine',
    'AQIEstimator',
    'AlertEvaluator',
    'AirGuardError',
    'InvalidReadingError',
    'MissingFieldError',
    'ExposureTracker',
    'TrackingPoint',
    'HistoricalSimulator',
    'IndexConverter',
    'TimeRange',
    'configure_logging',
    'Location',
    'PollutantPanel',
    'Reading',
    'SafetyScorer',
    'SourceAttributor',
    'SourceReliabilityScorer',
]
