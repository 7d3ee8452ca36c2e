"""
Engine report module for the AirGuard engine.

This module defines the EngineReport dataclass, the complete result of one
evaluation cycle: the input reading and every component's output. The
calling layer renders, stores or serializes it; to_dict() gives a
JSON-friendly form.
"""

from dataclasses import asdict, dataclass
from datetime import datetime

from .accuracy_result import AccuracyResult
from .citizen_alert import CitizenAlert
from .guardian_insight import GuardianInsight
from .insights import AirInsights
from .pollution_source import DetectedSource, PollutantTrace
from .reading import Reading


@dataclass(frozen=True)
class EngineReport:
    """
    Everything the engine produced for one reading.

    Attributes:
        timestamp: When the evaluation ran
        reading: The input reading
        accuracy: Reconciled AQI estimate
        insights: Simulated history and forecast
        sources: Nearby pollution sources, nearest first
        traces: Pollutant-to-source traces
        alerts: Hazard alerts, most severe first
        guardian: Safety score and guidance
    """

    timestamp: datetime
    reading: Reading
    accuracy: AccuracyResult
    insights: AirInsights
    sources: tuple[DetectedSource, ...]
    traces: tuple[PollutantTrace, ...]
    alerts: tuple[CitizenAlert, ...]
    guardian: GuardianInsight

    def __post_init__(self):
        # Stored as tuples, independent of the lists passed in
        for name in ("sources", "traces", "alerts"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    def to_dict(self) -> dict[str, object]:
        """
        Converts the report to a serializable dictionary.

        Enum values become their string form and datetimes ISO strings.
        """
        return {
            "timestamp": self.timestamp.isoformat(),
            "location": asdict(self.reading.location),
            "accuracy": {
                "aqi": self.accuracy.aqi,
                "category": self.accuracy.category,
                "lung_stress": self.accuracy.lung_stress,
                "cigarette_equivalent": self.accuracy.cigarette_equivalent,
                "confidence": self.accuracy.confidence,
                "primary_source": self.accuracy.primary_source,
                "sources_used": self.accuracy.sources_used,
                "pollutants": dict(self.accuracy.pollutants),
            },
            "insights": {
                "history": [asdict(point) for point in self.insights.history],
                "predictions": [asdict(point) for point in self.insights.predictions],
                "min_aqi": self.insights.min_aqi,
                "max_aqi": self.insights.max_aqi,
                "worst_pollutant": self.insights.worst_pollutant,
                "best_hour": self.insights.best_hour,
            },
            "sources": [
                {
                    "id": source.id,
                    "name": source.name,
                    "category": source.category.value,
                    "distance": source.distance,
                    "pollutants": list(source.pollutants),
                    "direction": source.direction,
                }
                for source in self.sources
            ],
            "traces": [asdict(trace) for trace in self.traces],
            "alerts": [alert.to_dict() for alert in self.alerts],
            "guardian": asdict(self.guardian),
        }
