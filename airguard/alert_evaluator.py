"""
Alert evaluator module for the AirGuard engine.

This module contains the AlertEvaluator class, a stateless threshold check
that turns a reading into zero to three CitizenAlerts. The rules are
independent and may all fire at once; none suppresses another.
"""

from datetime import datetime
from typing import Optional

from .citizen_alert import AlertLevel, CitizenAlert
from .reading import Reading


class AlertEvaluator:
    """
    Applies fixed hazard thresholds to a reading.

    Rules:
    - PM2.5 above 150 µg/m³: CRITICAL particulate spike
    - Severity index 4 or above: DANGER unhealthy air
    - Wind below 5 km/h with severity above 3: WARNING stagnant air
    """

    CRITICAL_PM25 = 150
    UNHEALTHY_INDEX = 4
    STAGNANT_WIND_KPH = 5
    STAGNANT_INDEX = 3

    def evaluate(self, reading: Reading, now: Optional[datetime] = None) -> list[CitizenAlert]:
        """
        Evaluates every alert rule against a reading.

        Args:
            reading: Current reading
            now: Creation time stamped on the alerts; defaults to now

        Returns:
            The alerts that fired, in rule order (may be empty)

        Raises:
            MissingFieldError: If PM2.5 or the severity index is missing
        """
        if now is None:
            now = datetime.now()
        stamp = int(now.timestamp() * 1000)

        pm25 = reading.pm2_5
        index = reading.severity_index
        alerts = []

        if pm25 > self.CRITICAL_PM25:
            alerts.append(
                CitizenAlert(
                    id=f"pm25-{stamp}",
                    title="Hazardous PM2.5 Spike",
                    message=f"Fine particulate matter is critically high ({pm25}). Immediate health risk.",
                    level=AlertLevel.CRITICAL,
                    action="Wear N95 Mask immediately",
                    source="AccurateAQI",
                    timestamp=now,
                )
            )

        if index >= self.UNHEALTHY_INDEX:
            alerts.append(
                CitizenAlert(
                    id=f"aqi-{stamp}",
                    title="Unhealthy Air Quality",
                    message="General air quality has deteriorated significantly.",
                    level=AlertLevel.DANGER,
                    action="Avoid outdoor exercise",
                    source="WAQI",
                    timestamp=now,
                )
            )

        if reading.wind_kph < self.STAGNANT_WIND_KPH and index > self.STAGNANT_INDEX:
            alerts.append(
                CitizenAlert(
                    id=f"stag-{stamp}",
                    title="Stagnant Air Warning",
                    message="Low wind speed is trapping pollutants.",
                    level=AlertLevel.WARNING,
                    action="Run air purifiers indoors",
                    source="WeatherAPI",
                    timestamp=now,
                )
            )

        return alerts


def sort_by_severity(alerts: list[CitizenAlert]) -> list[CitizenAlert]:
    """Returns alerts ordered most severe first; ties keep their order."""
    return sorted(alerts, key=lambda alert: alert.level, reverse=True)
