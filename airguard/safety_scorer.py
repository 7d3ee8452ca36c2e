"""
Safety scorer module for the AirGuard engine.

This module contains the SafetyScorer class, which condenses a reading into
a 0-100 safety score plus guidance: a short outlook, travel advice and
whether a mask is needed. Everything is a deterministic function of the
score and the two weather gates (low wind, high humidity).
"""

from .guardian_insight import GuardianInsight
from .reading import Reading


class SafetyScorer:
    """Scores how safe it is to be outdoors for a reading."""

    POINTS_PER_SEVERITY = 15
    LOW_WIND_KPH = 5
    LOW_WIND_PENALTY = 10
    HUMID_PERCENT = 70
    HUMIDITY_PENALTY = 5

    SAFE_TRAVEL_SCORE = 70
    MASK_SCORE = 60

    def analyze(self, reading: Reading) -> GuardianInsight:
        """
        Computes the GuardianInsight for a reading.

        score = 100 - severity * 15, minus 10 when wind < 5 km/h and minus 5
        when humidity > 70%, clamped to [0, 100].

        Raises:
            MissingFieldError: If the severity index is missing
        """
        index = reading.severity_index
        low_wind = reading.wind_kph < self.LOW_WIND_KPH

        score = 100 - index * self.POINTS_PER_SEVERITY
        if low_wind:
            score -= self.LOW_WIND_PENALTY
        if reading.humidity > self.HUMID_PERCENT:
            score -= self.HUMIDITY_PENALTY
        score = max(0, min(100, score))

        prediction = "Stable conditions."
        if low_wind and index > 3:
            prediction = "Pollution likely to accumulate due to low wind."
        if index <= 2:
            prediction = "Good air quality expected to continue."

        return GuardianInsight(
            safety_score=score,
            prediction=prediction,
            travel_advice="Safe to travel." if score > self.SAFE_TRAVEL_SCORE else "Avoid congestion zones.",
            mask_required=score < self.MASK_SCORE,
        )
