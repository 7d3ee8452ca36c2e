"""
Guardian insight module for the AirGuard engine.

This module defines the GuardianInsight dataclass, the safety score and
plain-language guidance produced by the SafetyScorer.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GuardianInsight:
    """
    Safety guidance for a location.

    Attributes:
        safety_score: 0 (dangerous) to 100 (safe)
        prediction: Short outlook sentence
        travel_advice: Short travel recommendation
        mask_required: True when a mask is advised outdoors
    """

    safety_score: int
    prediction: str
    travel_advice: str
    mask_required: bool
