"""
Citizen alert module for the AirGuard engine.

This module defines the CitizenAlert dataclass and its ordered AlertLevel.
Alerts are produced fresh on every evaluation and are never persisted or
deduplicated.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum


class AlertLevel(IntEnum):
    """Alert severity; compares WARNING < DANGER < CRITICAL."""

    WARNING = 1
    DANGER = 2
    CRITICAL = 3


@dataclass(frozen=True)
class CitizenAlert:
    """
    A hazard alert for people at a location.

    Attributes:
        id: Identifier built from the rule key and creation time
        title: Short headline
        message: Explanation of the hazard
        level: Severity level
        action: Recommended action
        source: Label of the data source that triggered the alert
        timestamp: Creation time
    """

    id: str
    title: str
    message: str
    level: AlertLevel
    action: str
    source: str
    timestamp: datetime

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "title": self.title,
            "message": self.message,
            "level": self.level.name,
            "action": self.action,
            "source": self.source,
            "timestamp": self.timestamp.isoformat(),
        }
