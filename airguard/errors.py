"""
Error types for the AirGuard engine.

The engine degrades gracefully on noisy sensor values (a negative PM2.5
reading floors to an index of 0), but it refuses to invent data. A reading
that is missing a field a component needs, or one whose meteorology is out
of physical range, is reported to the caller with one of these exceptions.
"""


class AirGuardError(Exception):
    """Base class for all errors raised by the AirGuard engine."""


class MissingFieldError(AirGuardError, KeyError):
    """
    Raised when a reading lacks a field that a component requires.

    Attributes:
        field: Name of the missing field (e.g. "pm2_5" or "us-epa-index")
    """

    def __init__(self, field: str):
        self.field = field
        super().__init__(field)

    def __str__(self) -> str:
        return f"required field '{self.field}' is missing from the reading"


class InvalidReadingError(AirGuardError, ValueError):
    """Raised by the engine when a reading fails validation."""
