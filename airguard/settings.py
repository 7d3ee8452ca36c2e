"""
Settings module for the AirGuard engine.

Configuration comes from environment variables, optionally loaded from a
.env file in the working directory:

- AIRGUARD_AQI_BASE: "severity" (default) or "pm25". Chooses whether the
  AQI estimate starts from the coarse severity index or from the strict
  PM2.5 breakpoint conversion.
- AIRGUARD_SEED: Optional integer seed for the simulation random generator.
- AIRGUARD_LOG_LEVEL: Logging level name used by configure_logging().
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

import numpy as np
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

AQI_BASE_SEVERITY = "severity"
AQI_BASE_PM25 = "pm25"
AQI_BASE_MODES = (AQI_BASE_SEVERITY, AQI_BASE_PM25)


@dataclass(frozen=True)
class Settings:
    """
    Engine configuration.

    Attributes:
        aqi_base: Base value strategy for AQI estimation ("severity" or "pm25")
        seed: Seed for the default random generator, or None for fresh entropy
        log_level: Logging level name
    """

    aqi_base: str = AQI_BASE_SEVERITY
    seed: Optional[int] = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Reads settings from the environment.

        Unknown AQI base modes and unparsable seeds fall back to the defaults
        with a warning rather than failing.
        """
        aqi_base = os.getenv("AIRGUARD_AQI_BASE", AQI_BASE_SEVERITY).strip().lower()
        if aqi_base not in AQI_BASE_MODES:
            logger.warning("Unknown AIRGUARD_AQI_BASE %r, using %r", aqi_base, AQI_BASE_SEVERITY)
            aqi_base = AQI_BASE_SEVERITY

        seed = None
        raw_seed = os.getenv("AIRGUARD_SEED", "").strip()
        if raw_seed:
            try:
                seed = int(raw_seed)
            except ValueError:
                logger.warning("Ignoring non-integer AIRGUARD_SEED %r", raw_seed)

        log_level = os.getenv("AIRGUARD_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"

        return cls(aqi_base=aqi_base, seed=seed, log_level=log_level)

    def make_rng(self) -> np.random.Generator:
        """Returns a random generator seeded from these settings."""
        return np.random.default_rng(self.seed)
