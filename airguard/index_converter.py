"""
Index converter module for the AirGuard engine.

This module contains the IndexConverter class, which turns a PM2.5
concentration into a US EPA style Air Quality Index using piecewise-linear
breakpoint segments. Concentrations beyond the top of the table keep
growing 1:1 instead of saturating at 500, so extreme pollution events stay
visible.
"""

import math


def round_half_up(value: float) -> int:
    """Rounds to the nearest integer with .5 going up (towards +inf)."""
    return int(math.floor(value + 0.5))


class IndexConverter:
    """
    Converts PM2.5 concentrations (µg/m³) to AQI values.

    Each breakpoint row is (index_low, index_high, conc_low, conc_high).
    """

    BREAKPOINTS = [
        (0, 50, 0.0, 12.0),
        (51, 100, 12.1, 35.4),
        (101, 150, 35.5, 55.4),
        (151, 200, 55.5, 150.4),
        (201, 300, 150.5, 250.4),
        (301, 400, 250.5, 350.4),
        (401, 500, 350.5, 500.4),
    ]

    TOP_INDEX = 500
    TOP_CONCENTRATION = 500.4

    CATEGORIES = [
        (50, "Good"),
        (100, "Moderate"),
        (150, "Unhealthy for Sensitive Groups"),
        (200, "Unhealthy"),
        (300, "Very Unhealthy"),
    ]
    HAZARDOUS = "Hazardous"

    # Upper bounds are exclusive
    LUNG_STRESS_BANDS = [
        (50, "LOW"),
        (100, "MODERATE"),
        (150, "HIGH"),
    ]
    LUNG_STRESS_CRITICAL = "CRITICAL"

    # AQI points per cigarette smoked in a day
    AQI_PER_CIGARETTE = 22

    def pm25_to_aqi(self, concentration: float) -> float:
        """
        Converts a PM2.5 concentration to an AQI value.

        Within the table the result is the linear interpolation over the
        matching segment, rounded to the nearest integer. A concentration in
        the gap between two segments (e.g. 12.05) belongs to the upper one.
        Above 500.4 the index extrapolates as 500 + (conc - 500.4) and is not
        rounded or clamped.

        Negative and NaN concentrations return 0. Upstream sensors can
        momentarily report small negative or malformed values and a severity
        calculation must not crash on them or report them as hazardous.

        Args:
            concentration: PM2.5 concentration in µg/m³

        Returns:
            The AQI value (an int for in-table concentrations)
        """
        if not concentration >= 0:
            return 0

        if concentration > self.TOP_CONCENTRATION:
            return self.TOP_INDEX + (concentration - self.TOP_CONCENTRATION)

        for index_low, index_high, conc_low, conc_high in self.BREAKPOINTS:
            if concentration <= conc_high:
                # Gap values (between conc_high of one row and conc_low of
                # the next) are pinned to the start of the segment
                conc = max(concentration, conc_low)
                aqi = (index_high - index_low) / (conc_high - conc_low) * (conc - conc_low) + index_low
                return round_half_up(aqi)

        raise ValueError(f"No breakpoint segment for PM2.5 concentration {concentration!r}")

    def category(self, aqi: float) -> str:
        """
        Returns the AQI band label for an index value.

        Bands: Good (<=50), Moderate (<=100), Unhealthy for Sensitive Groups
        (<=150), Unhealthy (<=200), Very Unhealthy (<=300), Hazardous.
        """
        for upper, label in self.CATEGORIES:
            if aqi <= upper:
                return label
        return self.HAZARDOUS

    def lung_stress(self, aqi: float) -> str:
        """
        Returns the lung-stress level for an index value.

        Levels: LOW (<50), MODERATE (<100), HIGH (<150), CRITICAL otherwise.
        """
        for upper, label in self.LUNG_STRESS_BANDS:
            if aqi < upper:
                return label
        return self.LUNG_STRESS_CRITICAL

    def cigarette_equivalent(self, aqi: float) -> float:
        """Daily cigarettes with the same particulate load as breathing at this AQI."""
        return max(0.0, aqi / self.AQI_PER_CIGARETTE)
