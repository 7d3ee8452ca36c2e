"""
Reading module for the AirGuard engine.

This module defines the Reading dataclass, the immutable snapshot of one
location's weather and air quality that every engine component consumes.
A Reading is produced by the external weather collaborator (usually from a
WeatherAPI-style JSON document) and is never mutated by the engine.
"""

from dataclasses import dataclass
from typing import Any, Optional

from .errors import MissingFieldError


@dataclass(frozen=True)
class Location:
    """
    Geographic context of a reading.

    Attributes:
        name: City or place name
        region: Administrative region
        country: Country name
        latitude: Latitude in decimal degrees (-90 to 90)
        longitude: Longitude in decimal degrees (-180 to 180)
    """

    name: str
    region: str
    country: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class PollutantPanel:
    """
    Pollutant concentrations reported by the upstream feed.

    Any field may be None when the feed omitted it. Components that need a
    value call require() so an absent pollutant surfaces as a
    MissingFieldError instead of a silently substituted number.

    Attributes:
        co: Carbon monoxide (µg/m³)
        no2: Nitrogen dioxide (µg/m³)
        o3: Ozone (µg/m³)
        so2: Sulphur dioxide (µg/m³)
        pm2_5: Fine particulate matter (µg/m³)
        pm10: Coarse particulate matter (µg/m³)
        us_epa_index: Coarse 1-6 severity index
    """

    co: Optional[float] = None
    no2: Optional[float] = None
    o3: Optional[float] = None
    so2: Optional[float] = None
    pm2_5: Optional[float] = None
    pm10: Optional[float] = None
    us_epa_index: Optional[int] = None

    def require(self, field: str) -> float:
        """
        Returns the value of a pollutant field.

        Raises:
            MissingFieldError: If the field is unknown or its value is None
        """
        value = getattr(self, field, None)
        if value is None:
            raise MissingFieldError(field)
        return value

    def as_dict(self) -> dict[str, Optional[float]]:
        """Returns the six raw concentrations keyed by short pollutant code."""
        return {
            "pm25": self.pm2_5,
            "pm10": self.pm10,
            "no2": self.no2,
            "so2": self.so2,
            "o3": self.o3,
            "co": self.co,
        }


@dataclass(frozen=True)
class Reading:
    """
    Immutable snapshot of one location at one instant.

    Attributes:
        location: Where the reading was taken
        temperature: Air temperature in Celsius
        wind_kph: Wind speed in km/h
        wind_degree: Wind direction in degrees
        humidity: Relative humidity in percent
        air_quality: Pollutant panel including the coarse severity index
    """

    location: Location
    temperature: float
    wind_kph: float
    wind_degree: float
    humidity: float
    air_quality: PollutantPanel

    @property
    def severity_index(self) -> int:
        return int(self.air_quality.require("us_epa_index"))

    @property
    def pm2_5(self) -> float:
        return self.air_quality.require("pm2_5")

    @property
    def pm10(self) -> float:
        return self.air_quality.require("pm10")

    @property
    def no2(self) -> float:
        return self.air_quality.require("no2")

    @property
    def so2(self) -> float:
        return self.air_quality.require("so2")

    @property
    def o3(self) -> float:
        return self.air_quality.require("o3")

    @property
    def co(self) -> float:
        return self.air_quality.require("co")

    def validate(self) -> tuple[bool, Optional[str]]:
        """
        Validates meteorology and location fields against physical ranges.

        Pollutant concentrations are not checked for sign: sensor noise can
        report small negative values and the index conversion floors them.

        Returns:
            A tuple containing:
            - bool: True if all validations pass, False otherwise
            - Optional[str]: None if valid, or a descriptive error message
        """
        if not -90 <= self.location.latitude <= 90:
            return (False, "latitude must be between -90 and 90")

        if not -180 <= self.location.longitude <= 180:
            return (False, "longitude must be between -180 and 180")

        if self.wind_kph < 0:
            return (False, "wind_kph must be >= 0")

        if not 0 <= self.humidity <= 100:
            return (False, "humidity must be between 0 and 100")

        if not -90 <= self.temperature <= 60:
            return (False, "temperature must be between -90 and 60")

        index = self.air_quality.us_epa_index
        if index is not None and not 1 <= index <= 6:
            return (False, "us_epa_index must be between 1 and 6")

        return (True, None)

    @classmethod
    def from_weather_payload(cls, payload: dict[str, Any]) -> "Reading":
        """
        Builds a Reading from a WeatherAPI-style "current" document.

        Expects the payload shape returned by the weather collaborator:
        a "location" object (name, region, country, lat, lon) and a
        "current" object (temp_c, wind_kph, wind_degree, humidity and an
        "air_quality" object keyed co, no2, o3, so2, pm2_5, pm10,
        "us-epa-index"). Individual pollutants may be absent; the
        meteorology and location keys are required.

        Raises:
            MissingFieldError: If a required key is absent
        """
        location_doc = _require_key(payload, "location")
        current = _require_key(payload, "current")
        aq = current.get("air_quality") or {}

        location = Location(
            name=_require_key(location_doc, "name"),
            region=location_doc.get("region", ""),
            country=location_doc.get("country", ""),
            latitude=float(_require_key(location_doc, "lat")),
            longitude=float(_require_key(location_doc, "lon")),
        )

        index = aq.get("us-epa-index")
        panel = PollutantPanel(
            co=aq.get("co"),
            no2=aq.get("no2"),
            o3=aq.get("o3"),
            so2=aq.get("so2"),
            pm2_5=aq.get("pm2_5"),
            pm10=aq.get("pm10"),
            us_epa_index=int(index) if index is not None else None,
        )

        return cls(
            location=location,
            temperature=float(_require_key(current, "temp_c")),
            wind_kph=float(_require_key(current, "wind_kph")),
            wind_degree=float(current.get("wind_degree", 0)),
            humidity=float(_require_key(current, "humidity")),
            air_quality=panel,
        )


def _require_key(doc: dict[str, Any], key: str) -> Any:
    if key not in doc or doc[key] is None:
        raise MissingFieldError(key)
    return doc[key]
