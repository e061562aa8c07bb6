"""Domain models for places, coordinates and travel profiles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A WGS84 point in degrees."""

    latitude: float
    longitude: float

    def is_valid(self) -> bool:
        return -90.0 <= self.latitude <= 90.0 and -180.0 <= self.longitude <= 180.0

    def as_lon_lat(self) -> str:
        """Format as the ``lon,lat`` pair OSRM expects in request paths."""
        return f"{self.longitude},{self.latitude}"


@dataclass(slots=True)
class Place:
    """Represents a tourist stop selected by the caller."""

    place_id: str
    name: str
    coordinates: Coordinate
    description: str = ""


class TravelProfile(Enum):
    """Travel mode keyed by the caller-facing mode name.

    Each member carries the OSRM profile token plus the nominal speed and
    cost rate used for trip estimates when no routed duration is available.
    """

    WALKING = ("walk", "foot", 5.0, 0.0)
    CYCLING = ("bike", "bike", 40.0, 2.0)
    DRIVING = ("car", "driving", 60.0, 8.0)

    def __init__(self, mode_key: str, osrm_profile: str, speed_kmh: float, cost_per_km: float) -> None:
        self.mode_key = mode_key
        self.osrm_profile = osrm_profile
        self.speed_kmh = speed_kmh
        self.cost_per_km = cost_per_km

    @classmethod
    def from_mode_key(cls, mode_key: str | None) -> "TravelProfile":
        """Resolve ``walk``/``bike``/``car``; anything else drives."""
        normalized = (mode_key or "").strip().lower()
        for profile in cls:
            if profile.mode_key == normalized:
                return profile
        return cls.DRIVING
