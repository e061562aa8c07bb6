"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional, Union

from ...models.domain import Coordinate, TravelProfile

START: Literal["start"] = "start"

# A leg endpoint is either an index into the caller's place list or the start marker.
LegEndpoint = Union[int, Literal["start"]]


@dataclass(slots=True)
class RouteFragment:
    """Distance/duration/geometry for one origin-destination pair.

    ``duration_seconds`` and ``geometry`` are None when the provider lookup
    failed and the great-circle distance was substituted.
    """

    distance_km: float
    duration_seconds: Optional[float] = None
    geometry: Optional[List[Coordinate]] = None

    @property
    def is_fallback(self) -> bool:
        return self.duration_seconds is None


@dataclass(slots=True)
class RouteLeg:
    origin: LegEndpoint
    destination: LegEndpoint
    distance_km: float
    duration_seconds: Optional[float] = None
    geometry: Optional[List[Coordinate]] = None
    is_long: bool = False

    @property
    def is_fallback(self) -> bool:
        return self.duration_seconds is None


@dataclass(slots=True)
class RouteOrder:
    sequence: List[int] = field(default_factory=list)
    start_index: Optional[int] = None

    def __len__(self) -> int:
        return len(self.sequence)


@dataclass(slots=True)
class TripEstimate:
    hours: float
    cost: float


@dataclass(slots=True)
class OptimizedRoute:
    order: RouteOrder
    legs: List[RouteLeg]
    total_distance_km: float
    total_duration_seconds: float
    threshold_km: float
    profile: TravelProfile
    long_legs: List[RouteLeg] = field(default_factory=list)
    path: List[Coordinate] = field(default_factory=list)
    estimate: Optional[TripEstimate] = None

    @property
    def fallback_leg_count(self) -> int:
        return sum(1 for leg in self.legs if leg.is_fallback)


@dataclass(slots=True)
class ReachabilitySet:
    reachable: List[int]
    root_index: Optional[int]
    max_distance_km: float

    def __contains__(self, index: object) -> bool:
        return index in self.reachable
