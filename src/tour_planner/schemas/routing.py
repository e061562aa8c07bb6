"""Routing request/response schemas."""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, Field

from ..models.domain import Coordinate, Place
from ..services.routing.models import OptimizedRoute, ReachabilitySet, RouteLeg


class CoordinateModel(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)

    def to_domain(self) -> Coordinate:
        return Coordinate(latitude=self.lat, longitude=self.lng)

    @classmethod
    def from_domain(cls, coordinate: Coordinate) -> "CoordinateModel":
        return cls(lat=coordinate.latitude, lng=coordinate.longitude)


class PlaceModel(BaseModel):
    id: str = Field(..., min_length=1)
    name: str
    coordinates: CoordinateModel
    description: str = ""

    def to_domain(self) -> Place:
        return Place(
            place_id=self.id,
            name=self.name,
            coordinates=self.coordinates.to_domain(),
            description=self.description,
        )


class OptimizeRouteRequest(BaseModel):
    places: List[PlaceModel] = Field(..., min_length=2, description="Selected places; at least two are required.")
    start: Optional[CoordinateModel] = Field(default=None, description="Free-standing starting location.")
    threshold_km: Optional[float] = Field(default=None, ge=0, description="Legs longer than this are flagged.")
    mode: Optional[str] = Field(default=None, description="Travel mode key: walk, bike or car.")


class ReachabilityRequest(BaseModel):
    places: List[PlaceModel] = Field(..., min_length=1)
    start: CoordinateModel
    max_distance_km: Optional[float] = Field(default=None, ge=0)
    mode: Optional[str] = None


class ExplorePathsRequest(BaseModel):
    places: List[PlaceModel]
    start_index: int = Field(default=0, ge=0)
    max_depth: Optional[int] = Field(default=None, ge=1)


class RouteLegModel(BaseModel):
    origin: Union[int, str]
    destination: Union[int, str]
    distance_km: float
    duration_seconds: Optional[float] = None
    geometry: Optional[List[CoordinateModel]] = None
    is_long: bool
    is_fallback: bool

    @classmethod
    def from_domain(cls, leg: RouteLeg) -> "RouteLegModel":
        return cls(
            origin=leg.origin,
            destination=leg.destination,
            distance_km=leg.distance_km,
            duration_seconds=leg.duration_seconds,
            geometry=[CoordinateModel.from_domain(point) for point in leg.geometry] if leg.geometry else None,
            is_long=leg.is_long,
            is_fallback=leg.is_fallback,
        )


class TripEstimateModel(BaseModel):
    hours: float
    cost: float


class OptimizedRouteResponse(BaseModel):
    order: List[int]
    start_index: Optional[int] = None
    legs: List[RouteLegModel]
    long_legs: List[RouteLegModel]
    total_distance_km: float
    total_duration_seconds: float
    threshold_km: float
    mode: str
    osrm_profile: str
    path: List[CoordinateModel]
    estimate: Optional[TripEstimateModel] = None
    metadata: dict = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, route: OptimizedRoute) -> "OptimizedRouteResponse":
        return cls(
            order=list(route.order.sequence),
            start_index=route.order.start_index,
            legs=[RouteLegModel.from_domain(leg) for leg in route.legs],
            long_legs=[RouteLegModel.from_domain(leg) for leg in route.long_legs],
            total_distance_km=route.total_distance_km,
            total_duration_seconds=route.total_duration_seconds,
            threshold_km=route.threshold_km,
            mode=route.profile.mode_key,
            osrm_profile=route.profile.osrm_profile,
            path=[CoordinateModel.from_domain(point) for point in route.path],
            estimate=TripEstimateModel(hours=route.estimate.hours, cost=route.estimate.cost) if route.estimate else None,
            metadata={
                "legs": len(route.legs),
                "fallback_legs": route.fallback_leg_count,
            },
        )


class ReachabilityResponse(BaseModel):
    reachable: List[int]
    root_index: Optional[int]
    max_distance_km: float

    @classmethod
    def from_domain(cls, result: ReachabilitySet) -> "ReachabilityResponse":
        return cls(
            reachable=list(result.reachable),
            root_index=result.root_index,
            max_distance_km=result.max_distance_km,
        )


class ExplorePathsResponse(BaseModel):
    start_index: int
    max_depth: int
    paths: List[List[int]]
