"""Road distance lookups with a uniform great-circle fallback."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from ...models.domain import Coordinate, TravelProfile
from ..geospatial import distance_km
from .models import RouteFragment
from .osrm_client import OSRMClient

logger = logging.getLogger(__name__)


class RouteProvider(Protocol):
    def route(self, origin: Coordinate, destination: Coordinate, profile: TravelProfile) -> Optional[RouteFragment]:
        ...


class RoadRouter:
    """Every caller that needs a road distance goes through here.

    ``real_route`` reports a failed lookup as None; ``route_or_fallback``
    substitutes the haversine distance with no duration and no geometry.
    """

    def __init__(self, client: RouteProvider | None = None) -> None:
        self.client: RouteProvider = client if client is not None else OSRMClient()

    def real_route(self, origin: Coordinate, destination: Coordinate, profile: TravelProfile) -> Optional[RouteFragment]:
        try:
            return self.client.route(origin, destination, profile)
        except Exception as e:
            logger.warning(f"Route provider raised during lookup, treating as failed: {e}")
            return None

    def route_or_fallback(self, origin: Coordinate, destination: Coordinate, profile: TravelProfile) -> RouteFragment:
        fragment = self.real_route(origin, destination, profile)
        if fragment is not None:
            return fragment
        fallback_km = distance_km(origin, destination)
        logger.debug(
            f"Using haversine fallback {fallback_km:.3f} km for "
            f"({origin.latitude}, {origin.longitude}) -> ({destination.latitude}, {destination.longitude})"
        )
        return RouteFragment(distance_km=fallback_km)

    def distance(self, origin: Coordinate, destination: Coordinate, profile: TravelProfile) -> float:
        return self.route_or_fallback(origin, destination, profile).distance_km
