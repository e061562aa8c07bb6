"""Routing orchestration service.

Caller-facing entry points. Each call works only on its arguments and
returns a fresh value; nothing is cached between requests.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from ...config import settings
from ...models.domain import Coordinate, Place, TravelProfile
from .classifier import classify_legs
from .errors import InvalidRouteInputError
from .estimates import estimate_trip
from .exploration import enumerate_paths, find_reachable
from .models import OptimizedRoute, ReachabilitySet
from .ordering import greedy_order
from .router import RoadRouter
from .segments import fetch_legs

logger = logging.getLogger(__name__)


def _validate_places(places: Sequence[Place]) -> None:
    seen: set[str] = set()
    for place in places:
        if not place.coordinates.is_valid():
            raise InvalidRouteInputError(
                f"Place '{place.place_id}' has out-of-range coordinates "
                f"({place.coordinates.latitude}, {place.coordinates.longitude})."
            )
        if place.place_id in seen:
            raise InvalidRouteInputError(f"Duplicate place id '{place.place_id}'.")
        seen.add(place.place_id)


def _validate_start(start: Coordinate | None) -> None:
    if start is not None and not start.is_valid():
        raise InvalidRouteInputError(f"Start point ({start.latitude}, {start.longitude}) is out of range.")


def _validate_distance(name: str, value: float) -> None:
    if value < 0:
        raise InvalidRouteInputError(f"{name} must be non-negative, got {value}.")


def compute_optimized_route(
    places: Sequence[Place],
    start: Coordinate | None = None,
    threshold_km: float | None = None,
    profile: TravelProfile = TravelProfile.DRIVING,
    *,
    router: RoadRouter | None = None,
    timeout: float | None = None,
) -> OptimizedRoute:
    """Order places greedily, resolve real legs in parallel and flag long legs.

    Raises:
        InvalidRouteInputError: malformed input, before any lookup is issued.
        RouteTimeoutError: leg lookups missed the deadline; no partial route.
    """
    threshold_km = settings.distance_threshold_km if threshold_km is None else threshold_km
    _validate_distance("threshold_km", threshold_km)
    _validate_places(places)
    _validate_start(start)

    order = greedy_order(places, start)
    logger.info(f"Greedy order for {len(places)} places ({profile.mode_key}): {order.sequence}")

    if len(places) < 2:
        return OptimizedRoute(
            order=order,
            legs=[],
            total_distance_km=0.0,
            total_duration_seconds=0.0,
            threshold_km=threshold_km,
            profile=profile,
            path=[places[idx].coordinates for idx in order.sequence],
            estimate=estimate_trip([], 0.0, profile),
        )

    router = router or RoadRouter()
    fetched = fetch_legs(places, order, start, profile, router, timeout=timeout)
    long_legs = classify_legs(fetched.legs, threshold_km)
    if long_legs:
        logger.info(f"{len(long_legs)} leg(s) exceed {threshold_km} km")

    path = [start] if start is not None else []
    path.extend(places[idx].coordinates for idx in order.sequence)

    return OptimizedRoute(
        order=order,
        legs=fetched.legs,
        total_distance_km=fetched.total_distance_km,
        total_duration_seconds=fetched.total_duration_seconds,
        threshold_km=threshold_km,
        profile=profile,
        long_legs=long_legs,
        path=path,
        estimate=estimate_trip(fetched.legs, fetched.total_distance_km, profile),
    )


def compute_reachability(
    places: Sequence[Place],
    start: Coordinate,
    max_distance_km: float | None = None,
    profile: TravelProfile = TravelProfile.DRIVING,
    *,
    router: RoadRouter | None = None,
) -> ReachabilitySet:
    max_distance_km = settings.reachability_max_distance_km if max_distance_km is None else max_distance_km
    _validate_distance("max_distance_km", max_distance_km)
    _validate_places(places)
    if start is None:
        raise InvalidRouteInputError("Reachability search requires a start point.")
    _validate_start(start)

    if not places:
        return ReachabilitySet(reachable=[], root_index=None, max_distance_km=max_distance_km)
    return find_reachable(places, start, max_distance_km, profile, router or RoadRouter())


def resolve_explore_depth(max_depth: int | None) -> int:
    return settings.explore_max_depth if max_depth is None else max_depth


def _check_exploration_size(place_count: int, max_depth: int) -> None:
    if max_depth > settings.explore_max_depth_limit:
        raise InvalidRouteInputError(
            f"max_depth {max_depth} exceeds the limit of {settings.explore_max_depth_limit}."
        )
    if place_count > settings.explore_max_places:
        raise InvalidRouteInputError(
            f"Path exploration accepts at most {settings.explore_max_places} places, got {place_count}."
        )
    # Every path is an ordered pick of (depth - 1) places after the start.
    depth = min(max_depth, place_count)
    path_count = math.perm(place_count - 1, depth - 1) if depth >= 1 else 0
    if path_count > settings.explore_max_paths:
        raise InvalidRouteInputError(
            f"Exploring {place_count} places to depth {max_depth} yields {path_count} paths; "
            f"the limit is {settings.explore_max_paths}."
        )


def explore_paths(places: Sequence[Place], start_index: int, max_depth: int | None = None) -> list[list[int]]:
    max_depth = resolve_explore_depth(max_depth)
    _check_exploration_size(len(places), max_depth)
    paths = enumerate_paths(places, start_index, max_depth)
    logger.debug(f"Explored {len(paths)} path(s) from place {start_index} to depth {max_depth}")
    return paths
