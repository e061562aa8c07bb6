"""Concurrent resolution of the legs of an ordered route."""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from concurrent.futures import TimeoutError as FuturesTimeoutError
from dataclasses import dataclass
from typing import Sequence

from ...config import settings
from ...models.domain import Coordinate, Place, TravelProfile
from .errors import RouteTimeoutError
from .models import START, LegEndpoint, RouteFragment, RouteLeg, RouteOrder
from .router import RoadRouter

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LegFetchResult:
    legs: list[RouteLeg]
    total_distance_km: float
    total_duration_seconds: float


def plan_leg_endpoints(order: RouteOrder, start: Coordinate | None) -> list[tuple[LegEndpoint, LegEndpoint]]:
    """List (origin, destination) pairs in travel order."""
    sequence = order.sequence
    pairs: list[tuple[LegEndpoint, LegEndpoint]] = []
    if start is not None and sequence:
        pairs.append((START, sequence[0]))
    pairs.extend(zip(sequence, sequence[1:]))
    return pairs


def _coordinate_for(endpoint: LegEndpoint, places: Sequence[Place], start: Coordinate | None) -> Coordinate:
    if endpoint == START:
        if start is None:
            raise ValueError("Leg references the start point but none was supplied.")
        return start
    return places[endpoint].coordinates


def fetch_legs(
    places: Sequence[Place],
    order: RouteOrder,
    start: Coordinate | None,
    profile: TravelProfile,
    router: RoadRouter,
    *,
    max_workers: int | None = None,
    timeout: float | None = None,
) -> LegFetchResult:
    """Resolve every leg of ``order`` through the road router in parallel.

    Lookups are independent, so they are submitted together to a bounded
    thread pool and written back by leg position; completion order does not
    matter. A failed lookup yields the haversine fallback for that leg only.
    If the deadline passes, queued lookups are cancelled and
    RouteTimeoutError is raised without returning any legs. Lookups already
    running are not aborted; each one finishes within the client's per-call
    limit (``osrm_timeout_seconds``) and its result is discarded.
    """
    pairs = plan_leg_endpoints(order, start)
    if not pairs:
        return LegFetchResult(legs=[], total_distance_km=0.0, total_duration_seconds=0.0)

    max_workers = max_workers or settings.max_parallel_requests
    timeout = timeout if timeout is not None else settings.route_timeout_seconds
    fragments: list[RouteFragment | None] = [None] * len(pairs)

    start_time = time.time()
    executor = ThreadPoolExecutor(max_workers=min(max_workers, len(pairs)))
    try:
        future_to_position = {
            executor.submit(
                router.route_or_fallback,
                _coordinate_for(origin, places, start),
                _coordinate_for(destination, places, start),
                profile,
            ): position
            for position, (origin, destination) in enumerate(pairs)
        }
        for future in as_completed(future_to_position, timeout=timeout):
            fragments[future_to_position[future]] = future.result()
    except FuturesTimeoutError as exc:
        resolved = sum(1 for fragment in fragments if fragment is not None)
        logger.warning(f"Leg lookups timed out after {timeout:.1f}s ({resolved}/{len(pairs)} resolved)")
        raise RouteTimeoutError(
            f"Route lookups did not finish within {timeout:.1f}s ({resolved}/{len(pairs)} legs resolved)."
        ) from exc
    finally:
        executor.shutdown(wait=False, cancel_futures=True)

    legs: list[RouteLeg] = []
    total_distance = 0.0
    total_duration = 0.0
    for (origin, destination), fragment in zip(pairs, fragments):
        legs.append(
            RouteLeg(
                origin=origin,
                destination=destination,
                distance_km=fragment.distance_km,
                duration_seconds=fragment.duration_seconds,
                geometry=fragment.geometry,
            )
        )
        total_distance += fragment.distance_km
        if fragment.duration_seconds is not None:
            total_duration += fragment.duration_seconds

    fallbacks = sum(1 for leg in legs if leg.is_fallback)
    elapsed = time.time() - start_time
    if fallbacks:
        logger.info(f"Resolved {len(legs)} legs in {elapsed:.2f}s ({fallbacks} on haversine fallback)")
    else:
        logger.info(f"Resolved {len(legs)} legs in {elapsed:.2f}s")

    return LegFetchResult(legs=legs, total_distance_km=total_distance, total_duration_seconds=total_duration)
