"""Graph exploration over a place set: reachability and bounded path enumeration."""

from __future__ import annotations

import logging
from collections import deque
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Sequence

from ...config import settings
from ...models.domain import Coordinate, Place, TravelProfile
from .errors import InvalidRouteInputError
from .models import ReachabilitySet
from .router import RoadRouter

logger = logging.getLogger(__name__)


def _measure_batch(
    executor: Executor,
    router: RoadRouter,
    pairs: Sequence[tuple[Coordinate, Coordinate]],
    profile: TravelProfile,
) -> list[float]:
    """Resolve a batch of independent distances concurrently, in input order."""
    if not pairs:
        return []
    return list(executor.map(lambda pair: router.distance(pair[0], pair[1], profile), pairs))


def find_reachable(
    places: Sequence[Place],
    start: Coordinate,
    max_distance_km: float,
    profile: TravelProfile,
    router: RoadRouter,
    *,
    max_workers: int | None = None,
) -> ReachabilitySet:
    """Breadth-first search for places within ``max_distance_km`` of the root.

    The root is the place with the shortest road (or fallback) distance to
    ``start``. From each dequeued node every unvisited place one hop within
    budget is enqueued. A dequeued node only counts as reachable when its own
    distance from the root is within budget, so a chain of short hops does not
    by itself make a distant place reachable.
    """
    if not places:
        return ReachabilitySet(reachable=[], root_index=None, max_distance_km=max_distance_km)

    workers = max_workers or settings.max_parallel_requests
    with ThreadPoolExecutor(max_workers=min(workers, len(places))) as executor:
        start_distances = _measure_batch(
            executor, router, [(start, place.coordinates) for place in places], profile
        )
        root = min(range(len(places)), key=lambda idx: (start_distances[idx], idx))
        root_coords = places[root].coordinates

        visited = {root}
        queue = deque([root])
        reachable: list[int] = []
        lookups = len(places)

        while queue:
            current = queue.popleft()
            current_coords = places[current].coordinates
            candidates = [idx for idx in range(len(places)) if idx not in visited and idx != current]

            pairs = [(current_coords, places[idx].coordinates) for idx in candidates]
            if current != root:
                pairs.insert(0, (root_coords, current_coords))
            distances = _measure_batch(executor, router, pairs, profile)
            lookups += len(pairs)

            distance_from_root = 0.0 if current == root else distances.pop(0)
            if distance_from_root <= max_distance_km:
                reachable.append(current)

            for idx, dist in zip(candidates, distances):
                if dist <= max_distance_km:
                    visited.add(idx)
                    queue.append(idx)

    logger.info(
        f"Reachability from place {root}: {len(reachable)}/{len(places)} within {max_distance_km} km "
        f"({lookups} distance lookups)"
    )
    return ReachabilitySet(reachable=reachable, root_index=root, max_distance_km=max_distance_km)


def enumerate_paths(places: Sequence[Place], start_index: int, max_depth: int) -> list[list[int]]:
    """Depth-first enumeration of visiting sequences starting at ``start_index``.

    A path is recorded once it holds ``max_depth`` places or every place.
    Each recursive step receives its own extended path and visited set, so
    sibling branches never see each other's choices.
    """
    if not places:
        return []
    if max_depth < 1:
        raise InvalidRouteInputError(f"max_depth must be at least 1, got {max_depth}.")
    if not 0 <= start_index < len(places):
        raise InvalidRouteInputError(f"start_index {start_index} is out of range for {len(places)} places.")

    place_count = len(places)
    paths: list[list[int]] = []

    def _extend(path: tuple[int, ...], visited: frozenset[int]) -> None:
        if len(path) >= max_depth or len(visited) == place_count:
            paths.append(list(path))
            return
        for idx in range(place_count):
            if idx not in visited:
                _extend(path + (idx,), visited | {idx})

    _extend((start_index,), frozenset({start_index}))
    return paths
