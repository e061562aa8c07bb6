"""Nearest-neighbour visiting order over great-circle distances."""

from __future__ import annotations

from typing import Sequence

from ...models.domain import Coordinate, Place
from ..geospatial import distance_km
from .models import RouteOrder


def nearest_index(origin: Coordinate, places: Sequence[Place], candidates: Sequence[int]) -> int:
    """Return the candidate closest to ``origin``; ties go to the lowest index."""

    best_idx = -1
    best_dist = float("inf")
    for idx in sorted(candidates):
        dist = distance_km(origin, places[idx].coordinates)
        if dist < best_dist:
            best_dist = dist
            best_idx = idx
    return best_idx


def greedy_order(places: Sequence[Place], start: Coordinate | None = None) -> RouteOrder:
    """Order places by always moving to the nearest unvisited one.

    Only haversine distances are used so ordering never waits on the network.
    With a start point the first stop is the place nearest to it, recorded as
    ``start_index``; otherwise the tour begins at index 0.
    """
    if not places:
        return RouteOrder()
    if len(places) == 1:
        return RouteOrder(sequence=[0])

    start_index: int | None = None
    if start is not None:
        current = nearest_index(start, places, range(len(places)))
        start_index = current
    else:
        current = 0

    unvisited = set(range(len(places)))
    sequence: list[int] = []
    while True:
        sequence.append(current)
        unvisited.discard(current)
        if not unvisited:
            break
        current = nearest_index(places[current].coordinates, places, list(unvisited))

    return RouteOrder(sequence=sequence, start_index=start_index)
