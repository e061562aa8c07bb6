"""Threshold classification of route legs."""

from __future__ import annotations

from typing import Sequence

from .models import RouteLeg


def classify_legs(legs: Sequence[RouteLeg], threshold_km: float) -> list[RouteLeg]:
    """Flag legs strictly longer than ``threshold_km`` and return the flagged ones in order."""

    long_legs: list[RouteLeg] = []
    for leg in legs:
        leg.is_long = leg.distance_km > threshold_km
        if leg.is_long:
            long_legs.append(leg)
    return long_legs
