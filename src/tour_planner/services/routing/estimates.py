"""Trip time and cost estimates for display."""

from __future__ import annotations

from typing import Sequence

from ...models.domain import TravelProfile
from .models import RouteLeg, TripEstimate


def leg_hours(leg: RouteLeg, profile: TravelProfile) -> float:
    # Routed duration wins; nominal speed only covers legs that fell back.
    if leg.duration_seconds is not None:
        return leg.duration_seconds / 3600.0
    if profile.speed_kmh == 0:
        return 0.0
    return leg.distance_km / profile.speed_kmh


def estimate_trip(legs: Sequence[RouteLeg], total_distance_km: float, profile: TravelProfile) -> TripEstimate:
    """Estimate travel hours and cost. Leg durations are never modified."""
    return TripEstimate(
        hours=sum(leg_hours(leg, profile) for leg in legs),
        cost=total_distance_km * profile.cost_per_km,
    )
