"""Routing endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...config import settings
from ...models.domain import TravelProfile
from ...schemas.routing import (
    ExplorePathsRequest,
    ExplorePathsResponse,
    OptimizedRouteResponse,
    OptimizeRouteRequest,
    ReachabilityRequest,
    ReachabilityResponse,
)
from ...services.routing.errors import RouteTimeoutError
from ...services.routing.service import (
    compute_optimized_route,
    compute_reachability,
    explore_paths,
    resolve_explore_depth,
)

router = APIRouter(prefix="/routes", tags=["routes"])
logger = logging.getLogger(__name__)


def _profile(mode: str | None) -> TravelProfile:
    return TravelProfile.from_mode_key(mode or settings.default_travel_mode)


@router.post("/optimize", response_model=OptimizedRouteResponse, status_code=status.HTTP_200_OK)
def optimize(payload: OptimizeRouteRequest) -> OptimizedRouteResponse:
    try:
        route = compute_optimized_route(
            [place.to_domain() for place in payload.places],
            start=payload.start.to_domain() if payload.start else None,
            threshold_km=payload.threshold_km,
            profile=_profile(payload.mode),
        )
        return OptimizedRouteResponse.from_domain(route)
    except RouteTimeoutError as exc:
        raise HTTPException(status_code=status.HTTP_504_GATEWAY_TIMEOUT, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception(f"Error optimizing route: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to optimize route: {str(exc)}"
        ) from exc


@router.post("/reachability", response_model=ReachabilityResponse, status_code=status.HTTP_200_OK)
def reachability(payload: ReachabilityRequest) -> ReachabilityResponse:
    try:
        result = compute_reachability(
            [place.to_domain() for place in payload.places],
            payload.start.to_domain(),
            max_distance_km=payload.max_distance_km,
            profile=_profile(payload.mode),
        )
        return ReachabilityResponse.from_domain(result)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception(f"Error computing reachability: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to compute reachability: {str(exc)}"
        ) from exc


@router.post("/explore", response_model=ExplorePathsResponse, status_code=status.HTTP_200_OK)
def explore(payload: ExplorePathsRequest) -> ExplorePathsResponse:
    """Enumerate visiting sequences up to a bounded depth (diagnostic)."""
    try:
        paths = explore_paths(
            [place.to_domain() for place in payload.places],
            payload.start_index,
            payload.max_depth,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception(f"Error exploring paths: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to explore paths: {str(exc)}"
        ) from exc
    max_depth = resolve_explore_depth(payload.max_depth)
    return ExplorePathsResponse(start_index=payload.start_index, max_depth=max_depth, paths=paths)
