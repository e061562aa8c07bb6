"""Route planning services."""

from .errors import InvalidRouteInputError, RoutePlanningError, RouteTimeoutError
from .service import compute_optimized_route, compute_reachability, explore_paths

__all__ = [
    "compute_optimized_route",
    "compute_reachability",
    "explore_paths",
    "RoutePlanningError",
    "InvalidRouteInputError",
    "RouteTimeoutError",
]
