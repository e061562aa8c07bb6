"""Route planning exceptions."""

from __future__ import annotations


class RoutePlanningError(Exception):
    """Base error for route planning failures surfaced to callers."""


class InvalidRouteInputError(RoutePlanningError, ValueError):
    """Raised for malformed input before any routing lookups are issued."""


class RouteTimeoutError(RoutePlanningError, TimeoutError):
    """Raised when leg lookups for a request do not finish before the deadline."""
