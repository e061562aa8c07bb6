"""HTTP client for interacting with OSRM services."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from ...config import settings
from ...models.domain import Coordinate, TravelProfile
from .models import RouteFragment

logger = logging.getLogger(__name__)


class OSRMClient:
    """Single-pair lookups against the OSRM ``/route`` endpoint.

    A lookup never raises for provider trouble: transport errors, non-2xx
    responses, a code other than ``Ok``, an empty route list or a route
    without geometry all come back as ``None`` so callers can fall back.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        geometries: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url or settings.osrm_base_url
        if not self.base_url:
            raise ValueError("OSRM base URL is not configured.")
        self.base_url = self.base_url.rstrip("/")
        self.timeout = timeout if timeout is not None else settings.osrm_timeout_seconds
        self.geometries = geometries or settings.osrm_geometries
        self._transport = transport

    def _get_client(self) -> httpx.Client:
        """Get a per-call HTTP client; lookups run on worker threads."""
        return httpx.Client(
            timeout=httpx.Timeout(self.timeout, connect=min(self.timeout, 10.0)),
            transport=self._transport,
        )

    def route(self, origin: Coordinate, destination: Coordinate, profile: TravelProfile) -> Optional[RouteFragment]:
        """Get road distance, duration and geometry between two points.

        Returns:
            RouteFragment with distance in km and duration in seconds, or None
            when the lookup failed.
        """
        # OSRM route endpoint expects coordinates as "lon,lat;lon,lat"
        coordinate_str = f"{origin.as_lon_lat()};{destination.as_lon_lat()}"
        url = f"{self.base_url}/route/v1/{profile.osrm_profile}/{coordinate_str}"
        params = {
            "overview": "full",
            "geometries": self.geometries,
            "steps": "false",
        }

        client = self._get_client()
        try:
            response = client.get(url, params=params)
            response.raise_for_status()
            return self._parse_route(response.json())
        except httpx.HTTPStatusError as e:
            logger.warning(f"OSRM route request returned HTTP {e.response.status_code} for {coordinate_str}")
            return None
        except httpx.HTTPError as e:
            logger.warning(f"OSRM route request failed for {coordinate_str}: {e}")
            return None
        except (ValueError, KeyError, TypeError, IndexError) as e:
            logger.warning(f"OSRM route response for {coordinate_str} could not be used: {e}")
            return None
        finally:
            client.close()

    def _parse_route(self, data: Any) -> RouteFragment:
        if not isinstance(data, dict):
            raise ValueError("OSRM response is not a JSON object.")
        if data.get("code") != "Ok":
            raise ValueError(f"OSRM route request failed: {data.get('message', data.get('code', 'Unknown OSRM route error'))}")
        routes = data.get("routes") or []
        if not routes:
            raise ValueError("OSRM returned no routes.")

        route = routes[0]
        geometry = route.get("geometry")
        if not geometry:
            raise ValueError("OSRM route is missing geometry.")
        if isinstance(geometry, str):
            points = [Coordinate(lat, lon) for lat, lon in decode_polyline(geometry)]
        else:
            # GeoJSON LineString coordinates are [lon, lat]
            points = [Coordinate(float(lat), float(lon)) for lon, lat, *_ in geometry["coordinates"]]
        if not points:
            raise ValueError("OSRM route geometry has no coordinates.")

        return RouteFragment(
            distance_km=float(route["distance"]) / 1000.0,
            duration_seconds=float(route["duration"]),
            geometry=points,
        )


def decode_polyline(polyline: str) -> list[tuple[float, float]]:
    """Decode Google polyline string to list of (lat, lon) coordinates.

    OSRM uses Google's polyline encoding format (precision 5) when
    ``geometries=polyline`` is requested.
    """
    coordinates = []
    index = 0
    lat = 0
    lon = 0

    while index < len(polyline):
        deltas = []
        for _ in range(2):
            shift = 0
            result = 0
            while True:
                b = ord(polyline[index]) - 63
                index += 1
                result |= (b & 0x1f) << shift
                shift += 5
                if b < 0x20:
                    break
            deltas.append(~(result >> 1) if (result & 1) else (result >> 1))
        lat += deltas[0]
        lon += deltas[1]

        coordinates.append((lat / 1e5, lon / 1e5))

    return coordinates


def check_health(base_url: str | None = None, transport: httpx.BaseTransport | None = None) -> bool:
    """Check OSRM service health by routing between two nearby points.

    Public OSRM endpoints may not have a /health endpoint, so we test
    connectivity with the smallest useful route request.
    """
    try:
        client = OSRMClient(base_url=base_url, timeout=5.0, transport=transport)
    except ValueError:
        return False
    # Berlin area, routable on the public demo server
    origin = Coordinate(52.517037, 13.388860)
    destination = Coordinate(52.496891, 13.385983)
    return client.route(origin, destination, TravelProfile.DRIVING) is not None
