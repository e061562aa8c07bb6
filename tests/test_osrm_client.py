import httpx
import pytest

from tour_planner.models.domain import Coordinate, TravelProfile
from tour_planner.services.routing.osrm_client import OSRMClient, check_health, decode_polyline

ORIGIN = Coordinate(12.3052, 76.6552)
DESTINATION = Coordinate(12.2725, 76.6710)


def _ok_payload(geometry):
    return {
        "code": "Ok",
        "routes": [{"distance": 5230.0, "duration": 640.5, "geometry": geometry}],
    }


def _client(handler, geometries="geojson") -> OSRMClient:
    return OSRMClient(base_url="http://osrm.test/", geometries=geometries, transport=httpx.MockTransport(handler))


def test_route_parses_geojson_geometry_and_units():
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=_ok_payload({"type": "LineString", "coordinates": [[76.6552, 12.3052], [76.6710, 12.2725]]}))

    fragment = _client(handler).route(ORIGIN, DESTINATION, TravelProfile.WALKING)

    assert fragment is not None
    assert fragment.distance_km == pytest.approx(5.23)
    assert fragment.duration_seconds == pytest.approx(640.5)
    assert fragment.geometry == [ORIGIN, DESTINATION]
    assert not fragment.is_fallback

    request = requests[0]
    assert request.url.path == "/route/v1/foot/76.6552,12.3052;76.671,12.2725"
    assert request.url.params["overview"] == "full"
    assert request.url.params["geometries"] == "geojson"


def test_route_decodes_polyline_geometry():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_ok_payload("_p~iF~ps|U_ulLnnqC_mqNvxq`@"))

    fragment = _client(handler, geometries="polyline").route(ORIGIN, DESTINATION, TravelProfile.DRIVING)

    assert fragment is not None
    assert [point.latitude for point in fragment.geometry] == pytest.approx([38.5, 40.7, 43.252])
    assert [point.longitude for point in fragment.geometry] == pytest.approx([-120.2, -120.95, -126.453])


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, json={"code": "NoRoute", "message": "Impossible route between points"}),
        httpx.Response(200, json={"code": "Ok", "routes": []}),
        httpx.Response(200, json={"code": "Ok", "routes": [{"distance": 10.0, "duration": 2.0}]}),
        httpx.Response(
            200,
            json={
                "code": "Ok",
                "routes": [
                    {"distance": 5000, "duration": 300, "geometry": {"type": "LineString", "coordinates": []}}
                ],
            },
        ),
        httpx.Response(200, json=["not", "an", "object"]),
        httpx.Response(200, text="<html>maintenance</html>"),
        httpx.Response(429, json={"code": "TooBig"}),
        httpx.Response(503, text="unavailable"),
    ],
)
def test_unusable_responses_are_lookup_failures(response):
    client = _client(lambda request: response)

    assert client.route(ORIGIN, DESTINATION, TravelProfile.CYCLING) is None


def test_transport_errors_are_lookup_failures():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    assert _client(handler).route(ORIGIN, DESTINATION, TravelProfile.DRIVING) is None


def test_missing_base_url_is_a_configuration_error(monkeypatch):
    from tour_planner.services.routing import osrm_client

    monkeypatch.setattr(osrm_client.settings, "osrm_base_url", None)

    with pytest.raises(ValueError):
        OSRMClient()


def test_check_health():
    healthy = httpx.MockTransport(
        lambda request: httpx.Response(200, json=_ok_payload({"coordinates": [[13.38886, 52.517037], [13.385983, 52.496891]]}))
    )
    down = httpx.MockTransport(lambda request: httpx.Response(502, text="bad gateway"))

    assert check_health("http://osrm.test", transport=healthy) is True
    assert check_health("http://osrm.test", transport=down) is False


def test_decode_polyline_empty():
    assert decode_polyline("") == []
