from tour_planner.services.routing.classifier import classify_legs
from tour_planner.services.routing.models import START, RouteLeg


def _legs() -> list[RouteLeg]:
    return [
        RouteLeg(origin=START, destination=0, distance_km=0.0),
        RouteLeg(origin=0, destination=1, distance_km=50.0),
        RouteLeg(origin=1, destination=2, distance_km=50.000001),
        RouteLeg(origin=2, destination=3, distance_km=12.5),
    ]


def test_threshold_comparison_is_strict():
    legs = _legs()

    long_legs = classify_legs(legs, 50.0)

    assert [leg.is_long for leg in legs] == [False, False, True, False]
    assert long_legs == [legs[2]]


def test_long_legs_keep_leg_order():
    legs = _legs()

    long_legs = classify_legs(legs, 10.0)

    assert [(leg.origin, leg.destination) for leg in long_legs] == [(0, 1), (1, 2), (2, 3)]


def test_classification_is_idempotent():
    legs = _legs()

    first_long = classify_legs(legs, 20.0)
    first_flags = [leg.is_long for leg in legs]
    second_long = classify_legs(legs, 20.0)

    assert [leg.is_long for leg in legs] == first_flags
    assert second_long == first_long


def test_reclassifying_with_higher_threshold_clears_flags():
    legs = _legs()
    classify_legs(legs, 1.0)

    assert classify_legs(legs, 100.0) == []
    assert not any(leg.is_long for leg in legs)
