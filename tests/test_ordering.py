import random

from tour_planner.models.domain import Coordinate, Place
from tour_planner.services.routing.ordering import greedy_order, nearest_index


def _place(pid: str, lat: float, lon: float) -> Place:
    return Place(place_id=pid, name=f"Place {pid}", coordinates=Coordinate(lat, lon))


def test_empty_and_single_place():
    assert greedy_order([]).sequence == []

    single = greedy_order([_place("P1", 12.3, 76.6)], start=Coordinate(12.0, 76.0))
    assert single.sequence == [0]
    assert single.start_index is None


def test_without_start_begins_at_first_place():
    places = [_place("P1", 0.0, 0.0), _place("P2", 0.0, 0.2), _place("P3", 0.0, 0.1)]

    order = greedy_order(places)

    assert order.sequence == [0, 2, 1]
    assert order.start_index is None


def test_start_point_selects_nearest_place():
    places = [_place("P1", 0.0, 0.0), _place("P2", 0.0, 0.1), _place("P3", 0.0, 0.3)]

    order = greedy_order(places, start=Coordinate(0.0, 0.32))

    assert order.start_index == 2
    assert order.sequence == [2, 1, 0]


def test_order_is_a_permutation_for_random_inputs():
    rng = random.Random(7)
    for size in range(2, 15):
        places = [_place(f"P{i}", rng.uniform(12.0, 13.0), rng.uniform(76.0, 77.0)) for i in range(size)]
        order = greedy_order(places, start=Coordinate(12.5, 76.5))

        assert sorted(order.sequence) == list(range(size))
        assert len(set(order.sequence)) == size


def test_ties_break_on_lowest_index_and_are_deterministic():
    places = [
        _place("P1", 0.0, 0.0),
        _place("P2", 0.0, 0.1),
        _place("P3", 0.0, -0.1),
        _place("P4", 0.0, 0.1),
    ]

    first = greedy_order(places)
    second = greedy_order(places)

    # P2 and P3 are equidistant from P1; P2 and P4 coincide
    assert first.sequence[:3] == [0, 1, 3]
    assert first == second


def test_nearest_index_prefers_lowest_index_on_tie():
    places = [_place("P1", 0.0, 0.1), _place("P2", 0.0, -0.1)]

    assert nearest_index(Coordinate(0.0, 0.0), places, [1, 0]) == 0
