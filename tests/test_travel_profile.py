import pytest

from tour_planner.models.domain import TravelProfile


@pytest.mark.parametrize(
    ("mode_key", "expected_profile", "token"),
    [
        ("walk", TravelProfile.WALKING, "foot"),
        ("bike", TravelProfile.CYCLING, "bike"),
        ("car", TravelProfile.DRIVING, "driving"),
        (" Walk ", TravelProfile.WALKING, "foot"),
        ("hovercraft", TravelProfile.DRIVING, "driving"),
        (None, TravelProfile.DRIVING, "driving"),
    ],
)
def test_mode_keys_map_to_osrm_profiles(mode_key, expected_profile, token):
    profile = TravelProfile.from_mode_key(mode_key)

    assert profile is expected_profile
    assert profile.osrm_profile == token


def test_profiles_carry_nominal_speed_and_cost():
    assert TravelProfile.WALKING.speed_kmh == 5.0
    assert TravelProfile.WALKING.cost_per_km == 0.0
    assert TravelProfile.CYCLING.speed_kmh == 40.0
    assert TravelProfile.DRIVING.cost_per_km == 8.0
