import pytest

from core.geo import (
    haversine_km,
    minutes_from_seconds,
    road_distance_km,
    round_distance_km,
    travel_seconds,
)


def test_haversine_identical_points_is_zero():
    assert haversine_km(-23.5505, -46.6333, -23.5505, -46.6333) == 0.0


def test_haversine_one_degree_of_latitude():
    assert haversine_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(111.19, abs=0.01)


def test_haversine_is_symmetric():
    forward = haversine_km(-23.5505, -46.6333, -22.9068, -43.1729)
    backward = haversine_km(-22.9068, -43.1729, -23.5505, -46.6333)
    assert forward == pytest.approx(backward)


def test_haversine_sao_paulo_to_rio():
    assert haversine_km(-23.5505, -46.6333, -22.9068, -43.1729) == pytest.approx(360.8, abs=1.0)


def test_road_distance_inflates_straight_line():
    assert road_distance_km(100.0) == pytest.approx(130.0)


def test_travel_seconds_at_average_speed():
    assert travel_seconds(60.0) == pytest.approx(3600.0)
    assert travel_seconds(30.0, speed_kmh=90.0) == pytest.approx(1200.0)


def test_round_distance_km_one_decimal():
    assert round_distance_km(12.345) == 12.3
    assert round_distance_km(0.04) == 0.0


@pytest.mark.parametrize(
    "seconds,minutes",
    [(0, 0), (1, 1), (59, 1), (60, 1), (61, 2), (3600, 60), (3600.0000001, 60)],
)
def test_minutes_from_seconds_rounds_up(seconds, minutes):
    assert minutes_from_seconds(seconds) == minutes
