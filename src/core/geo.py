"""Great-circle distance and travel-time heuristics. Pure functions, no I/O."""

import math

EARTH_RADIUS_KM = 6371.0
ROAD_INDIRECTION_FACTOR = 1.3
AVERAGE_SPEED_KMH = 60.0


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two coordinates, in kilometers."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def road_distance_km(straight_line_km: float) -> float:
    return straight_line_km * ROAD_INDIRECTION_FACTOR


def travel_seconds(distance_km: float, speed_kmh: float = AVERAGE_SPEED_KMH) -> float:
    return distance_km / speed_kmh * 3600


def round_distance_km(distance_km: float) -> float:
    return round(distance_km, 1)


def minutes_from_seconds(seconds: float) -> int:
    """Whole minutes, rounded up so arrival is never under-promised."""
    # Sub-microminute float noise must not push an exact minute count up by one.
    return math.ceil(round(seconds / 60, 6))
