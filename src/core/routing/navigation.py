"""Deep links into third-party navigation apps."""

from urllib.parse import urlencode

from core.models import GeoPoint


def waze_url(destination: GeoPoint) -> str:
    return f"https://waze.com/ul?ll={destination.latitude},{destination.longitude}&navigate=yes"


def google_maps_url(origin: GeoPoint, destination: GeoPoint) -> str:
    query = urlencode(
        {
            "api": 1,
            "origin": f"{origin.latitude},{origin.longitude}",
            "destination": f"{destination.latitude},{destination.longitude}",
            "travelmode": "driving",
        },
        safe=",",
    )
    return f"https://www.google.com/maps/dir/?{query}"
