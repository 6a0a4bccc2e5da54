"""Shared value types: coordinates and timestamps."""

from datetime import datetime, timezone
from typing import Annotated, NamedTuple

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]
Latitude = Annotated[float, Field(ge=-90.0, le=90.0)]
Longitude = Annotated[float, Field(ge=-180.0, le=180.0)]


class LatLng(NamedTuple):
    lat: float
    lng: float


class LngLat(NamedTuple):
    lng: float
    lat: float


class CamelModel(BaseModel):
    """Base for models exchanged as camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GeoPoint(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    latitude: Latitude
    longitude: Longitude

    def as_lat_lng(self) -> LatLng:
        return LatLng(self.latitude, self.longitude)

    def as_lng_lat(self) -> LngLat:
        return LngLat(self.longitude, self.latitude)
