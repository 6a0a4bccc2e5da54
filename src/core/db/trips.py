"""DynamoDB persistence for trips.

Every write after the initial insert is a compare-and-swap on the ``version``
attribute, so a status check followed by a transition is atomic per trip.
"""

from datetime import datetime
from typing import Any

from botocore.exceptions import ClientError

from core.errors import ConcurrentModificationError
from core.models import GeoPoint, LastLocation, Place, Trip, TripStatus

DRIVER_INDEX = "driverId-departureAt-index"


def _s(value: str) -> dict[str, str]:
    return {"S": value}


def _n(value: float | int) -> dict[str, str]:
    return {"N": str(value)}


def _place_to_attr(place: Place) -> dict[str, Any]:
    return {
        "M": {
            "name": _s(place.name),
            "lat": _n(place.point.latitude),
            "lng": _n(place.point.longitude),
        }
    }


def _place_from_attr(attr: dict[str, Any]) -> Place:
    m = attr["M"]
    return Place(
        name=m["name"]["S"],
        point=GeoPoint(latitude=float(m["lat"]["N"]), longitude=float(m["lng"]["N"])),
    )


def trip_to_item(trip: Trip) -> dict[str, Any]:
    item: dict[str, Any] = {
        "tripId": _s(trip.id),
        "driverId": _s(trip.driver_id),
        "vehicleId": _s(trip.vehicle_id),
        "origin": _place_to_attr(trip.origin),
        "destination": _place_to_attr(trip.destination),
        "departureAt": _s(trip.departure_at.isoformat()),
        "estimatedArrival": _s(trip.estimated_arrival.isoformat()),
        "distanceKm": _n(trip.distance_km),
        "durationMinutes": _n(trip.duration_minutes),
        "status": _s(trip.status.value),
        "createdAt": _s(trip.created_at.isoformat()),
        "updatedAt": _s(trip.updated_at.isoformat()),
        "version": _n(trip.version),
    }
    if trip.polyline is not None:
        item["polyline"] = _s(trip.polyline)
    if trip.available_seats is not None:
        item["availableSeats"] = _n(trip.available_seats)
    if trip.available_capacity_kg is not None:
        item["availableCapacityKg"] = _n(trip.available_capacity_kg)
    if trip.notes is not None:
        item["notes"] = _s(trip.notes)
    if trip.last_location is not None:
        item["lastLocation"] = {
            "M": {
                "lat": _n(trip.last_location.point.latitude),
                "lng": _n(trip.last_location.point.longitude),
                "ts": _s(trip.last_location.recorded_at.isoformat()),
            }
        }
    return item


def trip_from_item(item: dict[str, Any]) -> Trip:
    last_location = None
    if "lastLocation" in item:
        m = item["lastLocation"]["M"]
        last_location = LastLocation(
            point=GeoPoint(latitude=float(m["lat"]["N"]), longitude=float(m["lng"]["N"])),
            recorded_at=datetime.fromisoformat(m["ts"]["S"]),
        )

    return Trip(
        id=item["tripId"]["S"],
        driver_id=item["driverId"]["S"],
        vehicle_id=item["vehicleId"]["S"],
        origin=_place_from_attr(item["origin"]),
        destination=_place_from_attr(item["destination"]),
        departure_at=datetime.fromisoformat(item["departureAt"]["S"]),
        estimated_arrival=datetime.fromisoformat(item["estimatedArrival"]["S"]),
        distance_km=float(item["distanceKm"]["N"]),
        duration_minutes=int(item["durationMinutes"]["N"]),
        polyline=item["polyline"]["S"] if "polyline" in item else None,
        available_seats=int(item["availableSeats"]["N"]) if "availableSeats" in item else None,
        available_capacity_kg=float(item["availableCapacityKg"]["N"]) if "availableCapacityKg" in item else None,
        status=TripStatus(item["status"]["S"]),
        notes=item["notes"]["S"] if "notes" in item else None,
        last_location=last_location,
        created_at=datetime.fromisoformat(item["createdAt"]["S"]),
        updated_at=datetime.fromisoformat(item["updatedAt"]["S"]),
        version=int(item["version"]["N"]),
    )


def _is_condition_failure(error: ClientError) -> bool:
    return error.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException"


class TripRepository:
    def __init__(self, dynamo_client: Any, table_name: str) -> None:
        self._client = dynamo_client
        self._table = table_name

    def insert(self, trip: Trip) -> None:
        try:
            self._client.put_item(
                TableName=self._table,
                Item=trip_to_item(trip),
                ConditionExpression="attribute_not_exists(tripId)",
            )
        except ClientError as e:
            if _is_condition_failure(e):
                raise ConcurrentModificationError(f"Trip {trip.id} already exists") from e
            raise

    def get(self, trip_id: str) -> Trip | None:
        response = self._client.get_item(
            TableName=self._table,
            Key={"tripId": _s(trip_id)},
            ConsistentRead=True,
        )
        item = response.get("Item")
        return trip_from_item(item) if item else None

    def replace(self, trip: Trip, expected_version: int) -> None:
        """Overwrite the stored trip only if nobody else wrote it since ``expected_version``."""
        try:
            self._client.put_item(
                TableName=self._table,
                Item=trip_to_item(trip),
                ConditionExpression="version = :expected",
                ExpressionAttributeValues={":expected": _n(expected_version)},
            )
        except ClientError as e:
            if _is_condition_failure(e):
                raise ConcurrentModificationError(
                    f"Trip {trip.id} changed since version {expected_version}"
                ) from e
            raise

    def delete(self, trip_id: str, expected_version: int) -> None:
        try:
            self._client.delete_item(
                TableName=self._table,
                Key={"tripId": _s(trip_id)},
                ConditionExpression="version = :expected",
                ExpressionAttributeValues={":expected": _n(expected_version)},
            )
        except ClientError as e:
            if _is_condition_failure(e):
                raise ConcurrentModificationError(
                    f"Trip {trip_id} changed since version {expected_version}"
                ) from e
            raise

    def search(
        self,
        status: TripStatus | None = None,
        driver_id: str | None = None,
        from_date: datetime | None = None,
    ) -> list[Trip]:
        """Scan with optional filters, ordered by departure ascending."""
        filters: list[str] = []
        names: dict[str, str] = {}
        values: dict[str, Any] = {}
        if status is not None:
            filters.append("#status = :status")
            names["#status"] = "status"
            values[":status"] = _s(status.value)
        if driver_id is not None:
            filters.append("driverId = :driver")
            values[":driver"] = _s(driver_id)
        if from_date is not None:
            filters.append("departureAt >= :from")
            values[":from"] = _s(from_date.isoformat())

        scan_kwargs: dict[str, Any] = {"TableName": self._table}
        if filters:
            scan_kwargs["FilterExpression"] = " AND ".join(filters)
            scan_kwargs["ExpressionAttributeValues"] = values
        if names:
            scan_kwargs["ExpressionAttributeNames"] = names

        trips = [trip_from_item(item) for item in self._paginate("scan", scan_kwargs)]
        trips.sort(key=lambda trip: trip.departure_at)
        return trips

    def list_by_driver(self, driver_id: str) -> list[Trip]:
        """All trips of a driver, most recent departure first."""
        query_kwargs: dict[str, Any] = {
            "TableName": self._table,
            "IndexName": DRIVER_INDEX,
            "KeyConditionExpression": "driverId = :driver",
            "ExpressionAttributeValues": {":driver": _s(driver_id)},
            "ScanIndexForward": False,
        }
        return [trip_from_item(item) for item in self._paginate("query", query_kwargs)]

    def _paginate(self, operation: str, kwargs: dict[str, Any]) -> list[dict[str, Any]]:
        items: list[dict[str, Any]] = []
        last_key = None

        while True:
            page_kwargs = dict(kwargs)
            if last_key:
                page_kwargs["ExclusiveStartKey"] = last_key

            response = getattr(self._client, operation)(**page_kwargs)
            items.extend(response.get("Items", []))

            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break

        return items
