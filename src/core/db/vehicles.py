"""Read access to the vehicle registry table owned by the vehicle-approval service."""

from typing import Any

from core.models import Vehicle, VehicleStatus

DRIVER_INDEX = "driverId-index"


def vehicle_from_item(item: dict[str, Any]) -> Vehicle:
    return Vehicle(
        id=item["vehicleId"]["S"],
        driver_id=item["driverId"]["S"],
        status=VehicleStatus(item["status"]["S"]),
        plate=item["plate"]["S"] if "plate" in item else None,
        model=item["model"]["S"] if "model" in item else None,
    )


class VehicleRepository:
    def __init__(self, dynamo_client: Any, table_name: str) -> None:
        self._client = dynamo_client
        self._table = table_name

    def find_by_driver(self, driver_id: str, status: VehicleStatus | None = None) -> Vehicle | None:
        """First vehicle owned by ``driver_id``, optionally restricted to ``status``."""
        query_kwargs: dict[str, Any] = {
            "TableName": self._table,
            "IndexName": DRIVER_INDEX,
            "KeyConditionExpression": "driverId = :driver",
            "ExpressionAttributeValues": {":driver": {"S": driver_id}},
        }
        if status is not None:
            query_kwargs["FilterExpression"] = "#status = :status"
            query_kwargs["ExpressionAttributeNames"] = {"#status": "status"}
            query_kwargs["ExpressionAttributeValues"][":status"] = {"S": status.value}

        last_key = None
        while True:
            if last_key:
                query_kwargs["ExclusiveStartKey"] = last_key

            response = self._client.query(**query_kwargs)
            items = response.get("Items", [])
            if items:
                return vehicle_from_item(items[0])

            # A filtered page can come back empty while later pages still match
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return None
