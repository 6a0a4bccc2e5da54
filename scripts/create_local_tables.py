#!/usr/bin/env python3
"""Create DynamoDB tables for local development.

Creates the Trips and Vehicles tables, with the driver-keyed secondary indexes
the repositories query, against DynamoDB Local.

Usage:
    python scripts/create_local_tables.py
"""

import sys
from pathlib import Path

import boto3
from botocore.exceptions import ClientError

# Add src to path for config import
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import get_config
from core.db.trips import DRIVER_INDEX as TRIP_DRIVER_INDEX
from core.db.vehicles import DRIVER_INDEX as VEHICLE_DRIVER_INDEX


def _create(dynamodb, table_name: str, **kwargs) -> None:
    try:
        dynamodb.create_table(TableName=table_name, BillingMode="PAY_PER_REQUEST", **kwargs)
        print(f"✓ Created {table_name} table")
    except ClientError as e:
        if e.response["Error"]["Code"] == "ResourceInUseException":
            print(f"✓ {table_name} table already exists")
        else:
            raise


def create_trips_table(dynamodb, table_name: str):
    """Create the trips table with the driver/departure GSI."""
    _create(
        dynamodb,
        table_name,
        KeySchema=[{"AttributeName": "tripId", "KeyType": "HASH"}],
        AttributeDefinitions=[
            {"AttributeName": "tripId", "AttributeType": "S"},
            {"AttributeName": "driverId", "AttributeType": "S"},
            {"AttributeName": "departureAt", "AttributeType": "S"},
        ],
        GlobalSecondaryIndexes=[
            {
                "IndexName": TRIP_DRIVER_INDEX,
                "KeySchema": [
                    {"AttributeName": "driverId", "KeyType": "HASH"},
                    {"AttributeName": "departureAt", "KeyType": "RANGE"},
                ],
                "Projection": {"ProjectionType": "ALL"},
            }
        ],
    )


def create_vehicles_table(dynamodb, table_name: str):
    """Create the vehicles table with the driver GSI."""
    _create(
        dynamodb,
        table_name,
        KeySchema=[{"AttributeName": "vehicleId", "KeyType": "HASH"}],
        AttributeDefinitions=[
            {"AttributeName": "vehicleId", "AttributeType": "S"},
            {"AttributeName": "driverId", "AttributeType": "S"},
        ],
        GlobalSecondaryIndexes=[
            {
                "IndexName": VEHICLE_DRIVER_INDEX,
                "KeySchema": [{"AttributeName": "driverId", "KeyType": "HASH"}],
                "Projection": {"ProjectionType": "ALL"},
            }
        ],
    )


def main():
    """Create all DynamoDB tables."""
    config = get_config()

    endpoint_url = config.dynamodb_endpoint or "http://localhost:8000"

    print(f"Creating DynamoDB tables at {endpoint_url}...")
    print()

    # For DynamoDB Local, use dummy credentials
    dynamodb = boto3.client(
        "dynamodb",
        endpoint_url=endpoint_url,
        region_name=config.aws_region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )

    create_trips_table(dynamodb, config.trips_table)
    create_vehicles_table(dynamodb, config.vehicles_table)

    print()
    print("✅ All DynamoDB tables ready")


if __name__ == "__main__":
    main()
