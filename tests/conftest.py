"""Shared test fixtures for the trip marketplace backend."""

import os
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Unset AWS_PROFILE for local testing (DynamoDB Local doesn't need it)
if "AWS_PROFILE" in os.environ:
    del os.environ["AWS_PROFILE"]

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture
def departure():
    return datetime(2030, 3, 10, 8, 0, tzinfo=timezone.utc)


@pytest.fixture
def sao_paulo():
    from core.models import GeoPoint

    return GeoPoint(latitude=-23.5505, longitude=-46.6333)


@pytest.fixture
def rio():
    from core.models import GeoPoint

    return GeoPoint(latitude=-22.9068, longitude=-43.1729)


# DynamoDB fixtures
@pytest.fixture
def dynamodb_resource():
    """Provide a DynamoDB resource for integration tests."""
    import boto3
    from core.config import get_config

    config = get_config()

    resource = boto3.resource(
        "dynamodb",
        endpoint_url=config.dynamodb_endpoint,
        region_name=config.aws_region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )

    return resource


@pytest.fixture
def dynamodb_client():
    """Low-level client, the shape the repositories take."""
    import boto3
    from core.config import get_config

    config = get_config()

    return boto3.client(
        "dynamodb",
        endpoint_url=config.dynamodb_endpoint,
        region_name=config.aws_region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )


@pytest.fixture
def trips_table(dynamodb_resource):
    """Provide the Trips table."""
    from core.config import get_config

    table = dynamodb_resource.Table(get_config().trips_table)
    yield table

    # Cleanup: scan and delete all items created during test
    response = table.scan()
    with table.batch_writer() as batch:
        for item in response.get("Items", []):
            batch.delete_item(Key={"tripId": item["tripId"]})


@pytest.fixture
def vehicles_table(dynamodb_resource):
    """Provide the Vehicles table."""
    from core.config import get_config

    table = dynamodb_resource.Table(get_config().vehicles_table)
    yield table

    response = table.scan()
    with table.batch_writer() as batch:
        for item in response.get("Items", []):
            batch.delete_item(Key={"vehicleId": item["vehicleId"]})
