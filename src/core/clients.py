"""Lazy-initialized boto3 clients, reused across warm Lambda invocations."""

from functools import lru_cache
from typing import Any

import boto3

from core.config import get_config


@lru_cache(maxsize=4)
def _dynamo_client(endpoint_url: str | None, region_name: str) -> Any:
    return boto3.client("dynamodb", endpoint_url=endpoint_url, region_name=region_name)


def get_dynamo_client() -> Any:
    """DynamoDB client for the configured endpoint and region.

    Keyed on both, so a config reset in tests never hands back a client bound
    to a stale endpoint.
    """
    config = get_config()
    return _dynamo_client(config.dynamodb_endpoint, config.aws_region)
