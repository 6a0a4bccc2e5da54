from os import environ

import boto3
from pydantic import BaseModel, ConfigDict

_cached_secrets: dict[str, str] = {}


def _resolve_secret(name: str) -> str:
    """Value of secret ``name``: env var ``NAME`` locally, Secrets Manager ``NAME_ARN`` when deployed.

    Resolved values are cached for the lifetime of the process.
    """
    if name in _cached_secrets:
        return _cached_secrets[name]

    # Local dev: use env var directly
    direct = environ.get(name, "")
    if direct:
        _cached_secrets[name] = direct
        return direct

    # Deployed: fetch from Secrets Manager by ARN
    arn = environ.get(f"{name}_ARN", "")
    if not arn:
        return ""

    client = boto3.client("secretsmanager")
    _cached_secrets[name] = client.get_secret_value(SecretId=arn)["SecretString"]
    return _cached_secrets[name]


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    dynamodb_endpoint: str | None = None
    trips_table: str
    vehicles_table: str
    google_maps_api_key: str = ""
    openrouteservice_api_key: str = ""
    route_provider_timeout_seconds: float = 10.0
    nominatim_url: str
    nominatim_user_agent: str
    nominatim_country_codes: str = ""
    clerk_secret_key: str = ""
    environment: str


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config and secrets. For testing only."""
    global _cached_config
    _cached_config = None
    _cached_secrets.clear()


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        dynamodb_endpoint=environ.get("DYNAMODB_ENDPOINT"),
        trips_table=environ.get("TRIPS_TABLE", "Trips"),
        vehicles_table=environ.get("VEHICLES_TABLE", "Vehicles"),
        google_maps_api_key=_resolve_secret("GOOGLE_MAPS_API_KEY"),
        openrouteservice_api_key=_resolve_secret("OPENROUTESERVICE_API_KEY"),
        route_provider_timeout_seconds=float(environ.get("ROUTE_PROVIDER_TIMEOUT_SECONDS", "10")),
        nominatim_url=environ.get("NOMINATIM_URL", "https://nominatim.openstreetmap.org"),
        nominatim_user_agent=environ.get("NOMINATIM_USER_AGENT", "VaiNoPulo/1.0"),
        nominatim_country_codes=environ.get("NOMINATIM_COUNTRY_CODES", "br"),
        clerk_secret_key=_resolve_secret("CLERK_SECRET_KEY"),
        environment=environ.get("ENVIRONMENT", "local"),
    )
    return _cached_config
