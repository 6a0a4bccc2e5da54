"""Read-only projection of the vehicle registry's records."""

from enum import Enum

from core.models.common import CamelModel


class VehicleStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class Vehicle(CamelModel):
    id: str
    driver_id: str
    status: VehicleStatus
    plate: str | None = None
    model: str | None = None
