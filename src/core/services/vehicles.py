"""Picks the vehicle for a trip created without an explicit one."""

import logging

from core.db.vehicles import VehicleRepository
from core.errors import NoVehicleError, VehicleNotApprovedError
from core.models import VehicleStatus

logger = logging.getLogger(__name__)

STATUS_DESCRIPTIONS: dict[VehicleStatus, str] = {
    VehicleStatus.PENDING: "pending approval",
    VehicleStatus.REJECTED: "rejected",
    VehicleStatus.APPROVED: "approved",
}


class VehicleAssigner:
    def __init__(self, vehicles: VehicleRepository) -> None:
        self._vehicles = vehicles

    def assign(self, driver_id: str) -> str:
        """Return the driver's approved vehicle id.

        Raises ``VehicleNotApprovedError`` naming the status when the driver only
        has unapproved vehicles, ``NoVehicleError`` when they have none at all.
        """
        vehicle = self._vehicles.find_by_driver(driver_id, status=VehicleStatus.APPROVED)
        if vehicle is not None:
            logger.info("Assigned vehicle %s to driver %s", vehicle.id, driver_id)
            return vehicle.id

        any_vehicle = self._vehicles.find_by_driver(driver_id)
        if any_vehicle is not None:
            logger.info("Driver %s has vehicle %s in status %s", driver_id, any_vehicle.id, any_vehicle.status.value)
            raise VehicleNotApprovedError(driver_id, STATUS_DESCRIPTIONS[any_vehicle.status])

        logger.info("Driver %s has no registered vehicle", driver_id)
        raise NoVehicleError(driver_id)
