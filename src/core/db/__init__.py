"""
DynamoDB data access for the trip marketplace.

Trips are owned by this service; vehicles are read from the registry
maintained by the vehicle-approval service.
"""

from core.db.trips import TripRepository
from core.db.vehicles import VehicleRepository

__all__ = ["TripRepository", "VehicleRepository"]
