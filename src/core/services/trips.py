"""Trip lifecycle: creation, edits and the guarded status transitions.

Every guarded operation checks, in order, that the trip exists, that the caller
owns it, and that its status allows the operation. Writes are compare-and-swap
on the trip version; a writer that loses a race re-reads the trip so the caller
gets the precise reason.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from core.clients import get_dynamo_client
from core.config import Config, get_config
from core.db.trips import TripRepository
from core.db.vehicles import VehicleRepository
from core.errors import (
    ConcurrentModificationError,
    MarketplaceError,
    TripCreationError,
    TripForbiddenError,
    TripNotFoundError,
)
from core.models import (
    CreateTripRequest,
    GeoPoint,
    LastLocation,
    Place,
    RouteEstimate,
    Trip,
    TripQuery,
    UpdateTripRequest,
)
from core.routing import RouteResolver, build_route_resolver
from core.services.trip_state import ensure_allowed, next_status
from core.services.vehicles import VehicleAssigner

logger = logging.getLogger(__name__)

_EDITABLE_DETAILS = ("available_seats", "available_capacity_kg", "notes")


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _estimate_fields(estimate: RouteEstimate) -> dict[str, Any]:
    return {
        "distance_km": estimate.distance_km,
        "duration_minutes": estimate.duration_minutes,
        "estimated_arrival": estimate.estimated_arrival,
        "polyline": estimate.polyline,
    }


class TripLifecycleManager:
    def __init__(
        self,
        trips: TripRepository,
        route_resolver: RouteResolver,
        vehicle_assigner: VehicleAssigner,
    ) -> None:
        self._trips = trips
        self._routes = route_resolver
        self._vehicles = vehicle_assigner

    # --- Creation ---

    def create(self, driver_id: str, request: CreateTripRequest) -> Trip:
        """Resolve the route, pick a vehicle if none was given, then persist.

        Nothing is written before the final insert, so a failure at any step
        leaves no partial state.
        """
        logger.info("Creating trip for driver %s", driver_id)
        try:
            origin = request.origin
            destination = request.destination
            estimate = self._routes.resolve(origin.point, destination.point, request.departure_at)

            vehicle_id = request.vehicle_id
            if vehicle_id is None:
                vehicle_id = self._vehicles.assign(driver_id)

            now = _now()
            trip = Trip(
                id=str(uuid4()),
                driver_id=driver_id,
                vehicle_id=vehicle_id,
                origin=origin,
                destination=destination,
                departure_at=request.departure_at,
                available_seats=request.available_seats,
                available_capacity_kg=request.available_capacity_kg,
                notes=request.notes,
                created_at=now,
                updated_at=now,
                **_estimate_fields(estimate),
            )
            self._trips.insert(trip)
        except MarketplaceError:
            raise
        except Exception as e:
            logger.exception("Unexpected failure creating trip for driver %s", driver_id)
            raise TripCreationError(f"Trip creation failed: {e}") from e

        logger.info(
            "Created trip %s for driver %s (%s, %.1f km, %d min)",
            trip.id,
            driver_id,
            estimate.provider,
            trip.distance_km,
            trip.duration_minutes,
        )
        return trip

    # --- Reads ---

    def get(self, trip_id: str) -> Trip:
        trip = self._trips.get(trip_id)
        if trip is None:
            raise TripNotFoundError(trip_id)
        return trip

    def search(self, query: TripQuery) -> list[Trip]:
        return self._trips.search(status=query.status, driver_id=query.driver_id, from_date=query.from_date)

    def list_for_driver(self, driver_id: str) -> list[Trip]:
        return self._trips.list_by_driver(driver_id)

    # --- Guarded mutations ---

    def update(self, trip_id: str, driver_id: str, request: UpdateTripRequest) -> Trip:
        """Apply the fields present in ``request``.

        The route is re-resolved only when origin, destination or departure
        actually changed; otherwise the stored estimate is carried forward as is.
        """
        trip = self._load_owned(trip_id, driver_id)
        ensure_allowed(trip, "update")

        def pick(name: str, current: Any) -> Any:
            return getattr(request, name) if request.provided(name) else current

        origin = Place(
            name=pick("origin_name", trip.origin.name),
            point=GeoPoint(
                latitude=pick("origin_lat", trip.origin.point.latitude),
                longitude=pick("origin_lng", trip.origin.point.longitude),
            ),
        )
        destination = Place(
            name=pick("dest_name", trip.destination.name),
            point=GeoPoint(
                latitude=pick("dest_lat", trip.destination.point.latitude),
                longitude=pick("dest_lng", trip.destination.point.longitude),
            ),
        )
        departure_at = pick("departure_at", trip.departure_at)

        changes: dict[str, Any] = {"origin": origin, "destination": destination, "departure_at": departure_at}
        for name in _EDITABLE_DETAILS:
            if request.provided(name):
                changes[name] = getattr(request, name)

        geometry_changed = (
            origin.point != trip.origin.point
            or destination.point != trip.destination.point
            or departure_at != trip.departure_at
        )
        if geometry_changed:
            estimate = self._routes.resolve(origin.point, destination.point, departure_at)
            changes.update(_estimate_fields(estimate))
        else:
            logger.debug("Trip %s geometry unchanged, keeping stored estimate", trip_id)

        updated = self._write(trip, changes, guard=lambda current: ensure_allowed(current, "update"))
        logger.info("Updated trip %s (route recomputed: %s)", trip_id, geometry_changed)
        return updated

    def start(self, trip_id: str, driver_id: str) -> Trip:
        return self._transition(trip_id, driver_id, "start")

    def complete(self, trip_id: str, driver_id: str) -> Trip:
        return self._transition(trip_id, driver_id, "complete")

    def cancel(self, trip_id: str, driver_id: str) -> Trip:
        return self._transition(trip_id, driver_id, "cancel")

    def update_location(self, trip_id: str, driver_id: str, point: GeoPoint) -> Trip:
        trip = self._load_owned(trip_id, driver_id)
        ensure_allowed(trip, "update_location")
        location = LastLocation(point=point, recorded_at=_now())
        return self._write(
            trip,
            {"last_location": location},
            guard=lambda current: ensure_allowed(current, "update_location"),
        )

    def delete(self, trip_id: str, driver_id: str) -> None:
        trip = self._load_owned(trip_id, driver_id)
        ensure_allowed(trip, "delete")
        try:
            self._trips.delete(trip.id, expected_version=trip.version)
        except ConcurrentModificationError:
            self._explain_lost_race(trip.id, lambda current: ensure_allowed(current, "delete"))
            raise
        logger.info("Deleted trip %s (was %s)", trip_id, trip.status.value)

    # --- Internals ---

    def _transition(self, trip_id: str, driver_id: str, operation: str) -> Trip:
        trip = self._load_owned(trip_id, driver_id)
        target = next_status(trip, operation)
        updated = self._write(trip, {"status": target}, guard=lambda current: next_status(current, operation))
        logger.info("Trip %s %s: %s -> %s", trip_id, operation, trip.status.value, target.value)
        return updated

    def _load_owned(self, trip_id: str, driver_id: str) -> Trip:
        trip = self.get(trip_id)
        if trip.driver_id != driver_id:
            raise TripForbiddenError(f"Driver {driver_id} does not own trip {trip_id}")
        return trip

    def _write(self, trip: Trip, changes: dict[str, Any], guard: Callable[[Trip], Any]) -> Trip:
        updated = trip.model_copy(update={**changes, "updated_at": _now(), "version": trip.version + 1})
        try:
            self._trips.replace(updated, expected_version=trip.version)
        except ConcurrentModificationError:
            self._explain_lost_race(trip.id, guard)
            raise
        return updated

    def _explain_lost_race(self, trip_id: str, guard: Callable[[Trip], Any]) -> None:
        """Raise the domain error that now applies, if any; otherwise return and let the conflict propagate."""
        current = self._trips.get(trip_id)
        if current is None:
            raise TripNotFoundError(trip_id)
        guard(current)


def build_trip_manager(config: Config | None = None) -> TripLifecycleManager:
    config = config or get_config()
    dynamo_client = get_dynamo_client()
    return TripLifecycleManager(
        trips=TripRepository(dynamo_client, config.trips_table),
        route_resolver=build_route_resolver(config),
        vehicle_assigner=VehicleAssigner(VehicleRepository(dynamo_client, config.vehicles_table)),
    )
