"""Trip status state machine.

SCHEDULED is initial; COMPLETED and CANCELLED are terminal. The table below is
the complete list of legal transitions.
"""

from core.errors import InvalidTransitionError
from core.models import Trip, TripStatus

TRANSITIONS: dict[str, tuple[frozenset[TripStatus], TripStatus]] = {
    "start": (frozenset({TripStatus.SCHEDULED}), TripStatus.ACTIVE),
    "complete": (frozenset({TripStatus.ACTIVE}), TripStatus.COMPLETED),
    "cancel": (frozenset({TripStatus.SCHEDULED, TripStatus.ACTIVE}), TripStatus.CANCELLED),
}

EDITABLE_STATUSES = frozenset({TripStatus.SCHEDULED})
TRACKABLE_STATUSES = frozenset({TripStatus.SCHEDULED, TripStatus.ACTIVE})
UNDELETABLE_STATUSES = frozenset({TripStatus.ACTIVE})


def next_status(trip: Trip, operation: str) -> TripStatus:
    """Target status of ``operation`` on ``trip``, or ``InvalidTransitionError``."""
    allowed_from, target = TRANSITIONS[operation]
    if trip.status not in allowed_from:
        raise InvalidTransitionError(trip.id, trip.status.value, operation)
    return target


def ensure_allowed(trip: Trip, operation: str) -> None:
    """Guard for the operations that do not change status: update, location, delete."""
    if operation == "update":
        allowed = trip.status in EDITABLE_STATUSES
    elif operation == "update_location":
        allowed = trip.status in TRACKABLE_STATUSES
    elif operation == "delete":
        allowed = trip.status not in UNDELETABLE_STATUSES
    else:
        raise ValueError(f"Unknown trip operation: {operation}")

    if not allowed:
        raise InvalidTransitionError(trip.id, trip.status.value, operation)
