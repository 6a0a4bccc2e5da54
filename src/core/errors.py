"""
Custom exceptions and error handling for the trip marketplace backend.

Defines application-specific exceptions with error codes and HTTP status codes
for consistent error handling across Lambda handlers and client communication.

Usage:
    from core.errors import InvalidTransitionError

    raise InvalidTransitionError(trip_id, current_status=trip.status, operation="start")
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Authentication errors
    AUTH_FAILED = "AUTH_FAILED"
    INVALID_TOKEN = "INVALID_TOKEN"
    NOT_A_DRIVER = "NOT_A_DRIVER"

    # Trip errors
    TRIP_NOT_FOUND = "TRIP_NOT_FOUND"
    NOT_TRIP_OWNER = "NOT_TRIP_OWNER"
    INVALID_TRANSITION = "INVALID_TRANSITION"
    CONCURRENT_MODIFICATION = "CONCURRENT_MODIFICATION"
    TRIP_CREATION_FAILED = "TRIP_CREATION_FAILED"

    # Vehicle errors
    NO_VEHICLE = "NO_VEHICLE"
    VEHICLE_NOT_APPROVED = "VEHICLE_NOT_APPROVED"

    # Provider errors
    PROVIDER_FAILED = "PROVIDER_FAILED"
    ADDRESS_NOT_FOUND = "ADDRESS_NOT_FOUND"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    TIMEOUT = "TIMEOUT"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.AUTH_FAILED: "Authentication failed. Please sign in again.",
    ErrorCode.INVALID_TOKEN: "Your session has expired. Please sign in again.",
    ErrorCode.NOT_A_DRIVER: "Only drivers can perform this action.",
    ErrorCode.TRIP_NOT_FOUND: "Trip not found.",
    ErrorCode.NOT_TRIP_OWNER: "You do not have permission to change this trip.",
    ErrorCode.INVALID_TRANSITION: "This action is not allowed for the trip's current status.",
    ErrorCode.CONCURRENT_MODIFICATION: "The trip was changed by another request. Please reload and try again.",
    ErrorCode.TRIP_CREATION_FAILED: "The trip could not be created. Please try again.",
    ErrorCode.NO_VEHICLE: "You need to register a vehicle before creating a trip.",
    ErrorCode.VEHICLE_NOT_APPROVED: "Your vehicle is awaiting approval. Please wait for an administrator to review it.",
    ErrorCode.PROVIDER_FAILED: "The map service is temporarily unavailable. Please try again later.",
    ErrorCode.ADDRESS_NOT_FOUND: "Address not found.",
    ErrorCode.VALIDATION_ERROR: "Your request contains invalid information. Please check and try again.",
    ErrorCode.INVALID_REQUEST: "Invalid request format. Please try again.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
    ErrorCode.TIMEOUT: "The request timed out. Please try again.",
}


class MarketplaceError(Exception):
    """Base exception for all marketplace errors."""

    status_code: int = 500

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class AuthenticationError(MarketplaceError):
    """Authentication failed."""

    status_code = 401

    def __init__(self, message: str, code: ErrorCode = ErrorCode.AUTH_FAILED):
        super().__init__(message, code)


class ValidationError(MarketplaceError):
    """Input validation failed."""

    status_code = 400

    def __init__(self, message: str, code: ErrorCode = ErrorCode.VALIDATION_ERROR):
        super().__init__(message, code)


class TripNotFoundError(MarketplaceError):
    status_code = 404

    def __init__(self, trip_id: str):
        self.trip_id = trip_id
        super().__init__(f"Trip {trip_id} not found", code=ErrorCode.TRIP_NOT_FOUND)


class TripForbiddenError(MarketplaceError):
    """The caller is authenticated but may not act on the resource."""

    status_code = 403

    def __init__(self, message: str, code: ErrorCode = ErrorCode.NOT_TRIP_OWNER):
        super().__init__(message, code)


class InvalidTransitionError(MarketplaceError):
    """The trip's current status does not allow the attempted operation."""

    status_code = 409

    def __init__(self, trip_id: str, current_status: str, operation: str):
        self.trip_id = trip_id
        self.current_status = current_status
        self.operation = operation
        super().__init__(
            f"Trip {trip_id} is {current_status}; cannot {operation.replace('_', ' ')}",
            code=ErrorCode.INVALID_TRANSITION,
        )


class ConcurrentModificationError(MarketplaceError):
    """A conditional write lost the race against another writer."""

    status_code = 409

    def __init__(self, message: str):
        super().__init__(message, code=ErrorCode.CONCURRENT_MODIFICATION)


class VehicleResolutionError(MarketplaceError):
    """No usable vehicle could be resolved for the driver."""

    status_code = 400


class NoVehicleError(VehicleResolutionError):
    def __init__(self, driver_id: str):
        self.driver_id = driver_id
        super().__init__(
            "You need to register a vehicle before creating a trip",
            code=ErrorCode.NO_VEHICLE,
        )


class VehicleNotApprovedError(VehicleResolutionError):
    def __init__(self, driver_id: str, vehicle_status: str):
        self.driver_id = driver_id
        self.vehicle_status = vehicle_status
        super().__init__(
            f'Your vehicle has status "{vehicle_status}". A vehicle must be approved by an administrator before you can publish trips.',
            code=ErrorCode.VEHICLE_NOT_APPROVED,
        )


class AddressNotFoundError(MarketplaceError):
    status_code = 404

    def __init__(self, query: str):
        self.query = query
        super().__init__(f"No address found for {query}", code=ErrorCode.ADDRESS_NOT_FOUND)


class TripCreationError(MarketplaceError):
    """Unexpected failure while creating a trip."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message, code=ErrorCode.TRIP_CREATION_FAILED)


class ProviderError(MarketplaceError):
    """A remote routing or geocoding provider failed. Never surfaced by routing."""

    status_code = 502

    def __init__(self, provider: str, message: str, code: ErrorCode = ErrorCode.PROVIDER_FAILED):
        self.provider = provider
        super().__init__(f"{provider}: {message}", code)
