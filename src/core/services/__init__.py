"""
Business services for the trip marketplace.

- trips.py: trip lifecycle manager (create, update, start/complete/cancel, delete)
- trip_state.py: legal status transitions
- vehicles.py: vehicle assignment for trips created without one
- geocoding.py: Nominatim forward/reverse geocoding
"""

__all__: list[str] = []
