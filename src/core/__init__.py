"""
Core business logic package for the trip marketplace.

Route resolution, geocoding, trip lifecycle and data access live here.
Lambda handlers in src/handlers/ are thin wrappers that call into core/.
"""

__all__: list[str] = []
