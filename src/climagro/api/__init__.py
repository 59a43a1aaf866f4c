"""
API layer for public climate and geocoding services.

Provides a retrying HTTP client, the NASA POWER daily point client and the
Nominatim geocoding client.
"""

from .client import APIClient
from .power import PowerAPI
from .geocoding import GeocodingAPI

__all__ = [
    "APIClient",
    "PowerAPI",
    "GeocodingAPI",
]
