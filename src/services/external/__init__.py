"""
External Services

This module contains clients for the backend inventory API.
"""

from .inventory_api_client import InventoryApiClient

__all__ = [
    "InventoryApiClient",
]
