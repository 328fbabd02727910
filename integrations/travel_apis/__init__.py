"""
Skyroute Backend - Travel API Integrations
Provides access to travel service providers
"""

from integrations.travel_apis.amadeus import (
    AmadeusClient,
    ProviderResult,
    carrier_names,
    location_summaries,
)

__all__ = [
    # Amadeus
    "AmadeusClient",
    "ProviderResult",
    "carrier_names",
    "location_summaries",
]
