"""
Mapbox Geocoding API v6: forward, structured forward, reverse and batch geocoding.
"""

from .models import (
    BatchError,
    BatchQuery,
    BatchRequest,
    BatchResponse,
    BatchResult,
    ContextEntry,
    Feature,
    FeatureProperties,
    ForwardRequest,
    GeocodingResponse,
    MatchCode,
    ReverseRequest,
    StructuredForwardRequest,
)
from .service import GeocodingService

__all__ = [
    "GeocodingService",
    # Requests
    "ForwardRequest",
    "StructuredForwardRequest",
    "ReverseRequest",
    "BatchQuery",
    "BatchRequest",
    # Responses
    "GeocodingResponse",
    "Feature",
    "FeatureProperties",
    "ContextEntry",
    "MatchCode",
    "BatchResponse",
    "BatchResult",
    "BatchError",
]
