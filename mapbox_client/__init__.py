"""
Mapbox Client Library

An async Python client for the Mapbox Geocoding v6 and Search Box v1 APIs.

This library provides typed request and response shapes, validates requests
before anything is sent, and maps API failures to a small exception hierarchy.
HTTP is done with an httpx.AsyncClient, created by the client or injected.

Basic usage:
    >>> from mapbox_client import MapboxClient, ForwardRequest
    >>>
    >>> async with MapboxClient("pk.your_token") as client:
    ...     response = await client.geocoding().forward(ForwardRequest(query="Colosseum Rome", limit=5))
    ...     print(response.first.geometry.coordinates)
"""

from .client import MapboxClient
from .config import ClientConfig, loadConfig
from .constants import (
    DEFAULT_BASE_URL,
    MAX_BATCH_QUERIES,
    VERSION,
    EtaType,
    NavigationProfile,
    ProximityMode,
    SarType,
)
from .exceptions import (
    ApiError,
    ConfigurationError,
    DecodeError,
    InvalidRequestError,
    InvalidTokenError,
    MapboxError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ServerError,
    ValidationError,
    classifyApiError,
)
from .geocoding import (
    BatchQuery,
    BatchRequest,
    BatchResponse,
    ForwardRequest,
    GeocodingResponse,
    GeocodingService,
    ReverseRequest,
    StructuredForwardRequest,
)
from .models import Coordinate, Coordinates, FeatureCollection, GenericFeature, Point
from .options import withBaseUrl, withHttpClient, withTimeout
from .searchbox import (
    CategorySearchRequest,
    ForwardSearchRequest,
    ListCategoriesRequest,
    ListCategoriesResponse,
    NavigationOptions,
    RetrieveRequest,
    ReverseSearchRequest,
    SAROptions,
    SearchBoxService,
    SearchResponse,
    SuggestRequest,
    SuggestResponse,
)
from .session import newSessionToken

__version__ = VERSION

# Public API
__all__ = [
    # Main client
    "MapboxClient",
    "withHttpClient",
    "withBaseUrl",
    "withTimeout",
    "ClientConfig",
    "loadConfig",
    # Services
    "GeocodingService",
    "SearchBoxService",
    "newSessionToken",
    # Constants
    "VERSION",
    "DEFAULT_BASE_URL",
    "MAX_BATCH_QUERIES",
    # Enums
    "ProximityMode",
    "NavigationProfile",
    "EtaType",
    "SarType",
    # Shared models
    "Coordinate",
    "Coordinates",
    "Point",
    "GenericFeature",
    "FeatureCollection",
    # Geocoding
    "ForwardRequest",
    "StructuredForwardRequest",
    "ReverseRequest",
    "BatchQuery",
    "BatchRequest",
    "GeocodingResponse",
    "BatchResponse",
    # Search Box
    "SuggestRequest",
    "RetrieveRequest",
    "ForwardSearchRequest",
    "CategorySearchRequest",
    "ListCategoriesRequest",
    "ReverseSearchRequest",
    "NavigationOptions",
    "SAROptions",
    "SuggestResponse",
    "SearchResponse",
    "ListCategoriesResponse",
    # Exceptions
    "MapboxError",
    "ConfigurationError",
    "ValidationError",
    "ApiError",
    "InvalidTokenError",
    "NotFoundError",
    "InvalidRequestError",
    "RateLimitError",
    "ServerError",
    "DecodeError",
    "NetworkError",
    "classifyApiError",
]
