"""
Mapbox Client Constants

This module contains all constants and enums for the Mapbox Geocoding and Search Box APIs.
"""

from enum import StrEnum
from typing import Final

VERSION: Final[str] = "0.1.0"

# API Configuration
DEFAULT_BASE_URL: Final[str] = "https://api.mapbox.com"
DEFAULT_TIMEOUT: Final[int] = 30
USER_AGENT: Final[str] = f"mapbox-client-python/{VERSION}"

# HTTP Methods
HTTP_GET: Final[str] = "GET"
HTTP_POST: Final[str] = "POST"

# Authentication
ACCESS_TOKEN_PARAM: Final[str] = "access_token"
ACCESS_TOKEN_ENV: Final[str] = "MAPBOX_ACCESS_TOKEN"

# Content Types
CONTENT_TYPE_JSON: Final[str] = "application/json"

# Geocoding v6 Endpoints
GEOCODE_FORWARD_PATH: Final[str] = "/search/geocode/v6/forward"
GEOCODE_REVERSE_PATH: Final[str] = "/search/geocode/v6/reverse"
GEOCODE_BATCH_PATH: Final[str] = "/search/geocode/v6/batch"

# Search Box v1 Endpoints
SEARCHBOX_SUGGEST_PATH: Final[str] = "/search/searchbox/v1/suggest"
SEARCHBOX_RETRIEVE_PATH: Final[str] = "/search/searchbox/v1/retrieve"
SEARCHBOX_FORWARD_PATH: Final[str] = "/search/searchbox/v1/forward"
SEARCHBOX_CATEGORY_PATH: Final[str] = "/search/searchbox/v1/category"
SEARCHBOX_LIST_CATEGORIES_PATH: Final[str] = "/search/searchbox/v1/category"
SEARCHBOX_REVERSE_PATH: Final[str] = "/search/searchbox/v1/reverse"

# API Limits
MAX_BATCH_QUERIES: Final[int] = 1000
MAX_SEARCH_QUERY_LENGTH: Final[int] = 256
MIN_LIMIT: Final[int] = 1
MAX_LIMIT: Final[int] = 10
MAX_CATEGORY_LIMIT: Final[int] = 25

# Coordinate bounds
MIN_LONGITUDE: Final[float] = -180.0
MAX_LONGITUDE: Final[float] = 180.0
MIN_LATITUDE: Final[float] = -90.0
MAX_LATITUDE: Final[float] = 90.0

# Search Along Route points use fixed precision
ROUTE_COORDINATE_PRECISION: Final[int] = 6


class ProximityMode(StrEnum):
    """Non-coordinate proximity sources"""

    IP = "ip"


class NavigationProfile(StrEnum):
    """Travel profile used for ETA calculations"""

    DRIVING = "driving"
    WALKING = "walking"
    CYCLING = "cycling"


class EtaType(StrEnum):
    """ETA calculation mode"""

    NAVIGATION = "navigation"


class SarType(StrEnum):
    """Search Along Route algorithm"""

    ISOCHRONE = "isochrone"
