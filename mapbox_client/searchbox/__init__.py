"""
Mapbox Search Box API v1: suggest/retrieve autocomplete, forward, category and reverse search.
"""

from .models import (
    Category,
    CategorySearchRequest,
    Context,
    ContextElement,
    ForwardSearchRequest,
    ListCategoriesRequest,
    ListCategoriesResponse,
    NavigationOptions,
    RetrieveRequest,
    ReverseSearchRequest,
    RoutablePoint,
    SAROptions,
    SearchFeature,
    SearchFeatureProperties,
    SearchResponse,
    Suggestion,
    SuggestRequest,
    SuggestResponse,
)
from .service import SearchBoxService

__all__ = [
    "SearchBoxService",
    # Options
    "NavigationOptions",
    "SAROptions",
    # Requests
    "SuggestRequest",
    "RetrieveRequest",
    "ForwardSearchRequest",
    "CategorySearchRequest",
    "ListCategoriesRequest",
    "ReverseSearchRequest",
    # Responses
    "SuggestResponse",
    "Suggestion",
    "SearchResponse",
    "SearchFeature",
    "SearchFeatureProperties",
    "Context",
    "ContextElement",
    "RoutablePoint",
    "ListCategoriesResponse",
    "Category",
]
