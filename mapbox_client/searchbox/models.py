"""
Search Box API v1 models.

This module contains the request dataclasses for the suggest/retrieve workflow,
forward, category and reverse search, and the response dataclasses they decode
into.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

from ..constants import MAX_CATEGORY_LIMIT, MAX_LIMIT, MAX_SEARCH_QUERY_LENGTH, EtaType, NavigationProfile, SarType
from ..encoding import QueryParams
from ..exceptions import ValidationError
from ..models import Coordinate, Coordinates, Point, Proximity, extraKwargs, floatList, validateProximity
from ..validation import checkLength, checkLimit, requireText, validateCoordinates

# Options


@dataclass(slots=True)
class NavigationOptions:
    """
    ETA and navigation options, passed through to the API as-is
    """

    etaType: Optional[Union[EtaType, str]] = None
    """ETA calculation mode ("navigation")"""
    origin: Optional[Sequence[float]] = None
    """[longitude, latitude] to compute the ETA from"""
    profile: Optional[Union[NavigationProfile, str]] = None
    """driving, walking or cycling"""

    def validate(self) -> None:
        checkLength(self.origin, 2, "origin")

    def apply(self, params: QueryParams) -> QueryParams:
        return (
            params.text("eta_type", self.etaType)
            .numbers("origin", self.origin)
            .text("navigation_profile", self.profile)
        )


@dataclass(slots=True)
class SAROptions:
    """
    Search Along Route options for category search
    """

    route: Sequence[Sequence[float]] = field(default_factory=list)
    """Route points as [longitude, latitude] pairs"""
    type: Optional[Union[SarType, str]] = SarType.ISOCHRONE
    """Search Along Route algorithm"""
    timeDeviation: Optional[int] = None
    """Acceptable detour, in seconds"""

    @property
    def hasRoute(self) -> bool:
        return len(self.route) > 0

    def validate(self) -> None:
        for point in self.route:
            checkLength(point, 2, "route")

    def apply(self, params: QueryParams) -> QueryParams:
        # sar_type and route are sent together
        if self.hasRoute:
            params.text("sar_type", self.type).route("route", self.route)
        return params.integer("time_deviation", self.timeDeviation)


# Requests


@dataclass(slots=True)
class SuggestRequest:
    """
    First step of the autocomplete workflow: suggestions without coordinates.

    Reuse the same session token for the retrieve call that follows.
    """

    query: str
    """Search text, 1-256 characters"""
    sessionToken: str
    """UUIDv4 grouping suggest and retrieve calls"""
    proximity: Optional[Proximity] = None
    bbox: Optional[Sequence[float]] = None
    country: Optional[Sequence[str]] = None
    language: Optional[str] = None
    limit: Optional[int] = None
    """Maximum number of suggestions, 1-10"""
    types: Optional[Sequence[str]] = None
    poiCategory: Optional[Sequence[str]] = None
    """POI category filter"""
    navigation: Optional[NavigationOptions] = None

    def validate(self) -> None:
        requireText(self.query, "query", MAX_SEARCH_QUERY_LENGTH)
        requireText(self.sessionToken, "session_token")
        checkLimit(self.limit, MAX_LIMIT)
        checkLength(self.bbox, 4, "bbox")
        validateProximity(self.proximity)
        if self.navigation is not None:
            self.navigation.validate()

    def toQueryParams(self) -> Dict[str, str]:
        params = (
            QueryParams()
            .set("q", self.query)
            .set("session_token", self.sessionToken)
            .proximity("proximity", self.proximity)
            .numbers("bbox", self.bbox)
            .strings("country", self.country)
            .text("language", self.language)
            .integer("limit", self.limit)
            .strings("types", self.types)
            .strings("poi_category", self.poiCategory)
        )
        if self.navigation is not None:
            self.navigation.apply(params)
        return params.toDict()


@dataclass(slots=True)
class RetrieveRequest:
    """
    Second step of the autocomplete workflow: full feature for a suggestion
    """

    mapboxId: str
    """mapbox_id of the selected suggestion"""
    sessionToken: str
    """Same token used for the suggest call"""
    navigation: Optional[NavigationOptions] = None

    def validate(self) -> None:
        requireText(self.mapboxId, "mapbox_id")
        requireText(self.sessionToken, "session_token")
        if self.navigation is not None:
            self.navigation.validate()

    def toQueryParams(self) -> Dict[str, str]:
        params = QueryParams().set("session_token", self.sessionToken)
        if self.navigation is not None:
            self.navigation.apply(params)
        return params.toDict()


@dataclass(slots=True)
class ForwardSearchRequest:
    """
    One-shot text search returning features with coordinates
    """

    query: str
    """Search text, 1-256 characters"""
    autocomplete: Optional[bool] = None
    proximity: Optional[Proximity] = None
    bbox: Optional[Sequence[float]] = None
    country: Optional[Sequence[str]] = None
    language: Optional[str] = None
    limit: Optional[int] = None
    """Maximum number of results, 1-10"""
    types: Optional[Sequence[str]] = None
    poiCategory: Optional[Sequence[str]] = None
    navigation: Optional[NavigationOptions] = None

    def validate(self) -> None:
        requireText(self.query, "query", MAX_SEARCH_QUERY_LENGTH)
        checkLimit(self.limit, MAX_LIMIT)
        checkLength(self.bbox, 4, "bbox")
        validateProximity(self.proximity)
        if self.navigation is not None:
            self.navigation.validate()

    def toQueryParams(self) -> Dict[str, str]:
        params = (
            QueryParams()
            .set("q", self.query)
            .boolean("autocomplete", self.autocomplete)
            .proximity("proximity", self.proximity)
            .numbers("bbox", self.bbox)
            .strings("country", self.country)
            .text("language", self.language)
            .integer("limit", self.limit)
            .strings("types", self.types)
            .strings("poi_category", self.poiCategory)
        )
        if self.navigation is not None:
            self.navigation.apply(params)
        return params.toDict()


@dataclass(slots=True)
class CategorySearchRequest:
    """
    POI search within a category.

    The search area must be given by a proximity (coordinate or IP), a
    bounding box, or a Search Along Route with at least one point.
    """

    categoryId: str
    """Canonical category identifier (e.g. "coffee")"""
    proximity: Optional[Proximity] = None
    bbox: Optional[Sequence[float]] = None
    country: Optional[Sequence[str]] = None
    language: Optional[str] = None
    limit: Optional[int] = None
    """Maximum number of results, 1-25"""
    navigation: Optional[NavigationOptions] = None
    sar: Optional[SAROptions] = None

    def validate(self) -> None:
        requireText(self.categoryId, "category_id")
        checkLength(self.bbox, 4, "bbox")
        validateProximity(self.proximity)

        hasProximity = isinstance(self.proximity, (Coordinate, str)) or bool(self.proximity)
        hasBBox = bool(self.bbox)
        hasSAR = self.sar is not None and self.sar.hasRoute
        if not hasProximity and not hasBBox and not hasSAR:
            raise ValidationError("either proximity, bbox, or SAR is required", field="category_id")

        checkLimit(self.limit, MAX_CATEGORY_LIMIT)
        if self.navigation is not None:
            self.navigation.validate()
        if self.sar is not None:
            self.sar.validate()

    def toQueryParams(self) -> Dict[str, str]:
        params = (
            QueryParams()
            .proximity("proximity", self.proximity)
            .numbers("bbox", self.bbox)
            .strings("country", self.country)
            .text("language", self.language)
            .integer("limit", self.limit)
        )
        if self.navigation is not None:
            self.navigation.apply(params)
        if self.sar is not None:
            self.sar.apply(params)
        return params.toDict()


@dataclass(slots=True)
class ListCategoriesRequest:
    """
    Request for the list of available POI categories
    """

    language: Optional[str] = None
    """Language of the category names"""

    def validate(self) -> None:
        pass

    def toQueryParams(self) -> Dict[str, str]:
        return QueryParams().text("language", self.language).toDict()


@dataclass(slots=True)
class ReverseSearchRequest:
    """
    Reverse search: coordinates to nearby addresses and POIs
    """

    longitude: float
    latitude: float
    country: Optional[Sequence[str]] = None
    language: Optional[str] = None
    limit: Optional[int] = None
    """Maximum number of results, 1-10"""
    types: Optional[Sequence[str]] = None

    def validate(self) -> None:
        validateCoordinates(self.longitude, self.latitude)
        checkLimit(self.limit, MAX_LIMIT)

    def toQueryParams(self) -> Dict[str, str]:
        return (
            QueryParams()
            .number("longitude", self.longitude)
            .number("latitude", self.latitude)
            .strings("country", self.country)
            .text("language", self.language)
            .integer("limit", self.limit)
            .strings("types", self.types)
            .toDict()
        )


# Responses


@dataclass(slots=True)
class ContextElement:
    """
    Single level of the context hierarchy
    """

    mapbox_id: Optional[str] = None
    name: Optional[str] = None
    wikidata_id: Optional[str] = None
    short_code: Optional[str] = None
    country_code: Optional[str] = None
    region_code: Optional[str] = None
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ContextElement":
        """Create ContextElement instance from API response dictionary."""
        known = ("mapbox_id", "name", "short_code", "country_code", "region_code")
        return cls(
            **{key: data.get(key) for key in known},
            wikidata_id=data.get("wikidata_id", data.get("wikidata")),
            api_kwargs=extraKwargs(data, (*known, "wikidata_id", "wikidata")),
        )


_CONTEXT_LEVELS = (
    "country",
    "region",
    "postcode",
    "district",
    "place",
    "locality",
    "neighborhood",
    "street",
    "address",
)


@dataclass(slots=True)
class Context:
    """
    Hierarchical context of a feature, from country down to address
    """

    country: Optional[ContextElement] = None
    region: Optional[ContextElement] = None
    postcode: Optional[ContextElement] = None
    district: Optional[ContextElement] = None
    place: Optional[ContextElement] = None
    locality: Optional[ContextElement] = None
    neighborhood: Optional[ContextElement] = None
    street: Optional[ContextElement] = None
    address: Optional[ContextElement] = None
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Other context levels, undecoded"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Context":
        """Create Context instance from API response dictionary."""
        levels = {
            key: ContextElement.from_dict(data[key]) if data.get(key) is not None else None for key in _CONTEXT_LEVELS
        }
        return cls(**levels, api_kwargs=extraKwargs(data, _CONTEXT_LEVELS))


@dataclass(slots=True)
class RoutablePoint:
    """
    Point suitable for navigation (entrance, parking...)
    """

    name: Optional[str] = None
    coordinates: List[float] = field(default_factory=list)
    """[longitude, latitude]"""
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoutablePoint":
        """Create RoutablePoint instance from API response dictionary."""
        return cls(
            name=data.get("name"),
            coordinates=floatList(data.get("coordinates")),
            api_kwargs=extraKwargs(data, {"name", "coordinates"}),
        )


def _optionalFloat(value: Any) -> Optional[float]:
    return float(value) if value is not None else None


@dataclass(slots=True)
class Suggestion:
    """
    Autocomplete suggestion, without coordinates
    """

    mapbox_id: Optional[str] = None
    """Identifier to pass to retrieve"""
    feature_type: Optional[str] = None
    name: Optional[str] = None
    name_preferred: Optional[str] = None
    place_formatted: Optional[str] = None
    address: Optional[str] = None
    full_address: Optional[str] = None
    context: Optional[Context] = None
    poi_category: List[str] = field(default_factory=list)
    poi_category_ids: List[str] = field(default_factory=list)
    brand: List[str] = field(default_factory=list)
    maki: Optional[str] = None
    """Maki icon name"""
    metadata: Dict[str, Any] = field(default_factory=dict)
    distance: Optional[float] = None
    """Distance from the origin, in meters"""
    eta: Optional[float] = None
    """Estimated travel time from the origin, in minutes"""
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Suggestion":
        """Create Suggestion instance from API response dictionary."""
        context = data.get("context")
        textFields = (
            "mapbox_id",
            "feature_type",
            "name",
            "name_preferred",
            "place_formatted",
            "address",
            "full_address",
            "maki",
        )
        return cls(
            **{key: data.get(key) for key in textFields},
            context=Context.from_dict(context) if context is not None else None,
            poi_category=list(data.get("poi_category") or []),
            poi_category_ids=list(data.get("poi_category_ids") or []),
            brand=list(data.get("brand") or []),
            metadata=dict(data.get("metadata") or {}),
            distance=_optionalFloat(data.get("distance")),
            eta=_optionalFloat(data.get("eta")),
            api_kwargs=extraKwargs(
                data,
                (*textFields, "context", "poi_category", "poi_category_ids", "brand", "metadata", "distance", "eta"),
            ),
        )


@dataclass(slots=True)
class SuggestResponse:
    """
    Suggest endpoint response
    """

    suggestions: List[Suggestion] = field(default_factory=list)
    attribution: Optional[str] = None
    response_id: Optional[str] = None
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SuggestResponse":
        """Create SuggestResponse instance from API response dictionary."""
        return cls(
            suggestions=[Suggestion.from_dict(s) for s in data.get("suggestions") or []],
            attribution=data.get("attribution"),
            response_id=data.get("response_id"),
            api_kwargs=extraKwargs(data, {"suggestions", "attribution", "response_id"}),
        )


_SEARCH_TEXT_FIELDS = (
    "mapbox_id",
    "feature_type",
    "name",
    "name_preferred",
    "place_formatted",
    "full_address",
    "address",
    "address_number",
    "street",
    "postcode",
    "accuracy",
    "maki",
)

_SEARCH_LIST_FIELDS = ("poi_category", "poi_category_ids", "brand", "brand_id")


@dataclass(slots=True)
class SearchFeatureProperties:
    """
    Properties of a Search Box feature
    """

    mapbox_id: Optional[str] = None
    feature_type: Optional[str] = None
    name: Optional[str] = None
    name_preferred: Optional[str] = None
    place_formatted: Optional[str] = None
    full_address: Optional[str] = None
    address: Optional[str] = None
    address_number: Optional[str] = None
    street: Optional[str] = None
    postcode: Optional[str] = None
    context: Optional[Context] = None
    coordinates: Optional[Coordinates] = None
    accuracy: Optional[str] = None
    routable_points: List[RoutablePoint] = field(default_factory=list)
    poi_category: List[str] = field(default_factory=list)
    poi_category_ids: List[str] = field(default_factory=list)
    brand: List[str] = field(default_factory=list)
    brand_id: List[str] = field(default_factory=list)
    maki: Optional[str] = None
    """Maki icon name"""
    external_ids: Dict[str, str] = field(default_factory=dict)
    """Identifiers in third-party datasets"""
    metadata: Dict[str, Any] = field(default_factory=dict)
    """Opening hours, phone, website and other POI metadata"""
    distance: Optional[float] = None
    eta: Optional[float] = None
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchFeatureProperties":
        """Create SearchFeatureProperties instance from API response dictionary."""
        context = data.get("context")
        coordinates = data.get("coordinates")
        return cls(
            **{key: data.get(key) for key in _SEARCH_TEXT_FIELDS},
            **{key: list(data.get(key) or []) for key in _SEARCH_LIST_FIELDS},
            context=Context.from_dict(context) if context is not None else None,
            coordinates=Coordinates.from_dict(coordinates) if coordinates is not None else None,
            routable_points=[RoutablePoint.from_dict(p) for p in data.get("routable_points") or []],
            external_ids=dict(data.get("external_ids") or {}),
            metadata=dict(data.get("metadata") or {}),
            distance=_optionalFloat(data.get("distance")),
            eta=_optionalFloat(data.get("eta")),
            api_kwargs=extraKwargs(
                data,
                (
                    *_SEARCH_TEXT_FIELDS,
                    *_SEARCH_LIST_FIELDS,
                    "context",
                    "coordinates",
                    "routable_points",
                    "external_ids",
                    "metadata",
                    "distance",
                    "eta",
                ),
            ),
        )


@dataclass(slots=True)
class SearchFeature:
    """
    GeoJSON Feature returned by retrieve, forward, category and reverse search
    """

    type: str = "Feature"
    id: Optional[str] = None
    geometry: Optional[Point] = None
    properties: SearchFeatureProperties = field(default_factory=SearchFeatureProperties)
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchFeature":
        """Create SearchFeature instance from API response dictionary."""
        geometry = data.get("geometry")
        return cls(
            type=data.get("type", "Feature"),
            id=data.get("id"),
            geometry=Point.from_dict(geometry) if geometry is not None else None,
            properties=SearchFeatureProperties.from_dict(data.get("properties") or {}),
            api_kwargs=extraKwargs(data, {"type", "id", "geometry", "properties"}),
        )


@dataclass(slots=True)
class SearchResponse:
    """
    FeatureCollection returned by retrieve, forward, category and reverse search
    """

    type: str = "FeatureCollection"
    features: List[SearchFeature] = field(default_factory=list)
    attribution: Optional[str] = None
    response_id: Optional[str] = None
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    @property
    def first(self) -> Optional[SearchFeature]:
        """First result or None."""
        return self.features[0] if self.features else None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchResponse":
        """Create SearchResponse instance from API response dictionary."""
        return cls(
            type=data.get("type", "FeatureCollection"),
            features=[SearchFeature.from_dict(f) for f in data.get("features") or []],
            attribution=data.get("attribution"),
            response_id=data.get("response_id"),
            api_kwargs=extraKwargs(data, {"type", "features", "attribution", "response_id"}),
        )


@dataclass(slots=True)
class Category:
    """
    POI category available for category search
    """

    canonical_name: Optional[str] = None
    """Identifier to pass as categoryId"""
    name: Optional[str] = None
    """Display name"""
    maki_icon: Optional[str] = None
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Category":
        """Create Category instance from API response dictionary."""
        return cls(
            canonical_name=data.get("canonical_name"),
            name=data.get("name"),
            maki_icon=data.get("maki_icon"),
            api_kwargs=extraKwargs(data, {"canonical_name", "name", "maki_icon"}),
        )


@dataclass(slots=True)
class ListCategoriesResponse:
    """
    List categories endpoint response
    """

    categories: List[Category] = field(default_factory=list)
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ListCategoriesResponse":
        """Create ListCategoriesResponse instance from API response dictionary."""
        return cls(
            categories=[Category.from_dict(c) for c in data.get("categories") or []],
            api_kwargs=extraKwargs(data, {"categories"}),
        )
