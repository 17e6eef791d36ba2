"""
Geocoding API v6 models.

This module contains the request dataclasses (with their validation and query
encoding) and the response dataclasses for forward, structured forward,
reverse and batch geocoding.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from ..constants import MAX_BATCH_QUERIES
from ..encoding import QueryParams, stringList
from ..exceptions import ValidationError
from ..models import Coordinates, Point, Proximity, extraKwargs, floatList, validateProximity
from ..validation import checkLength, requireText, validateCoordinates

# Requests


@dataclass(slots=True)
class ForwardRequest:
    """
    Forward geocoding request using free-form text search
    """

    query: str
    """Search text, required"""
    autocomplete: Optional[bool] = None
    """Return partial-match results (API default: true)"""
    bbox: Optional[Sequence[float]] = None
    """[min_lon, min_lat, max_lon, max_lat]"""
    country: Optional[Sequence[str]] = None
    """ISO 3166 alpha-2 country codes"""
    language: Optional[str] = None
    """IETF language tag"""
    limit: Optional[int] = None
    """Maximum number of results, 1-10 (API default: 5)"""
    proximity: Optional[Proximity] = None
    """Bias results toward a coordinate or the caller's IP"""
    types: Optional[Sequence[str]] = None
    """Feature types filter"""
    worldview: Optional[str] = None
    """Worldview country code"""

    def validate(self) -> None:
        requireText(self.query, "query")
        checkLength(self.bbox, 4, "bbox")
        validateProximity(self.proximity)

    def toQueryParams(self) -> Dict[str, str]:
        return (
            QueryParams()
            .set("q", self.query)
            .boolean("autocomplete", self.autocomplete)
            .numbers("bbox", self.bbox)
            .strings("country", self.country)
            .text("language", self.language)
            .integer("limit", self.limit)
            .proximity("proximity", self.proximity)
            .strings("types", self.types)
            .text("worldview", self.worldview)
            .toDict()
        )


@dataclass(slots=True)
class StructuredForwardRequest:
    """
    Forward geocoding request using structured address components.

    At least one of the address components must be set.
    """

    addressNumber: Optional[str] = None
    """House or street number"""
    street: Optional[str] = None
    """Street name"""
    block: Optional[str] = None
    """Block name"""
    place: Optional[str] = None
    """City, town or village"""
    region: Optional[str] = None
    """State, province or region"""
    postcode: Optional[str] = None
    """Postal code"""
    country: Optional[str] = None
    """Country code or name"""
    autocomplete: Optional[bool] = None
    bbox: Optional[Sequence[float]] = None
    language: Optional[str] = None
    limit: Optional[int] = None
    proximity: Optional[Proximity] = None
    worldview: Optional[str] = None

    def validate(self) -> None:
        components = (
            self.addressNumber,
            self.street,
            self.block,
            self.place,
            self.region,
            self.postcode,
            self.country,
        )
        if not any(components):
            raise ValidationError("at least one address component is required", field="address")
        checkLength(self.bbox, 4, "bbox")
        validateProximity(self.proximity)

    def toQueryParams(self) -> Dict[str, str]:
        return (
            QueryParams()
            .text("address_number", self.addressNumber)
            .text("street", self.street)
            .text("block", self.block)
            .text("place", self.place)
            .text("region", self.region)
            .text("postcode", self.postcode)
            .text("country", self.country)
            .boolean("autocomplete", self.autocomplete)
            .numbers("bbox", self.bbox)
            .text("language", self.language)
            .integer("limit", self.limit)
            .proximity("proximity", self.proximity)
            .text("worldview", self.worldview)
            .toDict()
        )


@dataclass(slots=True)
class ReverseRequest:
    """
    Reverse geocoding request: coordinates to addresses and places
    """

    longitude: float
    """Longitude, -180 to 180"""
    latitude: float
    """Latitude, -90 to 90"""
    country: Optional[Sequence[str]] = None
    language: Optional[str] = None
    limit: Optional[int] = None
    """Maximum number of results, 1-10 (API default: 1)"""
    types: Optional[Sequence[str]] = None
    worldview: Optional[str] = None

    def validate(self) -> None:
        validateCoordinates(self.longitude, self.latitude)

    def toQueryParams(self) -> Dict[str, str]:
        return (
            QueryParams()
            .number("longitude", self.longitude)
            .number("latitude", self.latitude)
            .strings("country", self.country)
            .text("language", self.language)
            .integer("limit", self.limit)
            .strings("types", self.types)
            .text("worldview", self.worldview)
            .toDict()
        )


@dataclass(slots=True)
class BatchQuery:
    """
    Single entry of a batch request.

    Forward-style entries set `query`, reverse-style entries set both
    `longitude` and `latitude`. Exactly one style must be used.
    """

    query: Optional[str] = None
    """Search text for forward geocoding"""
    longitude: Optional[float] = None
    """Longitude for reverse geocoding"""
    latitude: Optional[float] = None
    """Latitude for reverse geocoding"""
    id: Optional[str] = None
    """Caller identifier echoed back in the matching result"""
    country: Optional[Sequence[str]] = None
    language: Optional[str] = None
    limit: Optional[int] = None
    types: Optional[Sequence[str]] = None

    @property
    def isForward(self) -> bool:
        return bool(self.query)

    @property
    def isReverse(self) -> bool:
        return self.longitude is not None and self.latitude is not None

    def validate(self, index: int) -> None:
        """Check the entry is exactly one of forward or reverse.

        Args:
            index: Position of the entry in the batch, used in error messages
        """
        if not self.isForward and not self.isReverse:
            raise ValidationError(
                "must specify either 'q' (forward) or 'longitude'+'latitude' (reverse)", field="queries", index=index
            )
        if self.isForward and self.isReverse:
            raise ValidationError("cannot specify both 'q' and 'longitude'+'latitude'", field="queries", index=index)

        if self.isReverse:
            try:
                validateCoordinates(self.longitude, self.latitude)  # type: ignore[arg-type]
            except ValidationError as e:
                raise ValidationError(e.message, field="queries", index=index) from e

    def toDict(self) -> Dict[str, Any]:
        """JSON representation, absent fields omitted."""
        data: Dict[str, Any] = {}
        if self.id:
            data["id"] = self.id
        if self.isForward:
            data["q"] = self.query
        if self.isReverse:
            data["longitude"] = self.longitude
            data["latitude"] = self.latitude
        if self.country:
            data["country"] = stringList(self.country)
        if self.language:
            data["language"] = self.language
        if self.limit is not None:
            data["limit"] = self.limit
        if self.types:
            data["types"] = stringList(self.types)
        return data


@dataclass(slots=True)
class BatchRequest:
    """
    Batch geocoding request with 1 to 1000 forward and/or reverse queries.

    Size and every entry are validated on construction.
    """

    queries: List[BatchQuery]
    """Ordered list of queries"""

    def __post_init__(self) -> None:
        self.queries = list(self.queries)
        self.validate()

    def validate(self) -> None:
        if len(self.queries) == 0:
            raise ValidationError("at least one query is required", field="queries")
        if len(self.queries) > MAX_BATCH_QUERIES:
            raise ValidationError(
                f"maximum {MAX_BATCH_QUERIES} queries allowed, got {len(self.queries)}", field="queries"
            )
        for index, query in enumerate(self.queries):
            query.validate(index)

    def toDict(self) -> Dict[str, Any]:
        return {"queries": [query.toDict() for query in self.queries]}


# Responses


@dataclass(slots=True)
class ContextEntry:
    """
    Contextual hierarchy element (region, country, postcode...)
    """

    mapbox_id: Optional[str] = None
    """Mapbox identifier of the context element"""
    name: Optional[str] = None
    """Name of the element"""
    wikidata_id: Optional[str] = None
    """Wikidata identifier"""
    short_code: Optional[str] = None
    """Short code (e.g. "US-CA")"""
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ContextEntry":
        """Create ContextEntry instance from API response dictionary."""
        return cls(
            mapbox_id=data.get("mapbox_id"),
            name=data.get("name"),
            wikidata_id=data.get("wikidata_id", data.get("wikidata")),
            short_code=data.get("short_code"),
            api_kwargs=extraKwargs(data, {"mapbox_id", "name", "wikidata_id", "wikidata", "short_code"}),
        )


@dataclass(slots=True)
class MatchCode:
    """
    Quality of the geocoding match
    """

    confidence: Optional[str] = None
    """exact, high, medium or low"""
    accuracy: Optional[str] = None
    """Precision of the match"""
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Per-component match results and other raw data"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchCode":
        """Create MatchCode instance from API response dictionary."""
        return cls(
            confidence=data.get("confidence"),
            accuracy=data.get("accuracy"),
            api_kwargs=extraKwargs(data, {"confidence", "accuracy"}),
        )


_PROPERTY_TEXT_FIELDS = (
    "mapbox_id",
    "feature_type",
    "name",
    "name_preferred",
    "place_name",
    "place_name_preferred",
    "place_formatted",
    "full_address",
    "accuracy",
    "address_number",
    "street",
    "postcode",
)


@dataclass(slots=True)
class FeatureProperties:
    """
    Metadata of a geocoding result
    """

    mapbox_id: Optional[str] = None
    feature_type: Optional[str] = None
    """address, street, place, region, country..."""
    name: Optional[str] = None
    name_preferred: Optional[str] = None
    place_name: Optional[str] = None
    place_name_preferred: Optional[str] = None
    place_formatted: Optional[str] = None
    full_address: Optional[str] = None
    accuracy: Optional[str] = None
    address_number: Optional[str] = None
    street: Optional[str] = None
    postcode: Optional[str] = None
    context: Dict[str, ContextEntry] = field(default_factory=dict)
    """Context hierarchy keyed by layer name"""
    coordinates: Optional[Coordinates] = None
    bbox: List[float] = field(default_factory=list)
    match_code: Optional[MatchCode] = None
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FeatureProperties":
        """Create FeatureProperties instance from API response dictionary."""
        coordinates = data.get("coordinates")
        matchCode = data.get("match_code")
        return cls(
            **{key: data.get(key) for key in _PROPERTY_TEXT_FIELDS},
            context={k: ContextEntry.from_dict(v) for k, v in (data.get("context") or {}).items()},
            coordinates=Coordinates.from_dict(coordinates) if coordinates is not None else None,
            bbox=floatList(data.get("bbox")),
            match_code=MatchCode.from_dict(matchCode) if matchCode is not None else None,
            api_kwargs=extraKwargs(data, (*_PROPERTY_TEXT_FIELDS, "context", "coordinates", "bbox", "match_code")),
        )


@dataclass(slots=True)
class Feature:
    """
    Single geocoding result as a GeoJSON Feature
    """

    type: str = "Feature"
    id: Optional[str] = None
    geometry: Optional[Point] = None
    properties: FeatureProperties = field(default_factory=FeatureProperties)
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Feature":
        """Create Feature instance from API response dictionary."""
        geometry = data.get("geometry")
        return cls(
            type=data.get("type", "Feature"),
            id=data.get("id"),
            geometry=Point.from_dict(geometry) if geometry is not None else None,
            properties=FeatureProperties.from_dict(data.get("properties") or {}),
            api_kwargs=extraKwargs(data, {"type", "id", "geometry", "properties"}),
        )


@dataclass(slots=True)
class GeocodingResponse:
    """
    Geocoding API response (GeoJSON FeatureCollection)
    """

    type: str = "FeatureCollection"
    features: List[Feature] = field(default_factory=list)
    attribution: Optional[str] = None
    """Data attribution text"""
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    @property
    def first(self) -> Optional[Feature]:
        """First (best) result or None."""
        return self.features[0] if self.features else None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeocodingResponse":
        """Create GeocodingResponse instance from API response dictionary."""
        return cls(
            type=data.get("type", "FeatureCollection"),
            features=[Feature.from_dict(f) for f in data.get("features") or []],
            attribution=data.get("attribution"),
            api_kwargs=extraKwargs(data, {"type", "features", "attribution"}),
        )


@dataclass(slots=True)
class BatchError:
    """
    Error reported for a single batch entry
    """

    message: str = ""
    code: Optional[str] = None
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BatchError":
        """Create BatchError instance from API response dictionary."""
        return cls(
            message=data.get("message", ""),
            code=data.get("code"),
            api_kwargs=extraKwargs(data, {"message", "code"}),
        )


@dataclass(slots=True)
class BatchResult:
    """
    Result of a single batch entry: a response or an error
    """

    id: Optional[str] = None
    """Identifier supplied with the query"""
    response: Optional[GeocodingResponse] = None
    error: Optional[BatchError] = None
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BatchResult":
        """Create BatchResult instance from API response dictionary."""
        response = data.get("response")
        error = data.get("error")
        return cls(
            id=data.get("id"),
            response=GeocodingResponse.from_dict(response) if response is not None else None,
            error=BatchError.from_dict(error) if error is not None else None,
            api_kwargs=extraKwargs(data, {"id", "response", "error"}),
        )


@dataclass(slots=True)
class BatchResponse:
    """
    Batch geocoding response, results in query order
    """

    results: List[BatchResult] = field(default_factory=list)
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BatchResponse":
        """Create BatchResponse instance from API response dictionary."""
        return cls(
            results=[BatchResult.from_dict(r) for r in data.get("results") or []],
            api_kwargs=extraKwargs(data, {"results"}),
        )
