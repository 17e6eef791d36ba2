"""
Shared models for Mapbox APIs.

This module contains the request-side Coordinate value, the proximity variant
and the GeoJSON response shapes (Point, Coordinates, GenericFeature,
FeatureCollection) used by both the Geocoding and Search Box APIs.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from .constants import ProximityMode
from .exceptions import ValidationError
from .validation import checkLength, validateCoordinates


@dataclass(slots=True, frozen=True)
class Coordinate:
    """
    Longitude/latitude pair, validated on construction
    """

    longitude: float
    """Longitude, -180 to 180 inclusive"""
    latitude: float
    """Latitude, -90 to 90 inclusive"""

    def __post_init__(self) -> None:
        validateCoordinates(self.longitude, self.latitude, field="coordinate")

    def toList(self) -> List[float]:
        """Return [longitude, latitude]."""
        return [self.longitude, self.latitude]


Proximity = Union[Coordinate, Sequence[float], ProximityMode]
"""Proximity bias: a coordinate (or [lon, lat] pair) or ProximityMode.IP, never both"""


@dataclass(slots=True)
class Point:
    """
    GeoJSON Point geometry with coordinates [longitude, latitude]
    """

    type: str = "Point"
    """GeoJSON geometry type"""
    coordinates: List[float] = field(default_factory=list)
    """[longitude, latitude]"""
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    @classmethod
    def fromLonLat(cls, longitude: float, latitude: float) -> "Point":
        """Create a Point from longitude and latitude."""
        return cls(coordinates=[longitude, latitude])

    @property
    def longitude(self) -> float:
        if len(self.coordinates) >= 1:
            return self.coordinates[0]
        return 0.0

    @property
    def latitude(self) -> float:
        if len(self.coordinates) >= 2:
            return self.coordinates[1]
        return 0.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Point":
        """Create Point instance from API response dictionary."""
        return cls(
            type=data.get("type", "Point"),
            coordinates=[float(v) for v in data.get("coordinates") or []],
            api_kwargs={k: v for k, v in data.items() if k not in {"type", "coordinates"}},
        )


@dataclass(slots=True)
class Coordinates:
    """
    Longitude/latitude object as returned in feature properties
    """

    longitude: float = 0.0
    """Longitude"""
    latitude: float = 0.0
    """Latitude"""
    accuracy: Optional[str] = None
    """Precision of the coordinates (e.g. "rooftop", "parcel")"""
    routable_points: List[Dict[str, Any]] = field(default_factory=list)
    """Raw routable points, when the API nests them here"""
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Coordinates":
        """Create Coordinates instance from API response dictionary."""
        return cls(
            longitude=float(data.get("longitude", 0.0)),
            latitude=float(data.get("latitude", 0.0)),
            accuracy=data.get("accuracy"),
            routable_points=list(data.get("routable_points") or []),
            api_kwargs={
                k: v for k, v in data.items() if k not in {"longitude", "latitude", "accuracy", "routable_points"}
            },
        )


@dataclass(slots=True)
class GenericFeature:
    """
    GeoJSON Feature with free-form properties
    """

    type: str = "Feature"
    """GeoJSON type"""
    geometry: Optional[Point] = None
    """Point geometry"""
    properties: Dict[str, Any] = field(default_factory=dict)
    """Feature properties"""
    id: Optional[str] = None
    """Feature identifier"""
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenericFeature":
        """Create GenericFeature instance from API response dictionary."""
        geometry = data.get("geometry")
        return cls(
            type=data.get("type", "Feature"),
            geometry=Point.from_dict(geometry) if geometry is not None else None,
            properties=dict(data.get("properties") or {}),
            id=data.get("id"),
            api_kwargs={k: v for k, v in data.items() if k not in {"type", "geometry", "properties", "id"}},
        )


@dataclass(slots=True)
class FeatureCollection:
    """
    GeoJSON FeatureCollection with free-form feature properties
    """

    type: str = "FeatureCollection"
    """GeoJSON type"""
    features: List[GenericFeature] = field(default_factory=list)
    """Features"""
    api_kwargs: Dict[str, Any] = field(default_factory=dict)
    """Raw API response data"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FeatureCollection":
        """Create FeatureCollection instance from API response dictionary."""
        return cls(
            type=data.get("type", "FeatureCollection"),
            features=[GenericFeature.from_dict(f) for f in data.get("features") or []],
            api_kwargs={k: v for k, v in data.items() if k not in {"type", "features"}},
        )


def validateProximity(proximity: Optional[Proximity], field: str = "proximity") -> None:
    """Check a proximity value is a Coordinate, a [lon, lat] pair or ProximityMode.IP.

    Raises:
        ValidationError: If the value is neither form
    """
    if proximity is None or isinstance(proximity, (Coordinate, ProximityMode)):
        return
    if isinstance(proximity, str):
        if proximity == ProximityMode.IP.value:
            return
        raise ValidationError(f"{field} must be a [longitude, latitude] pair or ProximityMode.IP", field=field)
    checkLength(proximity, 2, field)
    if proximity:
        validateCoordinates(proximity[0], proximity[1], field=field)


def extraKwargs(data: Dict[str, Any], known: Iterable[str]) -> Dict[str, Any]:
    """Collect response keys not mapped to model fields."""
    knownKeys = set(known)
    return {k: v for k, v in data.items() if k not in knownKeys}


def floatList(values: Optional[Iterable[Any]]) -> List[float]:
    """Decode an optional JSON number array."""
    return [float(v) for v in values or []]
