"""
Query parameter encoding shared by all endpoint builders.

Rules:
    - numbers use the shortest round-trippable decimal form, no exponent,
      integral values without a trailing ".0"
    - number arrays and string arrays are comma-joined
    - booleans are "true"/"false"
    - route points use fixed 6-decimal precision, joined with ";"
"""

from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from .constants import ROUTE_COORDINATE_PRECISION, ProximityMode
from .models import Coordinate, Proximity


def formatFloat(value: float) -> str:
    """Format a number in its shortest round-trippable positional form.

    Example:
        >>> formatFloat(-122.5), formatFloat(10.0), formatFloat(1e-7)
        ('-122.5', '10', '0.0000001')
    """
    text = repr(float(value))
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def formatFloatArray(values: Iterable[float]) -> str:
    return ",".join(formatFloat(v) for v in values)


def stringList(values: Union[str, Iterable[str]]) -> List[str]:
    """Normalize a string list field, a bare string is a single entry."""
    if isinstance(values, str):
        return [values]
    return list(values)


def joinStrings(values: Union[str, Iterable[str]]) -> str:
    return ",".join(stringList(values))


def formatBool(value: bool) -> str:
    return "true" if value else "false"


def formatRoute(route: Sequence[Sequence[float]]) -> str:
    """Encode route points as "lon,lat;lon,lat" with fixed precision.

    Example:
        >>> formatRoute([[-122.4, 37.8], [-122.5, 37.7]])
        '-122.400000,37.800000;-122.500000,37.700000'
    """
    precision = ROUTE_COORDINATE_PRECISION
    return ";".join(f"{point[0]:.{precision}f},{point[1]:.{precision}f}" for point in route)


def formatProximity(proximity: Proximity) -> str:
    if isinstance(proximity, str):
        return ProximityMode(proximity).value
    if isinstance(proximity, Coordinate):
        return formatFloatArray(proximity.toList())
    return formatFloatArray(proximity)


class QueryParams:
    """Ordered query parameter builder that skips absent values.

    None, empty strings and empty sequences are never emitted.
    """

    __slots__ = ("_params",)

    def __init__(self) -> None:
        self._params: Dict[str, str] = {}

    def set(self, key: str, value: str) -> "QueryParams":
        """Set a required parameter as-is."""
        self._params[key] = value
        return self

    def text(self, key: str, value: Optional[str]) -> "QueryParams":
        if value:
            self._params[key] = str(value)
        return self

    def integer(self, key: str, value: Optional[int]) -> "QueryParams":
        if value is not None:
            self._params[key] = str(int(value))
        return self

    def number(self, key: str, value: Optional[float]) -> "QueryParams":
        if value is not None:
            self._params[key] = formatFloat(value)
        return self

    def boolean(self, key: str, value: Optional[bool]) -> "QueryParams":
        if value is not None:
            self._params[key] = formatBool(value)
        return self

    def numbers(self, key: str, values: Optional[Sequence[float]]) -> "QueryParams":
        if values:
            self._params[key] = formatFloatArray(values)
        return self

    def strings(self, key: str, values: Optional[Union[str, Sequence[str]]]) -> "QueryParams":
        if values:
            self._params[key] = joinStrings(values)
        return self

    def proximity(self, key: str, value: Optional[Proximity]) -> "QueryParams":
        if value is None:
            return self
        if not isinstance(value, (ProximityMode, Coordinate)) and not value:
            return self
        self._params[key] = formatProximity(value)
        return self

    def route(self, key: str, value: Optional[Sequence[Sequence[float]]]) -> "QueryParams":
        if value:
            self._params[key] = formatRoute(value)
        return self

    def update(self, params: Dict[str, Any]) -> "QueryParams":
        for key, value in params.items():
            self._params[key] = str(value)
        return self

    def toDict(self) -> Dict[str, str]:
        return dict(self._params)
