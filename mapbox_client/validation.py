"""
Shared request validation helpers.

Every helper raises ValidationError naming the offending field, so callers
fail fast before anything is encoded or sent.
"""

import math
from typing import Any, Optional, Sequence

from .constants import MAX_LATITUDE, MAX_LONGITUDE, MIN_LATITUDE, MIN_LONGITUDE, MIN_LIMIT
from .exceptions import ValidationError


def validateCoordinates(longitude: float, latitude: float, field: str = "coordinates") -> None:
    """Check longitude in [-180, 180] and latitude in [-90, 90], bounds inclusive.

    Raises:
        ValidationError: If either value is out of range or not a finite number
    """
    if isinstance(longitude, bool) or not isinstance(longitude, (int, float)) or math.isnan(longitude):
        raise ValidationError(f"longitude must be a number, got {longitude!r}", field=field)
    if isinstance(latitude, bool) or not isinstance(latitude, (int, float)) or math.isnan(latitude):
        raise ValidationError(f"latitude must be a number, got {latitude!r}", field=field)
    if longitude < MIN_LONGITUDE or longitude > MAX_LONGITUDE:
        raise ValidationError(f"longitude must be between -180 and 180, got {longitude:f}", field=field)
    if latitude < MIN_LATITUDE or latitude > MAX_LATITUDE:
        raise ValidationError(f"latitude must be between -90 and 90, got {latitude:f}", field=field)


def requireText(value: Optional[str], field: str, maxLength: Optional[int] = None) -> None:
    """Require a non-empty string, optionally bounded in length."""
    if not value:
        raise ValidationError(f"{field} is required", field=field)
    if maxLength is not None and len(value) > maxLength:
        raise ValidationError(f"{field} exceeds maximum length of {maxLength} characters", field=field)


def checkLimit(limit: Optional[int], maxLimit: int, field: str = "limit") -> None:
    """Check an optional limit is within [1, maxLimit]."""
    if limit is None:
        return
    if limit < MIN_LIMIT or limit > maxLimit:
        raise ValidationError(f"{field} must be between {MIN_LIMIT} and {maxLimit}", field=field)


def checkLength(values: Optional[Sequence[Any]], expected: int, field: str) -> None:
    """Check an optional numeric array has exactly `expected` elements, empty means unset."""
    if not values:
        return
    if len(values) != expected:
        raise ValidationError(f"{field} must have exactly {expected} elements, got {len(values)}", field=field)
