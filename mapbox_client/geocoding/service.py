"""
Mapbox Geocoding API v6 service.

Forward, structured forward, reverse and batch geocoding over a shared
HttpTransport.
"""

from typing import Any, Dict

from ..constants import ACCESS_TOKEN_PARAM, GEOCODE_BATCH_PATH, GEOCODE_FORWARD_PATH, GEOCODE_REVERSE_PATH
from ..encoding import QueryParams
from ..transport import HttpTransport, callEndpoint
from .models import (
    BatchRequest,
    BatchResponse,
    ForwardRequest,
    GeocodingResponse,
    ReverseRequest,
    StructuredForwardRequest,
)


class GeocodingService:
    """Geocoding API v6 facade, dood!

    Bound to an access token and a transport, usually obtained via
    MapboxClient.geocoding().

    Example:
        >>> service = client.geocoding()
        >>> response = await service.forward(ForwardRequest(query="Colosseum Rome", limit=5))
        >>> response.first.properties.full_address
    """

    __slots__ = ("_token", "_transport")

    def __init__(self, token: str, transport: HttpTransport) -> None:
        self._token = token
        self._transport = transport

    def _queryParams(self, request: Any) -> Dict[str, str]:
        return QueryParams().set(ACCESS_TOKEN_PARAM, self._token).update(request.toQueryParams()).toDict()

    async def forward(self, request: ForwardRequest) -> GeocodingResponse:
        """Geocode free-form text into places.

        Args:
            request: Forward geocoding parameters

        Returns:
            GeocodingResponse with matching features, best match first

        Raises:
            ValidationError: If the request is invalid, before any network call
            ApiError: If the API returns a non-2xx response
            DecodeError: If the response body can't be decoded
            NetworkError: If the HTTP engine fails
        """
        request.validate()
        return await callEndpoint(
            "forward geocoding",
            self._transport.get(GEOCODE_FORWARD_PATH, self._queryParams(request), GeocodingResponse),
        )

    async def forwardStructured(self, request: StructuredForwardRequest) -> GeocodingResponse:
        """Geocode structured address components into places.

        Uses the same endpoint as forward(), with address components instead of `q`.
        """
        request.validate()
        return await callEndpoint(
            "structured forward geocoding",
            self._transport.get(GEOCODE_FORWARD_PATH, self._queryParams(request), GeocodingResponse),
        )

    async def reverse(self, request: ReverseRequest) -> GeocodingResponse:
        """Find addresses and places at the given coordinates."""
        request.validate()
        return await callEndpoint(
            "reverse geocoding",
            self._transport.get(GEOCODE_REVERSE_PATH, self._queryParams(request), GeocodingResponse),
        )

    async def batch(self, request: BatchRequest) -> BatchResponse:
        """Run up to 1000 forward and/or reverse queries in one POST request.

        Results come back in query order. A failed entry carries a BatchError
        instead of failing the whole call.
        """
        request.validate()
        params = QueryParams().set(ACCESS_TOKEN_PARAM, self._token).toDict()
        return await callEndpoint(
            "batch geocoding",
            self._transport.post(GEOCODE_BATCH_PATH, request.toDict(), BatchResponse, params=params),
        )
