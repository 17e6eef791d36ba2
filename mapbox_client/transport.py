"""
Mapbox HTTP Transport

This module provides the HttpTransport class, the single point through which
every endpoint reaches the network. It builds URLs, attaches the common
headers, serializes JSON bodies, delegates the call to an injected
httpx.AsyncClient and turns responses into decoded models or classified errors.
"""

import json
import logging
from typing import Any, Awaitable, Dict, Optional, Protocol, Self, Type, TypeVar

import httpx

from .constants import ACCESS_TOKEN_PARAM, CONTENT_TYPE_JSON, HTTP_GET, HTTP_POST, USER_AGENT
from .exceptions import ApiError, DecodeError, MapboxError, NetworkError, classifyApiError
from .utils import maskParams

logger = logging.getLogger(__name__)


class Decodable(Protocol):
    """Anything that can be built from a decoded JSON object"""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Self: ...


DecodableT = TypeVar("DecodableT", bound=Decodable)
ResultT = TypeVar("ResultT")


class HttpTransport:
    """Generic request executor shared by all Mapbox services, dood!

    Owns no connection, timeout or retry logic: all of that belongs to the
    injected httpx.AsyncClient.

    Example:
        >>> transport = HttpTransport("https://api.mapbox.com", httpx.AsyncClient())
        >>> response = await transport.get(
        ...     "/search/geocode/v6/forward",
        ...     {"access_token": "pk.xxx", "q": "Rome"},
        ...     GeocodingResponse,
        ... )

    Attributes:
        baseUrl: Base URL every path is appended to
        httpClient: HTTP engine used to execute requests
    """

    __slots__ = ("baseUrl", "httpClient")

    def __init__(self, baseUrl: str, httpClient: httpx.AsyncClient) -> None:
        """Initialize the transport.

        Args:
            baseUrl: Base URL for the API (e.g. https://api.mapbox.com)
            httpClient: httpx.AsyncClient executing the requests
        """
        self.baseUrl = baseUrl.rstrip("/")
        self.httpClient = httpClient

    def buildUrl(self, path: str) -> str:
        """Join the base URL with an endpoint path.

        Args:
            path: Endpoint path (e.g. "/search/geocode/v6/forward")

        Returns:
            Full URL without query string
        """
        return f"{self.baseUrl}/{path.lstrip('/')}"

    async def execute(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, str]] = None,
        body: Optional[Any] = None,
    ) -> httpx.Response:
        """Execute a single HTTP request.

        Args:
            method: HTTP method (GET, POST)
            path: Endpoint path
            params: Query parameters, percent-encoded by httpx
            body: JSON-serializable request body (optional)

        Returns:
            Raw httpx response

        Raises:
            httpx.HTTPError: Network-level failures are propagated unchanged
        """
        url = self.buildUrl(path)
        headers = {
            "Accept": CONTENT_TYPE_JSON,
            "User-Agent": USER_AGENT,
        }

        content: Optional[bytes] = None
        if body is not None:
            content = json.dumps(body).encode("utf-8")
            headers["Content-Type"] = CONTENT_TYPE_JSON

        logger.debug(f"Making {method} request to {url} with params {maskParams(params or {}, ACCESS_TOKEN_PARAM)}")

        return await self.httpClient.request(method, url, params=params, content=content, headers=headers)

    async def get(
        self,
        path: str,
        params: Optional[Dict[str, str]],
        target: Type[DecodableT],
    ) -> DecodableT:
        """Make GET request and decode the response into target.

        Args:
            path: Endpoint path
            params: Query parameters
            target: Model class with a from_dict classmethod

        Returns:
            Decoded response model
        """
        response = await self.execute(HTTP_GET, path, params=params)
        return self.handleResponse(response, target)

    async def post(
        self,
        path: str,
        body: Any,
        target: Type[DecodableT],
        params: Optional[Dict[str, str]] = None,
    ) -> DecodableT:
        """Make POST request with a JSON body and decode the response into target.

        Args:
            path: Endpoint path
            body: JSON-serializable request body
            target: Model class with a from_dict classmethod
            params: Query parameters (optional)

        Returns:
            Decoded response model
        """
        response = await self.execute(HTTP_POST, path, params=params, body=body)
        return self.handleResponse(response, target)

    def handleResponse(self, response: httpx.Response, target: Type[DecodableT]) -> DecodableT:
        """Turn a response into a decoded model or raise the matching error.

        Raises:
            ApiError: Classified error for non-2xx responses
            DecodeError: If a 2xx body doesn't match the declared shape
        """
        if not response.is_success:
            error = self._parseError(response)
            logger.warning(f"API error: {error.statusCode} {error.message}")
            raise error

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Failed to parse JSON response: {e}")
            raise DecodeError(f"failed to unmarshal response: {e}", response.status_code) from e

        if not isinstance(data, dict):
            logger.error(f"Unexpected response shape: {type(data).__name__}")
            raise DecodeError(
                f"failed to unmarshal response: expected JSON object, got {type(data).__name__}",
                response.status_code,
            )

        try:
            result = target.from_dict(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.error(f"Failed to decode {target.__name__}: {type(e).__name__}#{e}")
            raise DecodeError(f"failed to unmarshal response into {target.__name__}: {e}", response.status_code) from e

        logger.debug(f"Request successful: {response.status_code} -> {target.__name__}")
        return result

    def _parseError(self, response: httpx.Response) -> ApiError:
        """Build classified error from a {message, code} envelope or the status line."""
        try:
            envelope = response.json()
        except ValueError:
            envelope = None

        if isinstance(envelope, dict):
            message = envelope.get("message")
            if isinstance(message, str) and message:
                code = envelope.get("code")
                return classifyApiError(
                    response.status_code,
                    message,
                    code if isinstance(code, str) and code else None,
                    envelope,
                )

        return classifyApiError(response.status_code, f"{response.status_code} {response.reason_phrase}".strip())


async def callEndpoint(endpoint: str, call: Awaitable[ResultT]) -> ResultT:
    """Await a transport call, tagging any failure with the endpoint name.

    MapboxError subclasses are re-raised with their class preserved,
    httpx.HTTPError is wrapped in NetworkError with the original as __cause__.
    """
    try:
        return await call
    except MapboxError as e:
        raise e.withEndpoint(endpoint)
    except httpx.HTTPError as e:
        logger.error(f"{endpoint} failed: {type(e).__name__}#{e}")
        raise NetworkError(f"Network error: {e}", endpoint=endpoint) from e
