"""
Mapbox Client

This module provides the MapboxClient class, the entry point holding the
access token, base URL and HTTP engine, and building the Geocoding and
Search Box services on top of a shared transport.
"""

import logging

import httpx

from .config import ClientConfig
from .exceptions import ConfigurationError
from .geocoding.service import GeocodingService
from .options import ClientOption, ClientSettings, withBaseUrl, withTimeout
from .searchbox.service import SearchBoxService
from .transport import HttpTransport
from .utils import maskToken

logger = logging.getLogger(__name__)


class MapboxClient:
    """Async client for the Mapbox Geocoding v6 and Search Box v1 APIs, dood!

    The client supports async context manager usage for proper resource cleanup:

    Example:
        >>> from mapbox_client import MapboxClient, ForwardRequest
        >>>
        >>> async with MapboxClient("pk.your_token") as client:
        ...     response = await client.geocoding().forward(ForwardRequest(query="Colosseum Rome"))
        ...     print(response.first.properties.full_address)

    Or with a caller-owned HTTP engine:
        >>> async with httpx.AsyncClient(timeout=10) as engine:
        ...     client = MapboxClient("pk.your_token", withHttpClient(engine))
        ...     suggestions = await client.searchBox().suggest(request)

    Attributes:
        maskedToken: Access token safe for logs
        baseUrl: Base URL every request goes to
        httpClient: HTTP engine used for requests
    """

    __slots__ = ("_accessToken", "_transport", "_ownsHttpClient")

    def __init__(self, accessToken: str, *options: ClientOption) -> None:
        """Initialize the client.

        Args:
            accessToken: Mapbox access token (required)
            *options: withHttpClient(), withBaseUrl(), withTimeout()

        Raises:
            ConfigurationError: If the access token is empty
        """
        if not accessToken or not accessToken.strip():
            raise ConfigurationError("access token is required")

        settings = ClientSettings()
        for option in options:
            option(settings)

        self._ownsHttpClient = settings.httpClient is None
        httpClient = settings.httpClient
        if httpClient is None:
            httpClient = httpx.AsyncClient(timeout=httpx.Timeout(settings.timeout))

        self._accessToken = accessToken
        self._transport = HttpTransport(settings.baseUrl, httpClient)

        logger.debug(f"MapboxClient initialized for {self._transport.baseUrl} with token {self.maskedToken}")

    @classmethod
    def fromConfig(cls, config: ClientConfig, *options: ClientOption) -> "MapboxClient":
        """Build a client from loaded configuration.

        Options given here are applied after the configured ones.
        """
        return cls(config.accessToken, withBaseUrl(config.baseUrl), withTimeout(config.timeout), *options)

    async def __aenter__(self) -> "MapboxClient":
        return self

    async def __aexit__(self, excType, excVal, excTb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP engine if the client created it."""
        if self._ownsHttpClient:
            await self._transport.httpClient.aclose()
            logger.debug("HTTP client closed")

    @property
    def maskedToken(self) -> str:
        return maskToken(self._accessToken)

    @property
    def baseUrl(self) -> str:
        return self._transport.baseUrl

    @property
    def httpClient(self) -> httpx.AsyncClient:
        return self._transport.httpClient

    def geocoding(self) -> GeocodingService:
        """Geocoding API v6: forward, structured forward, reverse and batch."""
        return GeocodingService(self._accessToken, self._transport)

    def searchBox(self) -> SearchBoxService:
        """Search Box API v1: suggest, retrieve, forward, category and reverse search."""
        return SearchBoxService(self._accessToken, self._transport)
