"""
Client options.

Each option is a callable applied in order to the settings MapboxClient is
constructed from, so later options override earlier ones.
"""

from dataclasses import dataclass
from typing import Callable, Optional

import httpx

from .constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT


@dataclass(slots=True)
class ClientSettings:
    """
    Mutable settings collected from options before the client is built
    """

    baseUrl: str = DEFAULT_BASE_URL
    """Base URL of the Mapbox API"""
    httpClient: Optional[httpx.AsyncClient] = None
    """Caller-supplied HTTP engine, None to let the client create one"""
    timeout: float = DEFAULT_TIMEOUT
    """Timeout in seconds for the default HTTP engine"""


ClientOption = Callable[[ClientSettings], None]


def withHttpClient(httpClient: httpx.AsyncClient) -> ClientOption:
    """Use a custom httpx.AsyncClient (proxies, retries, custom timeouts...).

    The client never closes an engine supplied this way.
    """

    def apply(settings: ClientSettings) -> None:
        settings.httpClient = httpClient

    return apply


def withBaseUrl(baseUrl: str) -> ClientOption:
    """Point the client at another API host (testing, proxies)."""

    def apply(settings: ClientSettings) -> None:
        settings.baseUrl = baseUrl

    return apply


def withTimeout(timeout: float) -> ClientOption:
    """Set the request timeout of the default HTTP engine, in seconds.

    Has no effect when withHttpClient() is also used.
    """

    def apply(settings: ClientSettings) -> None:
        settings.timeout = timeout

    return apply
