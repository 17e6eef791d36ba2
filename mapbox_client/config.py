"""
Configuration loading for the Mapbox client.

Settings are read from a TOML file section, e.g.:

    [mapbox]
    access_token = "pk.xxx"
    base_url = "https://api.mapbox.com"
    timeout = 30

The access token falls back to the MAPBOX_ACCESS_TOKEN environment variable.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import tomli

from .constants import ACCESS_TOKEN_ENV, DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ClientConfig:
    """
    Settings needed to build a MapboxClient
    """

    accessToken: str
    """Mapbox access token"""
    baseUrl: str = DEFAULT_BASE_URL
    """Base URL of the Mapbox API"""
    timeout: float = DEFAULT_TIMEOUT
    """Request timeout in seconds"""

    @classmethod
    def fromDict(cls, data: Dict[str, Any], env: Optional[Dict[str, str]] = None) -> "ClientConfig":
        """Build config from a parsed TOML section, dood!

        Args:
            data: Section contents
            env: Environment to read the token fallback from (default: os.environ)

        Raises:
            ConfigurationError: If no access token is available or timeout is not a number
        """
        if env is None:
            env = dict(os.environ)

        accessToken = str(data.get("access_token") or env.get(ACCESS_TOKEN_ENV) or "").strip()
        if not accessToken:
            raise ConfigurationError(f"access token is required (set access_token or {ACCESS_TOKEN_ENV})")

        timeout = data.get("timeout", DEFAULT_TIMEOUT)
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigurationError(f"timeout must be a positive number, got {timeout!r}")

        return cls(
            accessToken=accessToken,
            baseUrl=str(data.get("base_url") or DEFAULT_BASE_URL),
            timeout=float(timeout),
        )


def loadConfig(
    path: Union[str, Path],
    section: str = "mapbox",
    env: Optional[Dict[str, str]] = None,
) -> ClientConfig:
    """Load client configuration from a TOML file.

    Args:
        path: Path to the TOML file
        section: Table holding the client settings (default: "mapbox")
        env: Environment for the token fallback (default: os.environ)

    Returns:
        ClientConfig instance

    Raises:
        ConfigurationError: If the file is missing or invalid, or no token is available
    """
    configFile = Path(path)
    if not configFile.exists():
        logger.error(f"Configuration file {configFile} not found")
        raise ConfigurationError(f"configuration file {configFile} not found")

    try:
        with open(configFile, "rb") as f:
            data = tomli.load(f)
    except tomli.TOMLDecodeError as e:
        logger.error(f"Failed to parse configuration file {configFile}: {e}")
        raise ConfigurationError(f"failed to parse configuration file {configFile}: {e}") from e

    sectionData = data.get(section, {})
    if not isinstance(sectionData, dict):
        raise ConfigurationError(f"[{section}] must be a table")

    config = ClientConfig.fromDict(sectionData, env)
    logger.debug(f"Configuration loaded from {configFile}")
    return config
