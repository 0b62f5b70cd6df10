"""
Configuration management for the Barikoi client.

Settings are resolved in order: explicit arguments, environment variables,
optional TOML file (``[barikoi]`` table), built-in defaults.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import tomli

from .constants import API_BASE_URL, DEFAULT_TIMEOUT, ENV_API_KEY, ENV_BASE_URL, ENV_TIMEOUT
from .exceptions import BarikoiConfigurationError

logger = logging.getLogger(__name__)

CONFIG_SECTION = "barikoi"


@dataclass(frozen=True)
class BarikoiSettings:
    """Resolved client settings, immutable once built"""

    apiKey: str
    baseUrl: str = API_BASE_URL
    timeout: float = DEFAULT_TIMEOUT


def loadConfigFile(configPath: Union[str, Path]) -> Dict[str, Any]:
    """Load ``[barikoi]`` table from TOML file.

    Args:
        configPath: Path to TOML file

    Returns:
        Contents of the ``[barikoi]`` table, empty dict if the table is absent

    Raises:
        BarikoiConfigurationError: If the file is missing or is not valid TOML
    """
    configFile = Path(configPath)
    if not configFile.exists():
        raise BarikoiConfigurationError(f"Configuration file {configPath} not found")

    try:
        with open(configFile, "rb") as f:
            config = tomli.load(f)
    except tomli.TOMLDecodeError as e:
        raise BarikoiConfigurationError(f"Failed to parse configuration file {configPath}: {e}") from e

    section = config.get(CONFIG_SECTION, {})
    if not isinstance(section, dict):
        raise BarikoiConfigurationError(f"[{CONFIG_SECTION}] in {configPath} must be a table")

    logger.debug(f"Configuration loaded from {configPath}")
    return section


def resolveSettings(
    apiKey: Optional[str] = None,
    baseUrl: Optional[str] = None,
    timeout: Optional[float] = None,
    configPath: Optional[Union[str, Path]] = None,
) -> BarikoiSettings:
    """Build settings, explicit values taking precedence, dood!

    Args:
        apiKey: Explicit API key
        baseUrl: Explicit base URL
        timeout: Explicit request timeout in seconds
        configPath: Optional TOML file with a ``[barikoi]`` table
            (keys: ``api-key``, ``base-url``, ``timeout``)

    Returns:
        BarikoiSettings instance
    """
    fileConfig: Dict[str, Any] = loadConfigFile(configPath) if configPath is not None else {}

    if apiKey is None:
        apiKey = os.environ.get(ENV_API_KEY, fileConfig.get("api-key", ""))
    if baseUrl is None:
        baseUrl = os.environ.get(ENV_BASE_URL, fileConfig.get("base-url", API_BASE_URL))
    if timeout is None:
        rawTimeout = os.environ.get(ENV_TIMEOUT, fileConfig.get("timeout", DEFAULT_TIMEOUT))
        try:
            timeout = float(rawTimeout)
        except (TypeError, ValueError) as e:
            raise BarikoiConfigurationError(f"Invalid timeout value '{rawTimeout}'") from e

    if not apiKey:
        logger.warning("Barikoi API key is not set, requests will be rejected by the API")

    return BarikoiSettings(apiKey=apiKey, baseUrl=baseUrl.rstrip("/"), timeout=timeout)
