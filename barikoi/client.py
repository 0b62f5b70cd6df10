"""
Barikoi Async Client

This module provides the BarikoiClient transport class: the single point every
Barikoi API call goes through. It attaches the API key, builds URLs from
endpoint descriptors and turns responses into ApiResponse values or errors.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import httpx

from .config import BarikoiSettings, resolveSettings
from .constants import (
    API_KEY_PARAM,
    API_KEY_QUERY_PARAM,
    CONTENT_TYPE_JSON,
    HTTP_DELETE,
    HTTP_GET,
    HTTP_POST,
    VERSION,
    Endpoint,
)
from .exceptions import BarikoiError, BarikoiNetworkError
from .models import ApiResponse
from .normalizer import normalizeResponse

logger = logging.getLogger(__name__)

EndpointLike = Union[str, Endpoint]


class BarikoiClient:
    """Async HTTP client for the Barikoi API, dood!

    Holds the credentials for its whole lifetime and one lazily created
    ``httpx.AsyncClient``. Requests are never retried: every non-2xx answer is
    raised to the caller as a BarikoiError.

    Example:
        >>> from barikoi import BarikoiClient
        >>>
        >>> async with BarikoiClient("your_api_key") as client:
        ...     place = await client.get("/search/reverse/geocode", {"longitude": 90.36, "latitude": 23.8})

    Attributes:
        apiKey: Barikoi API key
        baseUrl: Base URL for the API (default: https://barikoi.xyz/v2/api)
        timeout: Request timeout in seconds (default: 60)
    """

    __slots__ = ("settings", "_transport", "_httpClient")

    def __init__(
        self,
        apiKey: Optional[str] = None,
        baseUrl: Optional[str] = None,
        timeout: Optional[float] = None,
        *,
        settings: Optional[BarikoiSettings] = None,
        configPath: Optional[Union[str, Path]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the Barikoi client.

        Args:
            apiKey: API key, falls back to BARIKOI_API_KEY / config file
            baseUrl: Base URL, falls back to BARIKOI_BASE_URL / config file / default
            timeout: Request timeout in seconds
            settings: Pre-built settings, used as-is when given
            configPath: Optional TOML config file with a ``[barikoi]`` table
            transport: Custom httpx transport (e.g. ``httpx.MockTransport`` in tests)
        """
        if settings is None:
            settings = resolveSettings(apiKey=apiKey, baseUrl=baseUrl, timeout=timeout, configPath=configPath)

        self.settings = settings
        self._transport = transport
        self._httpClient: Optional[httpx.AsyncClient] = None

        logger.debug(f"BarikoiClient initialized for {self.baseUrl}")

    @property
    def apiKey(self) -> str:
        return self.settings.apiKey

    @property
    def baseUrl(self) -> str:
        return self.settings.baseUrl

    @property
    def timeout(self) -> float:
        return self.settings.timeout

    async def __aenter__(self) -> "BarikoiClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    def _getHttpClient(self) -> httpx.AsyncClient:
        """Get or create the HTTP client with proper configuration.

        Returns:
            Configured httpx.AsyncClient instance
        """
        if self._httpClient is None or self._httpClient.is_closed:
            self._httpClient = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                headers={
                    "Accept": CONTENT_TYPE_JSON,
                    "User-Agent": f"barikoi-python/{VERSION}",
                },
                transport=self._transport,
            )
            logger.debug("Created new HTTP client")

        return self._httpClient

    async def aclose(self) -> None:
        """Close the HTTP client and cleanup resources."""
        if self._httpClient and not self._httpClient.is_closed:
            await self._httpClient.aclose()
            logger.debug("HTTP client closed")

    def _buildUrl(self, endpoint: EndpointLike) -> str:
        """Build full URL for an endpoint path or descriptor.

        Args:
            endpoint: Path relative to the base URL or Endpoint descriptor

        Returns:
            Absolute URL
        """
        if isinstance(endpoint, Endpoint):
            host = (endpoint.host or self.baseUrl).rstrip("/")
            path = endpoint.path
        else:
            host = self.baseUrl
            path = endpoint
        return f"{host}/{path.lstrip('/')}"

    def _redact(self, values: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        if not values:
            return values
        return {k: ("***" if k in (API_KEY_PARAM, API_KEY_QUERY_PARAM) else v) for k, v in values.items()}

    async def _makeRequest(self, method: str, endpoint: EndpointLike, **kwargs: Any) -> ApiResponse:
        """Send request and normalize the response.

        Args:
            method: HTTP method (GET, POST, DELETE)
            endpoint: Path or Endpoint descriptor
            **kwargs: Additional arguments passed to httpx request

        Returns:
            ListResult or RecordResult

        Raises:
            BarikoiValidationError: On 400 responses
            BarikoiApiError: On other non-2xx responses
            BarikoiNetworkError: On timeouts and transport failures
        """
        client = self._getHttpClient()
        url = self._buildUrl(endpoint)

        logger.debug(
            f"Making {method} request to {url} with params {self._redact(kwargs.get('params'))}, "
            f"data {self._redact(kwargs.get('data'))}, json {self._redact(kwargs.get('json'))}"
        )

        try:
            response = await client.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            logger.error(f"Request timeout: {method} {url}")
            raise BarikoiNetworkError(f"Request timeout: {type(e).__name__}#{e}") from e
        except httpx.RequestError as e:
            logger.error(f"Network error: {method} {url}: {type(e).__name__}#{e}")
            raise BarikoiNetworkError(f"Network error: {type(e).__name__}#{e}") from e

        try:
            result = normalizeResponse(response)
        except BarikoiError as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise

        logger.debug(f"Request successful: {method} {url} ({response.status_code})")
        return result

    async def get(self, endpoint: EndpointLike, params: Optional[Dict[str, Any]] = None) -> ApiResponse:
        """Make GET request, ``api_key`` goes into the query string.

        Args:
            endpoint: API endpoint path or descriptor
            params: Query parameters

        Returns:
            Parsed response
        """
        query = dict(params or {})
        query[API_KEY_PARAM] = self.apiKey
        return await self._makeRequest(HTTP_GET, endpoint, params=query)

    async def post(self, endpoint: EndpointLike, data: Optional[Dict[str, Any]] = None) -> ApiResponse:
        """Make form-encoded POST request, ``api_key`` goes into the body.

        Args:
            endpoint: API endpoint path or descriptor
            data: Form fields

        Returns:
            Parsed response
        """
        form = dict(data or {})
        form[API_KEY_PARAM] = self.apiKey
        return await self._makeRequest(HTTP_POST, endpoint, data=form)

    async def postJson(
        self,
        endpoint: EndpointLike,
        data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> ApiResponse:
        """Make JSON POST request with the key in the query string as ``key``.

        Used by the navigation routing endpoint.

        Args:
            endpoint: API endpoint path or descriptor
            data: JSON body
            params: Extra query parameters

        Returns:
            Parsed response
        """
        query = dict(params or {})
        query[API_KEY_QUERY_PARAM] = self.apiKey
        return await self._makeRequest(HTTP_POST, endpoint, json=dict(data or {}), params=query)

    async def postJsonWithKeyInBody(self, endpoint: EndpointLike, data: Optional[Dict[str, Any]] = None) -> ApiResponse:
        """Make JSON POST request with ``api_key`` inside the JSON body.

        Used by the waypoint optimization endpoint.

        Args:
            endpoint: API endpoint path or descriptor
            data: JSON body

        Returns:
            Parsed response
        """
        body = dict(data or {})
        body[API_KEY_PARAM] = self.apiKey
        return await self._makeRequest(HTTP_POST, endpoint, json=body)

    async def delete(self, endpoint: EndpointLike, params: Optional[Dict[str, Any]] = None) -> ApiResponse:
        """Make DELETE request, ``api_key`` goes into the query string.

        Args:
            endpoint: API endpoint path or descriptor
            params: Query parameters

        Returns:
            Parsed response
        """
        query = dict(params or {})
        query[API_KEY_PARAM] = self.apiKey
        return await self._makeRequest(HTTP_DELETE, endpoint, params=query)

    async def request(
        self,
        endpoint: Endpoint,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None,
        **pathArgs: Any,
    ) -> ApiResponse:
        """Dispatch an Endpoint descriptor to the matching method, dood!

        GET and DELETE send ``params`` in the query string, POST sends
        ``data`` as a form body.

        Args:
            endpoint: Endpoint descriptor
            params: Query parameters (GET/DELETE)
            data: Form fields (POST)
            **pathArgs: Values for the path placeholders

        Returns:
            Parsed response
        """
        bound = endpoint.bind(**pathArgs)

        if bound.method == HTTP_GET:
            return await self.get(bound, params)
        elif bound.method == HTTP_DELETE:
            return await self.delete(bound, params)
        elif bound.method == HTTP_POST:
            return await self.post(bound, data)

        raise ValueError(f"Unsupported HTTP method {bound.method}")
