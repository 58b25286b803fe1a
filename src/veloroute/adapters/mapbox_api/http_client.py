"""HTTP client for Mapbox API requests."""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from veloroute.adapters.api_rate_limiter import ApiRateLimiter
from veloroute.adapters.api_request_logger import log_api_request
from veloroute.adapters.mapbox_api.constants import MAPBOX_API_NAME, MAPBOX_BASE_URL

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class MapboxHttpClient:
    """Sends authenticated GET requests to the Mapbox APIs."""

    def __init__(
        self,
        session: "ClientSession | None",
        access_token: str,
        timeout_seconds: int = 10,
        min_delay_seconds: float = 0.0,
        base_url: str = MAPBOX_BASE_URL,
    ) -> None:
        """Initialize the client.

        Args:
            session: aiohttp session used for all requests.
            access_token: Mapbox access token.
            timeout_seconds: Total timeout per request.
            min_delay_seconds: Minimum delay between Mapbox requests.
            base_url: API base URL.
        """
        self._session = session
        self._access_token = access_token
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._rate_limiter = ApiRateLimiter.shared(MAPBOX_API_NAME, min_delay_seconds)
        self._base_url = base_url.rstrip("/")

    async def get_json(self, path: str, params: dict[str, str] | None = None) -> Any | None:
        """GET a Mapbox endpoint and decode the JSON body.

        Args:
            path: Endpoint path below the base URL.
            params: Query parameters, without the access token.

        Returns:
            Decoded JSON, or None on any failure.
        """
        if not self._session:
            logger.warning("No HTTP session available for Mapbox request")
            return None
        if not self._access_token:
            logger.warning("Mapbox access token is not configured")
            return None

        url = f"{self._base_url}{path}"
        query = {**(params or {}), "access_token": self._access_token}
        log_api_request("GET", url, query)

        await self._rate_limiter.acquire()
        try:
            async with self._session.get(url, params=query, timeout=self._timeout) as response:
                return await self._handle_response(response, url)
        except Exception as e:
            logger.warning(f"Error requesting Mapbox {path}: {e}")
            return None

    @staticmethod
    async def _handle_response(response: "ClientResponse", url: str) -> Any | None:
        """Decode a successful response, log anything else."""
        if response.status != 200:
            response_text = await response.text()
            logger.warning(
                f"Mapbox API returned status {response.status} for {url}: {response_text[:200]}"
            )
            return None
        return await response.json()
