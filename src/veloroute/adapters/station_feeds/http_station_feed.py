"""Station feed adapter for providers that publish a JSON list of stations."""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from veloroute.adapters.api_request_logger import log_api_request
from veloroute.domain.ports.station_feed import StationFeed

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

DEFAULT_HEADERS = {"Accept": "application/json"}


class HttpStationFeed(StationFeed):
    """Fetches raw station records from a JSON endpoint.

    The body may be a plain list or an object holding the list under
    `list_key`. Any failure yields an empty list.
    """

    def __init__(
        self,
        name: str,
        url: str,
        session: "ClientSession | None" = None,
        list_key: str = "stations",
        timeout_seconds: int = 10,
    ) -> None:
        """Initialize the feed.

        Args:
            name: Provider name used in logs.
            url: Feed URL. An empty URL disables the feed.
            session: aiohttp session used for requests.
            list_key: Key of the station list when the body is an object.
            timeout_seconds: Total timeout per request.
        """
        self.name = name
        self._url = url
        self._session = session
        self._list_key = list_key
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def fetch_records(self) -> list[dict[str, Any]]:
        """Fetch the provider's raw station records."""
        if not self._url:
            logger.debug(f"Station feed {self.name} has no URL, skipping")
            return []
        if not self._session:
            logger.warning(f"No HTTP session available for station feed {self.name}")
            return []

        log_api_request("GET", self._url)
        try:
            async with self._session.get(
                self._url, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                if response.status != 200:
                    response_text = await response.text()
                    logger.warning(
                        f"Station feed {self.name} returned status {response.status}: "
                        f"{response_text[:200]}"
                    )
                    return []
                data = await response.json(content_type=None)
        except Exception as e:
            logger.warning(f"Error fetching station feed {self.name}: {e}")
            return []

        records = self._extract_records(data)
        logger.info(f"Fetched {len(records)} records from station feed {self.name}")
        return records

    def _extract_records(self, data: Any) -> list[dict[str, Any]]:
        """Get the list of station records from the decoded body."""
        if isinstance(data, dict):
            data = data.get(self._list_key)
        if not isinstance(data, list):
            logger.warning(f"Station feed {self.name} returned no station list")
            return []
        return [record for record in data if isinstance(record, dict)]
