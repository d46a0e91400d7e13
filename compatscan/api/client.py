"""Steam store catalog client implementation."""

import logging
import time
from typing import Any, Dict, Optional

import httpx

from compatscan.api.error_handler import CatalogRequestError, log_http_status
from compatscan.api.response_parser import (
    AppLookup,
    ResponseError,
    parse_app_details,
    validate_response,
)
from compatscan.api.runtimes import get_runtime_name

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://store.steampowered.com/api"
APP_DETAILS_ENDPOINT = "appdetails"


def create_http_client() -> httpx.AsyncClient:
    """
    Create the httpx async client used for catalog lookups.

    Requests are made one at a time, so a single connection is enough.
    Timeouts are left at the httpx defaults.

    Returns:
        Configured httpx.AsyncClient
    """
    limits = httpx.Limits(max_connections=1, max_keepalive_connections=1)
    transport = httpx.AsyncHTTPTransport(limits=limits, retries=0)
    return httpx.AsyncClient(transport=transport, follow_redirects=True)


class StoreClient:
    """
    Client for the Steam store appdetails endpoint.

    Known Proton runtimes are answered from a static table without a
    request. Every other lookup is a single GET with no retry and no
    caching; any failure yields None.
    """

    def __init__(
        self,
        config: Dict[str, Any],
        client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize catalog client.

        Args:
            config: Configuration dictionary
            client: Optional httpx.AsyncClient (caller owns and closes it)
        """
        base_url = config.get('api', {}).get('base_url') or DEFAULT_BASE_URL
        self.base_url = base_url.rstrip('/')
        self.client = client

    @property
    def details_url(self) -> str:
        """Full URL of the appdetails endpoint."""
        return f"{self.base_url}/{APP_DETAILS_ENDPOINT}"

    async def fetch_app_info(self, app_id: int) -> Optional[AppLookup]:
        """
        Look up the store name of an app.

        Args:
            app_id: Steam app ID

        Returns:
            AppLookup with the success flag and display name, or None if
            the catalog could not be reached or returned no usable data
        """
        runtime_name = get_runtime_name(app_id)
        if runtime_name is not None:
            logger.debug(f"App {app_id} is a known runtime: {runtime_name}")
            return AppLookup(True, runtime_name)

        try:
            response_text = await self._query_app_details(app_id)
            document = validate_response(response_text)
        except (CatalogRequestError, ResponseError) as e:
            logger.debug(f"No catalog data for app {app_id}: {e}")
            return None

        result = parse_app_details(document, app_id)
        if result is None:
            logger.debug(f"Catalog response has no entry for app {app_id}")
        return result

    async def _query_app_details(self, app_id: int) -> str:
        """
        Query the appdetails endpoint.

        Args:
            app_id: Steam app ID

        Returns:
            Response body as text

        Raises:
            CatalogRequestError: If the request fails
        """
        if self.client is None:
            raise CatalogRequestError("No HTTP client configured")

        params = {'appids': app_id}
        url = self.details_url

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Catalog request: {url}?appids={app_id}")

        start_time = time.time()
        try:
            response = await self.client.get(url, params=params)
        except httpx.TimeoutException:
            raise CatalogRequestError("Request timeout")
        except httpx.HTTPError as e:
            raise CatalogRequestError(f"Network error: {e}")

        elapsed_time = time.time() - start_time
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Catalog response: {response.status_code} in {elapsed_time:.2f}s")

        log_http_status(response.status_code, context=f"app {app_id}")

        try:
            return response.text
        except (UnicodeDecodeError, LookupError) as e:
            raise CatalogRequestError(f"Undecodable response body: {e}")
