"""
HTTP client for the marketplace API.

Provides the raw paged calls behind the search and orders page sources and
the user lookup used to resolve seller nicknames.
"""

import time
from typing import Any, Dict, Optional

import httpx

from mlexport.constants import DEFAULT_BASE_URL, DEFAULT_HEADERS, DEFAULT_TIMEOUT
from mlexport.export.errors import FetchFailedError, LookupFailedError
from mlexport.logging import get_logger, log_api_call


def _error_message(response: httpx.Response) -> str:
    """Extract a clean error message from an API error response"""
    try:
        error_data = response.json()
    except ValueError:
        return response.text
    if isinstance(error_data, dict):
        for key in ("message", "error", "cause"):
            if error_data.get(key):
                return str(error_data[key])
    return response.text


class MarketplaceClient:
    """Thin synchronous client over ``httpx.Client``"""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.logger = get_logger("mlexport.api.client")
        self._client = httpx.Client(
            base_url=self.base_url,
            headers=DEFAULT_HEADERS,
            timeout=timeout,
            transport=transport,
        )

    def __enter__(self) -> "MarketplaceClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def get_json(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        Make a GET request and decode the JSON body.

        Args:
            path: Path relative to the base URL
            params: Query parameters
            headers: Extra request headers

        Returns:
            Decoded JSON body

        Raises:
            FetchFailedError: On transport errors, error statuses or bad JSON
        """
        start_time = time.time()
        url = f"{self.base_url}{path}"
        self.logger.debug(f"Starting GET request to {url}")

        try:
            response = self._client.get(path, params=params, headers=headers)
        except httpx.HTTPError as e:
            log_api_call("GET", url, duration=time.time() - start_time, error=str(e))
            raise FetchFailedError(f"Request error: {str(e)}", original_error=e) from e

        duration = time.time() - start_time
        request_url = str(response.request.url)

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            clean_error = f"{response.status_code} - {_error_message(response)}"
            log_api_call(
                "GET",
                request_url,
                status_code=response.status_code,
                duration=duration,
                response_size=len(response.content),
                error=clean_error,
            )
            raise FetchFailedError(
                clean_error, status_code=response.status_code, original_error=e
            ) from e

        log_api_call(
            "GET",
            request_url,
            status_code=response.status_code,
            duration=duration,
            response_size=len(response.content),
        )

        try:
            return response.json()
        except ValueError as e:
            raise FetchFailedError(
                f"Invalid JSON in response from {path}", original_error=e
            ) from e

    def search(self, site_id: str, offset: int, limit: int, **args) -> Any:
        """Search items of a site"""
        params = {**args, "offset": offset, "limit": limit}
        return self.get_json(f"/sites/{site_id}/search", params=params)

    def my_orders(self, offset: int, limit: int, access_token: Optional[str] = None, **args) -> Any:
        """Search the orders of the seller owning the access token"""
        headers = {"Authorization": f"Bearer {access_token}"} if access_token else None
        params = {**args, "offset": offset, "limit": limit}
        return self.get_json("/orders/search", params=params, headers=headers)

    def user(self, user_id: Any) -> Dict[str, Any]:
        """
        Fetch a user document.

        Raises:
            LookupFailedError: If the user cannot be fetched
        """
        try:
            data = self.get_json(f"/users/{user_id}")
        except FetchFailedError as e:
            raise LookupFailedError(user_id, original_error=e) from e
        if not isinstance(data, dict):
            raise LookupFailedError(user_id)
        return data
