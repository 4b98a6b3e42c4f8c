"""
Sleeper API integration

Thin async wrapper around the public Sleeper REST API
(https://docs.sleeper.com). The API is read-only and needs no key.

Every HTTP-layer failure is surfaced as SleeperAPIError so callers can tell
upstream problems apart from bugs.
"""

from typing import Any, Dict, Optional

import httpx

from sleeper_mcp.config import settings
from sleeper_mcp.config.logging_config import get_logger

logger = get_logger(__name__)


class SleeperAPIError(Exception):
    """Upstream request failed (non-2xx status or transport error)"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _upstream_message(response: httpx.Response) -> Optional[str]:
    """Pull the ``message`` field out of a JSON error body, if any."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message")
        if message:
            return str(message)
    return None


class SleeperAPIClient:
    """Async client bound to a single Sleeper API base URL."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            base_url: API root, defaults to ``settings.base_url``
            timeout: Request timeout in seconds, defaults to ``settings.request_timeout``
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=transport,
            follow_redirects=True,
        )

    async def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Issue one GET and return the decoded body.

        Args:
            endpoint: Path relative to the base URL (e.g. "/state/nfl")
            params: Optional flat query parameters

        Returns:
            Parsed JSON body. A body that is not JSON is returned as text.

        Raises:
            SleeperAPIError: On a non-2xx response or any transport failure
        """
        logger.debug("sleeper_api_request", endpoint=endpoint, params=params)
        try:
            response = await self._client.get(endpoint, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            message = _upstream_message(e.response) or f"Request failed with status code {status}"
            logger.warning("sleeper_api_error", status=status, endpoint=endpoint, message=message)
            raise SleeperAPIError(message, status_code=status) from e
        except httpx.HTTPError as e:
            message = str(e) or type(e).__name__
            logger.warning("sleeper_api_request_failed", endpoint=endpoint, error=message)
            raise SleeperAPIError(message) from e

        try:
            return response.json()
        except ValueError:
            return response.text

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "SleeperAPIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
