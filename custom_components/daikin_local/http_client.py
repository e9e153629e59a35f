"""HTTP transport for the Daikin local API."""

from __future__ import annotations

import asyncio
import logging

import aiohttp

from .const import DEFAULT_TIMEOUT
from .errors import DaikinTransportError

_LOGGER = logging.getLogger(__name__)


def normalize_host(host: str) -> str:
    """Return the host as a base URL without a trailing slash."""
    host = host.strip().rstrip("/")
    if "://" not in host:
        host = f"http://{host}"
    return host


class DaikinTransport:
    """Issue plain GET requests against a Daikin adapter."""

    def __init__(self, host: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        """Initialize the transport."""
        self.host = normalize_host(host)
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    async def get(self, path: str) -> str:
        """Request a path and return the raw response body."""
        url = f"{self.host}{path}"
        try:
            async with (
                aiohttp.ClientSession(timeout=self._timeout) as session,
                session.get(url) as response,
            ):
                if response.status == 200:
                    return await response.text()

                _LOGGER.error(
                    "Request to %s failed with status code %s", url, response.status
                )
                raise DaikinTransportError(
                    f"Unexpected status code {response.status} from {url}"
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            _LOGGER.error("Unexpected error requesting %s: %s", url, err)
            raise DaikinTransportError(f"Failed to request {url}: {err}") from err
