#!/usr/bin/env python3
"""
HTTP checker for deployed endpoints.

Issues a GET against a URL with httpx and reports the response status.
"""

import logging
from typing import Optional

import httpx

__version__ = "0.1.0"
__author__ = "John Ayers"

logger = logging.getLogger(__name__)


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "http_checker",
        "description": "HTTP checker for deployed endpoints",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-19",
    }


class HttpChecker:
    """Checks whether a URL serves a successful response."""

    def __init__(
        self, timeout: float = 30.0, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> None:
        """Initialize the checker.

        Args:
            timeout: Seconds before the request is abandoned
            transport: Optional httpx transport (used by tests)
        """
        self.timeout = timeout
        self._transport = transport

    async def get_status(self, url: str) -> Optional[int]:
        """GET a URL, following redirects.

        Args:
            url: Absolute URL to request

        Returns:
            Status code of a 2xx response, None for any other status or a
            transport failure
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, follow_redirects=True, transport=self._transport
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.debug(f"GET {url} returned {e.response.status_code}")
            return None
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug(f"GET {url} failed: {e!r}")
            return None

        return response.status_code


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
