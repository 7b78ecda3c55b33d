#!/usr/bin/env python3
"""
Service for waiting on DNS propagation of custom domains.

Newly created custom domains take anywhere from seconds to half an hour to
resolve. The service polls at a fixed interval until records appear or the
attempt ceiling is reached.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Protocol

from dns.exception import DNSException

__version__ = "0.1.0"
__author__ = "John Ayers"

logger = logging.getLogger(__name__)


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "dns_service",
        "description": "Service for waiting on DNS propagation",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-19",
    }


class RecordResolver(Protocol):
    """Protocol defining interface for DNS lookups."""

    async def lookup(self, hostname: str) -> list[str]:
        """List records published for a hostname.

        Args:
            hostname: Name to resolve

        Returns:
            Record values, empty if none
        """
        ...


class DnsPropagationService:
    """Application service for DNS checks."""

    def __init__(
        self,
        resolver: RecordResolver,
        max_retries: int = 40,
        retry_interval: float = 60.0,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """Initialize the DNS service.

        Args:
            resolver: DNS resolver
            max_retries: Maximum number of lookups while waiting
            retry_interval: Seconds between lookups
            sleep: Coroutine used to wait between lookups
        """
        self.resolver = resolver
        self.max_retries = max_retries
        self.retry_interval = retry_interval
        self._sleep = sleep

    async def dns_lookup(self, hostname: str) -> bool:
        """Check whether any DNS records exist for a hostname.

        Args:
            hostname: Name to resolve

        Returns:
            True if records were found
        """
        try:
            records = await self.resolver.lookup(hostname)
        except DNSException as e:
            logger.debug(f"DNS lookup for {hostname} failed: {e.__class__.__name__}")
            return False
        return bool(records)

    async def verify_dns_propagation(self, hostname: str, enabled: bool = True) -> bool:
        """Poll DNS until the hostname resolves or attempts run out.

        Sleeps retry_interval only between attempts, never after the final
        failed lookup: a name that never resolves costs max_retries lookups
        and max_retries - 1 sleeps (39 minutes with the defaults).

        Args:
            hostname: Name to resolve
            enabled: If False, skip the check and report success

        Returns:
            True if records were found (or checking is disabled)
        """
        logger.debug("Waiting for DNS to Propagate...")
        if not enabled:
            return True

        for attempt in range(1, self.max_retries + 1):
            if await self.dns_lookup(hostname):
                logger.debug(f"DNS records found for {hostname} after {attempt} attempt(s)")
                return True
            if attempt < self.max_retries:
                logger.debug(
                    f"No DNS records for {hostname} (attempt {attempt}/{self.max_retries}). "
                    f"Retrying in {self.retry_interval:.0f}s..."
                )
                await self._sleep(self.retry_interval)

        logger.warning(f"DNS for {hostname} did not propagate after {self.max_retries} attempts")
        return False


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
