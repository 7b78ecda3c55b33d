#!/usr/bin/env python3
"""
DNS resolver for checking custom domain records.

Wraps dnspython's async resolver to list the records published for a name.
"""

import logging
from typing import Optional, Sequence

import dns.asyncresolver
import dns.resolver

__version__ = "0.1.0"
__author__ = "John Ayers"

logger = logging.getLogger(__name__)


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "dns_resolver",
        "description": "DNS resolver for checking custom domain records",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-19",
    }


# Custom domains resolve through an alias (A/AAAA) or a CNAME to CloudFront
DEFAULT_RECORD_TYPES = ("A", "AAAA", "CNAME")


class DnsResolver:
    """Looks up DNS records for a hostname.

    Implements the RecordResolver protocol.
    """

    def __init__(
        self,
        record_types: Sequence[str] = DEFAULT_RECORD_TYPES,
        lifetime: float = 10.0,
        resolver: Optional[dns.asyncresolver.Resolver] = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            record_types: Record types to query, in order
            lifetime: Seconds allowed per query including retries
            resolver: dnspython resolver (defaults to one using system nameservers)
        """
        self.record_types = tuple(record_types)
        self.lifetime = lifetime
        self._resolver = resolver

    def _get_resolver(self) -> dns.asyncresolver.Resolver:
        """Get the dnspython resolver, reading system configuration on first use.

        Returns:
            dnspython async resolver
        """
        if self._resolver is None:
            self._resolver = dns.asyncresolver.Resolver()
        return self._resolver

    async def lookup(self, hostname: str) -> list[str]:
        """List records published for a hostname.

        Types with no records are skipped; the first type with answers wins.

        Args:
            hostname: Name to resolve

        Returns:
            Record values as text, empty if no queried type has records

        Raises:
            dns.exception.DNSException: If the name does not exist or no
                nameserver answered
        """
        for record_type in self.record_types:
            try:
                answer = await self._get_resolver().resolve(
                    hostname, record_type, lifetime=self.lifetime
                )
            except dns.resolver.NoAnswer:
                logger.debug(f"No {record_type} records for {hostname}")
                continue
            return [rdata.to_text() for rdata in answer]
        return []


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
