#!/usr/bin/env python3
"""
Service for looking up API Gateway custom domain settings.

Answers the single-field questions the integration tests assert on
(endpoint type, mapped stage, mapped base path) and reports None whenever
the answer cannot be read.
"""

import asyncio
import logging
from typing import Optional, Protocol

from domain_manager_testkit.domain.custom_domain import BasePathMapping, CustomDomain

__version__ = "0.1.0"
__author__ = "John Ayers"

logger = logging.getLogger(__name__)


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "lookup_service",
        "description": "Service for looking up API Gateway custom domain settings",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-19",
    }


class DomainRepository(Protocol):
    """Protocol defining interface for custom domain reads.

    Infrastructure layer must implement this protocol. Implementations are
    blocking and raise RuntimeError when the API call fails; any other
    exception (e.g. credential resolution) is treated the same way.
    """

    def get_domain_name(self, domain_name: str) -> CustomDomain:
        """Fetch a custom domain name.

        Args:
            domain_name: Custom domain

        Returns:
            CustomDomain object
        """
        ...

    def get_base_path_mappings(self, domain_name: str) -> list[BasePathMapping]:
        """List base path mappings of a custom domain.

        Args:
            domain_name: Custom domain

        Returns:
            List of BasePathMapping objects
        """
        ...


class LookupService:
    """Application service for custom domain lookups."""

    def __init__(self, domain_repo: DomainRepository) -> None:
        """Initialize the lookup service.

        Args:
            domain_repo: Repository for custom domain reads
        """
        self.domain_repo = domain_repo

    async def get_custom_domain(self, domain_name: str) -> Optional[CustomDomain]:
        """Fetch the full custom domain record.

        Args:
            domain_name: Custom domain

        Returns:
            CustomDomain, or None if it cannot be read
        """
        try:
            return await asyncio.to_thread(self.domain_repo.get_domain_name, domain_name)
        except Exception as e:
            logger.debug(f"Domain lookup failed for {domain_name}: {e!r}")
            return None

    async def get_first_mapping(self, domain_name: str) -> Optional[BasePathMapping]:
        """Fetch the first base path mapping of a domain.

        Args:
            domain_name: Custom domain

        Returns:
            First BasePathMapping, or None if there is none or it cannot be read
        """
        try:
            mappings = await asyncio.to_thread(
                self.domain_repo.get_base_path_mappings, domain_name
            )
        except Exception as e:
            logger.debug(f"Base path mapping lookup failed for {domain_name}: {e!r}")
            return None

        if not mappings:
            logger.debug(f"No base path mappings for {domain_name}")
            return None
        return mappings[0]

    async def get_endpoint_type(self, domain_name: str) -> Optional[str]:
        """Get the endpoint type of a custom domain.

        Args:
            domain_name: Custom domain

        Returns:
            Endpoint type (EDGE, REGIONAL, ...), or None
        """
        domain = await self.get_custom_domain(domain_name)
        if domain is None:
            return None
        return domain.endpoint_type

    async def get_stage(self, domain_name: str) -> Optional[str]:
        """Get the stage of the domain's first base path mapping.

        Args:
            domain_name: Custom domain

        Returns:
            Stage name, or None
        """
        mapping = await self.get_first_mapping(domain_name)
        return mapping.stage if mapping else None

    async def get_base_path(self, domain_name: str) -> Optional[str]:
        """Get the base path of the domain's first base path mapping.

        Args:
            domain_name: Custom domain

        Returns:
            Base path, or None
        """
        mapping = await self.get_first_mapping(domain_name)
        return mapping.base_path if mapping else None


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
