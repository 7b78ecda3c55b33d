#!/usr/bin/env python3
"""
Service wrapping creation and teardown of test resources.

Combines stack deployment with the DNS wait so a test can set up or tear
down everything for one custom domain in a single call.
"""

import logging

from domain_manager_testkit.application.deployment_service import DeploymentService
from domain_manager_testkit.application.dns_service import DnsPropagationService

__version__ = "0.1.0"
__author__ = "John Ayers"

logger = logging.getLogger(__name__)


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "resource_service",
        "description": "Service wrapping creation and teardown of test resources",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-19",
    }


class ResourceService:
    """Application service for the test resource lifecycle."""

    def __init__(
        self, deployment_service: DeploymentService, dns_service: DnsPropagationService
    ) -> None:
        """Initialize the resource service.

        Args:
            deployment_service: Service running the serverless CLI
            dns_service: Service waiting for DNS propagation
        """
        self.deployment_service = deployment_service
        self.dns_service = dns_service

    async def create_resources(
        self, folder_name: str, domain_name: str, random_string: str, enabled: bool = True
    ) -> bool:
        """Deploy a test stack and wait for its domain to resolve.

        Args:
            folder_name: Folder under the tests directory
            domain_name: Custom domain created by the stack
            random_string: Suffix namespacing this run's resources
            enabled: If False, skip the DNS wait

        Returns:
            True if the stack deployed and its DNS propagated
        """
        logger.debug(f"Creating Resources for {domain_name}")
        created = await self.deployment_service.deploy_lambdas(folder_name, random_string)

        dns_verified = False
        if created:
            dns_verified = await self.dns_service.verify_dns_propagation(domain_name, enabled)

        if created and dns_verified:
            logger.debug("Resources Created")
        else:
            logger.debug("Resources Failed to Create")
        return created and dns_verified

    async def destroy_resources(self, folder_name: str, domain_name: str) -> bool:
        """Remove a test stack and its custom domain.

        Args:
            folder_name: Folder under the tests directory
            domain_name: Custom domain created by the stack

        Returns:
            True if the stack was removed
        """
        logger.debug(f"Cleaning Up Resources for {domain_name}")
        removed = await self.deployment_service.remove_lambdas(folder_name)

        if removed:
            logger.debug("Resources Cleaned Up")
        else:
            logger.debug("Failed to Clean Up Resources")
        return removed


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
