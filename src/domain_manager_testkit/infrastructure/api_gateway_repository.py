#!/usr/bin/env python3
"""
API Gateway repository implementation.

Reads custom domain names and base path mappings using boto3.
"""

from typing import Any, Optional

from botocore.exceptions import BotoCoreError, ClientError

from domain_manager_testkit.domain.custom_domain import BasePathMapping, CustomDomain
from domain_manager_testkit.infrastructure.session_manager import (
    SessionManager,
    get_session_manager,
)

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "api_gateway_repository",
        "description": "API Gateway repository implementation",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-19",
    }


class ApiGatewayRepository:
    """Repository for API Gateway domain operations using boto3.

    Implements the DomainRepository protocol.
    """

    def __init__(
        self,
        region: str,
        profile: Optional[str] = None,
        session_manager: Optional[SessionManager] = None,
    ) -> None:
        """Initialize API Gateway repository.

        Args:
            region: AWS region holding the custom domains
            profile: Shared credentials profile name
            session_manager: Session cache (defaults to the global one)
        """
        self.region = region
        self.profile = profile
        self._session_manager = session_manager or get_session_manager()

    def _get_apigateway_client(self) -> Any:
        """Get boto3 apigateway client.

        Returns:
            boto3 apigateway client
        """
        return self._session_manager.get_client("apigateway", self.region, self.profile)

    def get_domain_name(self, domain_name: str) -> CustomDomain:
        """Fetch a custom domain name.

        Args:
            domain_name: Custom domain, e.g. api.example.com

        Returns:
            CustomDomain domain object

        Raises:
            RuntimeError: If the domain cannot be read
        """
        try:
            client = self._get_apigateway_client()
            response = client.get_domain_name(domainName=domain_name)
        except (ClientError, BotoCoreError) as e:
            raise RuntimeError(f"Failed to get domain name {domain_name}: {e}") from e

        endpoint_config = response.get("endpointConfiguration", {})
        return CustomDomain(
            domain_name=response.get("domainName", domain_name),
            endpoint_types=tuple(endpoint_config.get("types", [])),
        )

    def get_base_path_mappings(self, domain_name: str) -> list[BasePathMapping]:
        """List base path mappings of a custom domain.

        Only the first page is read; API Gateway returns mappings in creation order.

        Args:
            domain_name: Custom domain, e.g. api.example.com

        Returns:
            List of BasePathMapping domain objects

        Raises:
            RuntimeError: If the mappings cannot be read
        """
        try:
            client = self._get_apigateway_client()
            response = client.get_base_path_mappings(domainName=domain_name)
        except (ClientError, BotoCoreError) as e:
            raise RuntimeError(f"Failed to get base path mappings for {domain_name}: {e}") from e

        return [
            BasePathMapping(
                base_path=item.get("basePath", "(none)"),
                stage=item.get("stage"),
            )
            for item in response.get("items", [])
        ]


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
