#!/usr/bin/env python3
"""
Domain models for API Gateway custom domains.

Represents a custom domain name and the base path mappings that attach it
to deployed API stages.
"""

from dataclasses import dataclass, field
from typing import Optional

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "custom_domain",
        "description": "Domain models for API Gateway custom domains",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-19",
    }


@dataclass(frozen=True)
class CustomDomain:
    """Immutable domain model representing an API Gateway custom domain name.

    Attributes:
        domain_name: Custom DNS name, e.g. api.example.com
        endpoint_types: Endpoint types in API order (EDGE, REGIONAL, PRIVATE)
    """

    domain_name: str
    endpoint_types: tuple[str, ...] = field(default_factory=tuple)

    @property
    def endpoint_type(self) -> Optional[str]:
        """Primary endpoint type of the domain.

        Returns:
            First configured endpoint type, or None if none are configured
        """
        return self.endpoint_types[0] if self.endpoint_types else None


@dataclass(frozen=True)
class BasePathMapping:
    """Immutable domain model representing a base path mapping.

    Attributes:
        base_path: Path segment under the custom domain; "(none)" maps the root
        stage: Deployed API stage the path routes to
    """

    base_path: str
    stage: Optional[str] = None


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
