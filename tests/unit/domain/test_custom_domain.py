"""Unit tests for custom domain domain models."""

import pytest

from domain_manager_testkit.domain.custom_domain import BasePathMapping, CustomDomain


def test_custom_domain_endpoint_type(sample_domain: CustomDomain) -> None:
    """Test that the first endpoint type is the primary one."""
    assert sample_domain.endpoint_type == "EDGE"


def test_custom_domain_multiple_endpoint_types() -> None:
    """Test that only the first listed endpoint type is reported."""
    domain = CustomDomain(domain_name="api.example.com", endpoint_types=("REGIONAL", "EDGE"))

    assert domain.endpoint_type == "REGIONAL"


def test_custom_domain_without_endpoint_types() -> None:
    """Test endpoint type of a domain with no endpoint configuration."""
    domain = CustomDomain(domain_name="api.example.com")

    assert domain.endpoint_type is None


def test_custom_domain_is_immutable(sample_domain: CustomDomain) -> None:
    """Test that CustomDomain is frozen."""
    with pytest.raises(AttributeError):
        sample_domain.domain_name = "other.example.com"  # type: ignore[misc]


def test_base_path_mapping_defaults() -> None:
    """Test a mapping read without a stage."""
    mapping = BasePathMapping(base_path="(none)")

    assert mapping.base_path == "(none)"
    assert mapping.stage is None
