"""Unit tests for ApiGatewayRepository."""

from unittest.mock import Mock, patch

import pytest
from botocore.exceptions import ClientError, ProfileNotFound

from domain_manager_testkit.infrastructure.api_gateway_repository import ApiGatewayRepository


def test_get_domain_name() -> None:
    """Test mapping a GetDomainName response."""
    # Arrange
    repo = ApiGatewayRepository(region="us-west-2")
    mock_client = Mock()
    mock_client.get_domain_name.return_value = {
        "domainName": "regional-abc123.example.com",
        "regionalDomainName": "d-abc123.execute-api.us-west-2.amazonaws.com",
        "regionalCertificateArn": "arn:aws:acm:us-west-2:123456789012:certificate/cert-1",
        "endpointConfiguration": {"types": ["REGIONAL"]},
    }

    with patch.object(repo, "_get_apigateway_client", return_value=mock_client):
        # Act
        domain = repo.get_domain_name("regional-abc123.example.com")

    # Assert
    assert domain.domain_name == "regional-abc123.example.com"
    assert domain.endpoint_type == "REGIONAL"
    mock_client.get_domain_name.assert_called_once_with(domainName="regional-abc123.example.com")


def test_get_domain_name_not_found() -> None:
    """Test that API errors are wrapped in RuntimeError."""
    repo = ApiGatewayRepository(region="us-west-2")
    mock_client = Mock()
    mock_client.get_domain_name.side_effect = ClientError(
        {"Error": {"Code": "NotFoundException", "Message": "Invalid domain name identifier"}},
        "GetDomainName",
    )

    with patch.object(repo, "_get_apigateway_client", return_value=mock_client):
        with pytest.raises(RuntimeError, match="Failed to get domain name"):
            repo.get_domain_name("missing.example.com")


def test_get_domain_name_missing_profile() -> None:
    """Test that credential setup errors are wrapped in RuntimeError."""
    session_manager = Mock()
    session_manager.get_client.side_effect = ProfileNotFound(profile="nope")
    repo = ApiGatewayRepository(region="us-west-2", profile="nope", session_manager=session_manager)

    with pytest.raises(RuntimeError):
        repo.get_domain_name("api.example.com")


def test_get_client_uses_profile_and_region() -> None:
    """Test that the repository asks for an apigateway client with its settings."""
    session_manager = Mock()
    repo = ApiGatewayRepository(
        region="us-west-2", profile="integration", session_manager=session_manager
    )

    repo._get_apigateway_client()

    session_manager.get_client.assert_called_once_with("apigateway", "us-west-2", "integration")


def test_get_base_path_mappings() -> None:
    """Test mapping a GetBasePathMappings response."""
    repo = ApiGatewayRepository(region="us-west-2")
    mock_client = Mock()
    mock_client.get_base_path_mappings.return_value = {
        "items": [
            {"basePath": "api", "restApiId": "a1b2c3", "stage": "test"},
            {"basePath": "(none)", "restApiId": "d4e5f6", "stage": "prod"},
        ]
    }

    with patch.object(repo, "_get_apigateway_client", return_value=mock_client):
        mappings = repo.get_base_path_mappings("basic-abc123.example.com")

    assert len(mappings) == 2
    assert mappings[0].base_path == "api"
    assert mappings[0].stage == "test"
    assert mappings[1].base_path == "(none)"
    assert mappings[1].stage == "prod"


def test_get_base_path_mappings_empty() -> None:
    """Test a domain without mappings."""
    repo = ApiGatewayRepository(region="us-west-2")
    mock_client = Mock()
    mock_client.get_base_path_mappings.return_value = {}

    with patch.object(repo, "_get_apigateway_client", return_value=mock_client):
        assert repo.get_base_path_mappings("basic-abc123.example.com") == []


def test_get_base_path_mappings_error() -> None:
    """Test that API errors are wrapped in RuntimeError."""
    repo = ApiGatewayRepository(region="us-west-2")
    mock_client = Mock()
    mock_client.get_base_path_mappings.side_effect = ClientError(
        {"Error": {"Code": "TooManyRequestsException", "Message": "Rate exceeded"}},
        "GetBasePathMappings",
    )

    with patch.object(repo, "_get_apigateway_client", return_value=mock_client):
        with pytest.raises(RuntimeError, match="Failed to get base path mappings"):
            repo.get_base_path_mappings("basic-abc123.example.com")
