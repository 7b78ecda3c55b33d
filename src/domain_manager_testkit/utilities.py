#!/usr/bin/env python3
"""
Async helpers consumed by the integration test runner.

Each function is a thin wrapper over one service call. Failures never raise:
they come back as False or None so a test can assert on them directly.
Services are built from TestkitConfig.from_env() on first use; call
configure() to supply a different configuration.

Example:
    from domain_manager_testkit import utilities

    assert await utilities.create_resources("basic", "basic-abc.example.com", "abc", True)
    assert await utilities.get_endpoint_type("basic-abc.example.com") == "EDGE"
    assert await utilities.destroy_resources("basic", "basic-abc.example.com")
"""

import asyncio
from dataclasses import dataclass
from typing import Optional

from domain_manager_testkit.application.deployment_service import DeploymentService
from domain_manager_testkit.application.dns_service import DnsPropagationService
from domain_manager_testkit.application.lookup_service import LookupService
from domain_manager_testkit.application.resource_service import ResourceService
from domain_manager_testkit.domain.errors import CreationError
from domain_manager_testkit.infrastructure.api_gateway_repository import ApiGatewayRepository
from domain_manager_testkit.infrastructure.config import TestkitConfig
from domain_manager_testkit.infrastructure.dns_resolver import DnsResolver
from domain_manager_testkit.infrastructure.http_checker import HttpChecker
from domain_manager_testkit.infrastructure.shell_runner import ShellRunner

__version__ = "0.1.0"
__author__ = "John Ayers"

__all__ = [
    "CreationError",
    "configure",
    "create_resources",
    "curl_url",
    "deploy_lambdas",
    "destroy_resources",
    "dns_lookup",
    "get_base_path",
    "get_endpoint_type",
    "get_stage",
    "link_packages",
    "remove_lambdas",
    "sleep",
    "verify_dns_propagation",
]


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "utilities",
        "description": "Async helpers consumed by the integration test runner",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-19",
    }


@dataclass
class TestkitServices:
    """Wired services backing the helper functions."""

    __test__ = False

    lookup: LookupService
    deployment: DeploymentService
    dns: DnsPropagationService
    resources: ResourceService
    http: HttpChecker


def build_services(config: TestkitConfig) -> TestkitServices:
    """Wire services from configuration.

    Args:
        config: Testkit configuration

    Returns:
        TestkitServices instance
    """
    deployment = DeploymentService(
        runner=ShellRunner(timeout=config.command_timeout),
        tests_dir=config.tests_dir,
        sls_command=config.sls_command,
        npm_command=config.npm_command,
        plugin_package=config.plugin_package,
    )
    dns_service = DnsPropagationService(
        resolver=DnsResolver(),
        max_retries=config.dns_max_retries,
        retry_interval=config.dns_retry_interval,
    )
    return TestkitServices(
        lookup=LookupService(ApiGatewayRepository(region=config.region, profile=config.aws_profile)),
        deployment=deployment,
        dns=dns_service,
        resources=ResourceService(deployment, dns_service),
        http=HttpChecker(timeout=config.http_timeout),
    )


_services: Optional[TestkitServices] = None


def configure(config: Optional[TestkitConfig] = None) -> TestkitServices:
    """Rebuild the services used by the helper functions.

    Args:
        config: Configuration to use (defaults to the environment)

    Returns:
        Newly wired TestkitServices
    """
    global _services
    _services = build_services(config or TestkitConfig.from_env())
    return _services


def get_services() -> TestkitServices:
    """Get the services used by the helper functions, building them on first use.

    Returns:
        TestkitServices instance
    """
    if _services is None:
        return configure()
    return _services


async def sleep(seconds: float) -> None:
    """Suspend the calling coroutine for a number of seconds."""
    await asyncio.sleep(seconds)


async def link_packages() -> bool:
    """Link the plugin into global node_modules so the test stacks can use it."""
    return await get_services().deployment.link_packages()


async def curl_url(url: str) -> Optional[int]:
    """GET a URL; returns the status code of a successful response, else None."""
    return await get_services().http.get_status(url)


async def get_endpoint_type(domain_name: str) -> Optional[str]:
    """Endpoint type (EDGE/REGIONAL) of a custom domain, or None."""
    return await get_services().lookup.get_endpoint_type(domain_name)


async def get_stage(domain_name: str) -> Optional[str]:
    """Stage of the custom domain's first base path mapping, or None."""
    return await get_services().lookup.get_stage(domain_name)


async def get_base_path(domain_name: str) -> Optional[str]:
    """Base path of the custom domain's first base path mapping, or None."""
    return await get_services().lookup.get_base_path(domain_name)


async def deploy_lambdas(folder_name: str, random_string: str) -> bool:
    """Create the domain and deploy the stack in a test folder."""
    return await get_services().deployment.deploy_lambdas(folder_name, random_string)


async def remove_lambdas(folder_name: str) -> bool:
    """Delete the domain and remove the stack in a test folder."""
    return await get_services().deployment.remove_lambdas(folder_name)


async def dns_lookup(domain_name: str) -> bool:
    """True if any DNS records exist for the domain."""
    return await get_services().dns.dns_lookup(domain_name)


async def verify_dns_propagation(domain_name: str, enabled: bool = True) -> bool:
    """Poll DNS until the domain resolves, up to the configured retry ceiling."""
    return await get_services().dns.verify_dns_propagation(domain_name, enabled)


async def create_resources(
    folder_name: str, domain_name: str, random_string: str, enabled: bool = True
) -> bool:
    """Deploy a test stack and wait for its domain's DNS."""
    return await get_services().resources.create_resources(
        folder_name, domain_name, random_string, enabled
    )


async def destroy_resources(folder_name: str, domain_name: str) -> bool:
    """Remove a test stack and its domain."""
    return await get_services().resources.destroy_resources(folder_name, domain_name)


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
