#!/usr/bin/env python3
"""
Configuration management for domain-manager-testkit.

Handles loading and validation of configuration from the environment.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "config",
        "description": "Configuration management",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-19",
    }


DEFAULT_REGION = "us-west-2"
DEFAULT_TESTS_DIR = "test/integration-tests"
DEFAULT_PLUGIN_PACKAGE = "serverless-domain-manager"
DEFAULT_DNS_MAX_RETRIES = 40
DEFAULT_DNS_RETRY_INTERVAL = 60.0


def _get_number(name: str, default: Optional[float], cast: type) -> Optional[float]:
    """Read a numeric environment variable.

    Args:
        name: Environment variable name
        default: Value used when the variable is unset or empty
        cast: int or float

    Returns:
        Parsed value or default

    Raises:
        ValueError: If the variable is set but not a valid non-negative number
    """
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = cast(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {raw!r}")
    return value


@dataclass
class TestkitConfig:
    """Integration test helper settings.

    Attributes:
        aws_profile: Shared credentials profile (None uses the default chain)
        region: AWS region holding the test domains
        tests_dir: Directory containing one folder per test stack
        plugin_package: npm package linked into the test stacks
        sls_command: Serverless CLI executable
        npm_command: npm executable
        dns_max_retries: Maximum DNS checks while waiting for propagation
        dns_retry_interval: Seconds between DNS checks
        command_timeout: Seconds before an external command is killed (None waits forever)
        http_timeout: Seconds before an HTTP check gives up
    """

    __test__ = False

    aws_profile: Optional[str] = None
    region: str = DEFAULT_REGION
    tests_dir: Path = Path(DEFAULT_TESTS_DIR)
    plugin_package: str = DEFAULT_PLUGIN_PACKAGE
    sls_command: str = "sls"
    npm_command: str = "npm"
    dns_max_retries: int = DEFAULT_DNS_MAX_RETRIES
    dns_retry_interval: float = DEFAULT_DNS_RETRY_INTERVAL
    command_timeout: Optional[float] = None
    http_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "TestkitConfig":
        """Load configuration from environment variables.

        Returns:
            TestkitConfig instance

        Raises:
            ValueError: If a numeric environment variable is invalid
        """
        return cls(
            aws_profile=os.getenv("AWS_PROFILE") or None,
            region=os.getenv("INTEGRATION_TEST_REGION", DEFAULT_REGION),
            tests_dir=Path(os.getenv("INTEGRATION_TESTS_DIR", DEFAULT_TESTS_DIR)),
            plugin_package=os.getenv("PLUGIN_PACKAGE", DEFAULT_PLUGIN_PACKAGE),
            sls_command=os.getenv("SLS_COMMAND", "sls"),
            npm_command=os.getenv("NPM_COMMAND", "npm"),
            dns_max_retries=int(_get_number("DNS_MAX_RETRIES", DEFAULT_DNS_MAX_RETRIES, int)),
            dns_retry_interval=float(
                _get_number("DNS_RETRY_INTERVAL", DEFAULT_DNS_RETRY_INTERVAL, float)
            ),
            command_timeout=_get_number("COMMAND_TIMEOUT", None, float),
            http_timeout=float(_get_number("HTTP_TIMEOUT", 30.0, float)),
        )


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
