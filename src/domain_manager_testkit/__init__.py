#!/usr/bin/env python3
"""
domain-manager-testkit: integration test helpers for serverless-domain-manager.

This package deploys and removes throwaway serverless stacks, waits for their
custom domains to show up in DNS, and looks up the resulting API Gateway
domain configuration so the integration test runner can assert on it.
"""

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "__init__",
        "description": "Package initialization for domain-manager-testkit",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-19",
    }
