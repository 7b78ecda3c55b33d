#!/usr/bin/env python3
"""
Domain layer for domain-manager-testkit.

Contains plain value objects describing test stacks, command results and
API Gateway records. Nothing here talks to AWS, DNS or a shell.
"""

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "domain.__init__",
        "description": "Domain layer initialization",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-19",
    }
