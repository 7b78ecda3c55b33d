#!/usr/bin/env python3
"""
Error types for domain-manager-testkit.

The helpers themselves never raise these; they report failures as False/None.
CreationError is exported for test runners that want to abort a suite when
resource creation reports failure.
"""

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "errors",
        "description": "Error types for integration test helpers",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-19",
    }


class TestkitError(Exception):
    """Base class for domain-manager-testkit errors."""

    __test__ = False


class CreationError(TestkitError):
    """Raised by callers when test resources could not be created."""


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
