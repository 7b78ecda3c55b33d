#!/usr/bin/env python3
"""
Domain model for an integration test stack.

A test stack is one folder under the integration tests directory holding a
serverless.yml that exercises a particular plugin configuration.
"""

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
        "name": "test_stack",
        "description": "Domain model for integration test stacks",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-19",
    }


@dataclass(frozen=True)
class TestStack:
    """Immutable description of a serverless test stack.

    Attributes:
        folder_name: Folder under the integration tests directory
        random_string: Suffix used to namespace resources for this run (optional)
    """

    __test__ = False

    folder_name: str
    random_string: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the folder name.

        Raises:
            ValueError: If folder name is empty or escapes the tests directory
        """
        if not self.folder_name:
            raise ValueError("folder_name must not be empty")
        parts = Path(self.folder_name).parts
        if Path(self.folder_name).is_absolute() or ".." in parts:
            raise ValueError(f"folder_name must be relative to the tests directory: {self.folder_name}")

    def directory(self, tests_dir: Path) -> Path:
        """Resolve the stack's working directory.

        Args:
            tests_dir: Root directory holding all integration test stacks

        Returns:
            Path to this stack's folder
        """
        return Path(tests_dir) / self.folder_name

    def _random_string_args(self) -> tuple[str, ...]:
        if self.random_string is None:
            return ()
        return ("--RANDOM_STRING", self.random_string)

    def deploy_commands(self, sls_command: str = "sls") -> list[tuple[str, ...]]:
        """Commands that create the custom domain and deploy the stack, in order.

        Args:
            sls_command: Serverless CLI executable

        Returns:
            List of argument tuples
        """
        return [
            (sls_command, "create_domain", *self._random_string_args()),
            (sls_command, "deploy", *self._random_string_args()),
        ]

    def remove_commands(self, sls_command: str = "sls") -> list[tuple[str, ...]]:
        """Commands that delete the custom domain and remove the stack, in order.

        Args:
            sls_command: Serverless CLI executable

        Returns:
            List of argument tuples
        """
        return [
            (sls_command, "delete_domain"),
            (sls_command, "remove"),
        ]


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
