#!/usr/bin/env python3
"""
Service for deploying and removing integration test stacks.

Drives the npm and serverless CLIs for each test folder and reports a plain
success flag.
"""

import logging
from pathlib import Path
from typing import Optional, Protocol, Sequence

from domain_manager_testkit.domain.command_result import CommandResult
from domain_manager_testkit.domain.test_stack import TestStack

__version__ = "0.1.0"
__author__ = "John Ayers"

logger = logging.getLogger(__name__)


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "deployment_service",
        "description": "Service for deploying and removing integration test stacks",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-19",
    }


class CommandRunner(Protocol):
    """Protocol defining interface for running external commands."""

    async def run(self, command: Sequence[str], cwd: Optional[Path] = None) -> CommandResult:
        """Run one command.

        Args:
            command: Executable and arguments
            cwd: Working directory

        Returns:
            CommandResult
        """
        ...

    async def run_sequence(
        self, commands: Sequence[Sequence[str]], cwd: Optional[Path] = None
    ) -> list[CommandResult]:
        """Run commands in order, stopping after the first failure.

        Args:
            commands: Commands to run
            cwd: Working directory

        Returns:
            Results of the commands that were run
        """
        ...


class DeploymentService:
    """Application service for test stack deployment."""

    def __init__(
        self,
        runner: CommandRunner,
        tests_dir: Path,
        sls_command: str = "sls",
        npm_command: str = "npm",
        plugin_package: str = "serverless-domain-manager",
    ) -> None:
        """Initialize the deployment service.

        Args:
            runner: Runner for external commands
            tests_dir: Directory holding one folder per test stack
            sls_command: Serverless CLI executable
            npm_command: npm executable
            plugin_package: Package linked into the test stacks
        """
        self.runner = runner
        self.tests_dir = Path(tests_dir)
        self.sls_command = sls_command
        self.npm_command = npm_command
        self.plugin_package = plugin_package

    async def link_packages(self) -> bool:
        """Link the plugin from the global node_modules into the current project.

        Returns:
            True if npm linked the package cleanly
        """
        result = await self.runner.run((self.npm_command, "link", self.plugin_package))
        if not result.succeeded:
            logger.warning(f"'{result.command_line()}' failed: {result.failure_reason()}")
        return result.succeeded

    async def _run_stack_commands(
        self, stack: TestStack, commands: list[tuple[str, ...]]
    ) -> bool:
        results = await self.runner.run_sequence(commands, cwd=stack.directory(self.tests_dir))
        if len(results) != len(commands) or not all(r.succeeded for r in results):
            failed = results[-1] if results else None
            if failed is not None:
                logger.warning(
                    f"[{stack.folder_name}] '{failed.command_line()}' failed: "
                    f"{failed.failure_reason()}"
                )
            return False
        return True

    async def deploy_lambdas(self, folder_name: str, random_string: str) -> bool:
        """Create the custom domain and deploy the stack in a test folder.

        Args:
            folder_name: Folder under the tests directory
            random_string: Suffix namespacing this run's resources

        Returns:
            True if both the domain and the stack were created
        """
        try:
            stack = TestStack(folder_name=folder_name, random_string=random_string)
        except ValueError as e:
            logger.warning(f"Cannot deploy: {e}")
            return False

        return await self._run_stack_commands(stack, stack.deploy_commands(self.sls_command))

    async def remove_lambdas(self, folder_name: str) -> bool:
        """Delete the custom domain and remove the stack in a test folder.

        Args:
            folder_name: Folder under the tests directory

        Returns:
            True if both the domain and the stack were removed
        """
        try:
            stack = TestStack(folder_name=folder_name)
        except ValueError as e:
            logger.warning(f"Cannot remove: {e}")
            return False

        return await self._run_stack_commands(stack, stack.remove_commands(self.sls_command))


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
