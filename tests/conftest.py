"""Shared pytest fixtures for domain-manager-testkit tests."""

from unittest.mock import AsyncMock, Mock

import pytest

from domain_manager_testkit.domain.command_result import CommandResult
from domain_manager_testkit.domain.custom_domain import BasePathMapping, CustomDomain


@pytest.fixture
def ok_result() -> CommandResult:
    """Create a successful command result.

    Returns:
        CommandResult instance
    """
    return CommandResult(command=("sls", "deploy"), return_code=0, stdout="Service deployed")


@pytest.fixture
def failed_result() -> CommandResult:
    """Create a failed command result.

    Returns:
        CommandResult instance with a non-zero exit code
    """
    return CommandResult(
        command=("sls", "deploy"), return_code=1, stderr="Serverless Error: stack failed"
    )


@pytest.fixture
def sample_domain() -> CustomDomain:
    """Create a sample edge-optimized custom domain.

    Returns:
        CustomDomain instance
    """
    return CustomDomain(
        domain_name="basic-abc123.example.com",
        endpoint_types=("EDGE",),
    )


@pytest.fixture
def sample_mappings() -> list[BasePathMapping]:
    """Create sample base path mappings.

    Returns:
        List of BasePathMapping instances
    """
    return [
        BasePathMapping(base_path="api", stage="test"),
        BasePathMapping(base_path="v2", stage="prod"),
    ]


@pytest.fixture
def mock_runner(ok_result: CommandResult) -> Mock:
    """Create a command runner whose commands all succeed.

    Returns:
        Mock with async run and run_sequence
    """
    runner = Mock()
    runner.run = AsyncMock(return_value=ok_result)

    async def run_sequence(commands, cwd=None):
        return [
            CommandResult(command=tuple(c), return_code=0, stdout="ok") for c in commands
        ]

    runner.run_sequence = AsyncMock(side_effect=run_sequence)
    return runner
