"""Unit tests for TestStack domain model."""

from pathlib import Path

import pytest

from domain_manager_testkit.domain.test_stack import TestStack


def test_stack_directory() -> None:
    """Test resolving the stack folder under the tests directory."""
    stack = TestStack(folder_name="basic-example")

    assert stack.directory(Path("test/integration-tests")) == Path(
        "test/integration-tests/basic-example"
    )


def test_stack_deploy_commands() -> None:
    """Test that deploy creates the domain before deploying."""
    stack = TestStack(folder_name="basic-example", random_string="abc123")

    assert stack.deploy_commands() == [
        ("sls", "create_domain", "--RANDOM_STRING", "abc123"),
        ("sls", "deploy", "--RANDOM_STRING", "abc123"),
    ]


def test_stack_deploy_commands_without_random_string() -> None:
    """Test deploy commands when no random string is given."""
    stack = TestStack(folder_name="basic-example")

    assert stack.deploy_commands("serverless") == [
        ("serverless", "create_domain"),
        ("serverless", "deploy"),
    ]


def test_stack_remove_commands() -> None:
    """Test that remove deletes the domain before removing the stack."""
    stack = TestStack(folder_name="basic-example", random_string="abc123")

    assert stack.remove_commands() == [
        ("sls", "delete_domain"),
        ("sls", "remove"),
    ]


@pytest.mark.parametrize("folder_name", ["", "../outside", "/etc", "nested/../../up"])
def test_stack_rejects_invalid_folder(folder_name: str) -> None:
    """Test that folders outside the tests directory are rejected."""
    with pytest.raises(ValueError):
        TestStack(folder_name=folder_name)


def test_stack_allows_nested_folder() -> None:
    """Test that nested folders inside the tests directory are allowed."""
    stack = TestStack(folder_name="group/basic-example")

    assert stack.directory(Path("tests")) == Path("tests/group/basic-example")
