#!/usr/bin/env python3
"""
Subprocess runner for external CLIs.

Runs npm and serverless commands without blocking the event loop and reports
their outcome as CommandResult objects instead of raising.
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional, Sequence

from domain_manager_testkit.domain.command_result import CommandResult
from domain_manager_testkit.infrastructure.logger import log_operation

__version__ = "0.1.0"
__author__ = "John Ayers"

logger = logging.getLogger(__name__)


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "shell_runner",
        "description": "Subprocess runner for external CLIs",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-19",
    }


class ShellRunner:
    """Runs external commands with captured output.

    Implements the CommandRunner protocol.
    """

    def __init__(self, timeout: Optional[float] = None) -> None:
        """Initialize the runner.

        Args:
            timeout: Seconds before a command is killed (None waits forever)
        """
        self.timeout = timeout

    async def run(self, command: Sequence[str], cwd: Optional[Path] = None) -> CommandResult:
        """Run a single command to completion.

        Args:
            command: Executable followed by its arguments
            cwd: Working directory (defaults to the current one)

        Returns:
            CommandResult describing the outcome
        """
        command = tuple(command)
        log_operation(
            logger,
            "Running command",
            {"command": " ".join(command), "cwd": cwd or "."},
            level=logging.DEBUG,
        )

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                cwd=str(cwd) if cwd is not None else None,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            # Missing executable or working directory
            return CommandResult(command=command, return_code=None, stderr=str(e))

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError:
            try:
                process.kill()
            except ProcessLookupError:
                pass
            await process.wait()
            log_operation(
                logger,
                "Command timed out",
                {"command": " ".join(command), "timeout": self.timeout},
                level=logging.WARNING,
            )
            return CommandResult(
                command=command,
                return_code=process.returncode,
                stderr=f"killed after {self.timeout}s",
                timed_out=True,
            )

        return CommandResult(
            command=command,
            return_code=process.returncode,
            stdout=stdout.decode(errors="replace"),
            stderr=stderr.decode(errors="replace"),
        )

    async def run_sequence(
        self, commands: Sequence[Sequence[str]], cwd: Optional[Path] = None
    ) -> list[CommandResult]:
        """Run commands in order, stopping after the first failure.

        Args:
            commands: Commands to run
            cwd: Working directory shared by all commands

        Returns:
            Results of the commands that were run
        """
        results = []
        for command in commands:
            result = await self.run(command, cwd=cwd)
            results.append(result)
            if not result.succeeded:
                log_operation(
                    logger,
                    "Stopping sequence",
                    {"command": result.command_line(), "reason": result.failure_reason()},
                    level=logging.DEBUG,
                )
                break
        return results


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
