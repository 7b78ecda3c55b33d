#!/usr/bin/env python3
"""
Domain model for the outcome of an external command.

Captures exit status and output of a single CLI invocation (npm, sls).
"""

from dataclasses import dataclass

__version__ = "0.1.0"
__author__ = "John Ayers"


def file_info() -> dict[str, str]:
    """Return metadata about this module.

    Returns:
        Dictionary containing module metadata
    """
    return {
        "name": "command_result",
        "description": "Domain model for external command results",
        "version": __version__,
        "author": __author__,
        "last_updated": "2026-10-19",
    }


@dataclass(frozen=True)
class CommandResult:
    """Immutable result of running an external command.

    Attributes:
        command: Argument list that was executed
        return_code: Process exit code (None if the process never started or was killed)
        stdout: Captured standard output
        stderr: Captured standard error
        timed_out: True if the command was killed after exceeding its timeout
    """

    command: tuple[str, ...]
    return_code: int | None
    stdout: str = ""
    stderr: str = ""
    timed_out: bool = False

    @property
    def succeeded(self) -> bool:
        """Check if the command completed cleanly.

        A command only counts as successful when it exited with status 0 and
        wrote nothing to stderr.

        Returns:
            True if the command succeeded
        """
        return self.return_code == 0 and not self.timed_out and not self.stderr

    def command_line(self) -> str:
        """Render the command as a single printable string.

        Returns:
            Space-joined command line
        """
        return " ".join(self.command)

    def failure_reason(self) -> str:
        """Describe why the command failed.

        Returns:
            Human-readable reason, or empty string if the command succeeded
        """
        if self.succeeded:
            return ""
        if self.timed_out:
            return "timed out"
        if self.return_code is None:
            return self.stderr.strip() or "could not be started"
        if self.return_code != 0:
            return f"exit code {self.return_code}"
        lines = self.stderr.strip().splitlines()
        return f"wrote to stderr: {lines[0] if lines else repr(self.stderr)}"


if __name__ == "__main__":
    # Example usage
    info = file_info()
    print(f"{info['name']} v{info['version']}")
