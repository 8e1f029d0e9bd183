"""
External Command Execution.

This module runs external tools (tinygo, go) behind a small interface so
callers can substitute a fake runner in tests.

Key features:
- CommandRunner protocol and the subprocess-backed implementation
- Tool presence probe via a version flag
- Optional pass-through printing of command output
"""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from wasmgo.errors import PluginIOError

logger = logging.getLogger(__name__)

# Tools whose version probe is a subcommand rather than a flag
VERSION_SUBCOMMAND_TOOLS = frozenset({"tinygo"})


@dataclass(frozen=True)
class CommandOutput:
    """
    Result of a finished external command.

    Attributes:
        returncode: Process exit status
        stdout: Captured standard output
        stderr: Captured standard error
    """

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def success(self) -> bool:
        return self.returncode == 0


class CommandRunner(Protocol):
    def run(
        self,
        command: str,
        args: list[str],
        cwd: Path | None = None,
        verbose: bool = False,
    ) -> CommandOutput:
        """Run a command to completion and return its output."""


class SubprocessRunner:
    """CommandRunner that spawns real processes with subprocess.run."""

    def run(
        self,
        command: str,
        args: list[str],
        cwd: Path | None = None,
        verbose: bool = False,
    ) -> CommandOutput:
        """
        Run a command and wait for it to exit.

        Args:
            command: Executable name
            args: Arguments
            cwd: Working directory (defaults to the current one)
            verbose: Print the command line and its output

        Returns:
            CommandOutput

        Raises:
            PluginIOError: If the process cannot be spawned
        """
        cmd = [command, *args]
        location = cwd if cwd is not None else "."
        logger.debug("Executing %s in %s", " ".join(cmd), location)
        if verbose:
            print(f"Executing: {' '.join(cmd)} in {location}")

        try:
            result = subprocess.run(
                cmd,
                cwd=cwd,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as e:
            raise PluginIOError(e) from e

        if verbose:
            print(f"Command output: {result.stdout}")
            if result.stderr:
                print(f"Command stderr: {result.stderr}")

        return CommandOutput(result.returncode, result.stdout, result.stderr)


def version_args(tool: str) -> list[str]:
    return ["version"] if tool in VERSION_SUBCOMMAND_TOOLS else ["--version"]


def is_tool_installed(tool: str, runner: CommandRunner | None = None) -> bool:
    """
    Check whether a tool runs and reports its version successfully.

    Args:
        tool: Executable name
        runner: Runner to probe with (defaults to SubprocessRunner)

    Returns:
        True if the version probe exits with status 0
    """
    runner = runner or SubprocessRunner()
    try:
        output = runner.run(tool, version_args(tool))
    except PluginIOError:
        logger.debug("Tool %s could not be spawned", tool)
        return False

    logger.debug("Tool %s probe exited with %d", tool, output.returncode)
    return output.success
