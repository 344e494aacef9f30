import os
import subprocess
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol
from contextlib import contextmanager

from devcontainer_cli.utils.cli.exceptions import CliIOError
from devcontainer_cli.utils.logging_config import get_logger


@dataclass(frozen=True)
class CommandResult:
    """Raw outcome of a finished process."""

    stdout: bytes
    returncode: int
    stderr: bytes


class ProcessRunner(Protocol):
    def run(self, command: List[str]) -> CommandResult: ...


class CommandExecutor:
    """Runs the devcontainer CLI as a blocking subprocess."""

    def __init__(self, env: Optional[Dict[str, str]] = None):
        """Initialize the command executor.

        Args:
            env: Optional environment variables to use when executing commands.
                 If None, uses the current environment.
        """
        self.env = os.environ.copy() if env is None else env
        self.logger = get_logger(__name__)

    @contextmanager
    def _managed_command_execution(self, command: List[str]):
        """Context manager for command execution.

        Args:
            command: List of command arguments to execute

        Yields:
            None

        Raises:
            CliIOError: If the process cannot be started or its pipes fail
        """
        self.logger.debug("executing_command", command=" ".join(command))
        try:
            yield
        except OSError as e:
            self.logger.error(
                "command_execution_error", command=" ".join(command), error=str(e)
            )
            raise CliIOError(e, command=command) from e

    def run(self, command: List[str]) -> CommandResult:
        """Execute a command to completion and capture both output streams.

        The exit status is reported, not checked.

        Args:
            command: List of command arguments to execute

        Returns:
            CommandResult holding stdout and stderr as bytes

        Raises:
            CliIOError: If the command cannot be executed
        """
        with self._managed_command_execution(command):
            result = subprocess.run(
                command, check=False, capture_output=True, env=self.env
            )

            if result.stdout:
                self.logger.debug("command_stdout", size=len(result.stdout))
            if result.stderr:
                self.logger.debug("command_stderr", size=len(result.stderr))

            return CommandResult(
                stdout=result.stdout,
                returncode=result.returncode,
                stderr=result.stderr,
            )
