from enum import Enum
from typing import List, Optional

from devcontainer_cli.utils.cli.constants import ERROR_MESSAGES


class ErrorKind(str, Enum):
    """Failure kinds a configuration read can end with."""

    INVALID_PATH = "invalid_path"
    IO = "io"
    UTF8 = "utf8"


class DevcontainerCliError(Exception):
    """Base exception for failures while reading a devcontainer configuration."""

    kind: ErrorKind

    def __init__(self, message: str, command: Optional[List[str]] = None):
        super().__init__(message)
        self.command = command

    def __str__(self):
        msg = super().__str__()
        if self.command:
            msg += f"\nCommand: {' '.join(self.command)}"
        return msg


class InvalidPathError(DevcontainerCliError):
    """Raised when the requested workspace path does not exist."""

    kind = ErrorKind.INVALID_PATH

    def __init__(self, path: str):
        super().__init__(ERROR_MESSAGES["invalid_path"].format(path))
        self.path = path


class CliIOError(DevcontainerCliError):
    """Raised when the devcontainer CLI cannot be launched, run or read from."""

    kind = ErrorKind.IO

    def __init__(self, error: OSError, command: Optional[List[str]] = None):
        super().__init__(ERROR_MESSAGES["io_error"].format(error), command)
        self.error = error


class OutputDecodeError(DevcontainerCliError):
    """Raised when the CLI's standard output is not valid UTF-8."""

    kind = ErrorKind.UTF8

    def __init__(self, error: UnicodeDecodeError, command: Optional[List[str]] = None):
        super().__init__(ERROR_MESSAGES["utf8_error"].format(error), command)
        self.error = error
