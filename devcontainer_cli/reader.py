import os
import sys
from typing import List, Optional, Union

from devcontainer_cli.config_env import Settings, settings
from devcontainer_cli.filters.noise_filter import remove_node_noise
from devcontainer_cli.utils.cli.command_executor import CommandExecutor, ProcessRunner
from devcontainer_cli.utils.cli.constants import READ_CONFIGURATION_SUBCOMMAND
from devcontainer_cli.utils.cli.exceptions import InvalidPathError, OutputDecodeError
from devcontainer_cli.utils.logging_config import get_logger

logger = get_logger(__name__)

PathArg = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


def _lossy_path_string(path: PathArg) -> str:
    """Render a path as text, replacing anything the filesystem encoding can't map."""
    return os.fsencode(path).decode(sys.getfilesystemencoding(), errors="replace")


def build_command(path: Optional[PathArg] = None, config: Settings = settings) -> List[str]:
    """
    Build the devcontainer CLI invocation for a configuration read.

    Args:
        path: Optional workspace folder; omitted means the current directory
        config: Settings providing the executable

    Returns:
        List of command arguments, executable first

    Raises:
        InvalidPathError: If path is given but does not exist
    """
    command = [config.cli.resolved_executable, READ_CONFIGURATION_SUBCOMMAND]
    if path is not None:
        path_str = _lossy_path_string(path)
        if not os.path.exists(path):
            logger.warning("invalid_path", path=path_str)
            raise InvalidPathError(path_str)
        command.append(path_str)
    return command


def read_configuration(
    path: Optional[PathArg] = None,
    command_executor: Optional[ProcessRunner] = None,
    config: Settings = settings,
) -> str:
    """
    Read the devcontainer configuration for a workspace folder.

    The CLI's stdout is decoded as UTF-8, stripped of Node.js noise lines and
    trimmed. The JSON is returned unparsed.

    The exit status and stderr of the CLI do not affect the result. Both are
    only logged, so a failing CLI can still yield an empty or partial string.

    Args:
        path: Workspace folder to read, or None for the current directory
        command_executor: Optional process runner, defaults to CommandExecutor
        config: Settings providing the executable

    Returns:
        The cleaned configuration JSON text

    Raises:
        InvalidPathError: If path is given but does not exist
        CliIOError: If the CLI cannot be launched or read from
        OutputDecodeError: If the CLI's stdout is not valid UTF-8
    """
    command = build_command(path, config)
    runner = command_executor or CommandExecutor()

    result = runner.run(command)

    if result.returncode != 0:
        logger.warning(
            "cli_exited_nonzero", command=" ".join(command), returncode=result.returncode
        )
    if result.stderr:
        logger.warning(
            "cli_wrote_stderr",
            command=" ".join(command),
            stderr=result.stderr.decode("utf-8", errors="replace"),
        )

    try:
        text = result.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.error("cli_output_not_utf8", command=" ".join(command), error=str(e))
        raise OutputDecodeError(e, command=command) from e

    return remove_node_noise(text.strip()).strip()
