from devcontainer_cli.reader import read_configuration
from devcontainer_cli.filters.noise_filter import NoiseFilter, remove_node_noise
from devcontainer_cli.helpers.configuration import (
    ReadConfigurationOutput,
    load_configuration,
)
from devcontainer_cli.utils.cli.exceptions import (
    CliIOError,
    DevcontainerCliError,
    ErrorKind,
    InvalidPathError,
    OutputDecodeError,
)

__all__ = [
    "read_configuration",
    "load_configuration",
    "ReadConfigurationOutput",
    "NoiseFilter",
    "remove_node_noise",
    "DevcontainerCliError",
    "ErrorKind",
    "InvalidPathError",
    "CliIOError",
    "OutputDecodeError",
]
