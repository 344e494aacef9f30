import os
from enum import Enum
from typing import Dict


class HostPlatform(str, Enum):
    """Host operating system families the CLI ships launchers for."""

    WINDOWS = "windows"
    POSIX = "posix"


# npm installs a .cmd shim on Windows and a plain launcher everywhere else
EXECUTABLE_NAMES: Dict[HostPlatform, str] = {
    HostPlatform.WINDOWS: "devcontainer.cmd",
    HostPlatform.POSIX: "devcontainer",
}

HOST_PLATFORM = HostPlatform.WINDOWS if os.name == "nt" else HostPlatform.POSIX


def default_executable() -> str:
    """Name of the devcontainer CLI executable for the current host."""
    return EXECUTABLE_NAMES[HOST_PLATFORM]
