from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from devcontainer_cli.config_env import Settings, settings
from devcontainer_cli.reader import PathArg, read_configuration
from devcontainer_cli.utils.cli.command_executor import ProcessRunner


class WorkspaceInfo(BaseModel):
    """Where the CLI would place the workspace inside the container."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    workspace_folder: Optional[str] = Field(None, alias="workspaceFolder")
    workspace_mount: Optional[str] = Field(None, alias="workspaceMount")


class ReadConfigurationOutput(BaseModel):
    """Document printed by `devcontainer read-configuration`."""

    model_config = ConfigDict(extra="allow")

    configuration: Dict[str, Any]
    workspace: Optional[WorkspaceInfo] = None

    @property
    def name(self) -> Optional[str]:
        return self.configuration.get("name")

    @property
    def image(self) -> Optional[str]:
        return self.configuration.get("image")


def parse_configuration(text: str) -> ReadConfigurationOutput:
    """Validate cleaned CLI output. Raises pydantic's ValidationError on bad input."""
    return ReadConfigurationOutput.model_validate_json(text)


def load_configuration(
    path: Optional[PathArg] = None,
    command_executor: Optional[ProcessRunner] = None,
    config: Settings = settings,
) -> ReadConfigurationOutput:
    return parse_configuration(read_configuration(path, command_executor, config))
