import logging
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from devcontainer_cli.types.platform import default_executable


class CliConfig(BaseSettings):
    """Where the devcontainer CLI lives."""

    model_config = SettingsConfigDict(
        env_prefix="DEVCONTAINER_CLI_", env_file=".env", extra="ignore"
    )

    executable: Optional[str] = None

    @field_validator("executable")
    @classmethod
    def blank_means_default(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip()

    @property
    def resolved_executable(self) -> str:
        return self.executable or default_executable()


class LoggingConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DEVCONTAINER_LOG_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    level: str = "WARNING"
    json_output: bool = Field(False, validation_alias="DEVCONTAINER_LOG_JSON")
    log_file: Optional[str] = Field(None, validation_alias="DEVCONTAINER_LOG_FILE")

    @field_validator("level")
    @classmethod
    def known_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(getattr(logging, level, None), int):
            raise ValueError(f"Invalid log level: {v}")
        return level


class Settings(BaseModel):
    cli: CliConfig = Field(default_factory=CliConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


settings = Settings()
