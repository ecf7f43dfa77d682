from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from buildreqs.exceptions import ConfigError
from buildreqs.logging import get_logger

__all__ = [
    "BuildReqsConfig",
    "OutputConfig",
    "load_config",
    "get_user_config_path",
    "get_project_config_path",
]

logger = get_logger(__name__)

PROJECT_CONFIG_FILENAME = "buildreqs.yaml"

# Project config path for the load_config() call in progress.
_active_project_config_path: Path | None = None


class OutputConfig(BaseModel):
    """Settings for rendering check results.

    Attributes:
        format: Default output format for ``buildreqs check``.
    """

    format: Literal["text", "json"] = "text"


class YamlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from YAML files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        yaml_file: Path | None = None,
    ):
        super().__init__(settings_cls)
        self.yaml_file = yaml_file
        self._config_data: dict[str, Any] = {}
        if yaml_file and yaml_file.exists():
            try:
                with open(yaml_file) as f:
                    loaded = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(
                    message=f"Invalid YAML in {yaml_file}: {e}",
                ) from e
            if loaded is None:
                logger.warning(f"Config file {yaml_file} is empty, using defaults.")
            elif not isinstance(loaded, dict):
                raise ConfigError(
                    message=f"Config file {yaml_file} must contain a mapping",
                    value=loaded,
                )
            else:
                self._config_data = loaded

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        """Get value for a specific field from the YAML config."""
        if field_name in self._config_data:
            return self._config_data[field_name], field_name, False
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._config_data


class BuildReqsConfig(BaseSettings):
    """Root configuration object.

    The requirement list and tool minimum versions are fixed in code and
    intentionally not configurable.
    """

    model_config = SettingsConfigDict(
        env_prefix="BUILDREQS_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    output: OutputConfig = Field(default_factory=OutputConfig)
    verbosity: Literal["error", "warning", "info", "debug"] = "warning"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize the order of settings sources.

        Priority (highest to lowest):
        1. Init arguments
        2. Environment variables (BUILDREQS_*)
        3. Project YAML config (./buildreqs.yaml or --config path)
        4. User YAML config (~/.config/buildreqs/config.yaml)
        5. Field defaults
        """
        project_config_path = (
            _active_project_config_path or get_project_config_path()
        )
        return (
            init_settings,
            env_settings,
            YamlConfigSource(settings_cls, project_config_path),
            YamlConfigSource(settings_cls, get_user_config_path()),
        )



def get_user_config_path() -> Path:
    """Get the path to the user configuration file.

    Returns:
        Path to ~/.config/buildreqs/config.yaml
    """
    return Path.home() / ".config" / "buildreqs" / "config.yaml"


def get_project_config_path() -> Path:
    return Path.cwd() / PROJECT_CONFIG_FILENAME


def load_config(config_path: Path | None = None) -> BuildReqsConfig:
    """Load configuration with hierarchy: defaults -> user -> project -> env.

    Args:
        config_path: Optional path to project config file.
            Defaults to ./buildreqs.yaml

    Returns:
        BuildReqsConfig instance with merged configuration.

    Raises:
        ConfigError: If configuration is invalid.
    """
    global _active_project_config_path

    if config_path is None:
        config_path = get_project_config_path()

    if not config_path.exists():
        logger.info("No project configuration found, using defaults.")

    _active_project_config_path = config_path
    try:
        return BuildReqsConfig()
    except ValidationError as e:
        first_error = e.errors()[0]
        field = ".".join(str(loc) for loc in first_error["loc"])
        raise ConfigError(
            message=f"Invalid configuration: {first_error['msg']}",
            field=field,
            value=first_error.get("input"),
        ) from e
    finally:
        _active_project_config_path = None
