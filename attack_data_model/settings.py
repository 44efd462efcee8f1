"""Validation settings.

Settings are read, by order of precedence, from:
    1. keyword arguments given to ``ValidationSettings``
    2. environment variables prefixed with ``ATTACK_DATA_MODEL_``
    3. a YAML file, named by ``ATTACK_DATA_MODEL_CONFIG_FILE`` or given to ``load_settings``
    4. default values
"""

import os
from functools import cache
from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from attack_data_model.exceptions import ConfigValidationError

CONFIG_FILE_ENV_VAR = "ATTACK_DATA_MODEL_CONFIG_FILE"


class ValidationSettings(BaseSettings):
    """Process-wide settings of the validation core."""

    model_config = SettingsConfigDict(
        env_prefix="ATTACK_DATA_MODEL_",
        extra="ignore",
        frozen=True,
        yaml_file=None,
    )

    log_level: Literal["debug", "info", "warn", "warning", "error"] = Field(
        default="error",
        description="The minimum level of logs to display.",
    )
    json_logging: bool = Field(
        default=True,
        description="Whether logs are emitted as JSON documents.",
    )
    abort_early: bool = Field(
        default=False,
        description="Default consumption mode of the registry functions: "
        "keep only the first issue found instead of collecting them all.",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Read keyword arguments, then environment variables, then the YAML file."""
        yaml_file = settings_cls.model_config.get("yaml_file")
        if yaml_file and Path(str(yaml_file)).is_file():
            return (
                init_settings,
                env_settings,
                YamlConfigSettingsSource(settings_cls),
            )
        return (init_settings, env_settings)


def load_settings(yaml_file: str | Path | None = None) -> ValidationSettings:
    """Load the settings, optionally from a YAML file.

    Raises:
        ConfigValidationError: If a setting has an invalid value.

    """
    yaml_file = yaml_file or os.environ.get(CONFIG_FILE_ENV_VAR)

    class _FileValidationSettings(ValidationSettings):
        model_config = SettingsConfigDict(yaml_file=yaml_file)

    try:
        return _FileValidationSettings()
    except ValidationError as err:
        raise ConfigValidationError("Error validating validation settings.") from err


@cache
def get_settings() -> ValidationSettings:
    """Return the settings, loaded once for the process lifetime."""
    return load_settings()
