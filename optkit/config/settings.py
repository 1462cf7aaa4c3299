"""
settings.py

This module provides application configuration management for optkit.

Features:
- Centralized application configuration using Pydantic settings
- Environment overrides with the OPTKIT_ prefix
- Optional JSON config file in the user configuration directory

Usage:
Import appsettings for application configuration values.
"""

from pathlib import Path
from typing import Final
from appdirs import user_config_dir
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

# Set up the configuration directory and file using appdirs
CONFIG_DIR: Final[Path] = Path(user_config_dir("optkit", ""))
CONFIG_FILE: Final[Path] = CONFIG_DIR / "config.json"


class App(BaseSettings):
    """
    Application settings model.

    Settings are resolved in priority order: constructor arguments,
    environment variables with the OPTKIT_ prefix, then the JSON config file.

    Attributes:
        beQuiet: Suppress detailed logging output
        logLevel: Loguru level used by LOG when none is given
        detailedOutput: Show the compiled option table alongside parse results
        jsonIndent: Indentation used for --json output
        timestampFormat: date_get() format for generated file names
        timestampFormatFine: Fallback format when the coarse name is taken
        overwritePrompt: Ask before handing out an existing path
    """

    beQuiet: bool = True
    logLevel: str = "DEBUG"
    detailedOutput: bool = False
    jsonIndent: int = 2

    timestampFormat: str = "ymd.HM"
    timestampFormatFine: str = "ymd.HMS"

    overwritePrompt: bool = True

    model_config = SettingsConfigDict(
        env_prefix="OPTKIT_",  # Environment variables with this prefix override settings
        case_sensitive=False,  # Allow case-insensitive environment variables
        extra="allow",  # Allow additional attributes not defined in the model
        json_file=CONFIG_FILE,
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
        return (
            init_settings,
            env_settings,
            JsonConfigSettingsSource(settings_cls),
        )


# Create the application settings instance
appsettings: Final[App] = App()
