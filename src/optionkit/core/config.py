# src/optionkit/core/config.py
"""
Configuration schema and loading for the optionkit CLI.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Settings are frozen (immutable) after construction.
"""

import re
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

# "package.module:ClassName"
_IMPORT_PATH_PATTERN = re.compile(
    r"^[a-zA-Z_][a-zA-Z0-9_]*(\.[a-zA-Z_][a-zA-Z0-9_]*)*:[a-zA-Z_][a-zA-Z0-9_]*$"
)


class DatabaseSettings(BaseModel):
    """Configuration store connection."""

    model_config = {"frozen": True}

    url: str = Field(
        default="sqlite:///./optionkit.db",
        description="SQLAlchemy database URL",
    )


class AdminSettings(BaseModel):
    """Back-office request context."""

    model_config = {"frozen": True}

    current_index: str = Field(
        default="index.php?controller=AdminModules",
        description="URL of the admin modules page; the configure parameter is appended to it",
    )


class TranslationSettings(BaseModel):
    """Translation catalog for option labels."""

    model_config = {"frozen": True}

    catalog: str | None = Field(
        default=None,
        description="Path to a YAML catalog {domain: {source: translation}}",
    )
    locale: str = Field(default="en", description="Locale of the catalog")


class LoggingSettings(BaseModel):
    """Logging output."""

    model_config = {"frozen": True}

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Minimum log level",
    )
    json_output: bool = Field(default=False, description="Emit JSON lines")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v


class OptionkitSettings(BaseModel):
    """Top-level optionkit configuration.

    Names the module whose options are managed and the services the
    adapter is wired to. Validated and frozen after construction.
    """

    model_config = {"frozen": True}

    module: str = Field(
        description="Import path of the module class, 'package.module:ClassName'",
    )
    database: DatabaseSettings = Field(
        default_factory=DatabaseSettings,
        description="Configuration store connection",
    )
    admin: AdminSettings = Field(
        default_factory=AdminSettings,
        description="Back-office request context",
    )
    translations: TranslationSettings = Field(
        default_factory=TranslationSettings,
        description="Translation catalog",
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging output",
    )

    @field_validator("module")
    @classmethod
    def validate_module_path(cls, v: str) -> str:
        """Module must be a 'package.module:ClassName' import path."""
        if not _IMPORT_PATH_PATTERN.match(v):
            raise ValueError(
                f"module '{v}' must be an import path like 'package.module:ClassName'"
            )
        return v


def load_settings(config_path: Path) -> OptionkitSettings:
    """Load settings from YAML file with environment variable overrides.

    Uses Dynaconf for multi-source loading with precedence:
    1. Environment variables (OPTIONKIT_*) - highest priority
    2. Config file (settings.yaml)
    3. Defaults from Pydantic schema - lowest priority

    Environment variable format: OPTIONKIT_DATABASE__URL for nested keys.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated OptionkitSettings instance

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config file doesn't exist
    """
    from dynaconf import Dynaconf

    # Dynaconf silently accepts missing files
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix="OPTIONKIT",
        settings_files=[str(config_path)],
        environments=False,
        load_dotenv=False,
        merge_enabled=True,
    )

    # Dynaconf returns uppercase top-level keys and its own bookkeeping keys
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config = {
        k.lower(): v
        for k, v in dynaconf_settings.as_dict().items()
        if k not in internal_keys
    }
    return OptionkitSettings(**raw_config)
