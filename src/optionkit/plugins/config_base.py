# src/optionkit/plugins/config_base.py
"""Base classes for typed module configuration.

Provides the common base that module-facing models inherit from:
- Strict validation by default (reject unknown fields)
- Factory method with clear error messages

Example usage:
    class BannerSettings(PluginConfig):
        position: str = "top"

    cfg = BannerSettings.from_dict(raw)
"""

from typing import Any, Self

from pydantic import BaseModel, ValidationError


class PluginConfigError(Exception):
    """Raised when module configuration is invalid."""

    pass


class PluginConfig(BaseModel):
    """Base class for typed module configuration.

    Subclasses that must carry through unknown keys override
    ``model_config`` with ``extra="allow"``.
    """

    model_config = {"extra": "forbid"}

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> Self:
        """Create config from dict with clear error on validation failure.

        Args:
            config: Dictionary of configuration values.

        Returns:
            Validated configuration instance.

        Raises:
            PluginConfigError: If configuration is invalid.
        """
        try:
            return cls.model_validate(config)
        except ValidationError as e:
            raise PluginConfigError(
                f"Invalid configuration for {cls.__name__}: {e}"
            ) from e
