# src/optionkit/plugins/schema.py
"""Typed option schema declared by a module.

A module declares its options as a static mapping:

    OPTIONS = {
        "position": {
            "title": "Banner position",
            "desc": "Where the banner is displayed",
            "type": "select",
            "default": "top",
            "list": {"top": "Top", "bottom": "Bottom"},
        },
    }

OptionSchema.from_dict() validates that mapping once, at load time. Fields
the adapter does not interpret (type, cast, validation, size, ...) are kept
and handed to the renderer unchanged.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Self

from pydantic import Field, field_validator

from optionkit.core.translation import to_translatable
from optionkit.plugins.config_base import PluginConfig, PluginConfigError


class OptionSpec(PluginConfig):
    """Declaration of a single option.

    ``list`` and ``choices`` map submitted values to labels, either as a
    mapping or as a list of rows (selects with an ``identifier``). When they
    are empty the module computes them at render time instead. Numeric and
    boolean defaults are stored the way the host casts scalars: 5 and 5.0
    as "5", True as "1".
    """

    model_config = {"extra": "allow", "frozen": True}

    title: str | None = None
    desc: str | None = None
    default: str | None = None
    list_: dict[Any, Any] | list[Any] | None = Field(default=None, alias="list")
    choices: dict[Any, Any] | list[Any] | None = None

    @field_validator("default", mode="before")
    @classmethod
    def coerce_default(cls, v: Any) -> Any:
        """Store defaults as the strings the configuration store holds."""
        if isinstance(v, bool):
            return "1" if v else "0"
        if isinstance(v, float) and v.is_integer():
            return str(int(v))
        if isinstance(v, int | float):
            return str(v)
        return v

    @field_validator("list_", "choices")
    @classmethod
    def validate_labels(
        cls, v: dict[Any, Any] | list[Any] | None
    ) -> dict[Any, Any] | list[Any] | None:
        """Labels must be strings, or nested mappings and lists of strings."""
        if v is None:
            return v
        try:
            to_translatable(v)
        except TypeError as e:
            raise ValueError(str(e)) from e
        return v

    @property
    def has_default(self) -> bool:
        return self.default is not None

    def field_params(self) -> dict[str, Any]:
        """Declared fields keyed by their declared names, extras included."""
        fields = type(self).model_fields
        declared = {
            fields[name].alias or name: getattr(self, name)
            for name in self.model_fields_set
            if name in fields
        }
        return {**declared, **(self.model_extra or {})}


@dataclass(frozen=True)
class OptionSchema:
    """Immutable mapping of option key to OptionSpec.

    Keys are unique case-insensitively: two keys differing only in case
    would be persisted under the same name.
    """

    options: Mapping[str, OptionSpec]

    @classmethod
    def from_dict(cls, raw: Mapping[str, Mapping[str, Any]]) -> Self:
        """Validate a module's OPTIONS mapping.

        Raises:
            PluginConfigError: If a spec is invalid or two keys collide
        """
        seen: dict[str, str] = {}
        options: dict[str, OptionSpec] = {}
        for key, spec in raw.items():
            if not isinstance(key, str) or not key:
                raise PluginConfigError(f"Option keys must be non-empty strings, got {key!r}")
            folded = key.lower()
            if folded in seen:
                raise PluginConfigError(
                    f"Duplicate option key: '{key}' collides with '{seen[folded]}' "
                    "(option keys are case-insensitive)"
                )
            seen[folded] = key
            if not isinstance(spec, Mapping):
                raise PluginConfigError(
                    f"Option '{key}' must be a mapping of field parameters, "
                    f"got {type(spec).__name__}"
                )
            try:
                options[key] = OptionSpec.from_dict(dict(spec))
            except PluginConfigError as e:
                raise PluginConfigError(f"Invalid option '{key}': {e}") from e

        return cls(options=MappingProxyType(options))

    def keys(self) -> list[str]:
        """Option keys in declaration order."""
        return list(self.options)

    def get(self, key: str) -> OptionSpec | None:
        return self.options.get(key)

    def default_for(self, key: str) -> str | None:
        """Declared default for ``key``; None when absent or undeclared."""
        spec = self.options.get(key)
        if spec is None:
            return None
        return spec.default

    def items(self) -> Iterator[tuple[str, OptionSpec]]:
        return iter(self.options.items())

    def __getitem__(self, key: str) -> OptionSpec:
        return self.options[key]

    def __contains__(self, key: object) -> bool:
        return key in self.options

    def __iter__(self) -> Iterator[str]:
        return iter(self.options)

    def __len__(self) -> int:
        return len(self.options)
