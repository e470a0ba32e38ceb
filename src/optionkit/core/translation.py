# src/optionkit/core/translation.py
"""Translatable strings and the catalog-backed translator.

Option titles, descriptions and choice labels are a single string, a mapping
of labels keyed by the submitted value, or an ordered list of rows (a select
field with an ``identifier``). The shapes are modelled as one tagged variant:

    Translatable = Leaf(text) | Group({key: Translatable}) | Rows((Translatable, ...))

and resolved by a single recursive function. Group keys are never translated,
only the labels they point to.

Example:
    translated = resolve(
        to_translatable({"1": "Yes", "0": "No"}),
        lambda text: catalog.translate(text, "banner"),
    )
    # {"1": "Oui", "0": "Non"}
"""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Self

import yaml

from optionkit.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Leaf:
    """A single translatable string."""

    text: str


@dataclass(frozen=True)
class Group:
    """A mapping of translatables. Keys are preserved as-is."""

    items: Mapping[Any, "Translatable"]


@dataclass(frozen=True)
class Rows:
    """Ordered translatables, e.g. the rows of a select field."""

    items: tuple["Translatable", ...]


Translatable = Leaf | Group | Rows


def to_translatable(value: str | Mapping[Any, Any] | Sequence[Any]) -> Translatable:
    """Lift a string, or nested mappings and lists of strings, into a Translatable.

    Raises:
        TypeError: If a leaf is not a string, mapping or list
    """
    if isinstance(value, str):
        return Leaf(value)
    if isinstance(value, Mapping):
        return Group({key: to_translatable(item) for key, item in value.items()})
    if isinstance(value, list | tuple):
        return Rows(tuple(to_translatable(item) for item in value))
    raise TypeError(
        f"Cannot translate value of type {type(value).__name__}: {value!r}"
    )


def resolve(value: Translatable, translate: Callable[[str], str]) -> Any:
    """Resolve a Translatable into plain strings.

    Args:
        value: Leaf, Group or Rows to resolve
        translate: Function applied to every leaf string

    Returns:
        The translated string for a Leaf, a dict with the same keys for a Group,
        or a list in the same order for Rows
    """
    match value:
        case Leaf(text=text):
            return translate(text)
        case Group(items=items):
            return {key: resolve(item, translate) for key, item in items.items()}
        case Rows(items=rows):
            return [resolve(item, translate) for item in rows]
        case _:
            raise TypeError(f"Not a Translatable: {value!r}")


@dataclass
class CatalogTranslator:
    """Translator backed by per-domain message catalogs.

    Catalog shape is ``{domain: {source_text: translated_text}}``; a module
    translates within its own domain (the module name). Missing entries fall
    back to the source text.
    """

    catalogs: dict[str, dict[str, str]] = field(default_factory=dict)
    locale: str = "en"

    def translate(self, text: str, domain: str) -> str:
        """Translate ``text`` within ``domain``."""
        catalog = self.catalogs.get(domain)
        if catalog is None:
            return text
        translated = catalog.get(text)
        if translated is None:
            logger.debug("Missing translation", domain=domain, text=text, locale=self.locale)
            return text
        return translated

    @classmethod
    def from_yaml(cls, path: Path, *, locale: str = "en") -> Self:
        """Load catalogs from a YAML file.

        Raises:
            FileNotFoundError: If the catalog file doesn't exist
            ValueError: If the file is not a mapping of mappings of strings
        """
        if not path.exists():
            raise FileNotFoundError(f"Translation catalog not found: {path}")

        with path.open(encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        if not isinstance(raw, dict):
            raise ValueError(f"Translation catalog {path} must be a mapping of domains")

        catalogs: dict[str, dict[str, str]] = {}
        for domain, messages in raw.items():
            if not isinstance(messages, dict):
                raise ValueError(
                    f"Translation catalog {path}: domain '{domain}' must map "
                    "source strings to translations"
                )
            catalogs[str(domain)] = {str(k): str(v) for k, v in messages.items()}

        return cls(catalogs=catalogs, locale=locale)
