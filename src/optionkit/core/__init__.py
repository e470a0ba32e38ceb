# src/optionkit/core/__init__.py
"""Core infrastructure: Configuration, Logging, Store, Translation."""

from optionkit.core.config import (
    AdminSettings,
    DatabaseSettings,
    LoggingSettings,
    OptionkitSettings,
    TranslationSettings,
    load_settings,
)
from optionkit.core.logging import (
    configure_logging,
    get_logger,
)
from optionkit.core.store import SqlConfigurationStore
from optionkit.core.translation import (
    CatalogTranslator,
    Group,
    Leaf,
    Rows,
    Translatable,
    resolve,
    to_translatable,
)

__all__ = [
    "AdminSettings",
    "CatalogTranslator",
    "DatabaseSettings",
    "Group",
    "Leaf",
    "Rows",
    "LoggingSettings",
    "OptionkitSettings",
    "SqlConfigurationStore",
    "Translatable",
    "TranslationSettings",
    "configure_logging",
    "get_logger",
    "load_settings",
    "resolve",
    "to_translatable",
]
