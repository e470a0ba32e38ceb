# src/optionkit/plugins/__init__.py
"""Module options: schema, adapter and back-office hooks via pluggy.

- Schema: typed OPTIONS declarations (OptionSpec, OptionSchema)
- Base class: BaseModule for modules exposing options
- Protocols: back-office services the adapter delegates to
- Context: the current admin request
- Configuration: OptionsConfiguration, the adapter itself
- Manager: hook registration and dispatch
- Hookspecs: pluggy hook definitions
"""

# Base class
from optionkit.plugins.base import BaseModule

# Config base classes
from optionkit.plugins.config_base import PluginConfig, PluginConfigError

# Adapter
from optionkit.plugins.configuration import CONFIGURE_PARAMETER, OptionsConfiguration

# Context
from optionkit.plugins.context import AdminContext, QueryParameters

# Discovery
from optionkit.plugins.discovery import ModuleLoadError, load_module_class

# Hookspecs
from optionkit.plugins.hookspecs import hookimpl, hookspec

# Manager
from optionkit.plugins.manager import HookManager

# Protocols
from optionkit.plugins.protocols import (
    AdminController,
    ConfigurationStore,
    ModuleProtocol,
    RequestParameters,
    Translator,
)

# Schema
from optionkit.plugins.schema import OptionSchema, OptionSpec

__all__ = [  # Grouped by category for readability
    # Adapter
    "CONFIGURE_PARAMETER",
    "OptionsConfiguration",
    # Base class
    "BaseModule",
    # Config base classes
    "PluginConfig",
    "PluginConfigError",
    # Context
    "AdminContext",
    "QueryParameters",
    # Discovery
    "ModuleLoadError",
    "load_module_class",
    # Manager
    "HookManager",
    # Hookspecs
    "hookimpl",
    "hookspec",
    # Protocols
    "AdminController",
    "ConfigurationStore",
    "ModuleProtocol",
    "RequestParameters",
    "Translator",
    # Schema
    "OptionSchema",
    "OptionSpec",
]
