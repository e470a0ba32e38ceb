# src/optionkit/plugins/manager.py
"""Hook manager for registering option adapters and dispatching admin hooks.

Uses pluggy for hook-based registration.
"""

from typing import Any

import pluggy

from optionkit.core.logging import get_logger
from optionkit.plugins.configuration import OptionsConfiguration
from optionkit.plugins.hookspecs import PROJECT_NAME, AdminOptionsSpec

logger = get_logger(__name__)


class HookManager:
    """Registers option adapters and dispatches back-office hooks.

    Persisted option names share one namespace across all modules, so
    registration rejects a module whose names collide with one already
    registered.

    Usage:
        manager = HookManager()
        manager.register(OptionsConfiguration(module, store=store, context=ctx))

        params: dict = {}
        manager.admin_options_form(params)
    """

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(AdminOptionsSpec)

        self._configurations: dict[str, OptionsConfiguration] = {}
        # persisted option name -> owning module name
        self._option_names: dict[str, str] = {}

    def register(self, configuration: OptionsConfiguration) -> None:
        """Register a module's options adapter.

        Raises:
            ValueError: If the module name is already registered, or one of its
                persisted option names is owned by another module
        """
        module_name = configuration.module.name
        if module_name in self._configurations:
            raise ValueError(f"Duplicate module name: '{module_name}'")

        names = configuration.get_options_names(configuration.option_keys)
        for name in names:
            owner = self._option_names.get(name)
            if owner is not None:
                raise ValueError(
                    f"Option name '{name}' of module '{module_name}' is already "
                    f"used by module '{owner}'"
                )

        self._pm.register(configuration, name=module_name)
        self._configurations[module_name] = configuration
        for name in names:
            self._option_names[name] = module_name
        logger.debug("Registered module options", module=module_name, options=len(names))

    def unregister(self, module_name: str) -> None:
        """Remove a module's adapter.

        Raises:
            KeyError: If the module is not registered
        """
        configuration = self._configurations.pop(module_name)
        self._pm.unregister(configuration)
        self._option_names = {
            name: owner for name, owner in self._option_names.items() if owner != module_name
        }

    def get_configuration(self, module_name: str) -> OptionsConfiguration | None:
        """Get a registered adapter by module name."""
        return self._configurations.get(module_name)

    def get_configurations(self) -> list[OptionsConfiguration]:
        """Get all registered adapters."""
        return list(self._configurations.values())

    def admin_options_form(self, params: dict[str, Any]) -> dict[str, Any]:
        """Dispatch the admin options form hook.

        Args:
            params: Renderer parameters, mutated in place by implementations

        Returns:
            The same ``params`` object, for chaining
        """
        self._pm.hook.optionkit_admin_options_form(params=params)
        return params
