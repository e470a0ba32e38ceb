# src/optionkit/plugins/configuration.py
"""Module options exposed to the back office.

OptionsConfiguration bridges a module's static option schema to
- the configuration store (read, write, default, delete values), and
- the modules page renderer (the options form and its submit URL).

Every operation delegates to an injected service. Store outcomes are
returned as booleans; a value that was never stored reads as "".

Usage:
    configuration = OptionsConfiguration(
        BannerModule(translator),
        store=SqlConfigurationStore.from_url(url),
        context=AdminContext(current_index=index, request=request),
    )
    configuration.set_options_default_values(configuration.option_keys)  # install
    configuration.get_option_value("position")                            # "top"
"""

from collections.abc import Iterable, Mapping
from typing import Any

from optionkit.contracts.form import FormDescriptor
from optionkit.core.logging import get_logger
from optionkit.core.translation import resolve, to_translatable
from optionkit.plugins.context import AdminContext
from optionkit.plugins.hookspecs import hookimpl
from optionkit.plugins.protocols import ConfigurationStore, ModuleProtocol
from optionkit.plugins.schema import OptionSchema, OptionSpec

logger = get_logger(__name__)

# Request parameter naming the module whose configuration page is open
CONFIGURE_PARAMETER = "configure"


class OptionsConfiguration:
    """Options of one module, persisted and rendered through host services."""

    def __init__(
        self,
        module: ModuleProtocol,
        *,
        store: ConfigurationStore,
        context: AdminContext,
        schema: OptionSchema | None = None,
    ) -> None:
        """Register module.

        Args:
            module: Module whose options are exposed
            store: Configuration store holding option values
            context: Current admin request context
            schema: Validated option schema; parsed from ``module.OPTIONS``
                when omitted

        Raises:
            PluginConfigError: If ``module.OPTIONS`` is not a valid schema
        """
        self.module = module
        self.store = store
        self.context = context
        self.schema = schema if schema is not None else OptionSchema.from_dict(module.OPTIONS)

    @property
    def option_keys(self) -> list[str]:
        """Declared option keys, in declaration order."""
        return self.schema.keys()

    def get_content(self) -> str:
        """Get configuration page content."""
        return self.context.controller.render_options()

    # === Values ===

    def get_option_value(self, option: str) -> str:
        """Get option value ("" when never stored)."""
        return self.store.get(self.get_option_name(option))

    def get_options_values(self, options: Iterable[str]) -> dict[str, str]:
        """Get options values keyed by lower-cased option key."""
        return {option.lower(): self.get_option_value(option) for option in options}

    def set_option_value(self, option: str, value: str) -> bool:
        """Save an option value."""
        return self.store.update_value(self.get_option_name(option), value)

    def set_option_default_value(self, option: str) -> bool:
        """Set option default value.

        An option without a declared default has nothing to write, which
        counts as success.
        """
        if not self.has_option_default_value(option):
            return True

        name = self.get_option_name(option)
        written = self.store.update_value(name, self.get_option_default_value(option))
        if not written:
            logger.warning("Option default not written", module=self.module.name, name=name)
        return written

    def set_options_default_values(self, options: Iterable[str]) -> bool:
        """Set options default values; True only if every one succeeded."""
        results = [self.set_option_default_value(option) for option in options]
        return all(results)

    def remove_option_value(self, option: str) -> bool:
        """Remove option value."""
        name = self.get_option_name(option)
        removed = self.store.delete_by_name(name)
        if not removed:
            logger.warning("Option value not removed", module=self.module.name, name=name)
        return removed

    def remove_options_values(self, options: Iterable[str]) -> bool:
        """Remove options values; True only if every one succeeded."""
        results = [self.remove_option_value(option) for option in options]
        return all(results)

    # === Admin hook ===

    @hookimpl(specname="optionkit_admin_options_form")
    def on_admin_options_form(self, params: dict[str, Any]) -> None:
        """Set configuration form options and action URL.

        Only acts on this module's configuration page; ``params`` is left
        untouched otherwise.
        """
        if not self.is_configuration_page():
            return

        logger.debug("Injecting options form", module=self.module.name)
        params["options"] = self.get_options_form(self.schema).to_params()
        params.setdefault("option_vars", {})["current"] = self.get_configuration_page_url()

    # === Form ===

    def get_options_form(self, schema: OptionSchema) -> FormDescriptor:
        return FormDescriptor(
            fields=self.get_options_fields(schema),
            submit_title=self.l("Save"),
        )

    def get_configuration_page_url(self) -> str:
        return self.context.configuration_page_url(self.module.name)

    def get_options_fields(self, schema: OptionSchema) -> dict[str, dict[str, Any]]:
        """Field parameters keyed by persisted option name."""
        return {
            self.get_option_name(option): self.get_option_field_params(spec, option)
            for option, spec in schema.items()
        }

    def get_options_names(self, options: Iterable[str]) -> list[str]:
        return [self.get_option_name(option) for option in options]

    def get_option_name(self, option: str) -> str:
        """Persisted name of an option: MODULENAME_OPTION."""
        return f"{self.module.name}_{option}".upper()

    def get_option_field_params(self, spec: OptionSpec, option: str) -> dict[str, Any]:
        """Get option field parameters.

        ``title`` and ``desc`` are translated. ``list`` and ``choices`` are
        translated when declared, and asked from the module when empty.
        Everything else is passed through.
        """
        params = spec.field_params()
        for key, value in params.items():
            match key:
                case "title" | "desc":
                    if value is not None:
                        params[key] = self.l(value)
                case "list":
                    params[key] = self.l(value) if value else self.module.get_option_list(option)
                case "choices":
                    params[key] = self.l(value) if value else self.module.get_option_choices(option)
        return params

    # === Schema lookups ===

    def get_option_default_value(self, option: str) -> str:
        default = self.schema.default_for(option)
        if default is None:
            raise KeyError(f"Option '{option}' of module '{self.module.name}' has no default")
        return default

    def has_option_default_value(self, option: str) -> bool:
        return self.schema.default_for(option) is not None

    # === Request ===

    def get_value(self, key: str, default: str = "") -> str:
        """Get a parameter of the current request."""
        return self.context.request.get_value(key, default)

    def is_configuration_page(self) -> bool:
        """Whether the module's configuration page is loading."""
        return self.module.name == self.get_value(CONFIGURE_PARAMETER)

    # === Translation ===

    def l(self, value: str | Mapping[Any, Any]) -> Any:  # noqa: E743
        """Get translated string(s); mapping keys are preserved."""
        return resolve(to_translatable(value), self.module.l)
