# src/optionkit/cli.py
"""optionkit Command Line Interface.

Entry point for the optionkit CLI tool. Every command loads a settings
file naming the module to manage and the configuration store to use.
"""

import json
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import typer
import yaml
from pydantic import ValidationError

from optionkit import __version__
from optionkit.core.config import OptionkitSettings, load_settings
from optionkit.core.logging import configure_logging
from optionkit.core.store import SqlConfigurationStore
from optionkit.core.translation import CatalogTranslator
from optionkit.plugins.config_base import PluginConfigError
from optionkit.plugins.configuration import CONFIGURE_PARAMETER, OptionsConfiguration
from optionkit.plugins.context import AdminContext, QueryParameters
from optionkit.plugins.discovery import ModuleLoadError, get_module_description, load_module_class
from optionkit.plugins.manager import HookManager

app = typer.Typer(
    name="optionkit",
    help="optionkit: manage module admin options in the configuration store.",
    no_args_is_help=True,
)

SETTINGS_OPTION = typer.Option(
    ...,
    "--settings",
    "-s",
    help="Path to settings YAML file.",
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"optionkit version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """optionkit: manage module admin options in the configuration store."""
    pass


def _load_config(settings: str) -> OptionkitSettings:
    """Load settings, reporting problems on stderr and exiting 1."""
    try:
        return load_settings(Path(settings))
    except FileNotFoundError:
        typer.echo(f"Error: Settings file not found: {settings}", err=True)
        raise typer.Exit(1) from None
    except ValidationError as e:
        typer.echo("Configuration errors:", err=True)
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            typer.echo(f"  - {loc}: {error['msg']}", err=True)
        raise typer.Exit(1) from None


@contextmanager
def _open_configuration(
    settings: str, *, on_configuration_page: bool = False
) -> Iterator[OptionsConfiguration]:
    """Wire the configured module to its store for the duration of a command.

    With ``on_configuration_page`` the admin context looks like a request for
    the module's own configuration page.
    """
    config = _load_config(settings)
    configure_logging(config.logging.level, json_output=config.logging.json_output)

    try:
        module_cls = load_module_class(config.module)
        translator = None
        if config.translations.catalog is not None:
            translator = CatalogTranslator.from_yaml(
                Path(config.translations.catalog), locale=config.translations.locale
            )
        module = module_cls(translator)
    except (ModuleLoadError, FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    query: dict[str, str] = (
        {CONFIGURE_PARAMETER: module.name} if on_configuration_page else {}
    )
    context = AdminContext(
        current_index=config.admin.current_index,
        request=QueryParameters(query=query),
    )

    with SqlConfigurationStore.from_url(config.database.url) as store:
        try:
            configuration = OptionsConfiguration(module, store=store, context=context)
        except PluginConfigError as e:
            typer.echo(f"Invalid options for module '{module.name}': {e}", err=True)
            raise typer.Exit(1) from None
        yield configuration


def _require_option(configuration: OptionsConfiguration, option: str) -> None:
    if option not in configuration.schema:
        typer.echo(
            f"Error: Unknown option '{option}' for module '{configuration.module.name}'. "
            f"Available: {', '.join(configuration.option_keys)}",
            err=True,
        )
        raise typer.Exit(1)


@app.command()
def options(settings: str = SETTINGS_OPTION) -> None:
    """List the module's options with persisted names and current values."""
    with _open_configuration(settings) as configuration:
        keys = configuration.option_keys
        if not keys:
            typer.echo(f"Module '{configuration.module.name}' declares no options.")
            return

        typer.echo(get_module_description(type(configuration.module)))
        values = configuration.get_options_values(keys)
        for key in keys:
            name = configuration.get_option_name(key)
            default = configuration.schema.default_for(key)
            default_text = "" if default is None else f" (default: {default!r})"
            typer.echo(f"{key}: {name} = {values[key.lower()]!r}{default_text}")


@app.command()
def get(
    option: str = typer.Argument(..., help="Option key."),
    settings: str = SETTINGS_OPTION,
) -> None:
    """Print an option's stored value."""
    with _open_configuration(settings) as configuration:
        _require_option(configuration, option)
        typer.echo(configuration.get_option_value(option))


@app.command("set")
def set_value(
    option: str = typer.Argument(..., help="Option key."),
    value: str = typer.Argument(..., help="Value to store."),
    settings: str = SETTINGS_OPTION,
) -> None:
    """Store a value for an option."""
    with _open_configuration(settings) as configuration:
        _require_option(configuration, option)
        if not configuration.set_option_value(option, value):
            typer.echo(f"Error: Could not save option '{option}'.", err=True)
            raise typer.Exit(1)
        typer.echo(f"Saved {configuration.get_option_name(option)}.")


@app.command()
def install(settings: str = SETTINGS_OPTION) -> None:
    """Write the declared default of every option."""
    with _open_configuration(settings) as configuration:
        if not configuration.set_options_default_values(configuration.option_keys):
            typer.echo("Error: Some option defaults could not be written.", err=True)
            raise typer.Exit(1)
        typer.echo(f"Installed defaults for module '{configuration.module.name}'.")


@app.command()
def uninstall(settings: str = SETTINGS_OPTION) -> None:
    """Remove the stored value of every option."""
    with _open_configuration(settings) as configuration:
        if not configuration.remove_options_values(configuration.option_keys):
            typer.echo("Error: Some option values could not be removed.", err=True)
            raise typer.Exit(1)
        typer.echo(f"Removed options of module '{configuration.module.name}'.")


@app.command()
def form(
    settings: str = SETTINGS_OPTION,
    output_format: str = typer.Option(
        "json",
        "--format",
        "-f",
        help="Output format: json or yaml.",
    ),
) -> None:
    """Print the options form parameters as built for the configuration page."""
    if output_format not in ("json", "yaml"):
        typer.echo(f"Error: Unknown format '{output_format}'. Use json or yaml.", err=True)
        raise typer.Exit(1)

    with _open_configuration(settings, on_configuration_page=True) as configuration:
        manager = HookManager()
        manager.register(configuration)
        params = manager.admin_options_form({})

    if output_format == "json":
        typer.echo(json.dumps(params, indent=2, ensure_ascii=False))
    else:
        typer.echo(yaml.safe_dump(params, sort_keys=False, allow_unicode=True))


if __name__ == "__main__":
    app()
