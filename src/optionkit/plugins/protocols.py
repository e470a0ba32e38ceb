# src/optionkit/plugins/protocols.py
"""Protocols for the back-office services the adapter delegates to.

These protocols define what the adapter needs from its surroundings.
They're used for type checking and for substituting test doubles; the
adapter never reaches for a global service.

Services:
- ConfigurationStore: persistent key/value store for option values
- Translator: per-module translation of labels
- RequestParameters: access to the current request's parameters
- AdminController: renders the options page of the current module
- ModuleProtocol: the module whose options are exposed
"""

from typing import Any, ClassVar, Protocol, runtime_checkable


@runtime_checkable
class ConfigurationStore(Protocol):
    """Protocol for the configuration persistence service.

    Keys are persisted option names. Values are strings.
    """

    def get(self, name: str) -> str:
        """Read a value.

        Returns:
            The stored value, or "" if nothing is stored under ``name``
        """
        ...

    def update_value(self, name: str, value: str) -> bool:
        """Create or overwrite a value.

        Returns:
            True if the value was written
        """
        ...

    def delete_by_name(self, name: str) -> bool:
        """Delete a value.

        Returns:
            True if the delete succeeded
        """
        ...


@runtime_checkable
class Translator(Protocol):
    """Protocol for the translation service."""

    def translate(self, text: str, domain: str) -> str:
        """Translate ``text`` within a module's ``domain``."""
        ...


@runtime_checkable
class RequestParameters(Protocol):
    """Protocol for reading parameters of the current admin request."""

    def get_value(self, key: str, default: str = "") -> str:
        """Return the parameter ``key``, or ``default`` when absent."""
        ...


@runtime_checkable
class AdminController(Protocol):
    """Protocol for the controller serving the module options page."""

    def render_options(self) -> str:
        """Render the options form of the current page."""
        ...


@runtime_checkable
class ModuleProtocol(Protocol):
    """Protocol for modules exposing admin options.

    Example:
        class BannerModule(BaseModule):
            name = "banner"
            OPTIONS = {"position": {"title": "Position", "default": "top"}}

            def get_option_list(self, option: str) -> dict[str, str]:
                return {"top": "Top", "bottom": "Bottom"}
    """

    name: str
    OPTIONS: ClassVar[dict[str, dict[str, Any]]]

    def l(self, text: str) -> str:  # noqa: E743
        """Translate ``text`` in this module's domain."""
        ...

    def get_option_list(self, option: str) -> dict[Any, Any]:
        """Compute the ``list`` of an option that declares none."""
        ...

    def get_option_choices(self, option: str) -> dict[Any, Any]:
        """Compute the ``choices`` of an option that declares none."""
        ...
