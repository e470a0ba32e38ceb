# src/optionkit/plugins/base.py
"""Base class for modules exposing admin options.

Modules subclass BaseModule, set ``name`` and ``OPTIONS``, and override
get_option_list()/get_option_choices() for options whose labels are only
known at render time.
"""

from typing import Any, ClassVar

from optionkit.plugins.protocols import Translator


class BaseModule:
    """Base class for modules.

    Usage:
        class BannerModule(BaseModule):
            name = "banner"
            version = "1.2.0"
            OPTIONS = {
                "position": {"title": "Position", "type": "select", "default": "top"},
            }

            def get_option_list(self, option: str) -> dict[str, str]:
                if option == "position":
                    return {"top": self.l("Top"), "bottom": self.l("Bottom")}
                return {}
    """

    name: str
    version: str = "1.0.0"
    OPTIONS: ClassVar[dict[str, dict[str, Any]]] = {}

    def __init__(self, translator: Translator | None = None) -> None:
        self._translator = translator

    def l(self, text: str) -> str:  # noqa: E743
        """Translate ``text`` in this module's domain (identity without a translator)."""
        if self._translator is None:
            return text
        return self._translator.translate(text, self.name)

    def get_option_list(self, option: str) -> dict[Any, Any]:
        """Labels for ``option``'s ``list`` when it declares none."""
        return {}

    def get_option_choices(self, option: str) -> dict[Any, Any]:
        """Labels for ``option``'s ``choices`` when it declares none."""
        return {}
