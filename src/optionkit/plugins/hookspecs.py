# src/optionkit/plugins/hookspecs.py
"""pluggy hook specifications for back-office hooks.

Option adapters implement these hooks to take part in admin page rendering.
The hook manager calls them while the modules page is built.

Usage (implementing a hook):
    from optionkit.plugins.hookspecs import hookimpl

    class MyConfiguration:
        @hookimpl(specname="optionkit_admin_options_form")
        def on_admin_options_form(self, params):
            params["options"] = [...]

Note: @hookspec defines the hook interface (done here).
      @hookimpl marks implementations of those hooks.
"""

from typing import Any

import pluggy

# Project name for pluggy
PROJECT_NAME = "optionkit"

# Hook specification marker
hookspec = pluggy.HookspecMarker(PROJECT_NAME)

# Hook implementation marker
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class AdminOptionsSpec:
    """Hook specifications for the admin modules options page."""

    @hookspec
    def optionkit_admin_options_form(self, params: dict[str, Any]) -> None:
        """Modify the options form parameters before they are rendered.

        Implementations mutate ``params`` in place. Every registered
        implementation is called; each decides from the request whether the
        page being built is its own.

        Args:
            params: Mutable renderer parameters (``options``, ``option_vars``)
        """
