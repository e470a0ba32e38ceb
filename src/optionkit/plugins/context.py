# src/optionkit/plugins/context.py
"""Admin request context.

The AdminContext carries what the adapter needs from the current back-office
request: the URL of the modules page, the request parameters, and the
controller that renders the options form.

Example:
    ctx = AdminContext(
        current_index="index.php?controller=AdminModules&token=abc",
        request=QueryParameters(query={"configure": "banner"}),
        controller=controller,
    )
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from optionkit.plugins.protocols import AdminController, RequestParameters


@dataclass(frozen=True)
class QueryParameters:
    """Request parameters from the query string and the submitted form.

    Form values take precedence over query values with the same key.
    """

    query: Mapping[str, Any] = field(default_factory=dict)
    form: Mapping[str, Any] = field(default_factory=dict)

    def get_value(self, key: str, default: str = "") -> str:
        if key in self.form:
            return str(self.form[key])
        if key in self.query:
            return str(self.query[key])
        return default


class _NoController:
    """Controller stand-in for contexts that never render (CLI, tests)."""

    def render_options(self) -> str:
        raise RuntimeError("No admin controller is attached to this context")


@dataclass(frozen=True)
class AdminContext:
    """Context of one back-office request."""

    current_index: str
    request: "RequestParameters" = field(default_factory=QueryParameters)
    controller: "AdminController" = field(default_factory=_NoController)

    def configuration_page_url(self, module_name: str) -> str:
        """URL of ``module_name``'s configuration page."""
        return f"{self.current_index}&configure={module_name}"
