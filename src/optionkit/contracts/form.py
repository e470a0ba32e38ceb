# src/optionkit/contracts/form.py
"""Form descriptor handed to the back-office options renderer."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class FormDescriptor:
    """One options form: rendered fields plus the submit button label.

    ``fields`` is keyed by persisted option name, so the renderer reads and
    writes the same keys the configuration store uses.
    """

    fields: dict[str, dict[str, Any]] = field(default_factory=dict)
    submit_title: str = "Save"

    def to_params(self) -> list[dict[str, Any]]:
        """Export in the renderer's ``options`` shape (a list of forms)."""
        return [
            {
                "fields": self.fields,
                "submit": {"title": self.submit_title},
            }
        ]
