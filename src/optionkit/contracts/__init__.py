# src/optionkit/contracts/__init__.py
"""Shared contracts between the adapter and the back office."""

from optionkit.contracts.form import FormDescriptor

__all__ = [
    "FormDescriptor",
]
