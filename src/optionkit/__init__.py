# src/optionkit/__init__.py
"""optionkit: module admin options bridged to a back-office form and config store."""

__version__ = "0.1.0"
