# src/optionkit/core/store/__init__.py
"""Key/value configuration store backed by SQLAlchemy."""

from optionkit.core.store.database import SqlConfigurationStore
from optionkit.core.store.schema import configuration_table, metadata

__all__ = [
    "SqlConfigurationStore",
    "configuration_table",
    "metadata",
]
