# src/optionkit/core/store/schema.py
"""SQLAlchemy table definitions for the configuration store.

Uses SQLAlchemy Core (not ORM). One row per persisted option name, the same
flat key/value layout the back office keeps for every module.
"""

from sqlalchemy import Column, DateTime, Integer, MetaData, String, Table, Text

metadata = MetaData()

configuration_table = Table(
    "configuration",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(254), nullable=False, unique=True),
    Column("value", Text),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)
