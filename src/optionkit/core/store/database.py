# src/optionkit/core/store/database.py
"""SQL-backed configuration store.

Handles SQLite (development) and PostgreSQL (production) backends.
Implements the ConfigurationStore protocol: values are plain strings keyed
by persisted option name, a missing name reads as "" and writes/deletes
report success as a boolean.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from typing import Any, Self

from sqlalchemy import Connection, create_engine, event, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from optionkit.core.logging import get_logger
from optionkit.core.store.schema import configuration_table, metadata

logger = get_logger(__name__)


def _now() -> datetime:
    return datetime.now(UTC)


def _enable_sqlite_wal(dbapi_connection: Any, connection_record: object) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.close()


class SqlConfigurationStore:
    """Configuration store over a SQLAlchemy engine.

    Use as a context manager, or call close() to dispose of the engine.
    """

    def __init__(self, url: str, *, create_tables: bool = True) -> None:
        """Connect to ``url``, creating the ``configuration`` table if asked.

        Args:
            url: SQLAlchemy URL, e.g. "sqlite:///./optionkit.db"
            create_tables: False when the table is managed elsewhere
        """
        self.url = url
        self._engine: Engine | None = create_engine(url, echo=False)
        if url.startswith("sqlite"):
            event.listen(self._engine, "connect", _enable_sqlite_wal)
        if create_tables:
            metadata.create_all(self._engine)

    @classmethod
    def in_memory(cls) -> Self:
        """In-memory SQLite store for tests."""
        return cls("sqlite:///:memory:")

    @classmethod
    def from_url(cls, url: str, *, create_tables: bool = True) -> Self:
        return cls(url, create_tables=create_tables)

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("Configuration store is closed")
        return self._engine

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @contextmanager
    def connection(self) -> Iterator[Connection]:
        """Get a connection inside a transaction (commit on exit, rollback on error)."""
        with self.engine.begin() as conn:
            yield conn

    # === ConfigurationStore protocol ===

    def get(self, name: str) -> str:
        """Read the value stored under ``name``; "" when absent."""
        with self.connection() as conn:
            value = conn.execute(
                select(configuration_table.c.value).where(
                    configuration_table.c.name == name
                )
            ).scalar_one_or_none()
        return "" if value is None else value

    def update_value(self, name: str, value: str) -> bool:
        """Insert or overwrite the value stored under ``name``.

        Returns:
            True if the value was written, False if the database rejected it
        """
        now = _now()
        try:
            with self.connection() as conn:
                existing = conn.execute(
                    select(configuration_table.c.id).where(
                        configuration_table.c.name == name
                    )
                ).scalar_one_or_none()
                if existing is None:
                    conn.execute(
                        configuration_table.insert().values(
                            name=name, value=value, created_at=now, updated_at=now
                        )
                    )
                else:
                    conn.execute(
                        configuration_table.update()
                        .where(configuration_table.c.id == existing)
                        .values(value=value, updated_at=now)
                    )
        except SQLAlchemyError:
            logger.error("Configuration write failed", name=name, exc_info=True)
            return False

        logger.debug("Configuration value written", name=name)
        return True

    def delete_by_name(self, name: str) -> bool:
        """Delete the value stored under ``name``.

        Deleting a name that was never stored succeeds: the post-condition
        (no value under ``name``) holds.

        Returns:
            True unless the database rejected the delete
        """
        try:
            with self.connection() as conn:
                result = conn.execute(
                    configuration_table.delete().where(
                        configuration_table.c.name == name
                    )
                )
        except SQLAlchemyError:
            logger.error("Configuration delete failed", name=name, exc_info=True)
            return False

        logger.debug("Configuration value deleted", name=name, rows=result.rowcount)
        return True

    def names(self, prefix: str = "") -> list[str]:
        """List stored names, optionally restricted to a prefix."""
        query = select(configuration_table.c.name).order_by(configuration_table.c.name)
        if prefix:
            query = query.where(configuration_table.c.name.startswith(prefix, autoescape=True))
        with self.connection() as conn:
            return list(conn.execute(query).scalars())
