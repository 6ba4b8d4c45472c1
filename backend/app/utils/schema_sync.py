"""Adds columns and indexes that models gained after their tables were first created."""

from __future__ import annotations

import logging

from sqlalchemy import Column, inspect, text
from sqlalchemy.engine import Dialect, Engine
from sqlalchemy.schema import CreateColumn, CreateIndex, MetaData

logger = logging.getLogger(__name__)


def _literal_default(column: Column, dialect: Dialect) -> str | None:
    """SQL literal for a scalar Python-side ``default=``, or ``None`` when there is none to render."""
    default = column.default
    if default is None or not getattr(default, "is_scalar", False):
        return None
    processor = column.type.literal_processor(dialect)
    if processor is None:
        return None
    return processor(default.arg)


def _column_ddl(column: Column, dialect: Dialect) -> str:
    """Column clause for ``ALTER TABLE ... ADD COLUMN``.

    Content tables already hold rows (a singleton always does), so a NOT NULL column needs a SQL
    default to be added. Model columns usually only carry a Python-side default; that value is
    rendered as the SQL default. A NOT NULL column with nothing to fill existing rows with is
    added as nullable.
    """
    if column.nullable or column.server_default is not None:
        return str(CreateColumn(column).compile(dialect=dialect)).strip()

    name = dialect.identifier_preparer.format_column(column)
    type_sql = column.type.compile(dialect=dialect)
    default_sql = _literal_default(column, dialect)
    if default_sql is None:
        logger.warning("[schema] %s.%s has no default for existing rows; adding it as nullable", column.table.name, column.name)
        return f"{name} {type_sql}"
    return f"{name} {type_sql} DEFAULT {default_sql} NOT NULL"


def sync_missing_schema_objects(engine: Engine, metadata: MetaData) -> list[str]:
    """Bring existing tables up to the model metadata. Tables that do not exist yet are left to ``create_all``.

    Returns a description of every change applied.
    """
    inspector = inspect(engine)
    existing_tables = set(inspector.get_table_names())
    table_sql = engine.dialect.identifier_preparer.format_table
    applied: list[str] = []

    with engine.begin() as conn:
        for table in metadata.sorted_tables:
            if table.name not in existing_tables:
                continue

            known_columns = {row["name"] for row in inspector.get_columns(table.name)}
            for column in table.columns:
                if column.name in known_columns:
                    continue
                conn.execute(text(f"ALTER TABLE {table_sql(table)} ADD COLUMN {_column_ddl(column, engine.dialect)}"))
                applied.append(f"column {table.name}.{column.name}")

            known_indexes = {row.get("name") for row in inspector.get_indexes(table.name)}
            for index in table.indexes:
                if index.name and index.name not in known_indexes:
                    conn.execute(CreateIndex(index))
                    applied.append(f"index {index.name}")

    for change in applied:
        logger.info("[schema] added %s", change)
    return applied
