"""
schema.synthesizer - New-column SQL for the host table.

Produces a CREATE TABLE statement in the partial-definition style the
host's schema compare tool merges into its table definitions.  The
statement is advisory output for an administrator; nothing here ever
executes DDL.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

import config
from catalog.definitions import AUTO_TYPE, ColumnSpec, FieldDefinition
from catalog.reader import CatalogReader
from schema.column_types import auto_column_type

logger = logging.getLogger(__name__)


def resolve_column_type(definition: FieldDefinition) -> str:
    """Declared SQL type, or the widget-derived one for "auto"."""
    if definition.new_column_type == AUTO_TYPE:
        return auto_column_type(definition.widget_type)
    return definition.new_column_type


def column_specs(definitions: Iterable[FieldDefinition]) -> list[ColumnSpec]:
    """
    One ColumnSpec per column name.

    When several fields request the same column, the last definition's
    type wins and the column keeps the position of its first request.
    """
    types: dict[str, str] = {}
    for definition in definitions:
        name = definition.new_column_name
        sql_type = resolve_column_type(definition)
        if name in types and types[name] != sql_type:
            logger.warning(
                f"Column {name} requested more than once, "
                f"{types[name]!r} replaced by {sql_type!r} (field uid {definition.uid})"
            )
        types[name] = sql_type
    return [ColumnSpec(name, sql_type) for name, sql_type in types.items()]


def render_create_table(specs: list[ColumnSpec], table: str) -> str:
    if not specs:
        return ""
    body = ",\n".join(spec.to_sql() for spec in specs)
    return f"CREATE TABLE {table} (\n{body}\n);"


def synthesize_schema(reader: CatalogReader, table: Optional[str] = None) -> str:
    """CREATE TABLE statement for every new column, or "" if there is none."""
    specs = column_specs(reader.list_new_column_fields())
    return render_create_table(specs, table or config.HOST_TABLE)


def missing_columns(specs: Iterable[ColumnSpec], live_columns: Iterable[str]) -> list[ColumnSpec]:
    """Declared columns that the live table does not have yet."""
    live = set(live_columns)
    return [spec for spec in specs if spec.column_name not in live]
