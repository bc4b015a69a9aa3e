"""
catalog.definitions - Typed records passed between reader, synthesizer
and sync engine.
"""

from __future__ import annotations

from dataclasses import dataclass

from flexform.parser import parse_flexform

# map_to sentinel: the field requests a brand-new host column
NEW_COLUMN = "*newcol"

# new_tca_field_type sentinel: derive the SQL type from the widget type
AUTO_TYPE = "auto"


@dataclass(frozen=True)
class FieldDefinition:
    uid: int
    parent_dce: int
    variable: str
    map_to: str = ""
    new_column_name: str = ""
    new_column_type: str = ""
    widget_type: str = ""
    field_kind: int = 0
    hidden: bool = False
    deleted: bool = False

    @property
    def requests_new_column(self) -> bool:
        return self.map_to == NEW_COLUMN

    @classmethod
    def from_row(cls, row) -> "FieldDefinition":
        """Build a definition from a DceField ORM row."""
        return cls(
            uid=row.uid,
            parent_dce=row.parent_dce,
            variable=row.variable or "",
            map_to=row.map_to or "",
            new_column_name=row.new_tca_field_name or "",
            new_column_type=row.new_tca_field_type or "",
            widget_type=widget_type_of(row.configuration),
            field_kind=row.type or 0,
            hidden=bool(row.hidden),
            deleted=bool(row.deleted),
        )


@dataclass(frozen=True)
class ColumnSpec:
    column_name: str
    sql_type: str

    def to_sql(self) -> str:
        return f"{self.column_name} {self.sql_type}"


def widget_type_of(configuration: str | None) -> str:
    """
    Return the <type> of a field configuration XML blob, or "" when the
    blob is empty, malformed or has no type.
    """
    tree = parse_flexform(configuration)
    if tree is None:
        return ""
    widget = tree.get("type", "")
    return widget.strip() if isinstance(widget, str) else ""
