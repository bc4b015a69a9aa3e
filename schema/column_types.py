"""
schema.column_types - SQL types for "auto" typed new columns.

The type is derived from the field's widget type only.  Anything not
listed below (including an unknown or missing widget) becomes "text".
"""

from __future__ import annotations

VARCHAR_TYPE = "varchar(255) DEFAULT '' NOT NULL"
FLAG_TYPE    = "tinyint(4) unsigned DEFAULT '0' NOT NULL"
TEXT_TYPE    = "text"

AUTO_TYPES: dict[str, str] = {
    "input":  VARCHAR_TYPE,
    "check":  FLAG_TYPE,
    "radio":  FLAG_TYPE,
    "text":   TEXT_TYPE,
    "select": TEXT_TYPE,
    "group":  TEXT_TYPE,
}


def auto_column_type(widget_type: str) -> str:
    return AUTO_TYPES.get(widget_type, TEXT_TYPE)
