"""
schema.descriptors - Host configuration entries for new columns.

The core only describes the columns.  apply_columns() is the boundary
adapter that writes the description into a host configuration registry
handed in by the caller.
"""

from __future__ import annotations

import copy
from typing import Iterable

from catalog.definitions import FieldDefinition

PASSTHROUGH = {"label": "", "config": {"type": "passthrough"}}


def column_descriptors(definitions: Iterable[FieldDefinition]) -> dict[str, dict]:
    """{column name: descriptor} for every requested new column."""
    return {
        d.new_column_name: copy.deepcopy(PASSTHROUGH)
        for d in definitions
        if d.new_column_name
    }


def apply_columns(registry: dict, table: str, descriptors: dict[str, dict]) -> dict:
    """
    Merge column descriptors into registry[table]["columns"].
    Existing columns of the same name are replaced.  Returns registry.
    """
    columns = registry.setdefault(table, {}).setdefault("columns", {})
    for name, descriptor in descriptors.items():
        columns[name] = copy.deepcopy(descriptor)
    return registry
