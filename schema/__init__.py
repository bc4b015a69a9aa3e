"""
schema - Host-table schema derived from the DCE field catalog.

Public API:
    synthesizer.synthesize_schema(reader)  → CREATE TABLE … / ""
    synthesizer.column_specs(definitions)  → [ColumnSpec]
    column_types.auto_column_type(widget)
    descriptors.column_descriptors / apply_columns
"""

from schema.column_types import auto_column_type                  # noqa: F401
from schema.synthesizer import (                                  # noqa: F401
    column_specs,
    missing_columns,
    render_create_table,
    resolve_column_type,
    synthesize_schema,
)
from schema.descriptors import apply_columns, column_descriptors  # noqa: F401
