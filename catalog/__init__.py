"""
catalog - DCE field catalog access.

Public API:
    CatalogReader(session).list_new_column_fields()
    CatalogReader(session).list_mapped_fields(parent_dce)
    FieldDefinition / ColumnSpec records
"""

from catalog.definitions import (                   # noqa: F401
    AUTO_TYPE,
    NEW_COLUMN,
    ColumnSpec,
    FieldDefinition,
)
from catalog.errors import UnknownDceError          # noqa: F401
from catalog.reader import CatalogReader            # noqa: F401
