"""
mapper.errors - Exceptions raised by the flexform-to-column mapping.
"""

from __future__ import annotations


class MappingError(Exception):
    """Base class for every mapping failure."""
    pass


class ConfigurationError(MappingError):
    """The field catalog is internally inconsistent."""
    pass


class SchemaDriftError(MappingError):
    """Mapped columns are missing from the live host table."""

    def __init__(self, table: str, columns: list[str]):
        self.table = table
        self.columns = list(columns)
        super().__init__(
            f"Column(s) {', '.join(self.columns)} missing in table {table}. "
            "It seems you have forgotten to perform a database schema update "
            "after changing the column mapping of a DCE field."
        )
