"""
mapper.resolver - Field definitions → {variable: target column}.
"""

from __future__ import annotations

from typing import Iterable

from catalog.definitions import FieldDefinition
from mapper.errors import ConfigurationError


def build_sync_targets(definitions: Iterable[FieldDefinition]) -> dict[str, str]:
    """
    Map every form variable onto the column it is stored in.

    "*newcol" fields map onto their new column name, all others onto
    map_to verbatim.  A "*newcol" field without a column name raises
    ConfigurationError.
    """
    targets: dict[str, str] = {}
    for definition in definitions:
        column = definition.map_to
        if definition.requests_new_column:
            column = definition.new_column_name
            if not column:
                raise ConfigurationError(
                    f"DCE field {definition.variable!r} (uid {definition.uid}) "
                    "maps to a new column but has no column name"
                )
        targets[definition.variable] = column
    return targets
