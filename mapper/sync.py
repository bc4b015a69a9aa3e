"""
mapper.sync - Copy flexform values into their mapped host columns.

Runs once per content save:

  content row → parent DCE → sync targets
  payload     → parse → flatten → field names → accumulated column values
  → live-schema check → single UPDATE
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from sqlalchemy.orm import Session

import config
from catalog.reader import CatalogReader
from db.models import ContentElement
from flexform import FlatFormValue, flatten, parse_flexform
from mapper.errors import ConfigurationError, SchemaDriftError
from mapper.host_table import HostTable
from mapper.notifications import NotificationQueue, SEVERITY_ERROR
from mapper.resolver import build_sync_targets

logger = logging.getLogger(__name__)

# Repeated values for one column (section items) are stacked as paragraphs
VALUE_SEPARATOR = "\n\n"


@dataclass
class SyncResult:
    values: dict[str, Any] = field(default_factory=dict)
    updated: bool = False

    def to_dict(self) -> dict:
        return {"values": self.values, "updated": self.updated}


def extract_field_name(path: str, pattern: re.Pattern) -> Optional[str]:
    """Variable name of a flattened path, or None if the path does not match."""
    match = pattern.match(path)
    if not match:
        return None
    return match.group(1)


def collect_update_values(
    flat_values: Iterable[FlatFormValue],
    targets: dict[str, str],
    pattern: re.Pattern,
) -> dict[str, Any]:
    """
    Accumulate mapped values per target column in encounter order.
    A second value for the same column is appended after a blank line.
    """
    update_values: dict[str, Any] = {}
    for item in flat_values:
        field_name = extract_field_name(item.path, pattern)
        if field_name is None or field_name not in targets:
            continue

        column = targets[field_name]
        current = update_values.get(column)
        if current is None or current == "":
            update_values[column] = item.value
        else:
            update_values[column] = f"{current}{VALUE_SEPARATOR}{item.value}"
    return update_values


class SyncEngine:

    def __init__(
        self,
        session: Session,
        notifier: Optional[NotificationQueue] = None,
        host_table: Optional[HostTable] = None,
        field_pattern: str = config.FIELD_NAME_PATTERN,
    ):
        self.reader = CatalogReader(session)
        self.host_table = host_table or HostTable(session)
        self.notifier = notifier if notifier is not None else NotificationQueue()
        self.field_pattern = re.compile(field_pattern)
        if self.field_pattern.groups < 1:
            raise ConfigurationError(
                f"Field name pattern {field_pattern!r} needs a capture group "
                "for the field variable"
            )

    def sync(self, row: ContentElement, raw_payload: str | bytes | None) -> SyncResult:
        """
        Write mapped flexform values of one content row into its columns.

        Raises ConfigurationError or UnknownDceError for an inconsistent
        catalog, SchemaDriftError when a target column does not exist.
        A failed UPDATE only produces an error notification.
        """
        result = SyncResult()

        parent_dce = self.reader.dce_uid_for_content(row)
        targets = build_sync_targets(self.reader.list_mapped_fields(parent_dce))
        if not targets or not raw_payload:
            return result

        tree = parse_flexform(raw_payload)
        if tree is None:
            logger.debug(f"Content element {row.uid}: flexform not parsable, skipped")
            return result

        values = collect_update_values(flatten(tree), targets, self.field_pattern)
        if not values:
            return result

        self._check_columns(values)
        result.values = values

        if self.host_table.update(row.uid, values):
            result.updated = True
            logger.info(f"Content element {row.uid}: mapped {sorted(values)}")
        else:
            self.notifier.add(
                f"Can't update {self.host_table.name} item with uid {row.uid}",
                "Flexform to TCA mapping failure",
                SEVERITY_ERROR,
            )
        return result

    def _check_columns(self, values: dict[str, Any]) -> None:
        live = self.host_table.column_names()
        missing = [col for col in values if col not in live]
        if missing:
            raise SchemaDriftError(self.host_table.name, missing)
