"""
catalog.reader - Read-only queries against the DCE field catalog.

Two entry points with different failure contracts:

  list_new_column_fields()   schema-maintenance time, runs on host
                             bootstrap → storage errors degrade to [].
  list_mapped_fields(dce)    content-save time → storage errors propagate.
"""

from __future__ import annotations

import logging
import re

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog.definitions import FieldDefinition, NEW_COLUMN
from catalog.errors import UnknownDceError
from db.models import ContentElement, Dce, DceField

logger = logging.getLogger(__name__)

_DCE_UID_CTYPE = re.compile(r"^dce_dceuid(\d+)$")
_CTYPE_PREFIX = "dce_"


class CatalogReader:

    def __init__(self, session: Session):
        self.session = session

    # ── Schema maintenance ─────────────────────────────────────────────

    def list_new_column_fields(self) -> list[FieldDefinition]:
        """
        Every non-deleted element field requesting a new column with
        both a column name and a column type, in storage order.
        """
        try:
            rows = (
                self.session.query(DceField)
                .filter(
                    DceField.map_to == NEW_COLUMN,
                    DceField.deleted == 0,
                    DceField.type == DceField.TYPE_ELEMENT,
                    DceField.new_tca_field_name != "",
                    DceField.new_tca_field_type != "",
                )
                .order_by(DceField.uid)
                .all()
            )
        except SQLAlchemyError as exc:
            logger.warning(f"Field catalog unavailable, no new columns: {exc}")
            return []

        return [FieldDefinition.from_row(r) for r in rows]

    # ── Save time ──────────────────────────────────────────────────────

    def list_mapped_fields(self, parent_dce: int) -> list[FieldDefinition]:
        """Visible, non-deleted fields of one DCE that declare a map_to."""
        rows = (
            self.session.query(DceField)
            .filter(
                DceField.parent_dce == parent_dce,
                DceField.map_to != "",
                DceField.deleted == 0,
                DceField.hidden == 0,
            )
            .order_by(DceField.uid)
            .all()
        )
        return [FieldDefinition.from_row(r) for r in rows]

    def dce_uid_for_content(self, row: ContentElement) -> int:
        """
        Resolve the owning DCE of a content row from its CType.

        Accepts "dce_dceuid<N>" (uid based) and "dce_<identifier>".
        Raises UnknownDceError otherwise.
        """
        ctype = (row.ctype or "").strip()
        match = _DCE_UID_CTYPE.match(ctype)
        if match:
            return int(match.group(1))

        if not ctype.startswith(_CTYPE_PREFIX):
            raise UnknownDceError(f"Content element {row.uid} is no DCE (CType={ctype!r})")

        identifier = ctype[len(_CTYPE_PREFIX):]
        dce = (
            self.session.query(Dce)
            .filter(Dce.identifier == identifier, Dce.deleted == 0)
            .first()
        )
        if dce is None:
            raise UnknownDceError(f"No DCE with identifier {identifier!r}")
        return dce.uid
