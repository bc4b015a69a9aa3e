"""
services.content_service - Save flexform data of content elements.

All session management is the caller's responsibility (open before,
close/commit after).  The stored payload and the mapped columns are
written in the same transaction, so a SchemaDriftError raised by the
sync rolls back both when the caller rolls back.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from db.models import ContentElement
from mapper.errors import MappingError
from mapper.notifications import NotificationQueue
from mapper.sync import SyncEngine, SyncResult


class PayloadError(MappingError):
    """The submitted flexform payload is not valid UTF-8."""
    pass


class ContentService:

    # ── Read ───────────────────────────────────────────────────────────

    @staticmethod
    def get(session: Session, uid: int) -> ContentElement | None:
        row = session.get(ContentElement, uid)
        if row is None or row.deleted:
            return None
        return row

    # ── Save ───────────────────────────────────────────────────────────

    @staticmethod
    def save_flexform(
        session: Session,
        row: ContentElement,
        raw_payload: str | bytes,
        notifier: Optional[NotificationQueue] = None,
    ) -> SyncResult:
        """
        Store the flexform payload on the row, then copy mapped values
        into their columns.

        Raises PayloadError for bytes that are not valid UTF-8; nothing is
        stored in that case.
        """
        if isinstance(raw_payload, bytes):
            try:
                raw_payload = raw_payload.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise PayloadError(f"Flexform payload is not valid UTF-8: {exc}") from exc
        row.pi_flexform = raw_payload
        session.flush()

        return SyncEngine(session, notifier).sync(row, raw_payload)
