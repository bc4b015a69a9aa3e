"""
mapper.host_table - Schema-introspectable access to the host content table.

Mapped columns are created by an administrator and are not part of the
ORM model, so everything here works on the reflected live table.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from sqlalchemy import MetaData, Table, inspect, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

import config

logger = logging.getLogger(__name__)


class HostTable:

    def __init__(self, session: Session, name: str = config.HOST_TABLE,
                 key: str = "uid"):
        self.session = session
        self.name = name
        self.key = key

    # ── Introspection ──────────────────────────────────────────────────

    def column_names(self) -> set[str]:
        """Column names of the live table (empty if the table is missing)."""
        inspector = inspect(self.session.connection())
        if not inspector.has_table(self.name):
            return set()
        return {col["name"] for col in inspector.get_columns(self.name)}

    def _reflect(self) -> Table:
        return Table(self.name, MetaData(), autoload_with=self.session.connection())

    # ── Rows ───────────────────────────────────────────────────────────

    def fetch_row(self, uid: int) -> Optional[dict[str, Any]]:
        """Full row including mapped columns, or None."""
        table = self._reflect()
        row = self.session.execute(
            select(table).where(table.c[self.key] == uid)
        ).mappings().first()
        return dict(row) if row is not None else None

    def update(self, uid: int, values: dict[str, Any]) -> bool:
        """
        Single UPDATE of one row.  Returns False when no row was affected
        or the database rejected the statement.

        Runs in a SAVEPOINT: a rejected UPDATE leaves the rest of the
        caller's transaction intact.
        """
        try:
            with self.session.begin_nested():
                table = self._reflect()
                result = self.session.execute(
                    update(table).where(table.c[self.key] == uid).values(values)
                )
        except SQLAlchemyError as exc:
            logger.error(f"Update of {self.name} uid={uid} failed: {exc}")
            return False
        return result.rowcount > 0
