"""
db.models - SQLAlchemy ORM declarations.

Tables
------
tx_dce_domain_model_dce       - one row per DCE (user-defined content type).
tx_dce_domain_model_dcefield  - field catalog of every DCE.  Fields may
                                request a new host column (map_to="*newcol")
                                or map onto an existing one.
tt_content                    - host content rows.  Only the base columns
                                are declared here; mapped columns are added
                                by an administrator from the synthesized DDL
                                and exist in the live schema only.
"""

from __future__ import annotations

from sqlalchemy import (
    Column, String, Integer, SmallInteger, Text, Index,
)
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class Dce(Base):
    __tablename__ = "tx_dce_domain_model_dce"

    uid        = Column(Integer, primary_key=True, autoincrement=True)
    identifier = Column(String(255), nullable=False, default="", index=True)
    title      = Column(String(255), nullable=False, default="")

    hidden  = Column(SmallInteger, nullable=False, default=0)
    deleted = Column(SmallInteger, nullable=False, default=0)


class DceField(Base):
    __tablename__ = "tx_dce_domain_model_dcefield"

    # type column values
    TYPE_ELEMENT = 0
    TYPE_TAB     = 1
    TYPE_SECTION = 2

    uid        = Column(Integer, primary_key=True, autoincrement=True)
    parent_dce = Column(Integer, nullable=False, default=0, index=True)
    variable   = Column(String(255), nullable=False, default="")
    title      = Column(String(255), nullable=False, default="")
    type       = Column(SmallInteger, nullable=False, default=TYPE_ELEMENT)
    sorting    = Column(Integer, nullable=False, default=0)

    # ── Column mapping ─────────────────────────────────────────────────
    map_to             = Column(String(255), nullable=False, default="")
    new_tca_field_name = Column(String(255), nullable=False, default="")
    new_tca_field_type = Column(String(255), nullable=False, default="")

    # Field configuration XML (<config><type>input</type>…</config>)
    configuration = Column(Text, nullable=False, default="")

    hidden  = Column(SmallInteger, nullable=False, default=0)
    deleted = Column(SmallInteger, nullable=False, default=0)

    __table_args__ = (
        Index("ix_dcefield_mapping", "parent_dce", "map_to"),
    )


class ContentElement(Base):
    __tablename__ = "tt_content"

    uid         = Column(Integer, primary_key=True, autoincrement=True)
    pid         = Column(Integer, nullable=False, default=0)
    ctype       = Column("CType", String(255), nullable=False, default="")
    header      = Column(String(255), nullable=False, default="")
    pi_flexform = Column(Text, nullable=True)

    hidden  = Column(SmallInteger, nullable=False, default=0)
    deleted = Column(SmallInteger, nullable=False, default=0)
