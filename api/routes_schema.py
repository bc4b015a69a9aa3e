"""
api.routes_schema - /api/v1/schema/* endpoints.

Expose the columns requested by the DCE field catalog so an
administrator (or a deploy script) can apply them to the host table.
"""

from flask import Response, jsonify

import config
from api import api_bp
from catalog.reader import CatalogReader
from db import get_session
from mapper.host_table import HostTable
from schema.descriptors import column_descriptors
from schema.synthesizer import column_specs, missing_columns, synthesize_schema


@api_bp.route("/schema/sql")
def schema_sql():
    """CREATE TABLE statement for all new columns (empty body if none)."""
    session = get_session()
    try:
        sql = synthesize_schema(CatalogReader(session))
        return Response(sql, mimetype="text/plain")
    finally:
        session.close()


@api_bp.route("/schema/columns")
def schema_columns():
    """Requested columns and those still missing in the live table."""
    session = get_session()
    try:
        specs = column_specs(CatalogReader(session).list_new_column_fields())
        live = HostTable(session).column_names()
        return jsonify({
            "table": config.HOST_TABLE,
            "columns": [{"name": s.column_name, "type": s.sql_type} for s in specs],
            "missing": [s.column_name for s in missing_columns(specs, live)],
        })
    finally:
        session.close()


@api_bp.route("/schema/tca")
def schema_tca():
    """Passthrough column descriptors for the host configuration."""
    session = get_session()
    try:
        fields = CatalogReader(session).list_new_column_fields()
        return jsonify({config.HOST_TABLE: {"columns": column_descriptors(fields)}})
    finally:
        session.close()
