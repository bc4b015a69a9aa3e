#!/usr/bin/env python3
"""
DCEMAP - DCE flexform-to-column mapping service
================================================

Single-command run:  python main.py
Print schema SQL:    flask --app main schema-sql

See config.py for all environment-variable tunables.
"""

import logging
from typing import Optional

from flask import Flask, jsonify

import config
from db import init_db, get_session
from api import api_bp
from catalog.reader import CatalogReader
from schema.synthesizer import synthesize_schema


def create_app(db_url: Optional[str] = None) -> Flask:
    """Flask application factory."""

    app = Flask(__name__)
    app.secret_key = config.SECRET

    # ── Initialise database ─────────────────────────────────────────
    db_url = db_url or config.DB_URL
    init_db(db_url)
    app.logger.info(f"Database: {db_url}")

    # ── Register blueprints ─────────────────────────────────────────
    app.register_blueprint(api_bp)

    # ── CLI ─────────────────────────────────────────────────────────
    @app.cli.command("schema-sql")
    def schema_sql_command():
        """Print the CREATE TABLE statement for new DCE columns."""
        session = get_session()
        try:
            sql = synthesize_schema(CatalogReader(session))
        finally:
            session.close()
        print(sql or f"-- no new columns for {config.HOST_TABLE}")

    # ── Error handlers ──────────────────────────────────────────────
    @app.errorhandler(404)
    def _404(e):
        return jsonify({"error": "not found"}), 404

    @app.errorhandler(500)
    def _500(e):
        return jsonify({"error": "internal server error"}), 500

    return app


def main():
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )

    print("=" * 56)
    print("  DCEMAP - Flexform to column mapping")
    print("=" * 56)

    app = create_app()

    print(f"\n  Database:   {config.DB_URL}")
    print(f"  Host table: {config.HOST_TABLE}")
    print(f"  http://{config.HOST}:{config.PORT}/api/v1/schema/sql")
    print("=" * 56)

    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)


if __name__ == "__main__":
    main()
