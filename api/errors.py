"""
api.errors - JSON error handlers for the API blueprint.
"""

import logging

from flask import jsonify

from api import api_bp
from catalog.errors import UnknownDceError
from mapper.errors import ConfigurationError, SchemaDriftError
from services.content_service import PayloadError

logger = logging.getLogger(__name__)


@api_bp.errorhandler(SchemaDriftError)
def api_schema_drift(exc: SchemaDriftError):
    logger.error(str(exc))
    return jsonify({"error": str(exc), "missing": exc.columns}), 409


@api_bp.errorhandler(ConfigurationError)
def api_configuration_error(exc: ConfigurationError):
    logger.error(str(exc))
    return jsonify({"error": str(exc)}), 422


@api_bp.errorhandler(PayloadError)
def api_bad_payload(exc: PayloadError):
    return jsonify({"error": str(exc)}), 400


@api_bp.errorhandler(UnknownDceError)
def api_unknown_dce(exc: UnknownDceError):
    return jsonify({"error": str(exc)}), 422


@api_bp.errorhandler(404)
def api_not_found(_e):
    return jsonify({"error": "not found"}), 404


@api_bp.errorhandler(400)
def api_bad_request(_e):
    return jsonify({"error": "bad request"}), 400


@api_bp.errorhandler(500)
def api_server_error(_e):
    return jsonify({"error": "internal server error"}), 500
