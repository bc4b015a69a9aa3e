"""
api.routes_content - /api/v1/content endpoints.

Saving a flexform payload runs the column mapping for that row.
"""

from flask import request, jsonify

from api import api_bp
from db import get_session
from mapper.host_table import HostTable
from mapper.notifications import NotificationQueue
from services.content_service import ContentService


@api_bp.route("/content/<int:uid>")
def get_content(uid: int):
    """GET /api/v1/content/{uid}  (full row including mapped columns)"""
    session = get_session()
    try:
        if ContentService.get(session, uid) is None:
            return jsonify({"error": "not found"}), 404
        return jsonify(HostTable(session).fetch_row(uid))
    finally:
        session.close()


@api_bp.route("/content/<int:uid>/flexform", methods=["PUT"])
def save_flexform(uid: int):
    """
    PUT /api/v1/content/{uid}/flexform

    Body: flexform XML.  Mapping errors roll back the whole save and are
    rendered by api.errors; a failed column update is reported in
    "notifications" while the payload itself is kept.
    """
    payload = request.get_data()
    session = get_session()
    try:
        row = ContentService.get(session, uid)
        if row is None:
            return jsonify({"error": "not found"}), 404

        notifications = NotificationQueue()
        result = ContentService.save_flexform(session, row, payload, notifications)
        session.commit()
        return jsonify({
            "uid": uid,
            **result.to_dict(),
            "notifications": notifications.to_list(),
        })
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
