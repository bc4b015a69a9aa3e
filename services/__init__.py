"""
services - Business-logic layer sitting between API and DB.
"""

from services.content_service import ContentService       # noqa: F401
