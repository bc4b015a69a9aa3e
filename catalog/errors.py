"""
catalog.errors - Exceptions raised while reading the field catalog.
"""

from __future__ import annotations


class UnknownDceError(LookupError):
    """A content row does not belong to any known DCE."""
    pass
