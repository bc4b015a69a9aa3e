"""
flexform - Flexform payload handling.

Public API:
    parse_flexform(raw) → dict | None
    flatten(tree)       → [FlatFormValue]
"""

from flexform.parser import parse_flexform                  # noqa: F401
from flexform.flatten import flatten, FlatFormValue         # noqa: F401
