"""
flexform.parser - Flexform XML → nested dict.

Responsibilities:
  • BOM removal (UTF-8 / UTF-8-SIG)
  • Root element is dropped, its children become the top-level keys
  • Children are keyed by their index="" attribute, else by tag name
    (<nNNN> tags stand for the numeric key NNN)
  • Leaf elements yield their text ("" when empty)

Returns None instead of raising for anything that is not a usable tree.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional
from xml.etree import ElementTree as ET

logger = logging.getLogger(__name__)

_NUMERIC_TAG = re.compile(r"^n\d+$")


def parse_flexform(raw: str | bytes | None) -> Optional[dict]:
    """
    Parse a flexform XML blob.

    Returns None when the blob is empty, malformed, or its root element
    carries no child elements.
    """
    if raw is None:
        return None
    text = _decode(raw)
    if not text or not text.strip():
        return None

    try:
        root = ET.fromstring(text.strip())
    except ET.ParseError as exc:
        logger.debug(f"Unparsable flexform XML: {exc}")
        return None

    tree = _to_value(root)
    if not isinstance(tree, dict):
        return None
    return tree


def _to_value(elem: ET.Element) -> Any:
    children = list(elem)
    if not children:
        if elem.get("type") == "array":
            return {}
        return elem.text or ""

    node: dict[str, Any] = {}
    for child in children:
        key = child.get("index") or _numeric_key(child.tag)
        node[key] = _to_value(child)
    return node


def _numeric_key(tag: str) -> str:
    # <n0>, <n1> ... stand for numeric keys that are not valid tag names
    if _NUMERIC_TAG.match(tag):
        return tag[1:]
    return tag


def _decode(raw: str | bytes) -> str:
    if isinstance(raw, bytes):
        if raw.startswith(b"\xef\xbb\xbf"):
            raw = raw[3:]
        return raw.decode("utf-8", errors="replace")
    if raw.startswith("\ufeff"):
        return raw[1:]
    return raw
