"""
flexform.flatten - Nested form tree → ordered (path, value) pairs.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

PATH_SEPARATOR = "."


@dataclass(frozen=True)
class FlatFormValue:
    path: str
    value: Any


def flatten(tree: Mapping | list | tuple) -> list[FlatFormValue]:
    """
    Depth-first walk in insertion order.  Keys are joined with ".",
    list items are keyed by their index.  Empty containers yield nothing.
    """
    if not isinstance(tree, (Mapping, list, tuple)):
        raise TypeError(f"Cannot flatten {type(tree).__name__}")

    flat: list[FlatFormValue] = []
    _walk(tree, "", flat)
    return flat


def _walk(node, prefix: str, out: list[FlatFormValue]) -> None:
    if isinstance(node, Mapping):
        items = node.items()
    else:
        items = enumerate(node)

    for key, value in items:
        path = f"{prefix}{PATH_SEPARATOR}{key}" if prefix else str(key)
        if isinstance(value, (Mapping, list, tuple)):
            _walk(value, path, out)
        else:
            out.append(FlatFormValue(path, value))
