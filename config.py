"""
DCEMAP - Centralised configuration.

All tunables live here.  Every other module imports from config
instead of reading os.environ directly.
"""

from __future__ import annotations
import os
from pathlib import Path


# ── Paths ──────────────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent

# ── Database ───────────────────────────────────────────────────────────
DB_URL = os.environ.get("DCEMAP_DB", f"sqlite:///{BASE_DIR / 'dcemap.sqlite'}")

# ── Mapping ────────────────────────────────────────────────────────────
# Host table which receives the mapped columns
HOST_TABLE = os.environ.get("DCEMAP_HOST_TABLE", "tt_content")

# Leaf field name inside a flattened flexform path (group 1 = variable)
FIELD_NAME_PATTERN = os.environ.get(
    "DCEMAP_FIELD_PATTERN", r"^.*settings\.(.*?)\.vDEF$"
)

# ── Server ─────────────────────────────────────────────────────────────
HOST   = os.environ.get("DCEMAP_HOST", "0.0.0.0")
PORT   = int(os.environ.get("DCEMAP_PORT", "5000"))
DEBUG  = os.environ.get("DCEMAP_DEBUG", "0") == "1"
SECRET = os.environ.get("DCEMAP_SECRET", "dcemap-dev-key-change-in-prod")

# ── Logging ────────────────────────────────────────────────────────────
LOG_LEVEL = os.environ.get("DCEMAP_LOG_LEVEL", "INFO").upper()
