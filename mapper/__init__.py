"""
mapper - Flexform-to-column mapping at content-save time.

Public API:
    SyncEngine(session, notifier).sync(row, payload) → SyncResult
    build_sync_targets(definitions)                  → {variable: column}
"""

from mapper.errors import (                                     # noqa: F401
    MappingError,
    ConfigurationError,
    SchemaDriftError,
)
from mapper.notifications import Notification, NotificationQueue   # noqa: F401
from mapper.resolver import build_sync_targets                      # noqa: F401
from mapper.host_table import HostTable                             # noqa: F401
from mapper.sync import SyncEngine, SyncResult                      # noqa: F401
