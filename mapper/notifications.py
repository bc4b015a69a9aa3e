"""
mapper.notifications - User-visible, non-fatal messages raised during a save.

The sync engine only appends to a NotificationQueue.  The HTTP layer
decides how to show them (JSON payload, Flask flash, …).
"""

from __future__ import annotations

from dataclasses import dataclass, field

SEVERITY_INFO  = "info"
SEVERITY_ERROR = "error"


@dataclass
class Notification:
    message: str
    title: str = ""
    severity: str = SEVERITY_INFO

    def to_dict(self) -> dict:
        return {
            "message": self.message,
            "title": self.title,
            "severity": self.severity,
        }


@dataclass
class NotificationQueue:
    messages: list[Notification] = field(default_factory=list)

    def add(self, message: str, title: str = "", severity: str = SEVERITY_INFO):
        self.messages.append(Notification(message, title, severity))

    def to_list(self) -> list[dict]:
        return [m.to_dict() for m in self.messages]

    def __len__(self) -> int:
        return len(self.messages)
