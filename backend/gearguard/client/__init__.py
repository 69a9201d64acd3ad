"""
Python client for the GearGuard API: session store, HTTP client and the
optimistic Kanban board model.
"""

from .api_client import ApiError, GearGuardClient
from .kanban import BoardFilters, KanbanBoard, is_overdue
from .notifications import Notification, NotificationKind, Notifier
from .session import SessionStore

__all__ = [
    "ApiError",
    "BoardFilters",
    "GearGuardClient",
    "KanbanBoard",
    "Notification",
    "NotificationKind",
    "Notifier",
    "SessionStore",
    "is_overdue",
]
