from dataclasses import dataclass
from enum import Enum


class NotificationKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    kind: NotificationKind
    title: str
    description: str


class Notifier:
    """Collects user-facing notifications in the order they were raised."""

    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def success(self, title: str, description: str) -> Notification:
        return self._push(Notification(NotificationKind.SUCCESS, title, description))

    def error(self, title: str, description: str) -> Notification:
        return self._push(Notification(NotificationKind.ERROR, title, description))

    @property
    def last(self) -> Notification | None:
        return self.notifications[-1] if self.notifications else None

    def _push(self, notification: Notification) -> Notification:
        self.notifications.append(notification)
        return notification
