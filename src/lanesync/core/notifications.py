"""Transient user-facing notifications (toasts) with a bounded history."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from lanesync.core.models.enums import NotificationKind
from lanesync.limits import MAX_NOTIFICATIONS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    kind: NotificationKind
    message: str
    created_at: datetime = field(default_factory=datetime.now)


NotificationListener = Callable[[Notification], None]


class NotificationCenter:
    """Records notifications and fans them out to listeners (UI toasts).

    A failing listener is logged and skipped; it never breaks the caller.
    """

    def __init__(self, max_history: int = MAX_NOTIFICATIONS) -> None:
        self._history: deque[Notification] = deque(maxlen=max_history)
        self._listeners: list[NotificationListener] = []

    @property
    def history(self) -> list[Notification]:
        return list(self._history)

    def add_listener(self, listener: NotificationListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: NotificationListener) -> None:
        self._listeners = [existing for existing in self._listeners if existing != listener]

    def notify(self, kind: NotificationKind, message: str) -> Notification:
        notification = Notification(kind=kind, message=message)
        self._history.append(notification)
        for listener in list(self._listeners):
            try:
                listener(notification)
            except Exception:
                logger.exception("Notification listener failed")
        return notification

    def success(self, message: str) -> Notification:
        return self.notify(NotificationKind.SUCCESS, message)

    def error(self, message: str) -> Notification:
        return self.notify(NotificationKind.ERROR, message)

    def count(self, kind: NotificationKind | None = None) -> int:
        if kind is None:
            return len(self._history)
        return sum(1 for item in self._history if item.kind == kind)

    def latest(self) -> Notification | None:
        return self._history[-1] if self._history else None

    def clear(self) -> None:
        self._history.clear()
