"""
Memory Notification Adapter - Records scheduled notifications (testing only).
"""

import secrets
from typing import Optional, Dict, List
from datetime import datetime
from boardroom_client.ports.notification_port import (
    NotificationPort,
    NotificationContent,
    ScheduledNotification,
)


class MemoryNotificationAdapter(NotificationPort):
    """
    In-memory notification provider.

    Nothing is ever delivered; scheduled notifications are kept so callers
    and tests can inspect and cancel them.
    """

    def __init__(self):
        self._scheduled: Dict[str, ScheduledNotification] = {}
        self.delivered: List[NotificationContent] = []

    def schedule(self, content: NotificationContent, trigger_at: Optional[datetime] = None) -> str:
        identifier = secrets.token_urlsafe(12)
        if trigger_at is None:
            self.delivered.append(content)
        else:
            self._scheduled[identifier] = ScheduledNotification(
                identifier=identifier,
                content=content,
                trigger_at=trigger_at,
            )
        return identifier

    def cancel(self, identifier: str) -> bool:
        return self._scheduled.pop(identifier, None) is not None

    def scheduled(self) -> List[ScheduledNotification]:
        return list(self._scheduled.values())

    def cancel_all(self) -> int:
        count = len(self._scheduled)
        self._scheduled.clear()
        return count
