"""
Notification Port - Interface to the local/push notification provider.

Implementations:
- MemoryNotificationAdapter: Records scheduled notifications (testing)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List
from datetime import datetime


@dataclass
class NotificationContent:
    title: str
    body: str
    data: Dict[str, Any] = field(default_factory=dict)
    channel_id: Optional[str] = None
    sound: str = "default"


@dataclass
class ScheduledNotification:
    identifier: str
    content: NotificationContent
    trigger_at: Optional[datetime] = None  # None = deliver immediately


class NotificationPort(ABC):
    """Port: schedule and cancel device notifications."""

    @abstractmethod
    def schedule(self, content: NotificationContent, trigger_at: Optional[datetime] = None) -> str:
        """
        Schedule a notification.

        Args:
            content: What to show
            trigger_at: When to show it; None shows it immediately

        Returns:
            Provider identifier of the scheduled notification
        """
        pass

    @abstractmethod
    def cancel(self, identifier: str) -> bool:
        """
        Cancel a scheduled notification.

        Returns:
            True if cancelled, False if not found
        """
        pass

    @abstractmethod
    def scheduled(self) -> List[ScheduledNotification]:
        """List notifications that have not fired yet."""
        pass

    @abstractmethod
    def cancel_all(self) -> int:
        """
        Cancel every scheduled notification.

        Returns:
            Number of notifications cancelled
        """
        pass
