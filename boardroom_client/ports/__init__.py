"""
Ports - Interfaces for storage, session state and notifications.

Hexagonal architecture: These define WHAT the client needs, not HOW.
Adapters provide the HOW.
"""

from boardroom_client.ports.storage_port import StoragePort
from boardroom_client.ports.auth_state_port import AuthStatePort
from boardroom_client.ports.notification_port import (
    NotificationPort,
    NotificationContent,
    ScheduledNotification,
)

__all__ = [
    "StoragePort",
    "AuthStatePort",
    "NotificationPort",
    "NotificationContent",
    "ScheduledNotification",
]
