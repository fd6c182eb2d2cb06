"""
Reminder Scheduler - Local reminders before a booking starts.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from boardroom_client.ports.notification_port import NotificationContent, NotificationPort

logger = logging.getLogger(__name__)

REMINDER_CHANNEL = "booking-reminders"


class ReminderScheduler:
    """Schedules and cancels booking reminders through a NotificationPort."""

    def __init__(self, notifications: NotificationPort, minutes_before: int = 15):
        self._notifications = notifications
        self._minutes_before = minutes_before

    def schedule_booking_reminder(
        self,
        booking_id: str,
        title: str,
        room_name: str,
        start_time: datetime,
        minutes_before: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> Optional[str]:
        """
        Schedule a reminder minutes_before the booking starts.

        Args:
            booking_id: Booking the reminder belongs to
            title: Booking title
            room_name: Room shown in the reminder body
            start_time: Booking start (timezone-aware, or naive local time)
            minutes_before: Lead time (default from the scheduler)
            now: Current time, for tests

        Returns:
            Notification id, or None if the trigger time has already passed
        """
        lead = self._minutes_before if minutes_before is None else minutes_before
        trigger_at = start_time - timedelta(minutes=lead)

        current = now or datetime.now(timezone.utc if start_time.tzinfo else None)
        if trigger_at <= current:
            return None

        content = NotificationContent(
            title=f"Upcoming: {title}",
            body=f"Starting in {lead} minutes at {room_name}",
            data={"type": "booking_reminder", "bookingId": booking_id},
            channel_id=REMINDER_CHANNEL,
        )
        identifier = self._notifications.schedule(content, trigger_at)
        logger.debug(f"Scheduled reminder {identifier} for booking {booking_id}")
        return identifier

    def cancel_booking_reminders(self, booking_id: str) -> int:
        """
        Cancel every pending reminder of a booking.

        Returns:
            Number of reminders cancelled
        """
        cancelled = 0
        for notification in self._notifications.scheduled():
            if notification.content.data.get("bookingId") == booking_id:
                if self._notifications.cancel(notification.identifier):
                    cancelled += 1
        return cancelled

    def reschedule_booking_reminder(
        self,
        booking_id: str,
        title: str,
        room_name: str,
        start_time: datetime,
        minutes_before: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> Optional[str]:
        """Replace the reminders of an edited booking."""
        self.cancel_booking_reminders(booking_id)
        return self.schedule_booking_reminder(
            booking_id, title, room_name, start_time, minutes_before=minutes_before, now=now
        )
