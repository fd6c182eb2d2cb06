"""
Utilities - Formatting helpers shared by callers rendering bookings.
"""

from boardroom_client.utils.dates import (
    parse_iso,
    format_booking_time,
    format_booking_date,
    format_full_date,
    format_relative_time,
    format_date_for_api,
)

__all__ = [
    "parse_iso",
    "format_booking_time",
    "format_booking_date",
    "format_full_date",
    "format_relative_time",
    "format_date_for_api",
]
