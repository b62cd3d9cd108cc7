"""
Decision rule for the once-a-day "order before the deadline" reminder.
"""

from datetime import date, datetime
from typing import Optional

from core.date_window import DEFAULT_CUTOFF_HOUR, is_ordering_open

REMINDER_START_HOUR = 17
REMINDER_END_HOUR = 21


def already_shown_today(last_shown_on: Optional[date], today: date) -> bool:
    """A reminder stored for an earlier day no longer counts."""
    return last_shown_on is not None and last_shown_on == today


def should_remind(
    now: datetime,
    notifications_enabled: bool,
    already_shown: bool,
    cutoff_hour: int = DEFAULT_CUTOFF_HOUR,
    start_hour: int = REMINDER_START_HOUR,
    end_hour: int = REMINDER_END_HOUR,
) -> bool:
    """
    True when a reminder should be surfaced now.

    Requires notifications to be on, no reminder yet for the current day, the
    hour to fall in ``[start_hour, end_hour)`` and ordering to still be open.
    """
    if not notifications_enabled or already_shown:
        return False
    if not start_hour <= now.hour < end_hour:
        return False
    return is_ordering_open(now, cutoff_hour)
