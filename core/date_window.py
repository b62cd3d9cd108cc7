"""
Ordering window helpers.

All functions take the evaluation instant explicitly. Hour comparisons use
``now`` as given, so the caller decides which clock and time zone apply
(see ``core.clock.local_now``).
"""

from datetime import date, datetime, timedelta
from typing import Optional, Tuple

DEFAULT_CUTOFF_HOUR = 21

# Returned by time_until_cutoff once today's cutoff instant is behind us.
DEADLINE_PASSED = None

DATE_FORMAT = "%Y-%m-%d"


def next_orderable_date(now: datetime) -> str:
    """Return the calendar day after ``now`` as ``YYYY-MM-DD``."""
    return (now.date() + timedelta(days=1)).strftime(DATE_FORMAT)


def parse_order_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` string produced by next_orderable_date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def is_ordering_open(now: datetime, cutoff_hour: int = DEFAULT_CUTOFF_HOUR) -> bool:
    """True while ``now`` is before ``cutoff_hour:00``; the cutoff hour itself is closed."""
    return now.hour < cutoff_hour


def time_until_cutoff(
    now: datetime, cutoff_hour: int = DEFAULT_CUTOFF_HOUR
) -> Optional[Tuple[int, int]]:
    """
    Time left until today's cutoff as ``(hours, minutes)``.

    Partial minutes are dropped. Returns DEADLINE_PASSED when ``now`` is past
    today's cutoff; it never rolls over to tomorrow's cutoff.
    """
    deadline = now.replace(hour=cutoff_hour, minute=0, second=0, microsecond=0)
    if now > deadline:
        return DEADLINE_PASSED

    whole_minutes = int((deadline - now).total_seconds() // 60)
    hours, minutes = divmod(whole_minutes, 60)
    return hours, minutes


def deadline_message(now: datetime, cutoff_hour: int = DEFAULT_CUTOFF_HOUR) -> str:
    remaining = time_until_cutoff(now, cutoff_hour)
    if remaining is DEADLINE_PASSED:
        return "Order deadline has passed for today"
    hours, minutes = remaining
    return f"{hours}h {minutes}m until deadline"


def format_order_date(value: str) -> str:
    """Render ``2026-10-20`` as ``Tuesday, October 20, 2026``."""
    day = parse_order_date(value)
    return f"{day.strftime('%A')}, {day.strftime('%B')} {day.day}, {day.year}"


def format_cutoff(cutoff_hour: int = DEFAULT_CUTOFF_HOUR) -> str:
    """Render a cutoff hour on a 12-hour clock, e.g. 21 -> ``9:00 PM``."""
    suffix = "AM" if cutoff_hour < 12 else "PM"
    hour = cutoff_hour % 12 or 12
    return f"{hour}:00 {suffix}"
