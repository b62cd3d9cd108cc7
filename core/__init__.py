"""
Core package - pure ordering rules.
Date window, order aggregation and reminder policy; no I/O.
"""

from core.clock import local_now
from core.date_window import (
    DEADLINE_PASSED,
    deadline_message,
    format_cutoff,
    format_order_date,
    is_ordering_open,
    next_orderable_date,
    parse_order_date,
    time_until_cutoff,
)
from core.order_aggregator import OrderAggregator, OrderCount, aggregate_orders
from core.reminder_policy import already_shown_today, should_remind

__all__ = [
    "local_now",
    "DEADLINE_PASSED",
    "deadline_message",
    "format_cutoff",
    "format_order_date",
    "is_ordering_open",
    "next_orderable_date",
    "parse_order_date",
    "time_until_cutoff",
    "OrderAggregator",
    "OrderCount",
    "aggregate_orders",
    "already_shown_today",
    "should_remind",
]
