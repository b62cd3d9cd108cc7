"""
Tests for the deadline reminder decision rule.
"""

import pytest
from datetime import date, datetime

from core.reminder_policy import already_shown_today, should_remind


AT_SIX = datetime(2026, 10, 19, 18, 0)


def test_reminds_in_band_when_enabled_and_not_shown():
    assert should_remind(AT_SIX, notifications_enabled=True, already_shown=False) is True


def test_no_reminder_when_already_shown():
    assert should_remind(AT_SIX, notifications_enabled=True, already_shown=True) is False


def test_no_reminder_before_band():
    now = datetime(2026, 10, 19, 16, 59)
    assert should_remind(now, notifications_enabled=True, already_shown=False) is False


def test_no_reminder_when_disabled():
    assert should_remind(AT_SIX, notifications_enabled=False, already_shown=False) is False


@pytest.mark.parametrize("hour, expected", [(17, True), (20, True), (21, False), (23, False)])
def test_band_is_half_open(hour, expected):
    now = datetime(2026, 10, 19, hour, 0)
    assert should_remind(now, True, False) is expected


def test_no_reminder_once_ordering_closed_by_earlier_cutoff():
    now = datetime(2026, 10, 19, 19, 30)
    assert should_remind(now, True, False, cutoff_hour=19) is False
    assert should_remind(now, True, False, cutoff_hour=20) is True


def test_already_shown_resets_on_new_day():
    assert already_shown_today(date(2026, 10, 19), date(2026, 10, 19)) is True
    assert already_shown_today(date(2026, 10, 18), date(2026, 10, 19)) is False
    assert already_shown_today(None, date(2026, 10, 19)) is False
