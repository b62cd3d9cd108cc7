"""
Deadline reminders.

ReminderService.run evaluates should_remind for every opted-in employee. A
reminder issued today is remembered through Profile.last_reminded_on, so the
"already shown" state resets on its own when the calendar day changes.
Issued reminders wait in the ReminderInbox until the employee fetches or
dismisses them.
"""

import logging
import threading
from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from app.config import settings
from core.date_window import format_cutoff, next_orderable_date, parse_order_date
from core.reminder_policy import already_shown_today, should_remind
from domain.models import Profile
from repositories import ProfileRepository

logger = logging.getLogger("smartcanteen.reminders")


@dataclass
class Reminder:
    profile_id: UUID
    message: str
    order_date: date
    issued_at: datetime


class ReminderInbox:
    """Pending reminders per profile, at most one each"""

    def __init__(self) -> None:
        self._pending: Dict[UUID, Reminder] = {}
        self._lock = threading.Lock()

    def post(self, reminder: Reminder) -> None:
        with self._lock:
            self._pending[reminder.profile_id] = reminder

    def peek(self, profile_id: UUID, today: Optional[date] = None) -> Optional[Reminder]:
        """Pending reminder for a profile; reminders from an earlier day are dropped"""
        with self._lock:
            reminder = self._pending.get(profile_id)
            if reminder is not None and today is not None and reminder.issued_at.date() != today:
                del self._pending[profile_id]
                return None
            return reminder

    def dismiss(self, profile_id: UUID) -> bool:
        with self._lock:
            return self._pending.pop(profile_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._pending.clear()

    def __len__(self) -> int:
        return len(self._pending)


reminder_inbox = ReminderInbox()


def reminder_message(cutoff_hour: int) -> str:
    return (
        "Don't forget to confirm your meal preferences for tomorrow "
        f"before {format_cutoff(cutoff_hour)}!"
    )


@dataclass
class ReminderRun:
    evaluated: int = 0
    reminded: int = 0


class ReminderService:
    @staticmethod
    def evaluate(profile: Profile, now: datetime) -> bool:
        return should_remind(
            now,
            notifications_enabled=profile.notification_enabled,
            already_shown=already_shown_today(profile.last_reminded_on, now.date()),
            cutoff_hour=settings.cutoff_hour,
            start_hour=settings.reminder_start_hour,
            end_hour=settings.reminder_end_hour,
        )

    @staticmethod
    def run(db: Session, now: datetime, inbox: ReminderInbox = reminder_inbox) -> ReminderRun:
        """Issue today's reminder to every employee who is due one"""
        repo = ProfileRepository(db)
        result = ReminderRun()
        order_date = parse_order_date(next_orderable_date(now))
        message = reminder_message(settings.cutoff_hour)
        due = []

        for profile in repo.list_reminder_candidates():
            result.evaluated += 1
            if not ReminderService.evaluate(profile, now):
                continue
            profile.last_reminded_on = now.date()
            due.append(
                Reminder(
                    profile_id=profile.profile_id,
                    message=message,
                    order_date=order_date,
                    issued_at=now,
                )
            )

        if due:
            # reminders become visible only once last_reminded_on is stored
            repo.commit()
            for reminder in due:
                inbox.post(reminder)
        result.reminded = len(due)
        logger.info(
            f"reminders_evaluated evaluated={result.evaluated} reminded={result.reminded}"
        )
        return result

    @staticmethod
    def pending_for(
        profile: Profile, now: datetime, inbox: ReminderInbox = reminder_inbox
    ) -> Optional[Reminder]:
        return inbox.peek(profile.profile_id, today=now.date())

    @staticmethod
    def dismiss(profile: Profile, inbox: ReminderInbox = reminder_inbox) -> bool:
        dismissed = inbox.dismiss(profile.profile_id)
        if dismissed:
            logger.info(f"reminder_dismissed profile_id={profile.profile_id}")
        return dismissed
